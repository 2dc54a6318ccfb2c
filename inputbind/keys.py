"""Buttons and keys that make up user input."""

from __future__ import annotations

from enum import Enum, auto, unique

__all__ = [
    "KeyCode",
    "MouseButton",
    "GamepadButtonType",
    "MouseWheelDirection",
    "MouseMotionDirection",
    "Modifier",
]


@unique
class KeyCode(Enum):
    """A logical key on the keyboard."""

    KEY1 = auto()
    KEY2 = auto()
    KEY3 = auto()
    KEY4 = auto()
    KEY5 = auto()
    KEY6 = auto()
    KEY7 = auto()
    KEY8 = auto()
    KEY9 = auto()
    KEY0 = auto()
    A = auto()
    B = auto()
    C = auto()
    D = auto()
    E = auto()
    F = auto()
    G = auto()
    H = auto()
    I = auto()  # noqa: E741
    J = auto()
    K = auto()
    L = auto()
    M = auto()
    N = auto()
    O = auto()  # noqa: E741
    P = auto()
    Q = auto()
    R = auto()
    S = auto()
    T = auto()
    U = auto()
    V = auto()
    W = auto()
    X = auto()
    Y = auto()
    Z = auto()
    ESCAPE = auto()
    F1 = auto()
    F2 = auto()
    F3 = auto()
    F4 = auto()
    F5 = auto()
    F6 = auto()
    F7 = auto()
    F8 = auto()
    F9 = auto()
    F10 = auto()
    F11 = auto()
    F12 = auto()
    SNAPSHOT = auto()
    SCROLL = auto()
    PAUSE = auto()
    INSERT = auto()
    HOME = auto()
    DELETE = auto()
    END = auto()
    PAGE_DOWN = auto()
    PAGE_UP = auto()
    LEFT = auto()
    UP = auto()
    RIGHT = auto()
    DOWN = auto()
    BACK = auto()
    RETURN = auto()
    SPACE = auto()
    TAB = auto()
    NUMLOCK = auto()
    NUMPAD0 = auto()
    NUMPAD1 = auto()
    NUMPAD2 = auto()
    NUMPAD3 = auto()
    NUMPAD4 = auto()
    NUMPAD5 = auto()
    NUMPAD6 = auto()
    NUMPAD7 = auto()
    NUMPAD8 = auto()
    NUMPAD9 = auto()
    NUMPAD_ADD = auto()
    NUMPAD_SUBTRACT = auto()
    NUMPAD_MULTIPLY = auto()
    NUMPAD_DIVIDE = auto()
    NUMPAD_DECIMAL = auto()
    NUMPAD_ENTER = auto()
    APOSTROPHE = auto()
    BACKSLASH = auto()
    BRACKET_LEFT = auto()
    BRACKET_RIGHT = auto()
    CAPITAL = auto()
    COMMA = auto()
    EQUALS = auto()
    GRAVE = auto()
    MINUS = auto()
    PERIOD = auto()
    SEMICOLON = auto()
    SLASH = auto()
    ALT_LEFT = auto()
    ALT_RIGHT = auto()
    CONTROL_LEFT = auto()
    CONTROL_RIGHT = auto()
    SHIFT_LEFT = auto()
    SHIFT_RIGHT = auto()
    SUPER_LEFT = auto()
    SUPER_RIGHT = auto()


@unique
class MouseButton(Enum):
    """A button on a mouse."""

    LEFT = auto()
    RIGHT = auto()
    MIDDLE = auto()
    BACK = auto()
    FORWARD = auto()


@unique
class GamepadButtonType(Enum):
    """A button on a gamepad, independent of which gamepad it is on."""

    SOUTH = auto()
    EAST = auto()
    NORTH = auto()
    WEST = auto()
    C = auto()
    Z = auto()
    LEFT_TRIGGER = auto()
    LEFT_TRIGGER2 = auto()
    RIGHT_TRIGGER = auto()
    RIGHT_TRIGGER2 = auto()
    SELECT = auto()
    START = auto()
    MODE = auto()
    LEFT_THUMB = auto()
    RIGHT_THUMB = auto()
    DPAD_UP = auto()
    DPAD_DOWN = auto()
    DPAD_LEFT = auto()
    DPAD_RIGHT = auto()


@unique
class MouseWheelDirection(Enum):
    """A discretized direction of mouse wheel movement."""

    UP = auto()
    DOWN = auto()
    RIGHT = auto()
    LEFT = auto()


@unique
class MouseMotionDirection(Enum):
    """A discretized direction of mouse movement."""

    UP = auto()
    DOWN = auto()
    RIGHT = auto()
    LEFT = auto()


@unique
class Modifier(Enum):
    """A keyboard modifier that stands for both its left and right key."""

    ALT = auto()
    CONTROL = auto()
    SHIFT = auto()
    WIN = auto()

    def key_codes(self) -> tuple[KeyCode, KeyCode]:
        """Return the (left, right) key codes of this modifier."""
        return _MODIFIER_KEYS[self]


_MODIFIER_KEYS: dict[Modifier, tuple[KeyCode, KeyCode]] = {
    Modifier.ALT: (KeyCode.ALT_LEFT, KeyCode.ALT_RIGHT),
    Modifier.CONTROL: (KeyCode.CONTROL_LEFT, KeyCode.CONTROL_RIGHT),
    Modifier.SHIFT: (KeyCode.SHIFT_LEFT, KeyCode.SHIFT_RIGHT),
    Modifier.WIN: (KeyCode.SUPER_LEFT, KeyCode.SUPER_RIGHT),
}