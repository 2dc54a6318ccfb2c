"""Combinations of user input: single buttons, chords and virtual axes."""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from dataclasses import dataclass, field
from enum import Enum, auto, unique
from typing import Any

from inputbind.keys import (
    GamepadButtonType,
    KeyCode,
    Modifier,
    MouseButton,
    MouseMotionDirection,
    MouseWheelDirection,
)
from inputbind.qwerty_linux import LinuxQwertyScanCode
from inputbind.qwerty_macos import MacQwertyScanCode
from inputbind.qwerty_wasm import WasmQwertyScanCode
from inputbind.qwerty_windows import WindowsQwertyScanCode
from inputbind.scan_codes import ScanCode, scan_code

__all__ = [
    "InputCategory",
    "InputKind",
    "RawInputs",
    "UserInput",
    "Single",
    "Chord",
    "VirtualDPad",
    "VirtualAxis",
    "to_input_kind",
    "to_user_input",
    "chord",
    "modified",
]


@unique
class InputCategory(Enum):
    """The kind of device input an :class:`InputKind` stands for."""

    GAMEPAD_BUTTON = auto()
    KEYBOARD = auto()
    KEY_LOCATION = auto()
    MODIFIER = auto()
    MOUSE = auto()
    MOUSE_WHEEL = auto()
    MOUSE_MOTION = auto()


_CATEGORY_TYPES: dict[InputCategory, type] = {
    InputCategory.GAMEPAD_BUTTON: GamepadButtonType,
    InputCategory.KEYBOARD: KeyCode,
    InputCategory.KEY_LOCATION: ScanCode,
    InputCategory.MODIFIER: Modifier,
    InputCategory.MOUSE: MouseButton,
    InputCategory.MOUSE_WHEEL: MouseWheelDirection,
    InputCategory.MOUSE_MOTION: MouseMotionDirection,
}

_QWERTY_LAYOUTS = (
    LinuxQwertyScanCode,
    MacQwertyScanCode,
    WasmQwertyScanCode,
    WindowsQwertyScanCode,
)


@dataclass(frozen=True)
class InputKind:
    """One button-like input binding, tagged with its category."""

    category: InputCategory
    value: Any

    def __post_init__(self) -> None:
        expected = _CATEGORY_TYPES[self.category]
        if not isinstance(self.value, expected):
            raise TypeError(
                f"{self.category.name} input needs a {expected.__name__}, "
                f"not {type(self.value).__name__}"
            )


def to_input_kind(value: Any) -> InputKind:
    """Convert a key, button, direction, modifier or scan code into an :class:`InputKind`."""
    if isinstance(value, InputKind):
        return value
    if isinstance(value, _QWERTY_LAYOUTS):
        return InputKind(InputCategory.KEY_LOCATION, scan_code(value))
    for category, kind_type in _CATEGORY_TYPES.items():
        if isinstance(value, kind_type):
            return InputKind(category, value)
    raise TypeError(f"cannot make an input kind from {value!r}")


@dataclass
class RawInputs:
    """The basic input events that make up a :class:`UserInput`."""

    keycodes: list[KeyCode] = field(default_factory=list)
    scan_codes: list[ScanCode] = field(default_factory=list)
    mouse_buttons: list[MouseButton] = field(default_factory=list)
    mouse_wheel: list[MouseWheelDirection] = field(default_factory=list)
    mouse_motion: list[MouseMotionDirection] = field(default_factory=list)
    gamepad_buttons: list[GamepadButtonType] = field(default_factory=list)

    def add(self, kind: InputKind) -> None:
        """Append the raw inputs that ``kind`` decomposes into."""
        category = kind.category
        if category is InputCategory.MODIFIER:
            self.keycodes.extend(kind.value.key_codes())
        elif category is InputCategory.KEYBOARD:
            self.keycodes.append(kind.value)
        elif category is InputCategory.KEY_LOCATION:
            self.scan_codes.append(kind.value)
        elif category is InputCategory.MOUSE:
            self.mouse_buttons.append(kind.value)
        elif category is InputCategory.MOUSE_WHEEL:
            self.mouse_wheel.append(kind.value)
        elif category is InputCategory.MOUSE_MOTION:
            self.mouse_motion.append(kind.value)
        else:
            self.gamepad_buttons.append(kind.value)


class UserInput:
    """Some combination of user input, possibly spanning several devices."""

    __slots__ = ()

    def _buttons(self) -> Iterator[InputKind]:
        raise NotImplementedError

    def __len__(self) -> int:
        return 1

    def is_empty(self) -> bool:
        """Whether this input is made of no buttons at all."""
        return len(self) == 0

    def n_matching(self, buttons: Iterable[Any]) -> int:
        """Count how many of ``buttons`` are found in this input."""
        wanted = {to_input_kind(button) for button in buttons}
        own = list(self._buttons())
        return sum(own.count(button) for button in wanted)

    def raw_inputs(self) -> RawInputs:
        """Return the raw inputs that make up this input."""
        raw = RawInputs()
        for button in self._buttons():
            raw.add(button)
        return raw


@dataclass(frozen=True)
class Single(UserInput):
    """A single button."""

    button: InputKind

    def __post_init__(self) -> None:
        object.__setattr__(self, "button", to_input_kind(self.button))

    def _buttons(self) -> Iterator[InputKind]:
        yield self.button

    def n_matching(self, buttons: Iterable[Any]) -> int:
        wanted = {to_input_kind(button) for button in buttons}
        return int(self.button in wanted)


@dataclass(frozen=True)
class Chord(UserInput):
    """A combination of buttons pressed together."""

    buttons: tuple[InputKind, ...]

    def __post_init__(self) -> None:
        object.__setattr__(
            self, "buttons", tuple(to_input_kind(b) for b in self.buttons)
        )

    def __len__(self) -> int:
        return len(self.buttons)

    def _buttons(self) -> Iterator[InputKind]:
        yield from self.buttons

    def n_matching(self, buttons: Iterable[Any]) -> int:
        wanted = {to_input_kind(button) for button in buttons}
        return sum(1 for button in wanted if button in self.buttons)


@dataclass(frozen=True)
class VirtualDPad(UserInput):
    """Four buttons that together act as a two-axis pad."""

    up: InputKind
    down: InputKind
    left: InputKind
    right: InputKind

    def __post_init__(self) -> None:
        for name in ("up", "down", "left", "right"):
            object.__setattr__(self, name, to_input_kind(getattr(self, name)))

    def _buttons(self) -> Iterator[InputKind]:
        yield from (self.up, self.down, self.left, self.right)


@dataclass(frozen=True)
class VirtualAxis(UserInput):
    """Two buttons that together act as a single axis."""

    negative: InputKind
    positive: InputKind

    def __post_init__(self) -> None:
        object.__setattr__(self, "negative", to_input_kind(self.negative))
        object.__setattr__(self, "positive", to_input_kind(self.positive))

    def _buttons(self) -> Iterator[InputKind]:
        yield from (self.negative, self.positive)


def to_user_input(value: Any) -> UserInput:
    """Convert a :class:`UserInput` or anything button-like into a :class:`UserInput`."""
    if isinstance(value, UserInput):
        return value
    return Single(to_input_kind(value))


def chord(inputs: Iterable[Any]) -> UserInput:
    """Make a chord of ``inputs``; a single input gives a :class:`Single`."""
    kinds = [to_input_kind(item) for item in inputs]
    if len(kinds) == 1:
        return Single(kinds[0])
    return Chord(tuple(kinds))


def modified(modifier: Any, input: Any) -> UserInput:
    """Make a chord of a keyboard ``modifier`` and another ``input``."""
    modifier_kind = to_input_kind(modifier)
    if modifier_kind.category is not InputCategory.MODIFIER:
        raise TypeError(f"{modifier!r} is not a keyboard modifier")
    return chord([modifier_kind, input])