"""Physical key locations of the QWERTY layout as browser ``KeyboardEvent`` key codes."""

from enum import IntEnum, unique

__all__ = ["WasmQwertyScanCode"]


@unique
class WasmQwertyScanCode(IntEnum):
    """Key locations named after the QWERTY layout, valued as browser key codes."""

    KEY1 = 0x31
    KEY2 = 0x32
    KEY3 = 0x33
    KEY4 = 0x34
    KEY5 = 0x35
    KEY6 = 0x36
    KEY7 = 0x37
    KEY8 = 0x38
    KEY9 = 0x39
    KEY0 = 0x30
    A = 0x41
    B = 0x42
    C = 0x43
    D = 0x44
    E = 0x45
    F = 0x46
    G = 0x47
    H = 0x48
    I = 0x49  # noqa: E741
    J = 0x4A
    K = 0x4B
    L = 0x4C
    M = 0x4D
    N = 0x4E
    O = 0x4F  # noqa: E741
    P = 0x50
    Q = 0x51
    R = 0x52
    S = 0x53
    T = 0x54
    U = 0x55
    V = 0x56
    W = 0x57
    X = 0x58
    Y = 0x59
    Z = 0x5A
    COMMA = 0xBC
    PERIOD = 0xBE
    SEMI_COLON = 0xBA
    APOSTROPHE = 0xDE
    BRACKET_LEFT = 0xDB
    BRACKET_RIGHT = 0xDD
    BACKTICK = 0xC0
    BACKSLASH = 0xDC
    MINUS = 0xBD
    EQUALS = 0xBB
    # Maps to the left Option key on Apple keyboards.
    ALT_LEFT = 0x12
    # Maps to the right Option key on Apple keyboards; AltGraph on Linux where present.
    ALT_RIGHT = 0xE1
    CAPS_LOCK = 0x14
    # The right Control key reports the same code in browsers.
    CONTROL_LEFT = 0x11
    # Maps to the Command key on Apple keyboards.
    SUPER_LEFT = 0x5B
    SUPER_RIGHT = 0x5C
    # The right Shift key reports the same code in browsers.
    SHIFT_LEFT = 0x10
    MENU = 0x5D
    # The numpad Enter key reports the same code in browsers.
    ENTER = 0x0D
    SPACE = 0x20
    TAB = 0x09
    DELETE = 0x2E
    END = 0x23
    HOME = 0x24
    # Maps to the Help key on Apple keyboards.
    INSERT = 0x2D
    PAGE_DOWN = 0x22
    PAGE_UP = 0x21
    DOWN = 0x28
    LEFT = 0x25
    RIGHT = 0x27
    UP = 0x26
    ESCAPE = 0x1B
    # Maps to F13 on Apple keyboards.
    SNAPSHOT = 0x2C
    # Maps to F14 on Apple keyboards.
    SCROLL = 0x91
    # Maps to F15 on Apple keyboards.
    PAUSE = 0x13
    F1 = 0x70
    F2 = 0x71
    F3 = 0x72
    F4 = 0x73
    F5 = 0x74
    F6 = 0x75
    F7 = 0x76
    F8 = 0x77
    F9 = 0x78
    F10 = 0x79
    F11 = 0x7A
    F12 = 0x7B
    # Maps to NumpadClear on Apple keyboards.
    NUMLOCK = 0x90
    NUMPAD0 = 0x06
    NUMPAD1 = 0x61
    NUMPAD2 = 0x62
    NUMPAD3 = 0x63
    NUMPAD4 = 0x64
    NUMPAD5 = 0x65
    NUMPAD6 = 0x66
    NUMPAD7 = 0x67
    NUMPAD8 = 0x68
    NUMPAD9 = 0x69
    NUMPAD_ADD = 0x6B
    NUMPAD_DECIMAL = 0x6E
    # Maps to NumpadEquals on Apple keyboards.
    NUMPAD_DIVIDE = 0x6F
    # Maps to NumpadDivide on Apple keyboards.
    NUMPAD_MULTIPLY = 0x6A
    # Maps to NumpadMultiply on Apple keyboards.
    NUMPAD_SUBTRACT = 0x6D