"""Physical key locations of the QWERTY layout as macOS scan codes."""

from enum import IntEnum, unique

__all__ = ["MacQwertyScanCode"]


@unique
class MacQwertyScanCode(IntEnum):
    """Key locations named after the QWERTY layout, valued as macOS scan codes."""

    A = 0x00
    S = 0x01
    D = 0x02
    F = 0x03
    H = 0x04
    G = 0x05
    Z = 0x06
    X = 0x07
    C = 0x08
    V = 0x09
    B = 0x0B
    Q = 0x0C
    W = 0x0D
    E = 0x0E
    R = 0x0F
    Y = 0x10
    T = 0x11
    KEY1 = 0x12
    KEY2 = 0x13
    KEY3 = 0x14
    KEY4 = 0x15
    KEY6 = 0x16
    KEY5 = 0x17
    EQUALS = 0x18
    KEY9 = 0x19
    KEY7 = 0x1A
    MINUS = 0x1B
    KEY8 = 0x1C
    KEY0 = 0x1D
    BRACKET_RIGHT = 0x1E
    O = 0x1F  # noqa: E741
    U = 0x20
    BRACKET_LEFT = 0x21
    I = 0x22  # noqa: E741
    P = 0x23
    L = 0x25
    J = 0x26
    APOSTROPHE = 0x27
    K = 0x28
    SEMI_COLON = 0x29
    BACKSLASH = 0x2A
    COMMA = 0x2B
    SLASH = 0x2C
    N = 0x2D
    M = 0x2E
    PERIOD = 0x2F
    BACKTICK = 0x32
    NUMPAD_DECIMAL = 0x41
    # Maps to NumpadMultiply on Apple keyboards.
    NUMPAD_SUBTRACT = 0x43
    NUMPAD_ADD = 0x45
    # Maps to NumpadClear on Apple keyboards.
    NUMLOCK = 0x47
    # Maps to NumpadDivide on Apple keyboards.
    NUMPAD_MULTIPLY = 0x4B
    NUMPAD_ENTER = 0x4C
    # Maps to NumpadEquals on Apple keyboards.
    NUMPAD_DIVIDE = 0x51
    NUMPAD0 = 0x52
    NUMPAD1 = 0x53
    NUMPAD2 = 0x54
    NUMPAD3 = 0x55
    NUMPAD4 = 0x56
    NUMPAD5 = 0x57
    NUMPAD6 = 0x58
    NUMPAD7 = 0x59
    NUMPAD8 = 0x5B
    NUMPAD9 = 0x5C
    ENTER = 0x24
    TAB = 0x30
    SPACE = 0x31
    BACKSPACE = 0x33
    ESCAPE = 0x35
    # The left Command key on Apple keyboards.
    SUPER_LEFT = 0x37
    SHIFT_LEFT = 0x38
    CAPS_LOCK = 0x39
    # The left Option key on Apple keyboards.
    ALT_LEFT = 0x3A
    CONTROL_LEFT = 0x3B
    SHIFT_RIGHT = 0x3C
    # The right Option key on Apple keyboards.
    ALT_RIGHT = 0x3D
    CONTROL_RIGHT = 0x3E
    F5 = 0x60
    F6 = 0x61
    F7 = 0x62
    F3 = 0x63
    F8 = 0x64
    F9 = 0x65
    F11 = 0x67
    # Maps to F13 on Apple keyboards.
    SNAPSHOT = 0x69
    # Maps to F14 on Apple keyboards.
    SCROLL = 0x6B
    F10 = 0x6D
    F12 = 0x6F
    # Maps to F15 on Apple keyboards.
    PAUSE = 0x71
    # Maps to the Help key on Apple keyboards.
    INSERT = 0xE052
    HOME = 0x73
    PAGE_UP = 0x74
    DELETE = 0x75
    F4 = 0x76
    END = 0x77
    F2 = 0x78
    PAGE_DOWN = 0x79
    F1 = 0x7A
    LEFT = 0x7B
    RIGHT = 0x7C
    DOWN = 0x7D
    UP = 0x7E
    # The right Command key on Apple keyboards; found by manual testing.
    SUPER_RIGHT = 0x36