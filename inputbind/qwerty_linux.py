"""Physical key locations of the QWERTY layout as X-like Linux scan codes."""

from enum import IntEnum, unique

__all__ = ["LinuxQwertyScanCode"]


@unique
class LinuxQwertyScanCode(IntEnum):
    """Key locations named after the QWERTY layout, valued as Linux input-event codes."""

    ESCAPE = 1
    KEY1 = 2
    KEY2 = 3
    KEY3 = 4
    KEY4 = 5
    KEY5 = 6
    KEY6 = 7
    KEY7 = 8
    KEY8 = 9
    KEY9 = 10
    KEY0 = 11
    MINUS = 12
    EQUALS = 13
    BACKSPACE = 14
    TAB = 15
    Q = 16
    W = 17
    E = 18
    R = 19
    T = 20
    Y = 21
    U = 22
    I = 23  # noqa: E741
    O = 24  # noqa: E741
    P = 25
    BRACKET_LEFT = 26
    BRACKET_RIGHT = 27
    ENTER = 28
    CONTROL_LEFT = 29
    A = 30
    S = 31
    D = 32
    F = 33
    G = 34
    H = 35
    J = 36
    K = 37
    L = 38
    SEMI_COLON = 39
    APOSTROPHE = 40
    BACKTICK = 41
    SHIFT_LEFT = 42
    BACKSLASH = 43
    Z = 44
    X = 45
    C = 46
    V = 47
    B = 48
    N = 49
    M = 50
    COMMA = 51
    PERIOD = 52
    SLASH = 53
    SHIFT_RIGHT = 54
    # Maps to NumpadDivide on Apple keyboards.
    NUMPAD_MULTIPLY = 55
    # Maps to the left Option key on Apple keyboards.
    ALT_LEFT = 56
    SPACE = 57
    CAPS_LOCK = 58
    F1 = 59
    F2 = 60
    F3 = 61
    F4 = 62
    F5 = 63
    F6 = 64
    F7 = 65
    F8 = 66
    F9 = 67
    F10 = 68
    # Maps to NumpadClear on Apple keyboards.
    NUMLOCK = 69
    # Maps to F14 on Apple keyboards.
    SCROLL = 70
    NUMPAD7 = 71
    NUMPAD8 = 72
    NUMPAD9 = 73
    # Maps to NumpadMultiply on Apple keyboards.
    NUMPAD_SUBTRACT = 74
    NUMPAD4 = 75
    NUMPAD5 = 76
    NUMPAD6 = 77
    NUMPAD_ADD = 78
    NUMPAD1 = 79
    NUMPAD2 = 80
    NUMPAD3 = 81
    NUMPAD0 = 82
    NUMPAD_DECIMAL = 83
    F11 = 87
    F12 = 88
    NUMPAD_ENTER = 96
    CONTROL_RIGHT = 97
    # Maps to NumpadEquals on Apple keyboards.
    NUMPAD_DIVIDE = 98
    ALT_SYSRQ = 99
    # Maps to the right Option key on Apple keyboards.
    ALT_RIGHT = 100
    HOME = 102
    UP = 103
    PAGE_UP = 104
    LEFT = 105
    RIGHT = 106
    END = 107
    DOWN = 108
    PAGE_DOWN = 109
    # Maps to the Help key on Apple keyboards.
    INSERT = 110
    DELETE = 111
    POWER = 116
    # Maps to F15 on Apple keyboards.
    PAUSE = 119
    # Maps to the Command key on Apple keyboards.
    SUPER_LEFT = 125
    SUPER_RIGHT = 126
    MENU = 139
    SLEEP = 142
    WAKE = 143