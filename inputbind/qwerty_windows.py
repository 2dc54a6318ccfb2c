"""Physical key locations of the QWERTY layout as Set 1 scan codes."""

from enum import IntEnum, unique

__all__ = ["WindowsQwertyScanCode"]


@unique
class WindowsQwertyScanCode(IntEnum):
    """Key locations named after the QWERTY layout, valued as Set 1 scan codes."""

    BACKTICK = 0x29
    KEY1 = 0x02
    KEY2 = 0x03
    KEY3 = 0x04
    KEY4 = 0x05
    KEY5 = 0x06
    KEY6 = 0x07
    KEY7 = 0x08
    KEY8 = 0x09
    KEY9 = 0x0A
    KEY0 = 0x0B
    MINUS = 0x0C
    EQUALS = 0x0D
    BACKSPACE = 0x0E
    TAB = 0x0F
    Q = 0x10
    W = 0x11
    E = 0x12
    R = 0x13
    T = 0x14
    Y = 0x15
    U = 0x16
    I = 0x17  # noqa: E741
    O = 0x18  # noqa: E741
    P = 0x19
    BRACKET_LEFT = 0x1A
    BRACKET_RIGHT = 0x1B
    BACKSLASH = 0x2B
    CAPS_LOCK = 0x3A
    A = 0x1E
    S = 0x1F
    D = 0x20
    F = 0x21
    G = 0x22
    H = 0x23
    J = 0x24
    K = 0x25
    L = 0x26
    SEMI_COLON = 0x27
    APOSTROPHE = 0x28
    # A key missing from the US layout, such as '#' on others.
    NON_US1 = 0x00
    ENTER = 0x1C
    SHIFT_LEFT = 0x2A
    Z = 0x2C
    X = 0x2D
    C = 0x2E
    V = 0x2F
    B = 0x30
    N = 0x31
    M = 0x32
    COMMA = 0x33
    PERIOD = 0x34
    SLASH = 0x35
    SHIFT_RIGHT = 0x36
    CONTROL_LEFT = 0x1D
    # Maps to the left Option key on Apple keyboards.
    ALT_LEFT = 0x38
    SPACE = 0x39
    # Maps to the right Option key on Apple keyboards.
    ALT_RIGHT = 0xE0E8
    CONTROL_RIGHT = 0xE01D
    # Maps to the Help key on Apple keyboards.
    INSERT = 0xE052
    DELETE = 0xE053
    HOME = 0xE047
    END = 0xE04F
    PAGE_UP = 0xE049
    PAGE_DOWN = 0xE051
    LEFT = 0xE04B
    UP = 0xE048
    DOWN = 0xE050
    RIGHT = 0xE04D
    # Maps to NumpadClear on Apple keyboards.
    NUMLOCK = 0x45
    NUMPAD7 = 0x47
    NUMPAD4 = 0x4B
    NUMPAD1 = 0x4F
    # Maps to NumpadEquals on Apple keyboards.
    NUMPAD_DIVIDE = 0xE035
    NUMPAD8 = 0x48
    NUMPAD5 = 0x4C
    NUMPAD2 = 0x50
    NUMPAD0 = 0x52
    # Maps to NumpadDivide on Apple keyboards.
    NUMPAD_MULTIPLY = 0x37
    NUMPAD9 = 0x49
    NUMPAD6 = 0x4D
    NUMPAD3 = 0x51
    NUMPAD_DECIMAL = 0x53
    # Maps to NumpadMultiply on Apple keyboards.
    NUMPAD_SUBTRACT = 0x4A
    NUMPAD_ADD = 0x4E
    NUMPAD_ENTER = 0xE01C
    ESCAPE = 0x01
    F1 = 0x3B
    F2 = 0x3C
    F3 = 0x3D
    F4 = 0x3E
    F5 = 0x3F
    F6 = 0x40
    F7 = 0x41
    F8 = 0x42
    F9 = 0x43
    F10 = 0x44
    F11 = 0x57
    F12 = 0x58
    # Maps to F13 on Apple keyboards.
    SNAPSHOT = 0xE037
    ALT_SYSRQ = 0x54
    # Maps to F14 on Apple keyboards.
    SCROLL = 0x46
    # Maps to F15 on Apple keyboards.
    PAUSE = 0xE11D45
    CTRL_BREAK = 0xE046
    # Maps to the Command key on Apple keyboards.
    SUPER_LEFT = 0xE05B
    SUPER_RIGHT = 0xE05C
    MENU = 0xE05D
    SLEEP = 0xE05F
    POWER = 0xE05E
    WAKE = 0xE063