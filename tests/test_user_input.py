import pytest

from inputbind.keys import (
    GamepadButtonType,
    KeyCode,
    Modifier,
    MouseButton,
    MouseMotionDirection,
    MouseWheelDirection,
)
from inputbind.qwerty_windows import WindowsQwertyScanCode
from inputbind.scan_codes import ScanCode
from inputbind.user_input import (
    Chord,
    InputCategory,
    InputKind,
    RawInputs,
    Single,
    VirtualAxis,
    VirtualDPad,
    chord,
    modified,
    to_input_kind,
    to_user_input,
)


def test_simple_chord():
    buttons = [GamepadButtonType.START, GamepadButtonType.SELECT]
    raw = chord(buttons).raw_inputs()
    assert raw == RawInputs(gamepad_buttons=buttons)


def test_mixed_chord():
    raw = chord([GamepadButtonType.START, KeyCode.A]).raw_inputs()
    assert raw == RawInputs(gamepad_buttons=[GamepadButtonType.START], keycodes=[KeyCode.A])


def test_gamepad_button():
    raw = to_user_input(GamepadButtonType.START).raw_inputs()
    assert raw == RawInputs(gamepad_buttons=[GamepadButtonType.START])


def test_keyboard_button():
    raw = to_user_input(KeyCode.A).raw_inputs()
    assert raw == RawInputs(keycodes=[KeyCode.A])


def test_modifier_key_decomposes_into_both_inputs():
    raw = modified(Modifier.CONTROL, KeyCode.S).raw_inputs()
    assert raw == RawInputs(
        keycodes=[KeyCode.CONTROL_LEFT, KeyCode.CONTROL_RIGHT, KeyCode.S]
    )


def test_mouse_button():
    raw = to_user_input(MouseButton.LEFT).raw_inputs()
    assert raw == RawInputs(mouse_buttons=[MouseButton.LEFT])


def test_mouse_wheel():
    raw = to_user_input(MouseWheelDirection.DOWN).raw_inputs()
    assert raw == RawInputs(mouse_wheel=[MouseWheelDirection.DOWN])


def test_mouse_motion():
    raw = to_user_input(MouseMotionDirection.UP).raw_inputs()
    assert raw == RawInputs(mouse_motion=[MouseMotionDirection.UP])


def test_qwerty_key_becomes_scan_code():
    kind = to_input_kind(WindowsQwertyScanCode.A)
    assert kind == InputKind(InputCategory.KEY_LOCATION, ScanCode(0x1E))
    raw = to_user_input(WindowsQwertyScanCode.A).raw_inputs()
    assert raw == RawInputs(scan_codes=[ScanCode(0x1E)])


def test_n_matching():
    buttons = {KeyCode.CONTROL_LEFT, KeyCode.ALT_LEFT}
    a = to_user_input(KeyCode.A)
    ctrl_a = chord([KeyCode.CONTROL_LEFT, KeyCode.A])
    ctrl_alt_a = chord([KeyCode.CONTROL_LEFT, KeyCode.ALT_LEFT, KeyCode.A])
    assert a.n_matching(buttons) == 0
    assert ctrl_a.n_matching(buttons) == 1
    assert ctrl_alt_a.n_matching(buttons) == 2


def test_single_n_matching_hit():
    assert to_user_input(KeyCode.A).n_matching({KeyCode.A}) == 1


def test_virtual_dpad_n_matching_and_raw():
    dpad = VirtualDPad(KeyCode.W, KeyCode.S, KeyCode.A, KeyCode.D)
    assert dpad.n_matching({KeyCode.W, KeyCode.D, KeyCode.Q}) == 2
    assert len(dpad) == 1
    assert dpad.raw_inputs() == RawInputs(
        keycodes=[KeyCode.W, KeyCode.S, KeyCode.A, KeyCode.D]
    )


def test_virtual_axis_raw_inputs():
    axis = VirtualAxis(GamepadButtonType.DPAD_LEFT, GamepadButtonType.DPAD_RIGHT)
    assert axis.n_matching({GamepadButtonType.DPAD_LEFT}) == 1
    assert axis.raw_inputs() == RawInputs(
        gamepad_buttons=[GamepadButtonType.DPAD_LEFT, GamepadButtonType.DPAD_RIGHT]
    )


def test_chord_of_one_is_single():
    assert chord([KeyCode.A]) == Single(KeyCode.A)


def test_chord_lengths():
    assert len(chord([KeyCode.A, KeyCode.B, KeyCode.C])) == 3
    empty = chord([])
    assert empty == Chord(())
    assert empty.is_empty()
    assert not to_user_input(KeyCode.A).is_empty()


def test_to_user_input_passes_user_input_through():
    dpad = VirtualDPad(KeyCode.UP, KeyCode.DOWN, KeyCode.LEFT, KeyCode.RIGHT)
    assert to_user_input(dpad) is dpad


def test_to_input_kind_rejects_unknown():
    with pytest.raises(TypeError):
        to_input_kind("A")


def test_input_kind_checks_value_type():
    with pytest.raises(TypeError):
        InputKind(InputCategory.KEYBOARD, MouseButton.LEFT)


def test_modified_requires_modifier():
    with pytest.raises(TypeError):
        modified(KeyCode.A, KeyCode.B)


def test_modified_builds_chord():
    result = modified(Modifier.SHIFT, MouseButton.LEFT)
    assert result == Chord(
        (
            InputKind(InputCategory.MODIFIER, Modifier.SHIFT),
            InputKind(InputCategory.MOUSE, MouseButton.LEFT),
        )
    )