import pytest

from inputbind.keys import (
    GamepadButtonType,
    KeyCode,
    Modifier,
    MouseButton,
    MouseMotionDirection,
    MouseWheelDirection,
)


@pytest.mark.parametrize(
    "modifier, expected",
    [
        (Modifier.ALT, (KeyCode.ALT_LEFT, KeyCode.ALT_RIGHT)),
        (Modifier.CONTROL, (KeyCode.CONTROL_LEFT, KeyCode.CONTROL_RIGHT)),
        (Modifier.SHIFT, (KeyCode.SHIFT_LEFT, KeyCode.SHIFT_RIGHT)),
        (Modifier.WIN, (KeyCode.SUPER_LEFT, KeyCode.SUPER_RIGHT)),
    ],
)
def test_modifier_key_codes(modifier, expected):
    assert modifier.key_codes() == expected


def test_modifier_left_key_comes_first():
    for modifier in Modifier:
        left, right = Modifier.key_codes(modifier)
        assert left.name.endswith("_LEFT")
        assert right.name.endswith("_RIGHT")


def test_modifier_keys_do_not_overlap():
    keys = [key for modifier in Modifier for key in Modifier.key_codes(modifier)]
    assert len(keys) == len(set(keys)) == 2 * len(Modifier)


def test_wheel_and_motion_directions_share_names_but_differ():
    wheel_names = [MouseWheelDirection(d.value).name for d in MouseWheelDirection]
    motion_names = [MouseMotionDirection(d.value).name for d in MouseMotionDirection]
    assert wheel_names == motion_names
    assert MouseWheelDirection.UP != MouseMotionDirection.UP


def test_lookup_by_name():
    assert KeyCode(KeyCode["CONTROL_LEFT"].value) is KeyCode.CONTROL_LEFT
    assert GamepadButtonType(GamepadButtonType["START"].value) is GamepadButtonType.START
    assert MouseButton(MouseButton["LEFT"].value) is MouseButton.LEFT


def test_unknown_name_raises():
    with pytest.raises(KeyError):
        MouseButton["SIDEWAYS"]
    with pytest.raises(ValueError):
        MouseButton("SIDEWAYS")


def test_keys_are_hashable_set_members():
    pressed = set(Modifier.CONTROL.key_codes()) | {KeyCode.CONTROL_LEFT}
    assert pressed == {KeyCode.CONTROL_LEFT, KeyCode.CONTROL_RIGHT}