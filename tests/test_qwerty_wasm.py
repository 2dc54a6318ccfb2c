import string

import pytest

from inputbind.qwerty_wasm import WasmQwertyScanCode


@pytest.mark.parametrize("letter", list(string.ascii_uppercase))
def test_letters_use_their_ascii_code(letter):
    assert WasmQwertyScanCode(ord(letter)).name == letter


@pytest.mark.parametrize("digit", list(string.digits))
def test_digit_keys_use_their_ascii_code(digit):
    assert WasmQwertyScanCode(ord(digit)).name == f"KEY{digit}"


def test_function_keys_are_consecutive():
    names = [WasmQwertyScanCode(0x70 + offset).name for offset in range(12)]
    assert names == [f"F{n}" for n in range(1, 13)]


def test_numpad_one_to_nine_are_consecutive():
    names = [WasmQwertyScanCode(0x61 + offset).name for offset in range(9)]
    assert names == [f"NUMPAD{n}" for n in range(1, 10)]


def test_pinned_values():
    assert WasmQwertyScanCode(0xE1) is WasmQwertyScanCode.ALT_RIGHT
    assert WasmQwertyScanCode(0x06) is WasmQwertyScanCode.NUMPAD0
    assert WasmQwertyScanCode(0x91) is WasmQwertyScanCode.SCROLL


def test_values_are_unique():
    values = [member.value for member in WasmQwertyScanCode]
    assert len(values) == len(set(values))
    assert {WasmQwertyScanCode(value) for value in values} == set(WasmQwertyScanCode)


def test_values_fit_in_u32():
    assert all(
        0 <= int(WasmQwertyScanCode(member.value)) <= 0xFFFFFFFF
        for member in WasmQwertyScanCode
    )


def test_lookup_by_value_round_trips():
    for member in WasmQwertyScanCode:
        assert WasmQwertyScanCode(int(member)) is member


def test_lookup_by_name_round_trips():
    for member in WasmQwertyScanCode:
        by_name = WasmQwertyScanCode[member.name]
        assert WasmQwertyScanCode(by_name.value) is member


def test_keys_without_a_browser_code_are_absent():
    names = {WasmQwertyScanCode(member.value).name for member in WasmQwertyScanCode}
    assert "ENTER" in names
    assert "BACKSPACE" not in names
    assert "NUMPAD_ENTER" not in names


def test_unknown_value_raises():
    with pytest.raises(ValueError):
        WasmQwertyScanCode(0xFFFF)