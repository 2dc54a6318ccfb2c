# inputbind

Input bindings that cross device boundaries. Keyboard keys, physical key
locations, keyboard modifiers, mouse buttons, discretized mouse wheel and
mouse motion directions, and gamepad buttons share one vocabulary. Any
binding can be broken down into the raw inputs it is made of.

## Installation

```
pip install inputbind
```

## Keys and buttons

`inputbind.keys` holds the plain input types, all enums:

- `KeyCode`: logical keyboard keys
- `MouseButton`: mouse buttons
- `GamepadButtonType`: gamepad buttons, whatever gamepad they are on
- `MouseWheelDirection` and `MouseMotionDirection`: `UP`, `DOWN`, `RIGHT`, `LEFT`
- `Modifier`: `ALT`, `CONTROL`, `SHIFT`, `WIN`, each standing for both its keys

`Modifier.key_codes()` returns the pair of keys a modifier stands for, left
key first:

```python
from inputbind.keys import KeyCode, Modifier

assert Modifier.CONTROL.key_codes() == (KeyCode.CONTROL_LEFT, KeyCode.CONTROL_RIGHT)
```

## Bindings

In `inputbind.user_input`, an `InputKind` is one button-like input together
with its `InputCategory`. `to_input_kind(value)` builds one from a key,
button, direction, modifier, `ScanCode` or QWERTY key location. It raises
`TypeError` for anything else.

A binding is a `UserInput`. There are four kinds:

- `Single`: one input
- `Chord`: several inputs pressed together
- `VirtualDPad(up, down, left, right)`: four buttons read as a pad
- `VirtualAxis(negative, positive)`: two buttons read as an axis

Each kind converts its fields with `to_input_kind`. That means plain keys and
buttons can be passed to them directly.

```python
from inputbind.keys import KeyCode, Modifier, MouseButton
from inputbind.user_input import VirtualDPad, chord, modified, to_user_input

jump = to_user_input(KeyCode.SPACE)
save = modified(Modifier.CONTROL, KeyCode.S)
drag = chord([KeyCode.SHIFT_LEFT, MouseButton.LEFT])
move = VirtualDPad(KeyCode.W, KeyCode.S, KeyCode.A, KeyCode.D)
```

- `to_user_input(value)` returns a `UserInput` unchanged and wraps anything else in a `Single`.
- `chord(inputs)` returns a `Single` when it is given exactly one input and a `Chord` otherwise.
- `modified(modifier, input)` makes a chord of a `Modifier` and another input. It raises `TypeError` if the first argument is not a modifier.

`len()` of a binding is its number of logical inputs:

- a `Chord` counts its buttons
- every other kind counts as 1

`is_empty()` says whether that number is zero.

`n_matching(buttons)` counts how many of the given inputs appear in a
binding. This helps decide which of two overlapping chords should win.

## Raw inputs

`UserInput.raw_inputs()` returns a `RawInputs` dataclass. Its lists hold the
`keycodes`, `scan_codes`, `mouse_buttons`, `mouse_wheel`, `mouse_motion` and
`gamepad_buttons` the binding uses, in order. A `Modifier` adds both of its
keys, left first:

```python
raw = modified(Modifier.CONTROL, KeyCode.S).raw_inputs()
assert raw.keycodes == [KeyCode.CONTROL_LEFT, KeyCode.CONTROL_RIGHT, KeyCode.S]
```

## Physical key locations

Logical keys depend on the keyboard layout; scan codes name where a key
sits. The QWERTY key locations are available as `IntEnum` tables, one per
platform family:

- `inputbind.qwerty_linux.LinuxQwertyScanCode`: Linux input-event codes
- `inputbind.qwerty_macos.MacQwertyScanCode`: macOS scan codes
- `inputbind.qwerty_windows.WindowsQwertyScanCode`: Set 1 scan codes
- `inputbind.qwerty_wasm.WasmQwertyScanCode`: browser key codes

`inputbind.scan_codes` has the helpers for these tables:

- `ScanCode(code)` is an unsigned 32-bit scan code. It raises `TypeError` for non-integers and `ValueError` for values out of range.
- `scan_code(key)` converts a location from any table into a `ScanCode`.
- `qwerty_layout_for(platform)` picks the table for a `sys.platform` value, or for the running platform when the argument is `None`:
  - `wasm`, `wasi` and `emscripten` get the browser table
  - `darwin` and `macos` get the macOS table
  - `linux*` gets the Linux table
  - anything else gets the Set 1 table

```python
from inputbind.qwerty_linux import LinuxQwertyScanCode
from inputbind.scan_codes import scan_code
from inputbind.user_input import to_user_input

forward = to_user_input(scan_code(LinuxQwertyScanCode.W))
```

## What this package does not do

This package only describes bindings. It does not:

- read devices or listen for events
- keep per-action pressed or released state
- map bindings to actions or resolve clashes between them

It has no analogue stick, trigger or other continuous axis inputs. Bindings
are made of buttons only, and `RawInputs` carries no axis data.

## Running the tests

```
pip install inputbind[test]
pytest
```