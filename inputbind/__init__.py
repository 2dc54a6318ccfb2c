"""Cross-device input bindings: keys, buttons, chords, virtual pads and axes, and QWERTY scan codes."""

__version__ = "0.1.0"