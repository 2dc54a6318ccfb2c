"""Physical key locations and the QWERTY layout tables for each platform."""

from __future__ import annotations

import sys
from dataclasses import dataclass
from enum import IntEnum
from typing import Union

from inputbind.qwerty_linux import LinuxQwertyScanCode
from inputbind.qwerty_macos import MacQwertyScanCode
from inputbind.qwerty_wasm import WasmQwertyScanCode
from inputbind.qwerty_windows import WindowsQwertyScanCode

__all__ = ["ScanCode", "QwertyScanCode", "qwerty_layout_for", "scan_code"]

QwertyScanCode = Union[
    LinuxQwertyScanCode,
    MacQwertyScanCode,
    WasmQwertyScanCode,
    WindowsQwertyScanCode,
]

_QWERTY_LAYOUTS: tuple[type[IntEnum], ...] = (
    LinuxQwertyScanCode,
    MacQwertyScanCode,
    WasmQwertyScanCode,
    WindowsQwertyScanCode,
)

_U32_MAX = 0xFFFF_FFFF

_WASM_PLATFORMS = frozenset({"wasm", "wasi", "emscripten"})
_MAC_PLATFORMS = frozenset({"darwin", "macos"})


@dataclass(frozen=True, order=True)
class ScanCode:
    """The physical location of a key, as an unsigned 32-bit scan code."""

    code: int

    def __post_init__(self) -> None:
        if isinstance(self.code, bool) or not isinstance(self.code, int):
            raise TypeError(f"scan code must be an int, not {type(self.code).__name__}")
        if not 0 <= self.code <= _U32_MAX:
            raise ValueError(f"scan code {self.code} does not fit in 32 unsigned bits")

    def __int__(self) -> int:
        return self.code


def qwerty_layout_for(platform: str | None = None) -> type[IntEnum]:
    """Return the QWERTY scan-code table used on ``platform``.

    ``platform`` takes the values of :data:`sys.platform`; ``None`` means the
    running platform. Browsers come first, then macOS, then Linux, and every
    other platform uses the Set 1 table.
    """
    name = (sys.platform if platform is None else platform).lower()
    if name in _WASM_PLATFORMS:
        return WasmQwertyScanCode
    if name in _MAC_PLATFORMS:
        return MacQwertyScanCode
    if name.startswith("linux"):
        return LinuxQwertyScanCode
    return WindowsQwertyScanCode


def scan_code(key: QwertyScanCode | ScanCode) -> ScanCode:
    """Convert a QWERTY key location into its :class:`ScanCode`."""
    if isinstance(key, ScanCode):
        return key
    if isinstance(key, _QWERTY_LAYOUTS):
        return ScanCode(int(key))
    raise TypeError(f"cannot make a scan code from {key!r}")