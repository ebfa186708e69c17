"""On-screen status text and its conversion to a transparent texture."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

TEXT_WIDTH = 512
TEXT_HEIGHT = 180
TEXT_MARGIN = 10

_ON = "[вкл]выкл  "
_OFF = " вкл[выкл] "


@dataclass
class RenderModes:
    """Switches for texturing, lighting and alpha blending."""

    texturing: bool = True
    lighting: bool = True
    alpha: bool = False

    def toggle(self, key: int | str) -> bool:
        """Flip the mode bound to key T, L or A; return whether one was flipped."""
        letter = chr(key) if isinstance(key, int) else key
        letter = letter.upper()
        if letter == "L":
            self.lighting = not self.lighting
        elif letter == "T":
            self.texturing = not self.texturing
        elif letter == "A":
            self.alpha = not self.alpha
        else:
            return False
        return True


def _flag(on: bool) -> str:
    return _ON if on else _OFF


def _triple(a: float, b: float, c: float) -> str:
    return f"{a:7.3f},{b:7.3f},{c:7.3f}"


def format_status(modes: RenderModes, light: Any, camera: Any, delta_time: float) -> str:
    """Build the help and status text shown in the corner of the window."""
    lines = [
        f"T - {_flag(modes.texturing)}текстур",
        f"L - {_flag(modes.lighting)}освещение",
        f"A - {_flag(modes.alpha)}альфа-наложение",
        "F - Свет из камеры",
        "G - двигать свет по горизонтали",
        "G+ЛКМ двигать свет по вертекали",
        f"Коорд. света: ({_triple(light.x, light.y, light.z)})",
        f"Коорд. камеры: ({_triple(camera.x, camera.y, camera.z)})",
        f"Параметры камеры: R={camera.distance:7.3f},fi1={camera.fi1:7.3f},fi2={camera.fi2:7.3f}",
        f"delta_time: {delta_time:.5f}",
    ]
    return "".join(line + "\n" for line in lines)


def text_to_rgba(pixels: bytes | bytearray | memoryview) -> bytes:
    """Make white pixels of a 4-byte-per-pixel text image transparent.

    Colour channels are kept; alpha becomes 0 for pure white and 255 otherwise.
    """
    data = bytes(pixels)
    if len(data) % 4:
        raise ValueError("pixel data length must be a multiple of 4")
    out = bytearray()
    for c0, c1, c2, _ in zip(*[iter(data)] * 4):
        alpha = 0 if c0 == c1 == c2 == 255 else 255
        out += bytes((c0, c1, c2, alpha))
    return bytes(out)