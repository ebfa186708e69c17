"""Point light that can be dragged around the scene with the mouse."""

from __future__ import annotations

import math
from typing import Any, Sequence

from kglab.events import KeyEventArg, MouseEventArg
from kglab.vector3 import Vector3

KEY_F = 0x46
KEY_G = 0x47
VK_LBUTTON = 0x01

AMBIENT = (0.2, 0.2, 0.2, 0.0)
DIFFUSE = (0.7, 0.7, 0.7, 0.0)
SPECULAR = (1.0, 1.0, 1.0, 0.0)

_MAX_RADIUS_SQUARED = 2500.0
_Z_LIMIT = 20.0

Color = tuple[float, float, float]
Point = tuple[float, float, float]


def _rows(m: Sequence[float]) -> list[list[float]]:
    """Turn a column-major 16-element matrix into a list of rows."""
    if len(m) != 16:
        raise ValueError("a 4x4 matrix needs 16 elements")
    return [[float(m[c * 4 + r]) for c in range(4)] for r in range(4)]


def _matmul(a: list[list[float]], b: list[list[float]]) -> list[list[float]]:
    return [[sum(a[r][k] * b[k][c] for k in range(4)) for c in range(4)] for r in range(4)]


def _invert(m: list[list[float]]) -> list[list[float]]:
    """Gauss-Jordan inversion with partial pivoting."""
    work = [row[:] + [1.0 if r == c else 0.0 for c in range(4)] for r, row in enumerate(m)]
    for col in range(4):
        pivot = max(range(col, 4), key=lambda r: abs(work[r][col]))
        if work[pivot][col] == 0.0:
            raise ValueError("matrix is singular")
        work[col], work[pivot] = work[pivot], work[col]
        lead = work[col][col]
        work[col] = [v / lead for v in work[col]]
        for r in range(4):
            if r != col and work[r][col] != 0.0:
                factor = work[r][col]
                work[r] = [v - factor * p for v, p in zip(work[r], work[col])]
    return [row[4:] for row in work]


def unproject(
    win_x: float,
    win_y: float,
    win_z: float,
    modelview: Sequence[float],
    projection: Sequence[float],
    viewport: Sequence[int],
) -> Vector3:
    """Map window coordinates back to object space.

    Matrices are column-major sequences of 16 numbers; the viewport is
    ``(x, y, width, height)``. Raises ValueError when the mapping is undefined.
    """
    vx, vy, vw, vh = viewport
    inverse = _invert(_matmul(_rows(projection), _rows(modelview)))
    ndc = (
        (win_x - vx) / vw * 2.0 - 1.0,
        (win_y - vy) / vh * 2.0 - 1.0,
        2.0 * win_z - 1.0,
        1.0,
    )
    out = [sum(row[k] * ndc[k] for k in range(4)) for row in inverse]
    if out[3] == 0.0:
        raise ValueError("point maps to infinity")
    return Vector3(out[0] / out[3], out[1] / out[3], out[2] / out[3])


def look_ray(
    wnd_x: float,
    wnd_y: float,
    modelview: Sequence[float],
    projection: Sequence[float],
    viewport: Sequence[int],
) -> tuple[Vector3, Vector3]:
    """Return the origin on the near plane and the unit direction under a window point."""
    origin = unproject(wnd_x, wnd_y, 0.0, modelview, projection, viewport)
    far = unproject(wnd_x, wnd_y, 1.0, modelview, projection, viewport)
    return origin, (far - origin).normalize()


class Light:
    """A point light.

    Holding G drags it over a horizontal plane, G with the left mouse button
    moves it vertically; F marks that it should follow the camera.
    """

    def __init__(self) -> None:
        self._pos = Vector3(1.0, 1.0, 1.0)
        self._drag = False
        self._from_camera = False

    @property
    def x(self) -> float:
        return self._pos.x

    @property
    def y(self) -> float:
        return self._pos.y

    @property
    def z(self) -> float:
        return self._pos.z

    @property
    def position(self) -> Vector3:
        return self._pos

    @property
    def dragging(self) -> bool:
        return self._drag

    @property
    def from_camera(self) -> bool:
        return self._from_camera

    def set_position(self, x: float, y: float, z: float) -> None:
        self._pos = Vector3(x, y, z)

    def start_drag(self, sender: Any, arg: KeyEventArg) -> None:
        if arg.key == KEY_G:
            self._drag = True
        if arg.key == KEY_F:
            self._from_camera = True

    def stop_drag(self, sender: Any, arg: KeyEventArg) -> None:
        if arg.key == KEY_G:
            self._drag = False
        if arg.key == KEY_F:
            self._from_camera = False

    def move_light(self, sender: Any, arg: MouseEventArg) -> None:
        """Move the light to follow the mouse while dragging.

        ``sender`` provides ``height``, ``look_ray(x, y)`` and ``is_key_pressed(key)``.
        """
        if not self._drag:
            return
        origin, direction = sender.look_ray(arg.x, sender.height - arg.y)

        if not sender.is_key_pressed(VK_LBUTTON):
            z = self._pos.z
            k = 0.0 if direction.z == 0 else (z - origin.z) / direction.z
            x = k * direction.x + origin.x
            y = k * direction.y + origin.y
            if x * x + y * y > _MAX_RADIUS_SQUARED:
                return
            self._pos = Vector3(x, y, z)
            return

        top = direction ^ Vector3.unit_z() ^ direction
        d = -(top & origin)
        if top.z == 0:
            new_z = 0.0
        else:
            new_z = -(top.x * self._pos.x + top.y * self._pos.y + d) / top.z
            new_z = min(max(new_z, -_Z_LIMIT), _Z_LIMIT)
        self._pos = Vector3(self._pos.x, self._pos.y, new_z)

    def gizmo_lines(self) -> list[tuple[Color, Point, Point]]:
        """Axis guide lines shown while dragging, as ``(color, start, end)``."""
        if not self._drag:
            return []
        x, y, z = self._pos
        return [
            ((0.0, 0.0, 0.8), (x, y, z), (x, y, 0.0)),
            ((0.8, 0.0, 0.0), (x - 1, y, 0.0), (x + 1, y, 0.0)),
            ((0.0, 0.8, 0.0), (x, y - 1, 0.0), (x, y + 1, 0.0)),
        ]

    def __repr__(self) -> str:
        return f"Light(x={self.x!r}, y={self.y!r}, z={self.z!r})"


__all__ = ["Light", "look_ray", "unproject", "AMBIENT", "DIFFUSE", "SPECULAR", "KEY_F", "KEY_G", "VK_LBUTTON"]