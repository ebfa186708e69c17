"""Orbit camera looking at the origin, driven by mouse events."""

from __future__ import annotations

import math
from typing import Any

from kglab.events import MouseEventArg, MouseWheelEventArg

_KEY_G = ord("G")


class Camera:
    """A camera on a sphere around the origin.

    ``fi1`` is the azimuth around Z and ``fi2`` the elevation above the XY plane.
    """

    def __init__(self) -> None:
        self.fi1: float = 1.0
        self.fi2: float = 0.5
        self._dist: float = 5.0
        self._nz: int = 1
        self._x = self._y = self._z = 0.0
        self._mouse: tuple[int, int] | None = None
        self._drag = False
        self.calculate_position()

    @property
    def distance(self) -> float:
        return self._dist

    @property
    def nz(self) -> int:
        """Z component of the up vector, flipped when the camera goes over the pole."""
        return self._nz

    @property
    def x(self) -> float:
        return self._x

    @property
    def y(self) -> float:
        return self._y

    @property
    def z(self) -> float:
        return self._z

    @property
    def dragging(self) -> bool:
        return self._drag

    def set_position(self, x: float, y: float, z: float) -> None:
        """Place the camera at a point and derive distance and angles from it."""
        self._x, self._y, self._z = x, y, z
        self._dist = math.sqrt(x * x + y * y + z * z)
        self.fi1 = math.atan2(y, x)
        self.fi2 = math.atan2(z, math.sqrt(x * x + y * y))

    def calculate_position(self) -> None:
        """Recompute the position from distance and angles."""
        c2 = math.cos(self.fi2)
        self._x = self._dist * c2 * math.cos(self.fi1)
        self._y = self._dist * c2 * math.sin(self.fi1)
        self._z = self._dist * math.sin(self.fi2)
        self._nz = -1 if c2 <= 0 else 1

    def zoom(self, sender: Any, arg: MouseWheelEventArg) -> None:
        """Move along the view ray, keeping the distance within [1, 100]."""
        if arg.value < 0 and self._dist <= 1:
            return
        if arg.value > 0 and self._dist >= 100:
            return
        self._dist += 0.01 * arg.value
        self.calculate_position()

    def mouse_move(self, sender: Any, arg: MouseEventArg) -> None:
        """Rotate while dragging; ignored while G is held on the sender."""
        if sender is not None and sender.is_key_pressed(_KEY_G):
            return
        if self._mouse is None:
            self._mouse = (arg.x, arg.y)
            return
        dx = self._mouse[0] - arg.x
        dy = self._mouse[1] - arg.y
        self._mouse = (arg.x, arg.y)
        if self._drag:
            self.fi1 += 0.01 * dx
            self.fi2 -= 0.01 * dy
            self.calculate_position()

    def mouse_leave(self, sender: Any, arg: MouseEventArg) -> None:
        self._mouse = None

    def start_drag(self, sender: Any, arg: MouseEventArg) -> None:
        self._drag = True

    def stop_drag(self, sender: Any, arg: MouseEventArg) -> None:
        self._drag = False
        self._mouse = None

    def look_at(
        self,
    ) -> tuple[tuple[float, float, float], tuple[float, float, float], tuple[float, float, float]]:
        """Return eye, target and up vectors for a look-at view matrix."""
        return (self._x, self._y, self._z), (0.0, 0.0, 0.0), (0.0, 0.0, float(self._nz))