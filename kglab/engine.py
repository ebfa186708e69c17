"""Input queue, window state and projection shared by the scene objects."""

from __future__ import annotations

import math
import threading
from typing import Callable, Sequence

from kglab.events import Event, KeyEventArg, MouseEventArg, MouseWheelEventArg
from kglab.light import look_ray as _look_ray
from kglab.vector3 import Vector3

FOVY = 45.0
NEAR = 0.2
FAR = 200.0

IDENTITY: tuple[float, ...] = (
    1.0, 0.0, 0.0, 0.0,
    0.0, 1.0, 0.0, 0.0,
    0.0, 0.0, 1.0, 0.0,
    0.0, 0.0, 0.0, 1.0,
)


def perspective(fovy: float, aspect: float, near: float, far: float) -> tuple[float, ...]:
    """Column-major perspective projection matrix.

    ``fovy`` is the vertical field of view in degrees. Raises ValueError
    when the parameters describe no valid frustum.
    """
    if aspect == 0 or near == far:
        raise ValueError("degenerate frustum")
    half = math.radians(fovy) / 2.0
    if math.sin(half) == 0:
        raise ValueError("field of view must not be a multiple of 360 degrees")
    f = math.cos(half) / math.sin(half)
    depth = near - far
    return (
        f / aspect, 0.0, 0.0, 0.0,
        0.0, f, 0.0, 0.0,
        0.0, 0.0, (far + near) / depth, -1.0,
        0.0, 0.0, 2.0 * far * near / depth, 0.0,
    )


class Engine:
    """Collects input from the window and replays it on the render side.

    Input methods only queue work; ``process_pending`` emits the queued
    events in arrival order, so handlers always run on the rendering thread.
    """

    def __init__(self) -> None:
        self.on_wheel: Event[Engine, MouseWheelEventArg] = Event()
        self.on_mouse_move: Event[Engine, MouseEventArg] = Event()
        self.on_mouse_leave: Event[Engine, MouseEventArg] = Event()
        self.on_mouse_l_down: Event[Engine, MouseEventArg] = Event()
        self.on_mouse_l_up: Event[Engine, MouseEventArg] = Event()
        self.on_mouse_r_down: Event[Engine, MouseEventArg] = Event()
        self.on_mouse_r_up: Event[Engine, MouseEventArg] = Event()
        self.on_mouse_m_down: Event[Engine, MouseEventArg] = Event()
        self.on_mouse_m_up: Event[Engine, MouseEventArg] = Event()
        self.on_key_down: Event[Engine, KeyEventArg] = Event()
        self.on_key_up: Event[Engine, KeyEventArg] = Event()

        self.modelview: tuple[float, ...] = IDENTITY
        self.projection: tuple[float, ...] = IDENTITY

        self._lock = threading.Lock()
        self._pending: list[Callable[[], None]] = []
        self._pending_size: tuple[int, int] | None = None
        self._width = 0
        self._height = 0
        self._pressed: set[int] = set()

    @property
    def width(self) -> int:
        return self._width

    @property
    def height(self) -> int:
        return self._height

    @property
    def viewport(self) -> tuple[int, int, int, int]:
        return (0, 0, self._width, self._height)

    def _queue(self, event: Event, arg: object) -> None:
        with self._lock:
            self._pending.append(lambda: event.emit(self, arg))

    def wheel_event(self, delta: float) -> None:
        self._queue(self.on_wheel, MouseWheelEventArg(delta))

    def mouse_move(self, x: int, y: int) -> None:
        self._queue(self.on_mouse_move, MouseEventArg(x, y))

    def mouse_leave(self, x: int, y: int) -> None:
        self._queue(self.on_mouse_leave, MouseEventArg(x, y))

    def mouse_l_down(self, x: int, y: int) -> None:
        self._queue(self.on_mouse_l_down, MouseEventArg(x, y))

    def mouse_l_up(self, x: int, y: int) -> None:
        self._queue(self.on_mouse_l_up, MouseEventArg(x, y))

    def mouse_r_down(self, x: int, y: int) -> None:
        self._queue(self.on_mouse_r_down, MouseEventArg(x, y))

    def mouse_r_up(self, x: int, y: int) -> None:
        self._queue(self.on_mouse_r_up, MouseEventArg(x, y))

    def mouse_m_down(self, x: int, y: int) -> None:
        self._queue(self.on_mouse_m_down, MouseEventArg(x, y))

    def mouse_m_up(self, x: int, y: int) -> None:
        self._queue(self.on_mouse_m_up, MouseEventArg(x, y))

    def key_down(self, key: int) -> None:
        self._queue(self.on_key_down, KeyEventArg(key))

    def key_up(self, key: int) -> None:
        self._queue(self.on_key_up, KeyEventArg(key))

    def process_pending(self) -> int:
        """Emit every queued event in order; return how many were handled."""
        with self._lock:
            pending, self._pending = self._pending, []
        for job in pending:
            job()
        return len(pending)

    def try_to_resize(self, w: int, h: int) -> None:
        """Remember a new window size, applied on the next frame."""
        with self._lock:
            self._pending_size = (w, h)

    def apply_pending_resize(self) -> bool:
        """Apply a remembered size and rebuild the projection; return whether one was applied."""
        with self._lock:
            size, self._pending_size = self._pending_size, None
        if size is None:
            return False
        self._width, self._height = size
        if self._width > 0 and self._height > 0:
            self.projection = perspective(FOVY, self._width / self._height, NEAR, FAR)
        return True

    def set_key_state(self, key: int, pressed: bool) -> None:
        if pressed:
            self._pressed.add(key)
        else:
            self._pressed.discard(key)

    def is_key_pressed(self, key: int) -> bool:
        return key in self._pressed

    def look_ray(self, x: float, y: float) -> tuple[Vector3, Vector3]:
        """Ray under a window point, with ``y`` counted from the bottom edge."""
        return _look_ray(x, y, self.modelview, self.projection, self.viewport)

    def bind(self, handlers: Sequence[tuple[Event, Callable]]) -> None:
        """Register several ``(event, handler)`` pairs at once."""
        for event, handler in handlers:
            event.reaction(handler)