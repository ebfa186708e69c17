"""Geometry of the scene: a coloured prism and a cylinder-shaped cutout."""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Iterator, Sequence

from kglab.vector3 import Vector3

PI = 3.1415927
_ANGLE_STEP = 0.1
_SKIP_START = 0.5525684671
_CENTER = (3.5, -5.0)

Color = tuple[float, float, float]


def face_normal(a: Sequence[float], b: Sequence[float], c: Sequence[float]) -> Vector3:
    """Unit normal of the plane through ``a``, ``b``, ``c`` as ``(a - b) x (c - b)``.

    Raises ZeroDivisionError for collinear points.
    """
    va, vb, vc = Vector3(*a), Vector3(*b), Vector3(*c)
    return ((va - vb) ^ (vc - vb)).normalize()


@dataclass(frozen=True)
class Face:
    """A flat polygon with a single colour."""

    color: Color
    vertices: tuple[Vector3, ...]

    def center(self) -> Vector3:
        total = Vector3()
        for v in self.vertices:
            total = total + v
        return total / len(self.vertices)

    def normal(self) -> Vector3:
        a, b, c = self.vertices[:3]
        return face_normal(a, b, c)


def _face(color: Color, *points: tuple[float, float, float]) -> Face:
    return Face(color, tuple(Vector3(*p) for p in points))


def prism_faces() -> list[Face]:
    """Faces of the prism: bottom at z=0, sides, top at z=5."""
    return [
        _face((0.3, 0.3, 1), (4, -8, 0), (3, -2, 0), (2, -4, 0)),
        _face((0.1, 0.7, 0.7), (8, 2, 0), (3, 1, 0), (3, -2, 0)),
        _face((0.9, 0.1, 0.2), (-2, -5, 0), (2, -4, 0), (3, -2, 0), (3, 1, 0)),
        _face((0.1, 0.5, 0), (-2, -5, 0), (3, 1, 0), (1, 7, 0), (-6, 3, 0)),
        _face((0, 0, 0.5), (2, -4, 5), (4, -8, 5), (4, -8, 0), (2, -4, 0)),
        _face((0.1, 0.9, 0.5), (4, -8, 5), (3, -2, 5), (3, -2, 0), (4, -8, 0)),
        _face((0.9, 0.1, 0.9), (3, -2, 5), (8, 2, 5), (8, 2, 0), (3, -2, 0)),
        _face((0.1, 0.3, 0.9), (8, 2, 5), (3, 1, 5), (3, 1, 0), (8, 2, 0)),
        _face((0.9, 0.9, 0.1), (3, 1, 5), (1, 7, 5), (1, 7, 0), (3, 1, 0)),
        _face((0.5, 0.3, 0.75), (1, 7, 5), (-6, 3, 5), (-6, 3, 0), (1, 7, 0)),
        _face((0.1, 0.8, 0.9), (-6, 3, 5), (-2, -5, 5), (-2, -5, 0), (-6, 3, 0)),
        _face((1, 1, 0.7), (-2, -5, 5), (2, -4, 5), (2, -4, 0), (-2, -5, 0)),
        _face((0.8, 0.3, 0.5), (2, -4, 5), (3, -2, 5), (4, -8, 5)),
        _face((0.1, 0.3, 0.2), (3, -2, 5), (3, 1, 5), (8, 2, 5)),
        _face((0.5, 0.2, 0.2), (3, 1, 5), (3, -2, 5), (2, -4, 5), (-2, -5, 5)),
        _face((0.1, 0.7, 0.1), (-6, 3, 5), (1, 7, 5), (3, 1, 5), (-2, -5, 5)),
    ]


def _outline(radius: float) -> Iterator[tuple[float, float]]:
    """Points of the arc outline; the skipped arc is bridged by two fixed points."""
    cx, cy = _CENTER
    skip_from = _SKIP_START * PI
    skip_to = skip_from + PI
    skipped = False
    bridged = False
    angle = 0.0
    while angle < 2 * PI:
        if skip_from <= angle <= skip_to:
            if not skipped:
                yield (3.0, -2.0)
                skipped = True
            angle += _ANGLE_STEP
            continue
        if skipped and not bridged:
            yield (4.0, -8.0)
            bridged = True
        yield (cx + radius * math.cos(angle), cy + radius * math.sin(angle))
        angle += _ANGLE_STEP
    yield (radius + cx, cy)


def cylinder_side(radius: float, height: float) -> list[Vector3]:
    """Quad-strip vertices of the side wall: top then bottom for each outline point."""
    vertices: list[Vector3] = []
    for x, y in _outline(radius):
        vertices.append(Vector3(x, y, height))
        vertices.append(Vector3(x, y, 0.0))
    return vertices


def cylinder_cap(radius: float, z: float) -> list[Vector3]:
    """Polygon vertices of a cap at height ``z``."""
    return [Vector3(x, y, z) for x, y in _outline(radius)]