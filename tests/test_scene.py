import math

import pytest

from kglab.scene import Face, cylinder_cap, cylinder_side, face_normal, prism_faces
from kglab.vector3 import Vector3

RADIUS = 3.0413812


def test_face_normal_is_unit_and_perpendicular():
    a, b, c = (1, 2, 0), (4, -1, 2), (0, 3, 5)
    n = face_normal(a, b, c)
    assert n.length() == pytest.approx(1.0)
    assert n.dot(Vector3(*a) - Vector3(*b)) == pytest.approx(0.0)
    assert n.dot(Vector3(*c) - Vector3(*b)) == pytest.approx(0.0)


def test_face_normal_orientation_flips_with_order():
    n1 = face_normal((0, 0, 0), (1, 0, 0), (0, 1, 0))
    n2 = face_normal((0, 1, 0), (1, 0, 0), (0, 0, 0))
    assert n1 == -n2
    assert abs(n1.z) == pytest.approx(1.0)


def test_face_normal_collinear_raises():
    with pytest.raises(ZeroDivisionError):
        face_normal((0, 0, 0), (1, 1, 1), (2, 2, 2))


def test_face_center():
    face = Face((1, 1, 1), (Vector3(0, 0, 0), Vector3(2, 0, 0), Vector3(2, 2, 0), Vector3(0, 2, 0)))
    assert face.center() == Vector3(1, 1, 0)


def test_prism_face_count():
    assert len(prism_faces()) == 16


def test_prism_faces_are_planar_and_sides_vertical():
    for face in prism_faces():
        n = face.normal()
        assert n.length() == pytest.approx(1.0)
        zs = {v.z for v in face.vertices}
        for v in face.vertices:
            assert n.dot(v - face.vertices[0]) == pytest.approx(0.0, abs=1e-9)
        if len(zs) == 2:
            assert n.z == pytest.approx(0.0)
        else:
            assert zs <= {0, 5}
            assert abs(n.z) == pytest.approx(1.0)


def test_prism_colors_in_range():
    for face in prism_faces():
        assert all(0 <= c <= 1 for c in face.color)


def test_cylinder_cap_points():
    cap = cylinder_cap(RADIUS, 5.0)
    assert all(v.z == 5.0 for v in cap)
    assert cap[0] == Vector3(3.5 + RADIUS, -5.0, 5.0)
    assert cap[-1] == Vector3(RADIUS + 3.5, -5.0, 5.0)
    xy = [(v.x, v.y) for v in cap]
    assert xy.count((3.0, -2.0)) == 1
    assert xy.count((4.0, -8.0)) == 1
    assert xy.index((3.0, -2.0)) + 1 == xy.index((4.0, -8.0))


def test_cylinder_points_lie_on_circle():
    for v in cylinder_cap(RADIUS, 0.0):
        assert math.hypot(v.x - 3.5, v.y + 5) == pytest.approx(RADIUS, rel=1e-6)


def test_cylinder_side_pairs_cap():
    side = cylinder_side(RADIUS, 5.0)
    top = cylinder_cap(RADIUS, 5.0)
    bottom = cylinder_cap(RADIUS, 0.0)
    assert len(side) == 2 * len(top)
    assert side[0::2] == top
    assert side[1::2] == bottom