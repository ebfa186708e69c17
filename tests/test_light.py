import math

import pytest

from kglab.events import KeyEventArg, MouseEventArg
from kglab.light import KEY_F, KEY_G, VK_LBUTTON, Light, look_ray, unproject
from kglab.vector3 import Vector3

IDENTITY = [1.0 if i % 5 == 0 else 0.0 for i in range(16)]
VIEWPORT = (0, 0, 100, 100)


class FakeSender:
    def __init__(self, origin, direction, lbutton=False, height=100):
        self.height = height
        self._ray = (Vector3(*origin), Vector3(*direction))
        self._lbutton = lbutton
        self.calls = []

    def look_ray(self, x, y):
        self.calls.append((x, y))
        return self._ray

    def is_key_pressed(self, key):
        return key == VK_LBUTTON and self._lbutton


def test_unproject_identity_center():
    p = unproject(50, 50, 0.0, IDENTITY, IDENTITY, VIEWPORT)
    assert p == Vector3(0.0, 0.0, -1.0)


def test_unproject_scaled_modelview():
    scale = list(IDENTITY)
    scale[0] = scale[5] = scale[10] = 2.0
    p = unproject(50, 50, 0.0, scale, IDENTITY, VIEWPORT)
    assert p.z == pytest.approx(-0.5)
    assert p.x == pytest.approx(0.0)


def test_unproject_singular_raises():
    with pytest.raises(ValueError):
        unproject(0, 0, 0, [0.0] * 16, IDENTITY, VIEWPORT)


def test_unproject_bad_matrix_size():
    with pytest.raises(ValueError):
        unproject(0, 0, 0, [1.0] * 9, IDENTITY, VIEWPORT)


def test_look_ray_direction_is_unit():
    origin, direction = look_ray(20, 70, IDENTITY, IDENTITY, VIEWPORT)
    assert direction.length() == pytest.approx(1.0)
    assert origin.z == pytest.approx(-1.0)
    assert direction.z == pytest.approx(1.0)


def test_default_position():
    light = Light()
    assert (light.x, light.y, light.z) == (1.0, 1.0, 1.0)


def test_set_position():
    light = Light()
    light.set_position(3, -4, 5)
    assert tuple(light.position) == (3, -4, 5)


def test_keys_toggle_flags():
    light = Light()
    light.start_drag(None, KeyEventArg(KEY_G))
    light.start_drag(None, KeyEventArg(KEY_F))
    assert light.dragging and light.from_camera
    light.stop_drag(None, KeyEventArg(KEY_G))
    assert not light.dragging and light.from_camera
    light.stop_drag(None, KeyEventArg(KEY_F))
    assert not light.from_camera


def test_other_keys_ignored():
    light = Light()
    light.start_drag(None, KeyEventArg(ord("X")))
    assert not light.dragging and not light.from_camera


def test_move_ignored_without_drag():
    light = Light()
    sender = FakeSender((2, 3, 10), (0, 0, -1))
    light.move_light(sender, MouseEventArg(10, 20))
    assert tuple(light.position) == (1.0, 1.0, 1.0)
    assert sender.calls == []


def test_horizontal_move_keeps_height():
    light = Light()
    light.start_drag(None, KeyEventArg(KEY_G))
    sender = FakeSender((2, 3, 10), (0, 0, -1))
    light.move_light(sender, MouseEventArg(10, 20))
    assert sender.calls == [(10, 80)]
    assert tuple(light.position) == pytest.approx((2, 3, 1))


def test_horizontal_move_parallel_ray_uses_origin():
    light = Light()
    light.start_drag(None, KeyEventArg(KEY_G))
    light.move_light(FakeSender((4, -2, 7), (1, 0, 0)), MouseEventArg(0, 0))
    assert tuple(light.position) == pytest.approx((4, -2, 1))


def test_horizontal_move_too_far_is_rejected():
    light = Light()
    light.start_drag(None, KeyEventArg(KEY_G))
    light.move_light(FakeSender((100, 0, 10), (0, 0, -1)), MouseEventArg(0, 0))
    assert tuple(light.position) == (1.0, 1.0, 1.0)


def test_vertical_move():
    light = Light()
    light.start_drag(None, KeyEventArg(KEY_G))
    light.move_light(FakeSender((0, 0, 7), (1, 0, 0), lbutton=True), MouseEventArg(0, 0))
    assert light.z == pytest.approx(7)
    assert (light.x, light.y) == (1.0, 1.0)


def test_vertical_move_is_clamped():
    light = Light()
    light.start_drag(None, KeyEventArg(KEY_G))
    light.move_light(FakeSender((0, 0, 50), (1, 0, 0), lbutton=True), MouseEventArg(0, 0))
    assert light.z == 20.0
    light.move_light(FakeSender((0, 0, -50), (1, 0, 0), lbutton=True), MouseEventArg(0, 0))
    assert light.z == -20.0


def test_vertical_move_looking_straight_down():
    light = Light()
    light.start_drag(None, KeyEventArg(KEY_G))
    light.move_light(FakeSender((0, 0, 9), (0, 0, -1), lbutton=True), MouseEventArg(0, 0))
    assert light.z == 0.0


def test_gizmo_lines():
    light = Light()
    assert light.gizmo_lines() == []
    light.set_position(2, 3, 4)
    light.start_drag(None, KeyEventArg(KEY_G))
    lines = light.gizmo_lines()
    assert len(lines) == 3
    assert lines[0][1:] == ((2, 3, 4), (2, 3, 0.0))
    for _, start, end in lines[1:]:
        assert math.dist(start, end) == pytest.approx(2.0)