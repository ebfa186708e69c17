"""Window, input wiring and drawing of the scene."""

from __future__ import annotations

import argparse
import math
from typing import Sequence

from kglab.camera import Camera
from kglab.engine import Engine
from kglab.hud import TEXT_HEIGHT, TEXT_MARGIN, TEXT_WIDTH, RenderModes, format_status
from kglab.light import AMBIENT, DIFFUSE, KEY_F, SPECULAR, VK_LBUTTON, Light
from kglab.scene import Face, prism_faces

TITLE = "Лабораторка по КГ"
VK_RBUTTON = 0x02
VK_MBUTTON = 0x04
VK_SPACE = 0x20
WHEEL_DELTA = 120

MATERIAL_AMBIENT = (0.2, 0.2, 0.1, 1.0)
MATERIAL_DIFFUSE = (0.4, 0.65, 0.5, 1.0)
MATERIAL_SPECULAR = (0.9, 0.8, 0.3, 1.0)
MATERIAL_SHININESS = 0.2 * 256


def vk_from_symbol(symbol: int) -> int | None:
    """Map a window key symbol to a virtual key code, or None if it has none."""
    if ord("a") <= symbol <= ord("z"):
        return symbol - ord("a") + ord("A")
    if ord("0") <= symbol <= ord("9"):
        return symbol
    if symbol == ord(" "):
        return VK_SPACE
    return None


def _gl():
    from pyglet.gl import gl_compat

    return gl_compat


def _floats(values: Sequence[float]):
    gl = _gl()
    return (gl.GLfloat * len(values))(*values)


def _doubles(values: Sequence[float]):
    gl = _gl()
    return (gl.GLdouble * len(values))(*values)


def _get_float(name: int) -> float:
    gl = _gl()
    value = (gl.GLfloat * 1)()
    gl.glGetFloatv(name, value)
    return value[0]


def _look_at(eye, target, up) -> tuple[float, ...]:
    fx, fy, fz = (t - e for t, e in zip(target, eye))
    fl = math.sqrt(fx * fx + fy * fy + fz * fz)
    fx, fy, fz = fx / fl, fy / fl, fz / fl
    ux, uy, uz = up
    sx, sy, sz = fy * uz - fz * uy, fz * ux - fx * uz, fx * uy - fy * ux
    sl = math.sqrt(sx * sx + sy * sy + sz * sz)
    sx, sy, sz = sx / sl, sy / sl, sz / sl
    ux, uy, uz = sy * fz - sz * fy, sz * fx - sx * fz, sx * fy - sy * fx
    ex, ey, ez = eye
    return (
        sx, ux, -fx, 0.0,
        sy, uy, -fy, 0.0,
        sz, uz, -fz, 0.0,
        -(sx * ex + sy * ey + sz * ez),
        -(ux * ex + uy * ey + uz * ez),
        fx * ex + fy * ey + fz * ez,
        1.0,
    )


def draw_face(face: Face) -> None:
    """Draw a face together with a red line along its normal."""
    gl = _gl()
    center = face.center()
    normal = face.normal()
    tip = center + normal

    lit = bool(gl.glIsEnabled(gl.GL_LIGHTING))
    if lit:
        gl.glDisable(gl.GL_LIGHTING)
    gl.glBegin(gl.GL_LINES)
    gl.glColor3d(1, 0, 0)
    gl.glVertex3d(*center)
    gl.glVertex3d(*tip)
    gl.glEnd()
    if lit:
        gl.glEnable(gl.GL_LIGHTING)

    gl.glNormal3d(*normal)
    gl.glBegin(gl.GL_TRIANGLES if len(face.vertices) == 3 else gl.GL_QUADS)
    gl.glColor3d(*face.color)
    for vertex in face.vertices:
        gl.glVertex3d(*vertex)
    gl.glEnd()


def draw_axes() -> None:
    """Draw the X, Y and Z axes in red, green and blue."""
    gl = _gl()
    gl.glDisable(gl.GL_LIGHTING)
    gl.glDisable(gl.GL_TEXTURE_2D)
    gl.glBegin(gl.GL_LINES)
    for color, end in (((1, 0, 0), (10, 0, 0)), ((0, 1, 0), (0, 10, 0)), ((0, 0, 1), (0, 0, 10))):
        gl.glColor3f(*color)
        gl.glVertex3d(0, 0, 0)
        gl.glVertex3d(*end)
    gl.glEnd()
    gl.glColor3f(0.0, 0.0, 0.0)


def draw_light_gizmo(light: Light) -> None:
    """Draw the light as a point, plus its guide lines while it is dragged."""
    gl = _gl()
    point_size = _get_float(gl.GL_POINT_SIZE)
    gl.glPointSize(10)
    gl.glDisable(gl.GL_DEPTH_TEST)
    gl.glDisable(gl.GL_TEXTURE_2D)
    gl.glDisable(gl.GL_LIGHTING)
    gl.glBegin(gl.GL_POINTS)
    gl.glColor3d(1, 0.7, 0.1)
    gl.glVertex3d(light.x, light.y, light.z)
    gl.glEnd()
    gl.glPointSize(point_size)

    lines = light.gizmo_lines()
    if not lines:
        return
    line_width = _get_float(gl.GL_LINE_WIDTH)
    gl.glLineWidth(3.0)
    gl.glBegin(gl.GL_LINES)
    for color, start, end in lines:
        gl.glColor3d(*color)
        gl.glVertex3d(*start)
        gl.glVertex3d(*end)
    gl.glEnd()
    gl.glLineWidth(line_width)


def _set_up_light(light: Light) -> None:
    gl = _gl()
    gl.glLightfv(gl.GL_LIGHT0, gl.GL_POSITION, _floats((light.x, light.y, light.z, 1.0)))
    gl.glLightfv(gl.GL_LIGHT0, gl.GL_AMBIENT, _floats(AMBIENT))
    gl.glLightfv(gl.GL_LIGHT0, gl.GL_DIFFUSE, _floats(DIFFUSE))
    gl.glLightfv(gl.GL_LIGHT0, gl.GL_SPECULAR, _floats(SPECULAR))
    gl.glEnable(gl.GL_LIGHT0)


def _set_up_material() -> None:
    gl = _gl()
    gl.glMaterialfv(gl.GL_FRONT, gl.GL_AMBIENT, _floats(MATERIAL_AMBIENT))
    gl.glMaterialfv(gl.GL_FRONT, gl.GL_DIFFUSE, _floats(MATERIAL_DIFFUSE))
    gl.glMaterialfv(gl.GL_FRONT, gl.GL_SPECULAR, _floats(MATERIAL_SPECULAR))
    gl.glMaterialf(gl.GL_FRONT, gl.GL_SHININESS, MATERIAL_SHININESS)
    gl.glShadeModel(gl.GL_SMOOTH)


def run(width: int = 800, height: int = 600) -> None:
    """Open the window and run the render loop until it is closed."""
    import pyglet
    from pyglet.window import mouse

    gl = _gl()
    try:
        config = pyglet.gl.Config(double_buffer=True, depth_size=16)
        window = pyglet.window.Window(width, height, caption=TITLE, resizable=True, config=config)
    except pyglet.window.NoSuchConfigException:
        window = pyglet.window.Window(width, height, caption=TITLE, resizable=True)

    engine = Engine()
    camera = Camera()
    light = Light()
    modes = RenderModes()
    faces = prism_faces()
    state = {"delta": 0.0}

    engine.bind(
        [
            (engine.on_wheel, camera.zoom),
            (engine.on_mouse_move, camera.mouse_move),
            (engine.on_mouse_leave, camera.mouse_leave),
            (engine.on_mouse_l_down, camera.start_drag),
            (engine.on_mouse_l_up, camera.stop_drag),
            (engine.on_mouse_move, light.move_light),
            (engine.on_key_down, light.start_drag),
            (engine.on_key_up, light.stop_drag),
            (engine.on_key_down, lambda sender, arg: modes.toggle(arg.key)),
        ]
    )
    camera.set_position(2, 1.5, 1.5)
    engine.try_to_resize(width, height)

    label = pyglet.text.Label(
        "",
        x=TEXT_MARGIN,
        y=height - TEXT_MARGIN,
        width=TEXT_WIDTH,
        height=TEXT_HEIGHT,
        multiline=True,
        anchor_y="top",
        font_name="Consolas",
        font_size=10,
        bold=True,
        color=(0, 0, 0, 255),
    )

    buttons = {
        mouse.LEFT: (VK_LBUTTON, engine.mouse_l_down, engine.mouse_l_up),
        mouse.RIGHT: (VK_RBUTTON, engine.mouse_r_down, engine.mouse_r_up),
        mouse.MIDDLE: (VK_MBUTTON, engine.mouse_m_down, engine.mouse_m_up),
    }

    def flip(y: int) -> int:
        return window.height - y

    @window.event
    def on_resize(w, h):
        engine.try_to_resize(w, h)

    @window.event
    def on_key_press(symbol, modifiers):
        vk = vk_from_symbol(symbol)
        if vk is not None:
            engine.set_key_state(vk, True)
            engine.key_down(vk)

    @window.event
    def on_key_release(symbol, modifiers):
        vk = vk_from_symbol(symbol)
        if vk is not None:
            engine.set_key_state(vk, False)
            engine.key_up(vk)

    @window.event
    def on_mouse_motion(x, y, dx, dy):
        engine.mouse_move(x, flip(y))

    @window.event
    def on_mouse_drag(x, y, dx, dy, button, modifiers):
        engine.mouse_move(x, flip(y))

    @window.event
    def on_mouse_leave(x, y):
        engine.mouse_leave(x, flip(y))

    @window.event
    def on_mouse_press(x, y, button, modifiers):
        if button in buttons:
            vk, down, _ = buttons[button]
            engine.set_key_state(vk, True)
            down(x, flip(y))

    @window.event
    def on_mouse_release(x, y, button, modifiers):
        if button in buttons:
            vk, _, up = buttons[button]
            engine.set_key_state(vk, False)
            up(x, flip(y))

    @window.event
    def on_mouse_scroll(x, y, scroll_x, scroll_y):
        engine.wheel_event(scroll_y * WHEEL_DELTA)

    @window.event
    def on_draw():
        engine.apply_pending_resize()
        engine.process_pending()

        gl.glViewport(0, 0, engine.width, engine.height)
        gl.glMatrixMode(gl.GL_PROJECTION)
        gl.glLoadMatrixd(_doubles(engine.projection))

        gl.glClearColor(1.0, 1.0, 1.0, 1.0)
        gl.glClear(gl.GL_COLOR_BUFFER_BIT | gl.GL_DEPTH_BUFFER_BIT)
        gl.glEnable(gl.GL_DEPTH_TEST)

        if engine.is_key_pressed(KEY_F):
            light.set_position(camera.x, camera.y, camera.z)
        engine.modelview = _look_at(*camera.look_at())
        gl.glMatrixMode(gl.GL_MODELVIEW)
        gl.glLoadMatrixd(_doubles(engine.modelview))
        _set_up_light(light)

        draw_axes()
        gl.glDisable(gl.GL_LIGHTING)
        gl.glDisable(gl.GL_TEXTURE_2D)
        gl.glDisable(gl.GL_BLEND)
        if modes.lighting:
            gl.glEnable(gl.GL_LIGHTING)
        if modes.texturing:
            gl.glEnable(gl.GL_TEXTURE_2D)
            gl.glBindTexture(gl.GL_TEXTURE_2D, 0)
        if modes.alpha:
            gl.glEnable(gl.GL_BLEND)
            gl.glBlendFunc(gl.GL_SRC_ALPHA, gl.GL_ONE_MINUS_SRC_ALPHA)
        _set_up_material()

        for face in faces:
            draw_face(face)
        draw_light_gizmo(light)

        gl.glDisable(gl.GL_DEPTH_TEST)
        gl.glDisable(gl.GL_LIGHTING)
        gl.glDisable(gl.GL_TEXTURE_2D)
        label.y = window.height - TEXT_MARGIN
        label.text = format_status(modes, light, camera, state["delta"])
        label.draw()

    def tick(dt: float) -> None:
        state["delta"] = dt

    pyglet.clock.schedule(tick)
    pyglet.app.run()


def main(argv: Sequence[str] | None = None) -> int:
    parser = argparse.ArgumentParser(prog="kglab", description="Interactive lit prism scene.")
    parser.add_argument("--width", type=int, default=800)
    parser.add_argument("--height", type=int, default=600)
    args = parser.parse_args(argv)
    if args.width <= 0 or args.height <= 0:
        parser.error("window size must be positive")
    run(args.width, args.height)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())