# kglab

An interactive 3D scene drawn with legacy (compatibility profile) OpenGL
through pyglet. It shows a coloured prism standing on the XY plane, the
coordinate axes, a point light you can move with the keyboard and mouse, and
a status panel in the top-left corner of the window. Each face of the prism
is drawn with a short red line along its normal.

## Installation

```
pip install .
```

## Running

```
kglab
```

This opens an 800×600 window. The size can be changed:

```
kglab --width 1024 --height 768
```

Both values must be positive. `kglab --help` lists the options.

## Controls

| Input                    | Action                                                        |
|--------------------------|---------------------------------------------------------------|
| Left mouse drag          | Orbit the camera around the origin                            |
| Mouse wheel              | Zoom; stops zooming in at distance 1 and out at distance 100  |
| `T`                      | Switch texturing state on or off                              |
| `L`                      | Switch lighting on or off                                     |
| `A`                      | Switch alpha blending on or off                               |
| Hold `F`                 | Keep the light at the camera's position                       |
| Hold `G`, move mouse     | Move the light across the horizontal plane at its height      |
| Hold `G` + left button   | Move the light up and down, between z = −20 and z = 20        |

While `G` is held the camera does not rotate, and the light shows guide lines
to the XY plane. Moving the light horizontally is refused when it would end
up more than 50 units from the Z axis.

The status panel shows which modes are on, where the light and the camera
are, the camera's spherical parameters (`R`, `fi1`, `fi2`) and the time since
the previous frame.

## Using the pieces as a library

Everything except `kglab.app` works without a window:

- `kglab.vector3.Vector3`: an immutable 3-component vector with `+`, `-`,
  scalar `*` and `/`, `length()`, `normalize()`, `cross()` and `dot()`;
  `^` is the cross product and `&` the dot product.
- `kglab.events.Event`: an ordered list of handlers, added with `reaction`,
  removed with `remove_reaction` or `remove_all_reactions`, and called as
  `handler(sender, arg)` by `emit`. The argument types are
  `MouseWheelEventArg`, `MouseEventArg` and `KeyEventArg`.
- `kglab.camera.Camera`: an orbit camera with `set_position`, `zoom`,
  `mouse_move`, `start_drag`, `stop_drag`, `mouse_leave` and `look_at`.
- `kglab.light.Light`: the draggable point light. `kglab.light.unproject`
  and `kglab.light.look_ray` map window coordinates back to world space
  from column-major matrices and a viewport.
- `kglab.scene`: `prism_faces()` returns the model's `Face` objects, each
  with a colour, vertices, `center()` and `normal()`; `cylinder_side` and
  `cylinder_cap` give the vertices of a cut cylinder shape.
- `kglab.hud`: `RenderModes` holds the T/L/A switches, `format_status`
  builds the status panel text, and `text_to_rgba` makes white pixels of
  RGBA image data transparent.
- `kglab.engine.Engine`: queues input events and emits them when
  `process_pending` is called; it also tracks pressed keys, window size and
  the perspective projection built by `kglab.engine.perspective`.

```python
from kglab.camera import Camera
from kglab.events import MouseWheelEventArg

camera = Camera()
camera.set_position(2, 1.5, 1.5)
camera.zoom(None, MouseWheelEventArg(120))
print(camera.distance, camera.x, camera.y, camera.z)
```

## What it does not do

No texture image is loaded. The `T` switch turns the texturing state on and
off, but the prism is always drawn with its plain face colours. The cut
cylinder shape in `kglab.scene` is available as geometry but is not drawn in
the window.

## Tests

```
pip install .[test]
pytest
```