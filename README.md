# moteur

moteur is a small scene engine. A scene is a list of game objects. Each game object
holds a transform and a list of components. Each frame, the engine draws every
displayed object that carries a mesh onto a device. The device records the
requests it receives.

## Modules

- `moteur.utils`
  - `CustomVertex`: a position `x, y, z` with a packed `color`.
  - `xrgb(r, g, b)`: packs an opaque 32-bit ARGB colour. It raises `ValueError`
    if a channel is outside 0–255.
  - `debug_log(message)`: takes a string or an integer. It writes the value at
    DEBUG level to the `moteur` logger and returns the text with a trailing
    newline.
- `moteur.component`
  - `Component`: the base class of every component. It is active by default.
    `set_active(active)` switches it on or off.
- `moteur.transform`
  - `Transform`: tracks roll about x, pitch about y and yaw about z. These are
    folded into a quaternion. The class keeps scale, rotation and translation
    matrices, and combines them into `render_matrix` in the order scale, then
    rotation, then translation. Angles are in degrees unless `is_radian` is true.
    - Methods: `create_rotation`, `set_rotation`, `add_rotation`, `set_roll`,
      `set_pitch`, `set_yaw`, `add_roll`, `add_pitch`, `add_yaw`,
      `rotation_vector`, `set_position`, `set_position_x/y/z`, `set_scale`,
      `set_scale_x/y/z` and `update_render`.
  - Helpers for quaternions in the order (x, y, z, w) and for row-vector
    matrices: `quaternion_from_axis_angle`, `quaternion_multiply`,
    `quaternion_to_matrix`, `matrix_to_quaternion`, `deg_to_rad` and
    `rad_to_deg`.
- `moteur.vertice`
  - `PrimitiveType`: point list, line list, line strip, triangle list, triangle
    strip and triangle fan.
  - `primitive_count(primitive_type, vertex_count)`: the number of primitives
    that the vertices make for the given type.
  - `Vertice(vertices, point_count=None, primitive_type=PrimitiveType.TRIANGLE_LIST)`:
    a mesh component. It holds its vertex and index buffers.
- `moteur.gameobject`
  - `GameObject(transform=None)`: has these methods:
    - `add_component`
    - `remove_component`: raises `ValueError` if the component is not found
      among the first `MAX_COMPONENTS` (20).
    - `get_component`
    - `reset_component`: replaces the entry with a fresh `Component`.
    - `count_components`
    - `find_component(component_type)`
    - `draw()`: returns the object's mesh when `to_display` is true.
- `moteur.input`
  - `KeyState`: the states not pressed, pressed, hold and released.
  - `Key`: a named key binding that keeps the last state seen.
  - `Input(is_down)`: polls a callable that you supply for each key code.
    - `key_state(key)` advances one key and returns its new state.
    - `update()` advances the keys 1–254.
    - `input[key]` reads a state without polling.
    - Key codes outside 0–255 raise `ValueError`.
- `moteur.engine`
  - Matrix builders: `look_at_lh`, `perspective_fov_lh` and `rotation_y`.
  - `RecordingDevice`: keeps every call in `calls`, together with the last
    transforms, the clear colour and a frame count.
  - `Engine(width=800, height=600, device=None)`: has these methods:
    - `add_game_object`
    - `add_mesh_to_scene`
    - `create_index_buffer`
    - `set_up_render_camera`
    - `init_light`
    - `render`
    - `close`

    It is a context manager that closes itself on exit. After it is closed,
    rendering raises `RuntimeError`.

## Installing

```
pip install .
```

## Example

```python
from moteur.engine import Engine
from moteur.gameobject import GameObject
from moteur.transform import Transform
from moteur.utils import CustomVertex, xrgb
from moteur.vertice import PrimitiveType, Vertice

with Engine() as engine:
    mesh = Vertice(
        [
            CustomVertex(-2.5, -3.0, 0.0, xrgb(255, 0, 0)),
            CustomVertex(0.0, 3.0, 0.0, xrgb(0, 255, 0)),
            CustomVertex(2.5, -3.0, 0.0, xrgb(0, 0, 255)),
        ],
        primitive_type=PrimitiveType.TRIANGLE_LIST,
    )
    engine.add_mesh_to_scene(mesh)

    triangle = GameObject(Transform())
    triangle.add_component(mesh)
    triangle.to_display = True
    engine.add_game_object(triangle)

    engine.render()
    print(engine.device.calls[-2])  # the draw_primitive call
```

Each object that is drawn during a frame is spun a little further about the y
axis. The camera looks at it from (20, 20, -80).

## Command line

The following command builds a scene with one coloured triangle:

```
moteur
```

It renders frames through the recording device and prints the number of frames
and draw calls. Options:

- `--frames N`: how many frames to render. The default is 1.
- `--width` and `--height`: the screen size. The defaults are 800 and 600.

## What it does not do

The package opens no window and does not talk to a graphics card or to the
keyboard:

- Rendering only goes to the `RecordingDevice`, which stores the requests so
  that you can inspect them.
- `Input` reads keys only through the `is_down` callable you give it.
- Lighting and material settings are recorded on the engine but do not affect
  any drawing.

## Running the tests

```
pip install .[test]
pytest
```