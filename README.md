# volpefw

Building blocks for small 3D rendering samples. None of it depends on a graphics API. It works with plain numpy matrices and plain vertex data, and you can pass those to whatever renderer you use.

## Install

```
pip install .
```

To run the tests:

```
pip install .[test]
pytest
```

## What is inside

- `volpefw.common` holds the enums `Attribute`, `ComponentType`, `DepthFunc`, `StencilFunc`, `StencilOp`, `BlendMode` and `BlendEquation`, and the frozen `Color4` dataclass, which you can iterate as `(r, g, b, a)`. It also has these helpers:
  - `min_float`, `max_float`, `rand_float(low, high)` and `deg_to_rad`.
  - `normalize`, which raises `ValueError` on a zero vector.
  - The 4x4 matrix builders `look_at`, `perspective`, `rotation`, `translation` and `scaling`. `perspective` is right-handed with clip depth in [-1, 1].
- `volpefw.camera` defines the abstract `Camera` base class and `InputState`.
  - `InputState` holds one frame of input: keys held, keys just pressed, mouse position and scroll, left and middle buttons, window size and whether the cursor is locked. Key names are compared case-insensitively.
  - `Camera.get_frustum(width, height)` returns a (6, 4) array of clip planes in the order left, right, bottom, top, near, far. The planes come from the camera's projection and view matrices, and each is normalised by the length of its normal.
- `volpefw.first_person_camera` has `FirstPersonCamera`.
  - `W`, `A`, `S` and `D` move it. `SPACE` moves it up and `LEFT_CONTROL` moves it down. Holding `LEFT_SHIFT` uses the sprint speed.
  - Moving the mouse changes yaw and pitch. Pitch is clamped to ±89°.
  - `Y` toggles the inversion of mouse Y.
  - `TAB` toggles cursor locking. While the cursor is locked, the camera puts `InputState.mouse_pos` back at the window centre after each update.
- `volpefw.orbit_camera` has `OrbitCamera`.
  - The left mouse button rotates it, the middle button pans and scrolling zooms. The distance never goes below 10, and the near and far planes follow the distance.
  - `focus_on(low, high)` aims at the centre of a box and sets the distance so the box fits in view.
  - `view_position()` and `view_direction()` report the position computed by the last `get_view_matrix()` call.
- `volpefw.grid` builds line grids and axis markers as lists of `GridVertex`.
  - `grid_2d_vertices` builds a grid on the XY plane and `grid_3d_vertices` builds one on the XZ plane.
  - `axes_2d_vertices` and `axes_3d_vertices` build coloured axis lines.
  - `Grid2D` and `Grid3D` bundle these with their colours and an axes-visible flag, which `show_axes()` and `hide_axes()` set.
- `volpefw.sphere` generates a UV sphere of radius 0.5 with `generate_sphere_mesh(sector_count, stack_count, length_inv)`, which returns a `SphereMesh` of `SphereVertex` entries and triangle indices.
  - `Sphere` holds a position, a radius and a colour. It shares one 20×20 mesh with every other `Sphere`, and `world_matrix(parent)` returns the parent matrix followed by the sphere's translation and scale.
- `volpefw.sample_runner` has the abstract `Sample` class and `SampleRunner`.
  - A runner holds several samples. The first sample added becomes current.
  - It switches samples with `switch_to_sample_number`, `switch_to_sample_with_name` or `next_sample`, which wraps around. On every switch it prints the sample's name and calls its `init()`.
  - `update` and `render` are forwarded to the current sample.
- `volpefw.tinyjson` is a minimal JSON reader and writer built around `TinyJson`, `Value`, `ValueArray` and `JsonParser`.
  - Reading splits one level of an object into a flat list of keys and values.
  - `get(key, default, kind)` returns a value converted to `str`, `bool`, `int` or `float`.
  - `get_array(key)` returns a `ValueArray`, and `enter(i)` on it reads element `i`.

## Example

```python
from volpefw.camera import InputState
from volpefw.orbit_camera import OrbitCamera

inputs = InputState()
camera = OrbitCamera(inputs)
camera.focus_on((-1.0, -1.0, -1.0), (1.0, 1.0, 1.0))
camera.update(1 / 60, inputs)

view = camera.get_view_matrix()
proj = camera.get_proj_matrix(1280, 720)
clip = proj @ view
frustum = camera.get_frustum(1280, 720)
```

Writing JSON:

```python
from volpefw.tinyjson import TinyJson

doc = TinyJson()
doc["name"].set("grid")
doc["lines"].set(8)
print(doc.write_json())   # {"name":"grid","lines":8}
```

## What it does not do

The package does not open windows, read devices, compile shaders or draw anything.

- You fill in an `InputState` from your own input handling each frame.
- `Grid2D`, `Grid3D` and `Sphere` only hold vertex data, colours and flags, such as the shader file paths and depth-test settings. Uploading and drawing them is up to your renderer.
- The package has no command-line program.