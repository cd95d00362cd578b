# zengine

Building blocks of a small 2D/3D graphics engine, modelled in plain Python:
vector and matrix maths, cameras and the controllers that move them, input
devices and key codes, a layer stack, meshes and lights, a generic staged
pipeline, and the engine's loggers.

No window or graphics context is needed. Devices hold their key state as
ordinary Python data, and cameras expose their matrices as numpy arrays.

## Installation

```
pip install .
```

For the test suite:

```
pip install ".[test]"
pytest
```

## Modules

- `zengine.maths`: `radians`, `clamp`, `normalize`, `perspective`, `ortho`,
  `look_at`, `translate`, `rotate`, `angle_axis`, `quat_multiply` and
  `quat_rotate`. Matrices are 4x4 numpy arrays that act on column vectors;
  quaternions are `[w, x, y, z]`. Degenerate input (a zero-length vector, a
  zero aspect ratio, an empty box, `low > high` for `clamp`) raises
  `ValueError`.
- `zengine.vertex`: `GraphicVertex` keeps a position, normal and texture
  coordinate in one eight-float buffer (`buffer`, in the order of
  `GraphicVertex.LAYOUT`); `transform_position` applies a 4x4 matrix to the
  position. `ElementLayout` describes one attribute of the layout.
- `zengine.cameras`: `Camera`, `OrthographicCamera` (with a `rotation`
  about z), `PerspectiveCamera` (with `forward`, `right` and `up` axes kept
  in step with position and target) and `OrbitCamera` (a `radius` clamped
  to 1.5–300, `set_yaw_angle`, `set_pitch_angle` and `orbit`). Setting
  `position`, `target` or `projection_matrix` recomputes `view_matrix` and
  `view_projection`.
- `zengine.controllers`: `OrthographicCameraController`,
  `PerspectiveCameraController` and `OrbitCameraController`. Each owns a
  camera, reads key state from a `Keyboard` and `Mouse` on `update(dt)`, and
  reacts to `on_mouse_wheel` (and, for the orbit controller,
  `on_mouse_moved`). Key constants such as `KEY_LEFT` use the SDL key codes
  on Linux and the GLFW key codes elsewhere.
- `zengine.keycodes`: the `KeyCode` (SDL) and `GlfwKeyCode` enumerations.
- `zengine.sdl_keys` and `zengine.glfw_keys`: `sdl_engine_key` and
  `glfw_engine_key` look up an engine key name such as `"ZENGINE_KEY_A"`,
  `"A"` or `"mouse_right"` and raise `KeyError` for unknown names.
- `zengine.devices`: `Device`, `Keyboard` and `Mouse`. `Keyboard.get()` and
  `Mouse.get()` return one shared instance per class; `press`, `release`,
  `is_key_pressed` and `is_key_released` track key state, and
  `Mouse.move_to` records the cursor `position`.
- `zengine.layers`: `Layer` and `LayerStack`, with `push_layer`,
  `push_overlay_layer`, `pop_layer` and `pop_overlay_layer`.
- `zengine.mesh`: `Mesh` (a geometry, a material and a `unique_identifier`)
  and `Light`, a mesh with ambient, diffuse and specular colours.
- `zengine.pipeline`: `PipelineStage`, `PipelineContext` and
  `StageInformation`, a chain of stages where each stage hands the context
  over to the one after it.
- `zengine.logs`: `initialize` sets up the `ENGINE` and `EDITOR` loggers on
  standard output; `engine_logger` and `editor_logger` return them and raise
  `RuntimeError` before `initialize` has been called.

## Example

```python
import numpy as np

from zengine.cameras import PerspectiveCamera
from zengine.maths import radians

camera = PerspectiveCamera(radians(45.0), 1080 / 800, 0.1, 100.0)
camera.position = np.array([0.0, 0.0, 5.0])
print(camera.view_matrix)
```

Keys are pressed and released on the shared keyboard, and controllers read
that state on each update:

```python
from zengine.controllers import KEY_RIGHT, OrthographicCameraController
from zengine.devices import Keyboard

keyboard = Keyboard.get()
controller = OrthographicCameraController(aspect_ratio=16 / 9)
controller.initialize()

keyboard.press(KEY_RIGHT)
controller.update(0.5)
keyboard.release(KEY_RIGHT)
print(controller.position)  # moved half a unit along x
```

## What it does not do

There is no renderer and no scene here: nothing turns meshes into draw
calls, manages frame buffers or shaders, or opens a window. Input devices
are not connected to any operating-system event source; key and cursor
state change only through `press`, `release` and `move_to`. The package
has no command-line entry point.