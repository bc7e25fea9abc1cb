# noether

The core of a small real-time 3D rendering engine, in pure Python with no
third-party dependencies. It provides the maths, geometry, scene and
application pieces that a renderer is built from. It does no drawing of its
own: windows and graphics devices are abstract interfaces for a backend to
implement.

## Modules

- `noether.vector`: immutable `Vec2`, `Vec3` and `Vec4` (`Color` is an alias
  of `Vec4`, with `r`, `g`, `b`, `a` properties). Arithmetic with vectors or
  scalars, `dot`, `cross` (on `Vec3`), `hadamard`, `lerp`, `lerp_clamped`,
  `add_scaled`, `magnitude`, `sqr_magnitude` and `normalised` (which raises
  `ZeroDivisionError` for a zero vector), plus `Vec3.from_vec4` and
  `Vec3.direction_from_euler` (pitch and yaw in degrees).
- `noether.matrix`: `Mat2`, `Mat3` and column-major `Mat4`. `Mat4` supports
  `+`, `-` and `*` with matrices or scalars, `*` with a `Vec4`, `transposed`,
  `element(row, column)` and `rotated`, and the constructors `identity`,
  `translation`, `rotation` (Euler degrees, applied Z, then Y, then X),
  `scale`, `view_look_dir`, `view_look_at`, `orthographic` and `perspective`.
  `translation`, `rotation` and `scale` take either a `Vec3` or three
  scalars.
- `noether.quaternion`: `Quat`, with `identity` and `normalised` (a zero
  quaternion normalises to the identity).
- `noether.transform`: `Transform` (position, Euler rotation and scale), with
  `local_transform` and `transform_direction`.
- `noether.maths`: `clamp`, `lerp`, `lerp_clamped`, `unlerp` and `IRect2D`.
- `noether.hashing` and `noether.rng`: `hash_pcg`, a 32-bit integer hash, and
  `Rng`, a generator whose whole state is one 32-bit seed, with `u32`,
  `u32_range`, `u64`, `u64_range`, `f32` (in [0, 1]), `f32_range`, `vec2` and
  `vec3`. The range methods raise `ValueError` for an empty range.
- `noether.buffers`: `BufferElementType`, `element_size`, `component_count`,
  `BufferElement`, `BufferLayout` (computes each element's offset and the
  `stride`), and in-memory `VertexBuffer`, `IndexBuffer` and `VertexArray`.
- `noether.mesh`: `Vertex`, `SubMesh` and `Mesh`; `Mesh.create` builds a
  mesh with one sub-mesh covering all its vertices and indices.
- `noether.shapes`: `create_sphere(radius, sectors, stacks)` and
  `create_cube(side)`.
- `noether.shader`: `parse_shader_source` and `load_shader_source` split a
  file with `#shader vertex` and `#shader fragment` sections into a
  `ShaderSource`; `Shader` keeps the values set through its
  `set_uniform_*` methods, readable with `uniform(name)`.
- `noether.materials`: `Texture`, `CubeMapData`, `AttachmentType`,
  `ImageFormat`, `PointLight`, `DirectionalLight`, and the `Material`
  base with `MaterialLit` and `MaterialUnlit`, whose `apply` binds their
  textures to fixed units and sets their uniforms on the shader.
- `noether.events`: `Event`, `EventType` and one payload class per event;
  `Event.of(payload)` picks the type from the payload.
- `noether.input`: `KeyCode`, `MouseButton`, `KeyMod`, `CursorMode` and
  `Input`, which polls keys, buttons and the cursor from an input source.
- `noether.clock`: `Clock`, returning the seconds between ticks.
- `noether.log`: `LogLevel`, `format_log` and `core_log` for coloured,
  levelled console output.
- `noether.app`: `App`, `Window`, `GraphicsDevice`, `WindowSpec`,
  `DisplayMode` and `ClearFlag`.

## Installing

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Example

```python
from noether.vector import Vec3
from noether.matrix import Mat4
from noether.transform import Transform
from noether.shapes import create_sphere

sphere = create_sphere(2.0, 36, 18)
print(sphere.vertex_count(), sphere.index_count())

camera = Transform(position=Vec3(0.0, 3.0, 5.0), rotation=Vec3(-30.0, 0.0, 0.0))
look = Vec3.direction_from_euler(camera.rotation)
view = Mat4.view_look_dir(camera.position, look, Vec3(0.0, 1.0, 0.0))
proj = Mat4.perspective(60.0, 16 / 9, 0.1, 1000.0)
world_to_clip = proj * view
```

## Writing an application

Subclass `noether.app.App` and implement `initialise`, `shutdown`, `update`,
`render`, `draw_gui` and `on_event`, and supply the window and graphics
device through `create_window` and `create_graphics_device`. Then call
`run()`.

`run` asks for a 1280x720 windowed window whose event callback is
`handle_event`, makes the window the source of `app.input`, creates the
graphics device and calls `initialise`. Each frame it ticks the clock, calls
the window's `new_frame`, passes the elapsed seconds to `update`, clears the
device, calls `render`, and calls `draw_gui` between `begin_gui` and
`end_gui`. The loop stops when a window-close event arrives, and `shutdown`
is then called. A backbuffer-size event sets the device's viewport. Every
event not marked handled is passed on to `on_event`.

For `app.input` to work, the window must also provide `key_pressed`,
`mouse_button_pressed`, `cursor_position`, `window_size`,
`set_cursor_position` and `set_cursor_mode`.

## What is not included

- There is no window or graphics backend: `Window` and `GraphicsDevice` are
  abstract, so nothing is put on screen until you implement them.
- `Shader` does not compile or link anything; it only stores its parsed
  source and the uniform values set on it.
- `Texture` does not load or decode image files, and no model or font files
  are read; meshes come from `Mesh.create` or `noether.shapes`.
- There is no command-line program.