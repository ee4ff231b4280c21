# hatescene

`hatescene` is a small library for describing 3D game scenes. It holds objects, how they are placed, and how they depend on each other. It does not draw anything and does not simulate physics. You pair it with whatever renderer and physics engine you use.

## Modules

### `hatescene.scene_object`

`SceneObject` is the node of the scene graph. Each node has a position, a 4x4 rotation matrix, a scale, a visibility flag and a UUID.

- `bind_obj(obj, bind_pos, bind_rot, bind_scale, bind_visible)` attaches a child node, and `unbind_obj(uuid)` detaches it.
  - A bound child follows the chosen parts of its parent's transform.
  - `unbind_obj` returns `False` if the child was not bound to that node.
- Methods that change the node:
  - `set_position`
  - `set_rotation` (X, Y, Z Euler angles in degrees)
  - `set_rotation_matrix`
  - `set_scale`
  - `set_visible`
  - `offset`
  - `rotate(degrees, global_)`
  - `look_at(target)`
- Methods that read values with the parents applied:
  - `global_position()`
  - `global_rotation_matrix()`
  - `global_scale()`
  - `global_visible()`
  - `global_rotation_euler()`
  - `global_direction()`
- `euler_xyz_matrix(radians)` builds the X·Y·Z rotation matrix that `set_rotation` uses.

### `hatescene.mesh`

`Mesh` holds a flat XYZ vertex list together with its indices, normals, UVs and colours.

- Setting vertices recomputes the axis-aligned bounds: `aabb_min`, `aabb_max` and `aabb_radius`. The radius is half the diagonal of the box.
- `aabb_distance_to_point(point)` measures from a point to the box placed at the mesh's global position.
- `set_color` gives every vertex the same RGB or RGBA colour. `set_colors` sets per-vertex colours.
- `copy(copy_texture)` returns a new, unbound mesh. The copy has its own UUID.

Two ready-made meshes are provided:

- `CubeMesh`: 36 vertices, two triangles per face. `set_size(width, height, length)` resizes it.
- `BillboardMesh`: a single quad. `set_size(width, height)` resizes it. `update()` turns it to face its `target`.

### `hatescene.lights`

The module provides `DirectionalLight`, `OmniLight` and `SpotLight`. Each is tagged with a `LightType`.

- Every light has an RGBA `color` and constant, linear and quadratic attenuation. Set all three at once with `set_attenuation`.
- `SpotLight` adds two settings. An out-of-range value is clamped and a warning is logged.
  - `angle_cutoff`: the full cone angle, clamped to 0–180.
  - `exponent`: clamped to 0–128.

### `hatescene.camera`

`Camera` is a scene object with a field of view and a render distance.

- `projection_matrix(aspect_ratio)` returns a perspective matrix with a near plane of 0.1. The matrix is cached until the aspect ratio changes.
- `view_matrix()` returns the view matrix.
- `project_ray_from_screen(pos, screen)` turns a pixel position into a world-space unit direction.
- The camera owns a cube `skybox`. The skybox follows the camera's position but not its rotation, and it is sized from the render distance.

### `hatescene.model`

`Model` groups meshes into `LOD` levels, which you add with `add_lod(distance, meshes)`.

- `meshes_for(camera_pos)` returns the meshes to draw. A level-0 mesh whose bounding box is farther than level 1's distance is swapped for its level-1 twin.
- `set_visible` shows or hides every mesh at every level.
- `copy(copy_textures)` copies the model's transform. If the model is loaded, it also copies every mesh.

### `hatescene.animation`

`AnimationPlayer(model)` builds animations from the meshes in the model's first level of detail.

- Each mesh name must look like `[walk][1]`: the animation name, then a frame number that starts at 1.
- `play(name)` starts an animation. It raises `AnimationNotFoundError` if the name is unknown.
- `update(delta)` advances the frames at `fps`. The animation loops, or stops at the last frame when `loop` is off.
- `current_meshes()` returns the meshes of the current frame.
- `stop()` stops playback.

### `hatescene.shapes`

The module describes collision shapes: `BoxShape`, `SphereShape`, `CapsuleShape` and `ConvexShape`. Each is tagged with a `ShapeType`.

- A shape's transform is fixed when the shape is built. Calling `set_position`, `set_rotation`, `offset` or `rotate` afterwards only logs a warning.
- `friction` must not be negative, and `bounciness` must lie between 0 and 1. An invalid value is ignored with a warning.
- Collision filtering uses 16 category and mask bits:
  - `set_collision_category`
  - `set_collision_mask_bit`
  - `collision_mask_bit`
  - `enabled_collision_mask_bits`
- `CapsuleShape` takes a full height. Its `height` property returns the height without the two caps.
- `ConvexShape` flattens its list of faces into `indices` and `faces`. Each entry of `faces` is a `PolygonFace`.
- `collider` is left for a physics engine to fill in. `is_initialized` tells whether it has been set.

### `hatescene.log`

`format_message(level, msg, file, line, now)` builds lines such as:

```
09-08-2024 18:04:15.115 [INFO] [main.py@10] Hello
```

The logging functions print a line and return its text. If the file or line is left out, it is taken from the caller.

| Function | Stream | Colour |
|----------|--------|--------|
| `debug` | stdout | green |
| `info` | stdout | plain |
| `warning` | stderr | yellow |
| `error` | stderr | red |
| `fatal` | stderr | red background |

`fatal` also raises `SystemExit(1)`.

## What it does not do

- It has no renderer, windowing or audio.
- It has no physics simulation. Collision shapes are descriptions only.
- There are no physical bodies or trigger areas.
- There is no particle emitter.
- There is no container that collects a whole level with its fog, background and ambient-light settings.
- There is no command-line program.

## Installation

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
from hatescene.camera import Camera
from hatescene.lights import SpotLight
from hatescene.mesh import CubeMesh
from hatescene.scene_object import SceneObject
from hatescene.shapes import BoxShape

pivot = SceneObject()
cube = CubeMesh()
cube.set_size(2, 2, 2)
pivot.bind_obj(cube)
pivot.set_position((0.0, 1.0, -5.0))
print(cube.global_position())        # [ 0.  1. -5.]

lamp = SpotLight()
lamp.angle_cutoff = 60
lamp.set_attenuation(1.0, 0.2, 0.0)

camera = Camera(fov=60, render_dist=100)
print(camera.project_ray_from_screen((400, 300), (800, 600)))  # about [0, 0, -1]

box = BoxShape((2, 2, 2))
box.set_collision_category(3)
box.set_collision_mask_bit(5, False)
print(box.collision_category)        # 3
```