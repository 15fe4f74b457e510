# orbitgl

A small, dependency-free toolkit for the maths behind simple 3D rendering.

## Modules

- `orbitgl.vector3.Vector3`: an immutable 3-component vector. Supports `+`, `-`, unary `-`,
  multiplication by a number (either side) or component-wise by another vector, iteration
  over `x, y, z`, `dot`, `cross`, `length`, `length_squared` and `normalized` (a vector
  shorter than `1e-8` normalises to zero). `with_x`, `with_y` and `with_z` return copies
  with one component replaced; `zero`, `one`, `up`, `right` and `forward` build common
  vectors.
- `orbitgl.matrix4.Matrix4`: an immutable row-major 4x4 matrix, built from 16 numbers or
  4 rows of 4 (no argument gives the identity). Constructors: `identity`, `zero`,
  `translation`, `rotation_x`, `rotation_y`, `rotation_z`, `rotation` (arbitrary axis),
  `scale` (per-axis vector or uniform number), `perspective`, `orthographic` and `look_at`.
  Entries are read with `m[row, col]`; `rows()` returns the four rows and `with_entry`
  returns a copy with one entry changed. Operations: `*` (matrix product or scaling by a
  number), `+`, `-`, `transpose`, `inverse` (Gauss-Jordan; a singular matrix gives the
  identity), `determinant`, `is_invertible(epsilon=1e-6)` and `decompose`, which returns a
  `Decomposition` of translation, Euler rotation in radians and scale. `str(m)` prints the
  matrix with three decimals per entry.
- `orbitgl.mesh`: `Vertex` (position, normal, colour) and `Mesh`, an indexed triangle mesh
  with `add_vertex`, `add_triangle`, `triangles()`, `vertices`, `indices`, `vertex_count`,
  `triangle_count`, `calculate_normals` (smooth normals from adjacent faces) and `clear`.
  Built-in shapes: `create_cube` (one colour per face), `create_sphere` (raises
  `ValueError` for fewer than 2 segments), `create_plane` and `create_triangle`.
- `orbitgl.camera.Camera`: a look-at camera with `position`, `target` and `up` properties,
  `look_at`, `move`, `rotate(yaw, pitch)`, `forward`, `right`, and cached
  `view_matrix`, `projection_matrix` and `view_projection_matrix`. `set_perspective`
  changes the field of view, aspect ratio and clip planes; `set_orthographic` only updates
  the near and far planes, and the projection stays perspective.
- `orbitgl.lighting`: `Light` (position, colour, intensity), `calculate_lighting`, which
  shades a colour with 10% ambient light plus Lambertian diffuse light from each light and
  clamps every channel to `[0, 1]`, and `outline_segments`, which yields the three edges of
  every triangle of a mesh as pairs of positions.

## Conventions

`Matrix4.transform_point` and `Matrix4.transform_vector` multiply the row vector
`(x, y, z, 1)` or `(x, y, z, 0)` by the matrix and keep the first three components.
`a * b` is the ordinary matrix product of `a` and `b`. Matrices are stored row-major;
transpose one before handing it to an API that expects column-major data.

## Installation

```
pip install .
```

Run the tests with:

```
pip install ".[test]"
pytest
```

## Example

```python
import math

from orbitgl.vector3 import Vector3
from orbitgl.matrix4 import Matrix4
from orbitgl.mesh import Mesh
from orbitgl.camera import Camera
from orbitgl.lighting import Light, calculate_lighting

cube = Mesh.create_cube(2.0)
print(cube.vertex_count, "vertices,", cube.triangle_count, "triangles")

camera = Camera(Vector3(7, 3, 0), Vector3(0, 0, 0), Vector3(0, 1, 0))
camera.set_perspective(math.radians(60), 1280 / 720, 1.0, 100.0)
view_projection = camera.view_projection_matrix()

model = Matrix4.rotation_y(math.radians(30))
lights = [
    Light(Vector3(5, 5, 5), Vector3(1, 1, 1), 1.0),
    Light(Vector3(-5, 5, -5), Vector3(0.8, 0.8, 1.0), 0.7),
]

for vertex in cube.vertices:
    world_position = model.transform_point(vertex.position)
    world_normal = model.transform_vector(vertex.normal).normalized()
    colour = calculate_lighting(lights, world_position, world_normal, vertex.color)
```

## What it does not do

orbitgl computes geometry, transforms and colours only. It opens no window, draws nothing
to the screen, handles no keyboard or window events and has no command to run; pass its
matrices, vertices, colours and outline segments to whatever drawing library you use.