# meshcore

Small building blocks for polygon mesh processing. Pure Python, with no
dependencies outside the standard library.

## Installation

```
pip install meshcore
```

To run the test suite:

```
pip install "meshcore[test]"
pytest
```

## Modules

- `meshcore.types`: holds the `IOFlags` dataclass and the mesh exceptions.
  `IOFlags` has the boolean fields `use_binary`, `use_vertex_normals`,
  `use_vertex_colors`, `use_vertex_texcoords`, `use_face_normals`,
  `use_face_colors` and `use_halfedge_texcoords`, all `False` by default.
  The exceptions are:
  - `InvalidInputError`, a `ValueError`
  - `SolverError`, a `RuntimeError`
  - `AllocationError`, a `ValueError`
  - `TopologyError`, a `RuntimeError`
  - `MeshIOError`, an `OSError`
- `meshcore.properties`: named per-element attribute arrays.
  - `PropertyArray` is a list of values with a shared default. Indexing out of
    range raises `IndexError`.
  - `PropertyContainer` keeps all its arrays the same length. It offers `add`,
    `get`, `get_or_add`, `exists`, `get_type`, `remove`, `resize`, `reserve`,
    `push_back`, `swap`, `clear`, `free_memory` and a deep `copy`.
  - `add` with a name that is already taken logs a warning and returns an
    invalid `Property`.
  - `get_type` returns the type of the default value, or `None` when no
    property has that name.
  - `Property` is a handle to one array. It is falsy when it refers to no
    array, for example after `reset()` or `remove()`. Using an invalid handle
    raises `ValueError`.
- `meshcore.timer`: `Timer` with `start`, `cont` (continue and accumulate),
  `stop` and `elapsed`. `elapsed` returns milliseconds and issues a
  `RuntimeWarning` if the timer is still running. A `Timer` also works as a
  context manager. `str(timer)` gives a value such as `"12.5 ms"`. A custom
  clock function can be passed to the constructor.
- `meshcore.memory_usage`: `max_size()` returns the peak resident set size of
  the process in bytes, on Linux and macOS. `current_size()` returns the
  current resident set size, read from `/proc/self/statm` on Linux. Both
  return `0` where the value cannot be determined.
- `meshcore.barycentric`: `barycentric_coordinates(p, u, v, w)` returns the
  barycentric coordinates of `p` in triangle `(u, v, w)` as a 3-tuple. For a
  degenerate triangle it returns `(1/3, 1/3, 1/3)`.
- `meshcore.heap`: `Heap` is a binary min-heap.
  - It takes an interface object with `less`, `greater`, `get_heap_position`
    and `set_heap_position`, and records each entry's position through it.
    This lets entries be `update`d or `remove`d in place.
  - A position of `-1` means an entry is not stored.
  - `front` and `pop_front` on an empty heap raise `IndexError`.
  - `update` and `remove` of an entry that is not stored raise `ValueError`.
  - `check()` verifies the heap condition.
- `meshcore.normal_cone`: `NormalCone(center_normal, angle=0.0)` describes a
  cone of normals. `merge(other)` takes another cone or a single normal and
  grows the cone to enclose it. It returns the cone itself.
- `meshcore.quadric`: `Quadric` is a symmetric 4x4 error quadric, stored as
  the upper-triangle fields `a`…`j`.
  - Build one with `Quadric.from_plane(a, b, c, d)` or
    `Quadric.from_point_normal(normal, point)`.
  - Quadrics support `+`, `+=`, `* s`, `*= s` and `clear()`.
  - `q(p)` evaluates the quadric at a point.
- `meshcore.tesselation`: `tesselate(points)` splits a polygon into triangles.
  It returns index triples into `points` and minimises the sum of squared
  triangle areas. Fewer than three points raise `InvalidInputError`.
- `meshcore.textures`: RGB image data as bytes.
  - `cold_warm_texture()` returns the 256-texel cold-warm colour map
    (768 bytes).
  - `checkerboard_texture(resolution=512)` returns a square image with
    32-texel squares that alternate between white and light blue.

## Example

```python
from meshcore.properties import PropertyContainer
from meshcore.quadric import Quadric
from meshcore.tesselation import tesselate

container = PropertyContainer()
weights = container.add("v:weight", 0.0)
container.resize(3)
weights[1] = 2.5

q = Quadric.from_point_normal((0.0, 0.0, 1.0), (0.0, 0.0, 0.0))
print(q((1.0, 2.0, 3.0)))  # squared distance to the plane z = 0: 9.0

square = [(0, 0, 0), (1, 0, 0), (1, 1, 0), (0, 1, 0)]
print(tesselate(square))  # [(0, 1, 3), (1, 2, 3)]
```

## What it does not do

The package does not include:

- a mesh data structure (vertices, halfedges, faces);
- mesh file readers or writers;
- rendering, windows or a viewer;
- commands to run.

`IOFlags` and `MeshIOError` are provided for code that reads or writes
meshes, but nothing in this package does so. The texture functions only
produce image bytes and do not display them.