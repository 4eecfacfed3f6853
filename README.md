# objmesh

A small Wavefront OBJ reader. It reads `v`, `vt`, `vn`, `f` and `g` lines
and builds a flat, index-based `Mesh` from them. The mesh can check that it
is consistent with itself, and it can be split into triangles. The package
also has a simple orbit `Camera` that produces a look-at view matrix.

## Install

```
pip install .
```

To run the tests:

```
pip install .[test]
pytest
```

## Loading a mesh

```python
from objmesh.parser import loads, load_file
from objmesh.errors import ParseError
from objmesh.mesh import ValidationResult

text = """
v 0 0 0
v 1 0 0
v 1 1 0
v 0 1 0
f 1 2 3 4
"""

mesh = loads(text)
assert mesh.check_consistency() is ValidationResult.OK

triangles = mesh.triangulate()
print(triangles.faces_ends)   # (3, 6)

try:
    load_file("model.obj")
except ParseError as error:
    print(error.status, error.line_number, error.column_number)
```

There are three entry points in `objmesh.parser`:

- `loads(text)` parses a string.
- `load(stream)` parses any iterable of lines, such as an open text file.
- `load_file(path)` opens and parses a file. If the file cannot be opened,
  it raises `ParseError` with status `Status.ERROR_INPUT`.

A `Mesh` (in `objmesh.mesh`) is a frozen dataclass that holds tuples:
`vertices`, `vertices_texture`, `normals`, `indices_vertices`,
`indices_vertices_texture`, `indices_normals`, `faces_ends`,
`groups_names` and `groups_ends`. Face `i` covers the index positions up to
`faces_ends[i]`, and group `g` covers the faces up to `groups_ends[g]`.
`check_consistency()` returns the first problem it finds as a
`ValidationResult`, or `ValidationResult.OK` if there is none.
`triangulate()` returns a new mesh in which each face has been split into a
fan of triangles around its first corner.

### Parsing rules

- Indices are 1-based. Negative indices count back from the last element
  defined so far.
- Every corner of a face must have the same components (`v`, `v/vt`,
  `v//vn` or `v/vt/vn`). If it does not, the status is
  `ERROR_COMPONENTS_INCOHERENCE`. A face needs at least three corners.
- An index that refers to an element not yet defined gives
  `ERROR_UNDEFINED_INDEX`.
- `v` and `vn` read three numbers and `vt` reads two. Any further numbers
  on the line are ignored.
- A face with no texture indices gets a new `(0, 0)` texture coordinate.
  A face with no normal indices gets a generated face normal, which is the
  average unit normal of its triangle fan.
- `g name` starts a new group. Only the first name on the line is kept.
  Every mesh begins with the group `default`.
- A line that ends in `\` continues on the next line.
- Comment lines are skipped. So are lines of unknown types (`o`, `s`,
  `mtllib`, `usemtl`, …).
- Input with no vertices, texture coordinates or normals raises
  `ParseError` with status `Status.ERROR_INPUT_EMPTY`.

`objmesh.errors` gives `status_to_string(status)`, which returns a readable
text for any `Status`. It also gives `status_type(status)`, which sorts a
status into `VERBOSE`, `ERROR` or `RESERVED`.

Line scanning is handled by `objmesh.scanner.Cursor`. It can also be used
directly to read numbers and statement keywords from a single line.

## Camera

```python
from objmesh.camera import Camera

camera = Camera()
camera.rotate((10.0, 0.0))   # mouse motion in pixels
camera.slide((0.0, 5.0))
camera.zoom(120)             # wheel delta; only its sign is used
matrix = camera.view()       # 4x4 look-at matrix as rows of floats
```

The camera starts at eye `(5, 0, 5)`, looking at the origin with up
`(0, 1, 0)`. `objmesh.camera.look_at(eye, center, up)` builds the same kind
of matrix for any eye, center and up.

## Command line

```
objmesh path/to/model.obj
```

This command loads the file and checks it for consistency. It then prints
statistics and the full index data for the mesh, both before and after
triangulation. If the file cannot be parsed, the command writes the status,
line and column to standard error and exits with 1. If the mesh is
inconsistent, it exits with 2.

## What it does not do

The package reads geometry only. It does not read materials (`mtllib`,
`usemtl`), smoothing groups or object names. It does not write OBJ files.
It has no viewer or rendering. The camera computes view matrices but does
not display anything.