"""Reading Wavefront OBJ geometry into :class:`Mesh` objects."""

from __future__ import annotations

import io
import os
from dataclasses import dataclass, field
from itertools import pairwise
from typing import Iterable, Iterator

from objmesh.errors import ParseError, Status
from objmesh.mesh import Mesh
from objmesh.scanner import Cursor, LineType, index_make_absolute
from objmesh.vector import Vec2, Vec3


@dataclass(frozen=True)
class FaceVertex:
    """One corner of a face: a vertex index with optional texture and normal indices.

    Indices are kept as written in the file (1-based or negative).
    """

    vertex: int
    texture: int | None = None
    normal: int | None = None

    @property
    def has_texture(self) -> bool:
        return self.texture is not None

    @property
    def has_normal(self) -> bool:
        return self.normal is not None


def parse_vertex_geometric(cursor: Cursor) -> Vec3:
    """Read three numbers; anything after them is ignored."""
    return Vec3(cursor.parse_float(), cursor.parse_float(), cursor.parse_float())


def parse_vertex_texture(cursor: Cursor) -> Vec2:
    """Read two numbers; anything after them is ignored."""
    return Vec2(cursor.parse_float(), cursor.parse_float())


def _expected_integer(cursor: Cursor) -> ParseError:
    return ParseError(Status.ERROR_EXPECTED_INTEGER, column_number=cursor.pos)


def parse_face_vertex_components(cursor: Cursor) -> FaceVertex:
    """Read one face corner: ``v``, ``v/vt``, ``v//vn`` or ``v/vt/vn``.

    Dangling slashes (``v/``, ``v//``, ``v/vt/``) are tolerated and the
    missing parts treated as absent.
    """
    cursor.skip_whitespace()
    if cursor.at_end_or_space():
        raise _expected_integer(cursor)

    vertex = cursor.parse_integer()
    if cursor.at_end_or_space():
        return FaceVertex(vertex)

    cursor.pos += 1  # the slash after the vertex index
    if cursor.at_end_or_space():
        return FaceVertex(vertex)

    if cursor.line[cursor.pos] == "/":
        cursor.pos += 1
        if cursor.at_end_or_space():
            return FaceVertex(vertex)
        normal = cursor.parse_integer()
        if cursor.at_end_or_space():
            return FaceVertex(vertex, normal=normal)

    texture = cursor.parse_integer()
    if cursor.at_end_or_space():
        return FaceVertex(vertex, texture=texture)

    cursor.pos += 1  # the slash after the texture index
    if cursor.at_end_or_space():
        return FaceVertex(vertex, texture=texture)

    normal = cursor.parse_integer()
    if cursor.at_end_or_space():
        return FaceVertex(vertex, texture=texture, normal=normal)
    raise _expected_integer(cursor)


def _append_index(cursor: Cursor, index: int, indices: list[int], num_components: int) -> None:
    absolute = index_make_absolute(index, num_components)
    if not 0 <= absolute < num_components:
        raise ParseError(Status.ERROR_UNDEFINED_INDEX, column_number=cursor.pos)
    indices.append(absolute)


def parse_face(
    cursor: Cursor,
    num_vertices: int,
    num_vertices_texture: int,
    num_normals: int,
    indices_vertices: list[int],
    indices_vertices_texture: list[int],
    indices_normals: list[int],
) -> int:
    """Read the corners of a face, appending their 0-based indices to the lists.

    Every corner must carry the same kinds of components as the first one.
    Returns the number of corners read; fewer than three is an error.
    """

    def read_corner() -> FaceVertex:
        corner = parse_face_vertex_components(cursor)
        _append_index(cursor, corner.vertex, indices_vertices, num_vertices)
        if corner.texture is not None:
            _append_index(cursor, corner.texture, indices_vertices_texture, num_vertices_texture)
        if corner.normal is not None:
            _append_index(cursor, corner.normal, indices_normals, num_normals)
        return corner

    first = read_corner()
    expected = (first.has_texture, first.has_normal)
    count = 1
    while not cursor.at_end():
        corner = read_corner()
        if (corner.has_texture, corner.has_normal) != expected:
            raise ParseError(Status.ERROR_COMPONENTS_INCOHERENCE, column_number=cursor.pos)
        count += 1
        cursor.skip_whitespace()

    if count < 3:
        raise _expected_integer(cursor)
    return count


def parse_group_name(cursor: Cursor) -> str:
    """Read the first group name on the line; further names are ignored."""
    cursor.skip_whitespace()
    if cursor.at_end_or_space():
        raise ParseError(Status.ERROR_EXPECTED_STRING, column_number=cursor.pos)
    begin = cursor.pos
    cursor.skip_until_whitespace()
    return cursor.line[begin:cursor.pos]


def generate_normal(
    vertices: list[Vec3] | tuple[Vec3, ...],
    indices_vertices: list[int] | tuple[int, ...],
    face_begin: int,
    face_end: int,
) -> Vec3:
    """Average unit normal of the triangle fan of one face."""
    origin = vertices[indices_vertices[face_begin]]
    total = Vec3()
    for a, b in pairwise(indices_vertices[face_begin + 1:face_end]):
        total = total + Vec3.normal(vertices[a] - origin, vertices[b] - origin)
    return total / (face_end - face_begin - 2)


@dataclass
class _MeshBuilder:
    vertices: list[Vec3] = field(default_factory=list)
    vertices_texture: list[Vec2] = field(default_factory=list)
    normals: list[Vec3] = field(default_factory=list)
    indices_vertices: list[int] = field(default_factory=list)
    indices_vertices_texture: list[int] = field(default_factory=list)
    indices_normals: list[int] = field(default_factory=list)
    faces_ends: list[int] = field(default_factory=list)
    groups_names: list[str] = field(default_factory=lambda: ["default"])
    groups_ends: list[int] = field(default_factory=list)

    def feed(self, cursor: Cursor) -> None:
        line_type = cursor.parse_line_type()
        if line_type is LineType.VERTEX:
            self.vertices.append(parse_vertex_geometric(cursor))
        elif line_type is LineType.VERTEX_TEXTURE:
            self.vertices_texture.append(parse_vertex_texture(cursor))
        elif line_type is LineType.NORMAL:
            self.normals.append(parse_vertex_geometric(cursor))
        elif line_type is LineType.FACE:
            self._add_face(cursor)
        elif line_type is LineType.GROUP:
            self.groups_names.append(parse_group_name(cursor))
            self.groups_ends.append(len(self.faces_ends))

    def _add_face(self, cursor: Cursor) -> None:
        count = parse_face(
            cursor,
            len(self.vertices),
            len(self.vertices_texture),
            len(self.normals),
            self.indices_vertices,
            self.indices_vertices_texture,
            self.indices_normals,
        )
        if len(self.indices_vertices_texture) != len(self.indices_vertices):
            self.vertices_texture.append(Vec2(0.0, 0.0))
            self.indices_vertices_texture.extend([len(self.vertices_texture) - 1] * count)
        if len(self.indices_normals) != len(self.indices_vertices):
            face_begin = self.faces_ends[-1] if self.faces_ends else 0
            self.normals.append(
                generate_normal(
                    self.vertices, self.indices_vertices, face_begin, len(self.indices_vertices)
                )
            )
            self.indices_normals.extend([len(self.normals) - 1] * count)
        self.faces_ends.append(len(self.indices_vertices))

    def build(self, line_number: int) -> Mesh:
        if not (self.vertices or self.vertices_texture or self.normals):
            raise ParseError(Status.ERROR_INPUT_EMPTY, line_number)
        return Mesh(
            vertices=self.vertices,
            vertices_texture=self.vertices_texture,
            normals=self.normals,
            indices_vertices=self.indices_vertices,
            indices_vertices_texture=self.indices_vertices_texture,
            indices_normals=self.indices_normals,
            faces_ends=self.faces_ends,
            groups_names=self.groups_names,
            groups_ends=[*self.groups_ends, len(self.faces_ends)],
        )


def _strip_line_end(raw: str) -> str:
    if raw.endswith("\n"):
        raw = raw[:-1]
    if raw.endswith("\r"):
        raw = raw[:-1]
    return raw


def load(stream: Iterable[str]) -> Mesh:
    """Parse OBJ text from an iterable of lines, such as an open text file.

    Raises :class:`ParseError` carrying the status, line and column of the
    first problem, or ``ERROR_INPUT_EMPTY`` when no vertex data was found.
    """
    builder = _MeshBuilder()
    lines: Iterator[str] = (_strip_line_end(raw) for raw in stream)
    line_number = 0
    for buffer in lines:
        line_number += 1
        if not buffer:
            continue
        while buffer.endswith("\\"):
            buffer = buffer[:-1] + " " + next(lines, "")
            line_number += 1

        cursor = Cursor(buffer)
        try:
            builder.feed(cursor)
        except ParseError as err:
            raise ParseError(err.status, line_number, cursor.pos) from err
    return builder.build(line_number)


def loads(text: str) -> Mesh:
    """Parse OBJ text held in a string."""
    return load(io.StringIO(text))


def load_file(path: str | os.PathLike[str]) -> Mesh:
    """Parse an OBJ file; a file that cannot be read raises ``ERROR_INPUT``."""
    try:
        with open(path, encoding="utf-8", errors="replace") as stream:
            return load(stream)
    except OSError as err:
        raise ParseError(Status.ERROR_INPUT) from err