"""Polygon mesh with per-corner indices, faces and named groups."""

from __future__ import annotations

import dataclasses
from dataclasses import dataclass, fields
from enum import IntEnum
from typing import Iterable

from objmesh.vector import Vec2, Vec3


class ValidationResult(IntEnum):
    """Outcome of :meth:`Mesh.check_consistency`."""

    OK = 0
    ERROR = 1
    ERROR_BEGIN = 2
    INVALID_INDICES_VERTICES = 3
    INVALID_INDICES_VERTICES_TEXTURE = 4
    INVALID_INDICES_NORMALS = 5
    INVALID_INDICES_GROUPS = 6
    INVALID_FACES_VERTICES = 7
    INVALID_FACES_VERTICES_TEXTURE = 8
    INVALID_FACES_NORMALS = 9
    NO_GROUPS = 10
    NO_GROUP_DEFAULT = 11
    ERROR_END = 12


def are_indices_valid(indices: Iterable[int], max_index: int) -> bool:
    """True if every index lies in ``[0, max_index)``."""
    return all(0 <= index < max_index for index in indices)


def are_face_ends_valid(indices: Iterable[int], max_index: int) -> bool:
    """True if the ends lie in ``[0, max_index]`` and never decrease."""
    last = -1
    for index in indices:
        if index < 0 or index > max_index or index < last:
            return False
        last = index
    return True


@dataclass(frozen=True)
class Mesh:
    """An immutable polygon mesh.

    Faces are stored as runs of corner indices; ``faces_ends[i]`` is the end
    (exclusive) of face ``i`` in the index sequences. Groups are runs of faces
    in the same way, ``groups_ends[g]`` being the end of group ``g``. When
    ``groups_ends`` is not given, all faces form one group.
    """

    vertices: tuple[Vec3, ...] = ()
    vertices_texture: tuple[Vec2, ...] = ()
    normals: tuple[Vec3, ...] = ()
    indices_vertices: tuple[int, ...] = ()
    indices_vertices_texture: tuple[int, ...] = ()
    indices_normals: tuple[int, ...] = ()
    faces_ends: tuple[int, ...] = ()
    groups_names: tuple[str, ...] = ("default",)
    groups_ends: tuple[int, ...] | None = None

    def __post_init__(self) -> None:
        if self.groups_ends is None:
            object.__setattr__(self, "groups_ends", (len(self.faces_ends),))
        for field in fields(self):
            object.__setattr__(self, field.name, tuple(getattr(self, field.name)))

    def check_consistency(self) -> ValidationResult:
        """Report the first structural problem found, or ``ValidationResult.OK``."""
        if not are_indices_valid(self.indices_vertices, len(self.vertices)):
            return ValidationResult.INVALID_INDICES_VERTICES
        if not are_indices_valid(self.indices_vertices_texture, len(self.vertices_texture)):
            return ValidationResult.INVALID_INDICES_VERTICES_TEXTURE
        if not are_indices_valid(self.indices_normals, len(self.normals)):
            return ValidationResult.INVALID_INDICES_NORMALS
        if not are_face_ends_valid(self.faces_ends, len(self.indices_vertices)):
            return ValidationResult.INVALID_FACES_VERTICES
        if not self.groups_ends or not self.groups_names:
            return ValidationResult.NO_GROUPS
        if self.groups_names[0] != "default":
            return ValidationResult.NO_GROUP_DEFAULT
        if not are_face_ends_valid(self.groups_ends, len(self.faces_ends)):
            return ValidationResult.INVALID_INDICES_GROUPS
        return ValidationResult.OK

    def triangulate(self) -> Mesh:
        """Split every face into a fan of triangles around its first corner."""
        indices_vertices: list[int] = []
        indices_texture: list[int] = []
        indices_normals: list[int] = []
        faces_ends: list[int] = []
        groups_ends: list[int] = []

        group_begin = 0
        face_begin = 0
        for group_end in self.groups_ends:
            for face_end in self.faces_ends[group_begin:group_end]:
                for j in range(face_begin + 1, face_end - 1):
                    corners = (face_begin, j, j + 1)
                    indices_vertices.extend(self.indices_vertices[k] for k in corners)
                    indices_texture.extend(self.indices_vertices_texture[k] for k in corners)
                    indices_normals.extend(self.indices_normals[k] for k in corners)
                    faces_ends.append(len(indices_vertices))
                face_begin = face_end
            group_begin = group_end
            groups_ends.append(len(faces_ends))

        return dataclasses.replace(
            self,
            indices_vertices=indices_vertices,
            indices_vertices_texture=indices_texture,
            indices_normals=indices_normals,
            faces_ends=faces_ends,
            groups_ends=groups_ends,
        )