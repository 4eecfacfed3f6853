"""Command that loads an OBJ file and prints its contents and triangulation."""

from __future__ import annotations

import argparse
import sys
from typing import Iterable, Sequence

from objmesh.errors import ParseError, status_to_string
from objmesh.mesh import Mesh, ValidationResult
from objmesh.parser import load_file
from objmesh.vector import Vec2, Vec3


def _format_item(item: object) -> str:
    if isinstance(item, (Vec2, Vec3)):
        return "(" + ", ".join(f"{component:g}" for component in item) + ")"
    if isinstance(item, str):
        return repr(item)
    return str(item)


def _format_sequence(items: Iterable[object]) -> str:
    return "[" + ", ".join(_format_item(item) for item in items) + "]"


def describe_mesh(mesh: Mesh) -> str:
    """Statistics and full contents of a mesh as printable text."""
    lines = [
        "[Stats]",
        f"Number of vertices: {len(mesh.vertices)}",
        f"Number of texture vertices: {len(mesh.vertices_texture)}",
        f"Number of normals: {len(mesh.normals)}",
        f"Number of faces: {len(mesh.faces_ends)}",
        f"Number of groups: {len(mesh.groups_ends)}",
        "",
        "[Overall mesh data]",
    ]
    for name in (
        "vertices",
        "vertices_texture",
        "normals",
        "indices_vertices",
        "indices_vertices_texture",
        "indices_normals",
        "faces_ends",
        "groups_names",
        "groups_ends",
    ):
        lines.append(f"{name}: {_format_sequence(getattr(mesh, name))}")
    return "\n".join(lines)


def main(argv: Sequence[str] | None = None) -> int:
    """Load, validate and triangulate an OBJ file, printing the results."""
    parser = argparse.ArgumentParser(
        prog="objmesh", description="Show the contents of a Wavefront OBJ file."
    )
    parser.add_argument("path", help="OBJ file to load")
    args = parser.parse_args(argv)

    try:
        mesh = load_file(args.path)
    except ParseError as err:
        print(f"{status_to_string(err.status)} at", file=sys.stderr)
        print(f"line {err.line_number}", file=sys.stderr)
        print(f"column {err.column_number}", file=sys.stderr)
        return 1

    validation = mesh.check_consistency()
    if validation != ValidationResult.OK:
        print(f"Invalid mesh: {validation.name}", file=sys.stderr)
        return 2

    print(describe_mesh(mesh))
    print()
    print("[Triangulation]")
    print(describe_mesh(mesh.triangulate()))
    return 0


if __name__ == "__main__":
    sys.exit(main())