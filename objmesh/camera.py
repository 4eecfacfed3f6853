"""Orbiting camera driven by mouse motion and wheel steps."""

from __future__ import annotations

import math
from dataclasses import dataclass

from objmesh.vector import Vec3

Matrix4 = tuple[
    tuple[float, float, float, float],
    tuple[float, float, float, float],
    tuple[float, float, float, float],
    tuple[float, float, float, float],
]

_WORLD_UP = Vec3(0.0, 1.0, 0.0)

_IDENTITY: Matrix4 = (
    (1.0, 0.0, 0.0, 0.0),
    (0.0, 1.0, 0.0, 0.0),
    (0.0, 0.0, 1.0, 0.0),
    (0.0, 0.0, 0.0, 1.0),
)


def look_at(eye: Vec3, center: Vec3, up: Vec3) -> Matrix4:
    """Row-major view matrix looking from ``eye`` towards ``center``.

    Returns the identity when ``eye`` and ``center`` coincide.
    """
    forward = center - eye
    if forward.length() == 0.0:
        return _IDENTITY
    forward = forward.normalized()
    side = forward.cross(up).normalized()
    up_vector = side.cross(forward)
    rows = (side, up_vector, -forward)
    return (
        *((r.x, r.y, r.z, -r.dot(eye)) for r in rows),
        (0.0, 0.0, 0.0, 1.0),
    )  # type: ignore[return-value]


def _add_keeping_length(delta: Vec3, v: Vec3) -> Vec3:
    return (v + delta).normalized() * v.length()


@dataclass
class Camera:
    """A camera orbiting ``center`` from ``eye`` with the given ``up``."""

    up: Vec3 = Vec3(0.0, 1.0, 0.0)
    center: Vec3 = Vec3(0.0, 0.0, 0.0)
    eye: Vec3 = Vec3(5.0, 0.0, 5.0)

    def rotate(self, mouse_motion: tuple[float, float]) -> None:
        """Orbit the eye, keeping its distance from the origin."""
        dx, dy = mouse_motion
        direction = self.center - self.eye
        left = Vec3.normal(direction, self.up)
        delta = direction.length() / 25.0 * ((dy / 25.0) * self.up + (-dx / 25.0) * left)
        self.eye = _add_keeping_length(delta, self.eye)
        direction = self.center - self.eye
        left = Vec3.normal(direction, _WORLD_UP)
        self.up = Vec3.normal(direction, -left)

    def slide(self, mouse_motion: tuple[float, float]) -> None:
        """Pan eye and center together across the view plane."""
        dx, dy = mouse_motion
        view_vector = self.center - self.eye
        left = Vec3.normal(view_vector, _WORLD_UP)
        up = Vec3.normal(view_vector, left)
        delta = view_vector.length() / 25.0 * ((-dy / 50.0) * up + (-dx / 50.0) * left)
        self.eye = self.eye + delta
        self.center = self.center + delta

    def zoom(self, angle8: float) -> None:
        """Step the eye towards (positive) or away from (negative) the center."""
        delta = math.copysign(0.5, angle8)
        self.eye = self.eye + delta * (self.center - self.eye) / 10.0

    def view(self) -> Matrix4:
        return look_at(self.eye, self.center, self.up)

    def direction(self) -> Vec3:
        return self.center - self.eye