# File: src/strawbale_construction/geometry/transform.py
"""
Rigid transforms for construction elements, groups and whole wall models.

A transform is a rotation (Euler angles in radians, applied X then Y then Z)
followed by a translation.
"""

import math
from dataclasses import dataclass
from typing import Tuple

Vec2 = Tuple[float, float]
Vec3 = Tuple[float, float, float]


def add(a: Vec3, b: Vec3) -> Vec3:
    return (a[0] + b[0], a[1] + b[1], a[2] + b[2])


def subtract(a: Vec3, b: Vec3) -> Vec3:
    return (a[0] - b[0], a[1] - b[1], a[2] - b[2])


def distance_2d(a: Vec2, b: Vec2) -> float:
    return math.hypot(b[0] - a[0], b[1] - a[1])


def _rotate(point: Vec3, rotation: Vec3) -> Vec3:
    x, y, z = point
    rx, ry, rz = rotation

    if rx:
        c, s = math.cos(rx), math.sin(rx)
        y, z = y * c - z * s, y * s + z * c
    if ry:
        c, s = math.cos(ry), math.sin(ry)
        x, z = x * c + z * s, -x * s + z * c
    if rz:
        c, s = math.cos(rz), math.sin(rz)
        x, y = x * c - y * s, x * s + y * c

    return (x, y, z)


@dataclass(frozen=True)
class Transform:
    """Rotation followed by translation."""
    translation: Vec3 = (0.0, 0.0, 0.0)
    rotation: Vec3 = (0.0, 0.0, 0.0)

    @property
    def is_identity(self) -> bool:
        return self.translation == (0.0, 0.0, 0.0) and self.rotation == (0.0, 0.0, 0.0)

    def apply(self, point: Vec3) -> Vec3:
        """Maps a point from the local frame into the parent frame."""
        return add(_rotate(point, self.rotation), self.translation)

    @classmethod
    def translate(cls, x: float = 0.0, y: float = 0.0, z: float = 0.0) -> "Transform":
        return cls(translation=(x, y, z))

    @classmethod
    def rotate_z(cls, angle: float, translation: Vec3 = (0.0, 0.0, 0.0)) -> "Transform":
        return cls(translation=translation, rotation=(0.0, 0.0, angle))


IDENTITY_TRANSFORM = Transform()
