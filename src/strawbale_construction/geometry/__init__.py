"""Geometry primitives: construction areas, bounds and transforms."""

from .area import WallConstructionArea
from .bounds import EMPTY_BOUNDS, Bounds3D
from .transform import IDENTITY_TRANSFORM, Transform, Vec2, Vec3

__all__ = [
    "WallConstructionArea",
    "Bounds3D",
    "EMPTY_BOUNDS",
    "Transform",
    "IDENTITY_TRANSFORM",
    "Vec2",
    "Vec3",
]
