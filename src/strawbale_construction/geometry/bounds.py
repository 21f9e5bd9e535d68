# File: src/strawbale_construction/geometry/bounds.py
"""Axis-aligned 3D bounding boxes."""

from dataclasses import dataclass
from itertools import product
from typing import Iterable, Optional

from .transform import Transform, Vec3


@dataclass(frozen=True)
class Bounds3D:
    """Axis-aligned box given by its minimum and maximum corners."""
    min: Vec3
    max: Vec3

    def __post_init__(self):
        if any(lo > hi for lo, hi in zip(self.min, self.max)):
            raise ValueError(f"Invalid bounds: min {self.min} exceeds max {self.max}")

    @classmethod
    def from_points(cls, points: Iterable[Vec3]) -> "Bounds3D":
        points = list(points)
        if not points:
            raise ValueError("Cannot create bounds from no points")
        return cls(
            min=tuple(min(p[i] for p in points) for i in range(3)),
            max=tuple(max(p[i] for p in points) for i in range(3)),
        )

    @classmethod
    def from_cuboid(cls, position: Vec3, size: Vec3) -> "Bounds3D":
        return cls(
            min=position,
            max=(position[0] + size[0], position[1] + size[1], position[2] + size[2]),
        )

    @classmethod
    def merge(cls, bounds: Iterable["Bounds3D"]) -> Optional["Bounds3D"]:
        """Union of all given bounds, None if there are none."""
        result = None
        for item in bounds:
            if result is None:
                result = item
            else:
                result = cls(
                    min=tuple(min(a, b) for a, b in zip(result.min, item.min)),
                    max=tuple(max(a, b) for a, b in zip(result.max, item.max)),
                )
        return result

    @property
    def size(self) -> Vec3:
        return (
            self.max[0] - self.min[0],
            self.max[1] - self.min[1],
            self.max[2] - self.min[2],
        )

    def corners(self):
        return [
            (x, y, z)
            for x, y, z in product(
                (self.min[0], self.max[0]),
                (self.min[1], self.max[1]),
                (self.min[2], self.max[2]),
            )
        ]

    def transformed(self, transform: Transform) -> "Bounds3D":
        """Bounds of this box after applying a transform."""
        if transform.is_identity:
            return self
        return Bounds3D.from_points(transform.apply(corner) for corner in self.corners())


EMPTY_BOUNDS = Bounds3D(min=(0.0, 0.0, 0.0), max=(0.0, 0.0, 0.0))
