# File: src/strawbale_construction/geometry/area.py
"""
Wall construction area: an axis-aligned box in the wall's local frame.

Every construction algorithm receives one of these and carves it up with the
split/adjust operations below. Areas are immutable, each operation returns a
new area.

Usage:
    area = WallConstructionArea((0, 0, 0), (3000, 360, 2500))
    left, right = area.split_in_x(800)
    top_course = area.with_z_adjustment(2000)
"""

from dataclasses import dataclass
from typing import Optional, Tuple, Union

from .bounds import Bounds3D
from .transform import Vec3

AXES = {"x": 0, "y": 1, "z": 2}

AxisLike = Union[str, int]


def _axis_index(axis: AxisLike) -> int:
    if isinstance(axis, int):
        if axis not in (0, 1, 2):
            raise ValueError(f"Invalid axis index: {axis}")
        return axis
    try:
        return AXES[axis]
    except KeyError:
        raise ValueError(f"Invalid axis: {axis!r}") from None


@dataclass(frozen=True)
class WallConstructionArea:
    """Box given by its minimum corner and a non-negative size."""
    position: Vec3
    size: Vec3

    def __post_init__(self):
        if any(component < 0 for component in self.size):
            raise ValueError(f"Area size must be non-negative, got {self.size}")

    @property
    def width(self) -> float:
        return self.size[0]

    @property
    def thickness(self) -> float:
        return self.size[1]

    @property
    def height(self) -> float:
        return self.size[2]

    @property
    def bounds(self) -> Bounds3D:
        return Bounds3D.from_cuboid(self.position, self.size)

    def start(self, axis: AxisLike) -> float:
        return self.position[_axis_index(axis)]

    def end(self, axis: AxisLike) -> float:
        index = _axis_index(axis)
        return self.position[index] + self.size[index]

    @property
    def is_empty(self) -> bool:
        return any(component == 0 for component in self.size)

    def split_in_x(self, offset: float) -> Tuple["WallConstructionArea", "WallConstructionArea"]:
        """
        Splits the area at a local x offset.

        Args:
            offset: Distance from the area's start, within [0, width]

        Returns:
            (left, right) areas that together cover this one

        Raises:
            ValueError: If the offset lies outside the area
        """
        if offset < 0 or offset > self.size[0]:
            raise ValueError(f"Split offset {offset} outside area width {self.size[0]}")

        x, y, z = self.position
        width, thickness, height = self.size
        left = WallConstructionArea((x, y, z), (offset, thickness, height))
        right = WallConstructionArea((x + offset, y, z), (width - offset, thickness, height))
        return left, right

    def with_axis_adjustment(
        self,
        axis: AxisLike,
        start: float,
        extent: Optional[float] = None,
    ) -> "WallConstructionArea":
        """
        Returns the sub-area starting at a local offset along an axis.

        The extent defaults to the rest of the area and is clamped so the
        result never leaves this area.

        Raises:
            ValueError: If start is negative or beyond the area, or extent is negative
        """
        index = _axis_index(axis)
        available = self.size[index]
        if start < 0 or start > available:
            raise ValueError(f"Adjustment start {start} outside area size {available} on axis {index}")
        if extent is not None and extent < 0:
            raise ValueError(f"Adjustment extent must be non-negative, got {extent}")

        remaining = available - start
        new_extent = remaining if extent is None else min(extent, remaining)

        position = list(self.position)
        size = list(self.size)
        position[index] += start
        size[index] = new_extent
        return WallConstructionArea(tuple(position), tuple(size))

    def with_x_adjustment(self, start: float, extent: Optional[float] = None) -> "WallConstructionArea":
        return self.with_axis_adjustment(0, start, extent)

    def with_y_adjustment(self, start: float, extent: Optional[float] = None) -> "WallConstructionArea":
        return self.with_axis_adjustment(1, start, extent)

    def with_z_adjustment(self, start: float, extent: Optional[float] = None) -> "WallConstructionArea":
        return self.with_axis_adjustment(2, start, extent)
