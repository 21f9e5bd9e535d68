# File: src/strawbale_construction/core/measurements.py
"""Dimension annotations produced alongside construction elements."""

import math
from dataclasses import dataclass
from enum import Enum
from typing import Optional, Sequence, Tuple

from ..geometry.transform import Transform, Vec3
from ..utils.units import format_length
from .tags import Tag


class MeasurementType(Enum):
    DIRECT = "direct"


@dataclass(frozen=True)
class RawMeasurement:
    """
    A dimension line between two points.

    The offset moves the drawn line away from the measured geometry, in the
    wall's y direction; it is a rendering hint only.
    """
    type: MeasurementType
    start_point: Vec3
    end_point: Vec3
    label: str
    offset: float = 0.0
    tags: Tuple[Tag, ...] = ()

    @property
    def length(self) -> float:
        return math.dist(self.start_point, self.end_point)

    def transformed(self, transform: Transform) -> "RawMeasurement":
        return RawMeasurement(
            type=self.type,
            start_point=transform.apply(self.start_point),
            end_point=transform.apply(self.end_point),
            label=self.label,
            offset=self.offset,
            tags=self.tags,
        )


def create_measurement(
    start_point: Vec3,
    end_point: Vec3,
    tags: Sequence[Tag] = (),
    offset: float = 0.0,
    label: Optional[str] = None,
) -> RawMeasurement:
    """Direct measurement labelled with its length unless a label is given."""
    if label is None:
        label = format_length(math.dist(start_point, end_point))
    return RawMeasurement(
        type=MeasurementType.DIRECT,
        start_point=start_point,
        end_point=end_point,
        label=label,
        offset=offset,
        tags=tuple(tags),
    )
