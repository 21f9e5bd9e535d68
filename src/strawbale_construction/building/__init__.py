"""Read-only input records: walls, openings, corners, perimeters, storeys."""

from .records import (
    BuildingModel,
    LineSegment2D,
    Opening,
    Perimeter,
    PerimeterCorner,
    PerimeterWall,
    Storey,
)

__all__ = [
    "BuildingModel",
    "LineSegment2D",
    "Opening",
    "Perimeter",
    "PerimeterCorner",
    "PerimeterWall",
    "Storey",
]
