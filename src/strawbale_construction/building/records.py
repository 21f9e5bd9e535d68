# File: src/strawbale_construction/building/records.py
"""
Input records describing the building the engine constructs.

Walls, openings, corners, perimeters and storeys are read-only snapshots
produced by the modelling layer. Their validation covers shape only (positive
sizes, unique ids, matching corner counts); geometric conflicts such as an
opening running past the wall end are construction issues reported in the
model, not validation errors.
"""

import math
from typing import List, Literal, Optional, Tuple

from pydantic import BaseModel, ConfigDict, Field, model_validator

Point2D = Tuple[float, float]


class FrozenRecord(BaseModel):
    model_config = ConfigDict(frozen=True)


class LineSegment2D(FrozenRecord):
    """Straight line in plan."""
    start: Point2D
    end: Point2D

    @property
    def length(self) -> float:
        return math.hypot(self.end[0] - self.start[0], self.end[1] - self.start[1])

    @property
    def direction(self) -> Point2D:
        """Unit vector from start to end."""
        length = self.length
        if length == 0:
            raise ValueError("Zero-length line has no direction")
        return ((self.end[0] - self.start[0]) / length, (self.end[1] - self.start[1]) / length)


class Opening(FrozenRecord):
    """Door, window or passage cut into a wall."""
    id: str = Field(min_length=1)
    type: Literal["door", "window", "passage"]
    offset_from_start: float = Field(ge=0, description="Distance from the wall start to the opening's left edge")
    width: float = Field(gt=0)
    height: float = Field(gt=0)
    sill_height: Optional[float] = Field(default=None, ge=0, description="Height above finished floor")
    opening_assembly_id: Optional[str] = Field(default=None, description="Per-opening assembly override")

    @property
    def end(self) -> float:
        return self.offset_from_start + self.width

    @property
    def sill_elevation(self) -> float:
        """Bottom of the opening above finished floor."""
        return self.sill_height or 0.0

    @property
    def header_elevation(self) -> float:
        """Top of the opening above finished floor."""
        return self.sill_elevation + self.height


class PerimeterWall(FrozenRecord):
    """
    One wall of a perimeter.

    The outside line defines the wall's local frame: x = 0 at its start,
    running towards its end. ``wall_length`` is the outside line length.
    """
    id: str = Field(min_length=1)
    thickness: float = Field(gt=0)
    wall_assembly_id: str
    inside_line: LineSegment2D
    outside_line: LineSegment2D
    openings: List[Opening] = Field(default_factory=list)

    @model_validator(mode='after')
    def validate_wall(self) -> 'PerimeterWall':
        """Validate line lengths and opening ids."""
        if self.outside_line.length <= 0:
            raise ValueError(f"Wall {self.id} has a zero-length outside line")
        ids = [opening.id for opening in self.openings]
        if len(ids) != len(set(ids)):
            raise ValueError(f"Wall {self.id} has duplicate opening ids")
        return self

    @property
    def wall_length(self) -> float:
        return self.outside_line.length

    @property
    def inside_length(self) -> float:
        return self.inside_line.length

    def project_onto_axis(self, point: Point2D) -> float:
        """Local x coordinate of a plan point along the wall."""
        direction = self.outside_line.direction
        start = self.outside_line.start
        return (point[0] - start[0]) * direction[0] + (point[1] - start[1]) * direction[1]


class PerimeterCorner(FrozenRecord):
    """
    Corner between two consecutive walls.

    ``constructed_by_wall`` names which of the two walls builds the corner
    region: "previous" (the wall ending here) or "next" (the wall starting here).
    """
    id: str = Field(min_length=1)
    inside_point: Point2D
    outside_point: Point2D
    constructed_by_wall: Literal["previous", "next"] = "next"


class Perimeter(FrozenRecord):
    """
    Closed ring of walls. Corner ``i`` joins wall ``i - 1`` and wall ``i``,
    so wall ``i`` starts at corner ``i`` and ends at corner ``i + 1``.
    """
    id: str = Field(min_length=1)
    storey_id: str
    walls: List[PerimeterWall] = Field(min_length=1)
    corners: List[PerimeterCorner] = Field(default_factory=list)
    base_ring_beam_assembly_id: Optional[str] = None
    top_ring_beam_assembly_id: Optional[str] = None

    @model_validator(mode='after')
    def validate_perimeter(self) -> 'Perimeter':
        """Validate corner count and wall id uniqueness."""
        if self.corners and len(self.corners) != len(self.walls):
            raise ValueError(
                f"Perimeter {self.id} has {len(self.walls)} walls but {len(self.corners)} corners"
            )
        ids = [wall.id for wall in self.walls]
        if len(ids) != len(set(ids)):
            raise ValueError(f"Perimeter {self.id} has duplicate wall ids")
        return self

    def wall_index(self, wall_id: str) -> Optional[int]:
        for index, wall in enumerate(self.walls):
            if wall.id == wall_id:
                return index
        return None

    def get_wall(self, wall_id: str) -> Optional[PerimeterWall]:
        index = self.wall_index(wall_id)
        return None if index is None else self.walls[index]

    def previous_wall(self, index: int) -> PerimeterWall:
        return self.walls[(index - 1) % len(self.walls)]

    def next_wall(self, index: int) -> PerimeterWall:
        return self.walls[(index + 1) % len(self.walls)]

    def start_corner(self, index: int) -> Optional[PerimeterCorner]:
        return self.corners[index] if self.corners else None

    def end_corner(self, index: int) -> Optional[PerimeterCorner]:
        return self.corners[(index + 1) % len(self.corners)] if self.corners else None


class Storey(FrozenRecord):
    id: str = Field(min_length=1)
    name: str = ""
    level: int = 0
    height: float = Field(gt=0, description="Finished floor to finished floor above")
    floor_assembly_id: str


class BuildingModel(FrozenRecord):
    """Snapshot of all storeys and perimeters, with id lookups."""
    storeys: List[Storey] = Field(default_factory=list)
    perimeters: List[Perimeter] = Field(default_factory=list)

    @model_validator(mode='after')
    def validate_ids(self) -> 'BuildingModel':
        """Validate storey and perimeter id uniqueness."""
        for name, records in (("storey", self.storeys), ("perimeter", self.perimeters)):
            ids = [record.id for record in records]
            if len(ids) != len(set(ids)):
                raise ValueError(f"Duplicate {name} ids")
        return self

    def get_storey(self, storey_id: str) -> Optional[Storey]:
        return next((storey for storey in self.storeys if storey.id == storey_id), None)

    def get_storey_above(self, storey_id: str) -> Optional[Storey]:
        """Lowest storey whose level is above the given storey's, if any."""
        storey = self.get_storey(storey_id)
        if storey is None:
            return None
        above = [other for other in self.storeys if other.level > storey.level]
        return min(above, key=lambda other: other.level) if above else None

    def get_perimeter(self, perimeter_id: str) -> Optional[Perimeter]:
        return next((p for p in self.perimeters if p.id == perimeter_id), None)
