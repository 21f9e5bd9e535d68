# File: src/strawbale_construction/walls/context.py
"""Vertical context of a wall: how its construction relates to the floors."""

from dataclasses import dataclass
from typing import Optional

from ..config.schemas import FloorAssemblyConfig


@dataclass(frozen=True)
class WallStoreyContext:
    """
    Attributes:
        storey_height: Finished floor to finished floor above
        floor_top_offset: Depth of the floor build-up the wall stands below;
            the finished floor sits this far above the wall bottom
        ceiling_bottom_offset: Adjustment at the top, negative when the next
            floor's construction cuts into the storey height
    """
    storey_height: float
    floor_top_offset: float
    ceiling_bottom_offset: float

    @property
    def total_construction_height(self) -> float:
        return self.storey_height + self.floor_top_offset + self.ceiling_bottom_offset

    @property
    def finished_floor_z(self) -> float:
        """z of the finished floor in the wall frame."""
        return self.floor_top_offset


def create_wall_storey_context(
    storey_height: float,
    floor_assembly: FloorAssemblyConfig,
    next_floor_assembly: Optional[FloorAssemblyConfig] = None,
) -> WallStoreyContext:
    """
    Build the storey context for walls on a floor.

    The wall stands on the current floor's construction and runs up to the
    underside of the next floor's construction. Without a storey above the
    wall ends at the storey height.
    """
    ceiling_bottom_offset = 0.0
    if next_floor_assembly is not None:
        ceiling_bottom_offset = -(
            next_floor_assembly.top_layers_thickness + next_floor_assembly.construction_thickness
        )
    return WallStoreyContext(
        storey_height=storey_height,
        floor_top_offset=floor_assembly.top_layers_thickness,
        ceiling_bottom_offset=ceiling_bottom_offset,
    )
