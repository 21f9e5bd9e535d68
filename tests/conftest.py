# tests/conftest.py
import math
import sys
import os

# Add src directory to path
sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), '../src')))

import pytest
from typing import List, Optional, Sequence

from strawbale_construction.building.records import (
    BuildingModel,
    LineSegment2D,
    Opening,
    Perimeter,
    PerimeterCorner,
    PerimeterWall,
    Storey,
)
from strawbale_construction.config.store import ConfigStore
from strawbale_construction.materials.material import StrawbaleMaterial


def create_straight_wall(
    length: float = 3000,
    thickness: float = 420,
    wall_assembly_id: str = "wa_infill_default",
    openings: Sequence[Opening] = (),
    wall_id: str = "wall_1",
) -> PerimeterWall:
    """Wall along +x with its inside face on y = 0 and the outside at y = thickness."""
    return PerimeterWall(
        id=wall_id,
        thickness=thickness,
        wall_assembly_id=wall_assembly_id,
        inside_line=LineSegment2D(start=(0, 0), end=(length, 0)),
        outside_line=LineSegment2D(start=(0, thickness), end=(length, thickness)),
        openings=list(openings),
    )


def create_building(
    walls: Sequence[PerimeterWall],
    corners: Optional[List[PerimeterCorner]] = None,
    storey_height: float = 2500,
    floor_assembly_id: str = "fa_concrete_default",
    base_ring_beam_assembly_id: Optional[str] = None,
    top_ring_beam_assembly_id: Optional[str] = None,
    extra_storeys: Sequence[Storey] = (),
) -> BuildingModel:
    """Single-perimeter building on storey "storey_1"."""
    return BuildingModel(
        storeys=[
            Storey(id="storey_1", name="Ground floor", level=0, height=storey_height,
                   floor_assembly_id=floor_assembly_id),
            *extra_storeys,
        ],
        perimeters=[
            Perimeter(
                id="perimeter_1",
                storey_id="storey_1",
                walls=list(walls),
                corners=corners or [],
                base_ring_beam_assembly_id=base_ring_beam_assembly_id,
                top_ring_beam_assembly_id=top_ring_beam_assembly_id,
            )
        ],
    )


def create_rectangle_building(
    width: float = 6000,
    depth: float = 4000,
    thickness: float = 420,
    wall_assembly_id: str = "wa_infill_default",
) -> BuildingModel:
    """
    Four walls wound clockwise around the inside rectangle, so the outside
    lies to the left of every wall. Walls 1 and 3 own both of their corners.
    """
    t = thickness
    inside = [(0, 0), (0, depth), (width, depth), (width, 0)]
    outside_corners = [(-t, -t), (-t, depth + t), (width + t, depth + t), (width + t, -t)]

    walls = []
    for index in range(4):
        start, end = inside[index], inside[(index + 1) % 4]
        length = math.hypot(end[0] - start[0], end[1] - start[1])
        nx = -(end[1] - start[1]) / length
        ny = (end[0] - start[0]) / length
        walls.append(PerimeterWall(
            id=f"wall_{index + 1}",
            thickness=t,
            wall_assembly_id=wall_assembly_id,
            inside_line=LineSegment2D(start=start, end=end),
            outside_line=LineSegment2D(
                start=(start[0] + nx * t, start[1] + ny * t),
                end=(end[0] + nx * t, end[1] + ny * t),
            ),
        ))

    corners = [
        PerimeterCorner(
            id=f"corner_{index + 1}",
            inside_point=inside[index],
            outside_point=outside_corners[index],
            constructed_by_wall="next" if index % 2 == 0 else "previous",
        )
        for index in range(4)
    ]
    return create_building(walls, corners=corners)


@pytest.fixture
def config_store():
    """Store holding the default catalog."""
    return ConfigStore.from_defaults()


@pytest.fixture
def straw_material():
    """Default straw bale: 800-900 long, 500 high, 360 wide."""
    return StrawbaleMaterial(id="straw", name="Straw bale")


@pytest.fixture
def wall_factory():
    return create_straight_wall


@pytest.fixture
def building_factory():
    return create_building


@pytest.fixture
def rectangle_building():
    return create_rectangle_building()
