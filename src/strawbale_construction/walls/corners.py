# File: src/strawbale_construction/walls/corners.py
"""
Corner extension calculation.

At every corner exactly one of the two meeting walls builds the corner
region. A wall that owns a corner extends its construction past its own
outside-line endpoint up to the corner's outside point; a wall that does not
own it stops flush at that endpoint.
"""

from dataclasses import dataclass
from typing import Optional

from ..building.records import Perimeter, PerimeterCorner, PerimeterWall
from ..core.model import HighlightedArea
from ..core.results import ResultStream, area_result
from ..core.tags import TAG_CORNER_AREA
from ..geometry.bounds import Bounds3D
from ..geometry.transform import distance_2d
from ..utils.logging_config import get_logger

logger = get_logger(__name__)


@dataclass(frozen=True)
class WallCornerInfo:
    """How far a wall's construction extends past each end of its outside line."""
    start_extension: float
    end_extension: float
    construction_length: float
    start_corner_owned: bool = False
    end_corner_owned: bool = False

    @property
    def construction_start(self) -> float:
        """Local x of the construction start (negative when extended)."""
        return -self.start_extension


def owns_start_corner(corner: Optional[PerimeterCorner]) -> bool:
    return corner is not None and corner.constructed_by_wall == "next"


def owns_end_corner(corner: Optional[PerimeterCorner]) -> bool:
    return corner is not None and corner.constructed_by_wall == "previous"


def calculate_wall_corner_info(
    wall: PerimeterWall,
    start_corner: Optional[PerimeterCorner],
    end_corner: Optional[PerimeterCorner],
) -> WallCornerInfo:
    """
    Compute the construction length of a wall from its corner ownership.

    Args:
        wall: The wall
        start_corner: Corner at the wall's start, None for a free end
        end_corner: Corner at the wall's end, None for a free end

    Returns:
        WallCornerInfo with extensions and the total construction length
    """
    start_owned = owns_start_corner(start_corner)
    end_owned = owns_end_corner(end_corner)

    start_extension = (
        distance_2d(wall.outside_line.start, start_corner.outside_point) if start_owned else 0.0
    )
    end_extension = (
        distance_2d(wall.outside_line.end, end_corner.outside_point) if end_owned else 0.0
    )

    info = WallCornerInfo(
        start_extension=start_extension,
        end_extension=end_extension,
        construction_length=wall.wall_length + start_extension + end_extension,
        start_corner_owned=start_owned,
        end_corner_owned=end_owned,
    )
    logger.debug(
        f"Wall {wall.id}: start ext {start_extension:.1f}, end ext {end_extension:.1f}, "
        f"construction length {info.construction_length:.1f}"
    )
    return info


def calculate_perimeter_wall_corner_info(perimeter: Perimeter, wall_index: int) -> WallCornerInfo:
    """Corner info for wall ``wall_index``, using corners i and (i + 1) % n."""
    return calculate_wall_corner_info(
        perimeter.walls[wall_index],
        perimeter.start_corner(wall_index),
        perimeter.end_corner(wall_index),
    )


def construct_corner_areas(
    corner_info: WallCornerInfo,
    wall_length: float,
    thickness: float,
    height: float,
) -> ResultStream:
    """Yields a highlighted area for every corner region this wall builds."""
    regions = []
    if corner_info.start_corner_owned and corner_info.start_extension > 0:
        regions.append((-corner_info.start_extension, corner_info.start_extension))
    if corner_info.end_corner_owned and corner_info.end_extension > 0:
        regions.append((wall_length, corner_info.end_extension))

    for x, extension in regions:
        yield area_result(HighlightedArea(
            area_type="corner",
            label="Corner",
            bounds=Bounds3D.from_cuboid((x, 0.0, 0.0), (extension, thickness, height)),
            tags=(TAG_CORNER_AREA,),
        ))
