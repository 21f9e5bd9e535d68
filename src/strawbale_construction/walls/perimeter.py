# File: src/strawbale_construction/walls/perimeter.py
"""Places every wall of a perimeter in plan coordinates."""

import math
from typing import List

from ..building.records import BuildingModel, PerimeterWall
from ..config.store import ConfigStore
from ..core.errors import ModelIntegrityError, StrawbaleConstructionError
from ..core.model import ConstructionModel, merge_models, transform_model
from ..geometry.transform import Transform
from ..utils.logging_config import get_logger
from .construction import construct_wall

logger = get_logger(__name__)


def wall_placement(wall: PerimeterWall) -> Transform:
    """
    Transform from a wall's local frame to plan coordinates.

    The local x axis follows the outside line, local y points from the inside
    face to the outside face, so the outside has to lie to the left of the
    wall direction.

    Raises:
        StrawbaleConstructionError: If the outside lies to the right
    """
    dx, dy = wall.outside_line.direction
    normal = (-dy, dx)
    offset = (
        wall.outside_line.start[0] - wall.inside_line.start[0],
        wall.outside_line.start[1] - wall.inside_line.start[1],
    )
    if offset[0] * normal[0] + offset[1] * normal[1] <= 0:
        raise StrawbaleConstructionError(
            f"Wall {wall.id} has its outside line to the right of its direction",
            extra={"wall_id": wall.id},
        )

    origin_x = wall.outside_line.start[0] - normal[0] * wall.thickness
    origin_y = wall.outside_line.start[1] - normal[1] * wall.thickness
    return Transform(translation=(origin_x, origin_y, 0.0), rotation=(0.0, 0.0, math.atan2(dy, dx)))


def construct_perimeter(perimeter_id: str, building: BuildingModel, config: ConfigStore) -> ConstructionModel:
    """
    Construct all walls of a perimeter and merge them in plan coordinates.

    Raises:
        ModelIntegrityError: If the perimeter is missing
        StrawbaleConstructionError: If a wall is wound the wrong way, or any
            integrity error from construct_wall
    """
    perimeter = building.get_perimeter(perimeter_id)
    if perimeter is None:
        raise ModelIntegrityError("perimeter", perimeter_id)

    models: List[ConstructionModel] = []
    for wall in perimeter.walls:
        placement = wall_placement(wall)
        models.append(transform_model(construct_wall(perimeter.id, wall.id, building, config), placement))

    model = merge_models(models)
    logger.info(f"Constructed perimeter {perimeter.id}: {len(perimeter.walls)} walls, {len(model.errors)} errors")
    return model
