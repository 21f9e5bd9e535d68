# File: src/strawbale_construction/walls/construction.py
"""
Wall construction entry point.

construct_wall resolves every record a wall needs from the building model
and the configuration snapshot, builds the storey context, dispatches to
the wall assembly implementation and merges the core with the cladding
layers into one ConstructionModel.

Usage:
    store = ConfigStore.from_defaults()
    model = construct_wall("perimeter_1", "wall_1", building, store)
    for issue in model.errors:
        print(issue.description)
"""

from typing import Dict, Type

from ..building.records import BuildingModel
from ..config.schemas import BaseWallAssemblyConfig, WallAssemblyType
from ..config.store import ConfigStore
from ..core.errors import ConfigurationIntegrityError, ModelIntegrityError
from ..core.model import ConstructionModel, merge_models
from ..utils.logging_config import get_logger
from .assemblies import (
    InfillWallAssembly,
    ModulesWallAssembly,
    NonStrawbaleWallAssembly,
    StrawhengeWallAssembly,
    WallAssembly,
)
from .context import create_wall_storey_context
from .layers import construct_wall_layers

logger = get_logger(__name__)

WALL_ASSEMBLY_IMPLEMENTATIONS: Dict[WallAssemblyType, Type[WallAssembly]] = {
    WallAssemblyType.INFILL: InfillWallAssembly,
    WallAssemblyType.STRAWHENGE: StrawhengeWallAssembly,
    WallAssemblyType.MODULES: ModulesWallAssembly,
    WallAssemblyType.NON_STRAWBALE: NonStrawbaleWallAssembly,
}


def create_wall_assembly(config: BaseWallAssemblyConfig, store: ConfigStore) -> WallAssembly:
    """Instantiate the implementation registered for the assembly's type."""
    implementation = WALL_ASSEMBLY_IMPLEMENTATIONS[config.assembly_type]
    return implementation(config, store)


def construct_wall(
    perimeter_id: str,
    wall_id: str,
    building: BuildingModel,
    config: ConfigStore,
) -> ConstructionModel:
    """
    Construct one wall of a perimeter in its local frame.

    Args:
        perimeter_id: Perimeter holding the wall
        wall_id: Wall to construct
        building: Building model snapshot
        config: Configuration snapshot

    Returns:
        ConstructionModel with the core, plates, openings and layers

    Raises:
        ModelIntegrityError: If the perimeter, wall or storey is missing
        ConfigurationIntegrityError: If an assembly, floor assembly or
            material the wall references is missing
    """
    perimeter = building.get_perimeter(perimeter_id)
    if perimeter is None:
        raise ModelIntegrityError("perimeter", perimeter_id)

    wall_index = perimeter.wall_index(wall_id)
    if wall_index is None:
        raise ModelIntegrityError("wall", wall_id, extra={"perimeter_id": perimeter_id})
    wall = perimeter.walls[wall_index]

    storey = building.get_storey(perimeter.storey_id)
    if storey is None:
        raise ModelIntegrityError("storey", perimeter.storey_id)

    wall_assembly = config.get_wall_assembly(wall.wall_assembly_id)
    if wall_assembly is None:
        raise ConfigurationIntegrityError("wall assembly", wall.wall_assembly_id)

    floor_assembly = config.get_floor_assembly(storey.floor_assembly_id)
    if floor_assembly is None:
        raise ConfigurationIntegrityError("floor assembly", storey.floor_assembly_id)

    next_floor_assembly = None
    storey_above = building.get_storey_above(storey.id)
    if storey_above is not None:
        next_floor_assembly = config.get_floor_assembly(storey_above.floor_assembly_id)
        if next_floor_assembly is None:
            raise ConfigurationIntegrityError("floor assembly", storey_above.floor_assembly_id)

    storey_context = create_wall_storey_context(storey.height, floor_assembly, next_floor_assembly)

    assembly = create_wall_assembly(wall_assembly, config)
    core_model = assembly.construct(wall, perimeter, wall_index, storey_context)
    layers_model = construct_wall_layers(wall, perimeter, wall_index, storey_context, wall_assembly, config)
    model = merge_models([core_model, layers_model])

    logger.info(
        f"Constructed wall {wall.id} ({wall_assembly.assembly_type.value}): "
        f"{len(model.elements)} elements, {len(model.errors)} errors, {len(model.warnings)} warnings"
    )
    return model
