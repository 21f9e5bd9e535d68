# File: src/strawbale_construction/walls/assemblies.py
"""
Wall assembly implementations.

Every wall assembly type shares the same segmentation (plates, wall segments,
opening segments, corners) and differs only in how it fills a wall segment
and the regions above and below openings.

Class hierarchy:
    WallAssembly (abstract)
    ├── InfillWallAssembly       posts and straw
    ├── StrawhengeWallAssembly   modules at the segment ends, straw fields between
    ├── ModulesWallAssembly      modules tiled end to end
    └── NonStrawbaleWallAssembly one solid element per region
"""

from abc import ABC, abstractmethod

from ..building.records import Perimeter, PerimeterWall
from ..config.schemas import (
    BaseWallAssemblyConfig,
    InfillWallAssemblyConfig,
    ModulesWallAssemblyConfig,
    NonStrawbaleWallAssemblyConfig,
    StrawhengeWallAssemblyConfig,
)
from ..config.store import ConfigStore
from ..core.elements import create_element_from_area
from ..core.errors import ConfigurationIntegrityError
from ..core.model import ConstructionModel
from ..core.results import ResultStream, build_construction_model, element_result
from ..core.tags import TAG_NON_STRAWBALE
from ..geometry.area import WallConstructionArea
from ..materials.material import BaseMaterial
from ..utils.logging_config import get_logger
from .context import WallStoreyContext
from .infill import infill_wall_area
from .modules import module_wall_area, strawhenge_wall_area
from .segmentation import segmented_wall_construction

logger = get_logger(__name__)


class WallAssembly(ABC):
    """Base class for wall assemblies."""

    def __init__(self, config: BaseWallAssemblyConfig, store: ConfigStore):
        self.config = config
        self.store = store

    @abstractmethod
    def construct_wall_area(self, area: WallConstructionArea, start_at_end: bool = False) -> ResultStream:
        """
        Fill one wall segment of the structural core.

        Args:
            area: Segment area between the plates
            start_at_end: Use the far end of the segment as leading edge
        """

    def construct_opening_infill(self, area: WallConstructionArea) -> ResultStream:
        """Fill the wall region above or below an opening."""
        return self.construct_wall_area(area)

    def construct(
        self,
        wall: PerimeterWall,
        perimeter: Perimeter,
        wall_index: int,
        storey_context: WallStoreyContext,
    ) -> ConstructionModel:
        """
        Construct the structural core of a wall in its local frame.

        Raises:
            ConfigurationIntegrityError: If a referenced assembly or material
                cannot be found
        """
        logger.debug(f"Constructing wall {wall.id} with {type(self).__name__} '{self.config.id}'")
        return build_construction_model(segmented_wall_construction(
            wall,
            perimeter,
            wall_index,
            storey_context,
            self.config,
            self.store,
            self.construct_wall_area,
            self.construct_opening_infill,
        ))

    def _straw_material(self, material_id) -> BaseMaterial:
        material = self.store.get_straw_material(material_id)
        if material is None:
            raise ConfigurationIntegrityError(
                "straw material", material_id or self.store.default_straw_material_id
            )
        return material


class InfillWallAssembly(WallAssembly):
    config: InfillWallAssemblyConfig

    def __init__(self, config: InfillWallAssemblyConfig, store: ConfigStore):
        super().__init__(config, store)
        self.straw = self._straw_material(config.infill.straw_material)

    def construct_wall_area(self, area, start_at_end=False):
        return infill_wall_area(area, self.config.infill, self.straw, start_at_end)


class StrawhengeWallAssembly(WallAssembly):
    config: StrawhengeWallAssemblyConfig

    def __init__(self, config: StrawhengeWallAssemblyConfig, store: ConfigStore):
        super().__init__(config, store)
        self.straw = self._straw_material(config.infill.straw_material)

    def construct_wall_area(self, area, start_at_end=False):
        return strawhenge_wall_area(area, self.config.module, self.config.infill, self.straw, start_at_end)

    def construct_opening_infill(self, area):
        return infill_wall_area(area, self.config.infill, self.straw)


class ModulesWallAssembly(WallAssembly):
    config: ModulesWallAssemblyConfig

    def __init__(self, config: ModulesWallAssemblyConfig, store: ConfigStore):
        super().__init__(config, store)
        self.straw = self._straw_material(config.infill.straw_material)

    def construct_wall_area(self, area, start_at_end=False):
        return module_wall_area(area, self.config.module, self.config.infill, self.straw, start_at_end)

    def construct_opening_infill(self, area):
        return infill_wall_area(area, self.config.infill, self.straw)


class NonStrawbaleWallAssembly(WallAssembly):
    """Solid core, e.g. concrete or masonry. Openings are still framed."""

    config: NonStrawbaleWallAssemblyConfig

    def construct_wall_area(self, area, start_at_end=False):
        if area.is_empty:
            return
        yield element_result(create_element_from_area(area, self.config.material, [TAG_NON_STRAWBALE]))
