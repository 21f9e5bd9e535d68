# File: src/strawbale_construction/walls/openings.py
"""
Opening frame construction.

An opening segment spans the padded width of one or more openings that share
sill and header elevations. The opening assembly frames it (header, sill,
optional filling) and hands the wall region above the header and below the
sill back to the wall's own infill method.

Usage:
    assembly = create_opening_assembly(config)
    results = assembly.construct(area, openings, adjusted_header, adjusted_sill,
                                 finished_floor_z, infill_method)
"""

from abc import ABC, abstractmethod
from typing import Callable, Dict, Sequence, Type

from ..building.records import Opening
from ..config.schemas import (
    EmptyOpeningAssemblyConfig,
    OpeningAssemblyConfig,
    SimpleOpeningAssemblyConfig,
)
from ..core.elements import Cuboid, create_element, create_element_from_area
from ..core.measurements import create_measurement
from ..core.model import HighlightedArea
from ..core.results import (
    ResultStream,
    area_result,
    element_result,
    error_result,
    measurement_result,
)
from ..core.tags import (
    TAG_HEADER,
    TAG_HEADER_HEIGHT,
    TAG_MISSING_ELEMENT,
    TAG_OPENING_FILLING,
    TAG_OPENING_HEIGHT,
    TAG_OPENING_WIDTH,
    TAG_SILL,
    TAG_SILL_HEIGHT,
)
from ..geometry.area import WallConstructionArea
from ..geometry.bounds import Bounds3D
from ..utils.logging_config import get_logger
from ..utils.units import format_length

logger = get_logger(__name__)

InfillMethod = Callable[[WallConstructionArea], ResultStream]


class OpeningAssembly(ABC):
    """Base class for opening assemblies."""

    def __init__(self, config: OpeningAssemblyConfig):
        self.config = config

    @property
    def padding(self) -> float:
        return self.config.padding

    @abstractmethod
    def construct(
        self,
        area: WallConstructionArea,
        openings: Sequence[Opening],
        adjusted_header: float,
        adjusted_sill: float,
        finished_floor_z: float,
        infill: InfillMethod,
    ) -> ResultStream:
        """
        Frame an opening segment.

        Args:
            area: Opening segment (padded width, full height between the plates)
            openings: Openings inside the segment, sorted by offset
            adjusted_header: z of the header bottom (opening top plus padding)
            adjusted_sill: z of the sill top (opening bottom minus padding),
                the area bottom for openings without a sill
            finished_floor_z: z of the finished floor, the reference for
                opening heights
            infill: Fills the wall regions above and below the opening
        """

    # ------------------------------------------------------------------
    # Shared helpers
    # ------------------------------------------------------------------

    def _construct_above(self, area: WallConstructionArea, from_z: float, infill: InfillMethod) -> ResultStream:
        if from_z < area.end("z"):
            yield from infill(area.with_z_adjustment(max(from_z - area.start("z"), 0.0)))

    def _construct_below(self, area: WallConstructionArea, to_z: float, infill: InfillMethod) -> ResultStream:
        if to_z > area.start("z"):
            yield from infill(area.with_z_adjustment(0, to_z - area.start("z")))

    def _construct_measurements(
        self,
        area: WallConstructionArea,
        openings: Sequence[Opening],
        finished_floor_z: float,
    ) -> ResultStream:
        y = area.start("y")
        for opening in openings:
            top = finished_floor_z + opening.header_elevation
            bottom = finished_floor_z + opening.sill_elevation
            x = opening.offset_from_start

            yield measurement_result(create_measurement(
                (x, y, top), (opening.end, y, top), tags=[TAG_OPENING_WIDTH],
            ))
            yield measurement_result(create_measurement(
                (x, y, finished_floor_z), (x, y, top), tags=[TAG_HEADER_HEIGHT],
            ))
            if opening.sill_height:
                yield measurement_result(create_measurement(
                    (x, y, finished_floor_z), (x, y, bottom), tags=[TAG_SILL_HEIGHT],
                ))
                yield measurement_result(create_measurement(
                    (x, y, bottom), (x, y, top), tags=[TAG_OPENING_HEIGHT],
                ))


def _missing_element_area(label: str, area: WallConstructionArea, z: float, height: float) -> HighlightedArea:
    return HighlightedArea(
        area_type="missing-element",
        label=label,
        bounds=Bounds3D.from_cuboid(
            (area.start("x"), area.start("y"), z), (area.width, area.thickness, height)
        ),
        tags=(TAG_MISSING_ELEMENT,),
    )


class SimpleOpeningAssembly(OpeningAssembly):
    """Header above, sill below (windows), optional filling in the opening."""

    config: SimpleOpeningAssemblyConfig

    def construct(self, area, openings, adjusted_header, adjusted_sill, finished_floor_z, infill):
        config = self.config
        wall_bottom = area.start("z")
        wall_top = area.end("z")
        logger.debug(
            f"Framing {[o.id for o in openings]}: x {area.start('x'):.0f}-{area.end('x'):.0f}, "
            f"header at {adjusted_header:.0f}, sill at {adjusted_sill:.0f}"
        )

        # Header
        if wall_bottom <= adjusted_header < wall_top:
            available = wall_top - adjusted_header
            if config.header_thickness > available:
                yield area_result(_missing_element_area("Header", area, adjusted_header, config.header_thickness))
                yield error_result(
                    f"Header does not fit: needs {format_length(config.header_thickness)} "
                    f"but only {format_length(available)} available"
                )
            else:
                header_area = area.with_z_adjustment(adjusted_header - wall_bottom, config.header_thickness)
                yield element_result(create_element_from_area(header_area, config.header_material, [TAG_HEADER]))
                yield from self._construct_above(area, adjusted_header + config.header_thickness, infill)

        # Sill
        has_sill = any(opening.sill_height for opening in openings)
        if has_sill and adjusted_sill <= wall_top:
            sill_bottom = adjusted_sill - config.sill_thickness
            if sill_bottom < wall_bottom:
                yield area_result(_missing_element_area("Sill", area, sill_bottom, config.sill_thickness))
                yield error_result(
                    f"Sill does not fit: needs {format_length(config.sill_thickness)} "
                    f"but only {format_length(max(adjusted_sill - wall_bottom, 0.0))} available"
                )
            else:
                sill_area = area.with_z_adjustment(sill_bottom - wall_bottom, config.sill_thickness)
                yield element_result(create_element_from_area(sill_area, config.sill_material, [TAG_SILL]))
                yield from self._construct_below(area, sill_bottom, infill)

        # Filling, inset by the padding on every side
        if config.filling_material is not None:
            filling_y = area.start("y") + (area.thickness - config.filling_thickness) / 2
            inset = config.padding
            for opening in openings:
                yield element_result(create_element(
                    config.filling_material,
                    Cuboid(
                        offset=(
                            opening.offset_from_start + inset,
                            filling_y,
                            finished_floor_z + opening.sill_elevation + inset,
                        ),
                        size=(opening.width - 2 * inset, config.filling_thickness, opening.height - 2 * inset),
                    ),
                    tags=[TAG_OPENING_FILLING],
                ))

        yield from self._construct_measurements(area, openings, finished_floor_z)


class EmptyOpeningAssembly(OpeningAssembly):
    """Plain cut-out: no frame members, the wall continues above and below."""

    config: EmptyOpeningAssemblyConfig

    def construct(self, area, openings, adjusted_header, adjusted_sill, finished_floor_z, infill):
        yield from self._construct_above(area, adjusted_header, infill)
        if any(opening.sill_height for opening in openings):
            yield from self._construct_below(area, adjusted_sill, infill)
        yield from self._construct_measurements(area, openings, finished_floor_z)


OPENING_ASSEMBLY_IMPLEMENTATIONS: Dict[str, Type[OpeningAssembly]] = {
    "simple": SimpleOpeningAssembly,
    "empty": EmptyOpeningAssembly,
}


def create_opening_assembly(config: OpeningAssemblyConfig) -> OpeningAssembly:
    """Instantiate the opening assembly implementation for a configuration."""
    try:
        implementation = OPENING_ASSEMBLY_IMPLEMENTATIONS[config.type]
    except KeyError:
        raise ValueError(f"Invalid opening assembly type: {config.type}") from None
    return implementation(config)
