# File: src/strawbale_construction/walls/ring_beams.py
"""Base and top plates from ring-beam assemblies."""

from typing import Sequence

from ..config.schemas import DoubleRingBeamConfig, FullRingBeamConfig
from ..core.elements import create_element_from_area
from ..core.results import ResultStream, element_result, error_result
from ..core.tags import TAG_INFILL, Tag
from ..geometry.area import WallConstructionArea


def construct_ring_beam(
    area: WallConstructionArea,
    ring_beam: FullRingBeamConfig,
    tags: Sequence[Tag],
) -> ResultStream:
    """
    Builds a plate along the area, which spans the core for the beam height.

    Args:
        area: Plate region (construction length x core depth x beam height)
        ring_beam: Ring-beam assembly
        tags: Plate tags (base or top plate)

    Yields:
        Beam elements, plus an error if the beam does not fit the core depth
    """
    tags = list(tags)

    if isinstance(ring_beam, DoubleRingBeamConfig):
        if area.thickness < 2 * ring_beam.thickness:
            element = create_element_from_area(area, ring_beam.material, tags)
            yield element_result(element)
            yield error_result("Wall is too thin for a double ring beam", [element])
            return

        inner = area.with_y_adjustment(0, ring_beam.thickness)
        outer = area.with_y_adjustment(area.thickness - ring_beam.thickness, ring_beam.thickness)
        yield element_result(create_element_from_area(inner, ring_beam.material, tags))
        yield element_result(create_element_from_area(outer, ring_beam.material, tags))

        gap = area.thickness - 2 * ring_beam.thickness
        if gap > 0:
            middle = area.with_y_adjustment(ring_beam.thickness, gap)
            yield element_result(create_element_from_area(middle, ring_beam.infill_material, tags + [TAG_INFILL]))
        return

    if ring_beam.offset + ring_beam.width > area.thickness:
        width = max(area.thickness - ring_beam.offset, 0.0)
        offset = min(ring_beam.offset, area.thickness)
        element = create_element_from_area(area.with_y_adjustment(offset, width), ring_beam.material, tags)
        yield element_result(element)
        yield error_result("Ring beam is wider than the wall", [element])
        return

    beam = area.with_y_adjustment(ring_beam.offset, ring_beam.width)
    yield element_result(create_element_from_area(beam, ring_beam.material, tags))
