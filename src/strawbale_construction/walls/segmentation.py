# File: src/strawbale_construction/walls/segmentation.py
"""
Wall segmentation.

Splits a wall's construction window into alternating wall segments and
opening segments, then constructs each: wall segments through the wall
assembly's area method, opening segments through their opening assembly.

Opening handling:
- Openings are sorted by offset.
- An opening running past the wall end, or starting before the previous
  opening ends, is reported as an error and left out; its region is built
  like the rest of the wall.
- Each opening claims its width plus its assembly's padding on both sides.
- Neighbouring padded spans that touch or overlap merge into one opening
  segment when sill, header and assembly match. Otherwise the clear gap
  between them is split in the middle.

Usage:
    segmentation = segment_wall(0, 4000, 4000, openings, resolve)
    for segment in segmentation.segments:
        print(segment.kind, segment.start, segment.width)
"""

import math
from dataclasses import dataclass, field
from enum import Enum
from typing import Callable, List, Optional, Sequence, Tuple

from ..building.records import Opening, Perimeter, PerimeterWall
from ..config.opening_resolver import resolve_opening_assembly
from ..config.schemas import BaseWallAssemblyConfig, OpeningAssemblyConfig
from ..config.store import ConfigStore
from ..core.errors import ConfigurationIntegrityError
from ..core.measurements import create_measurement
from ..core.model import HighlightedArea
from ..core.results import ResultStream, area_result, error_result, measurement_result
from ..core.tags import (
    TAG_BASE_PLATE,
    TAG_INVALID_OPENING,
    TAG_OPENING_SPACING,
    TAG_TOP_PLATE,
    TAG_WALL_LENGTH,
)
from ..geometry.area import WallConstructionArea
from ..geometry.bounds import Bounds3D
from ..utils.logging_config import get_logger
from .context import WallStoreyContext
from .corners import calculate_perimeter_wall_corner_info, construct_corner_areas
from .openings import InfillMethod, create_opening_assembly
from .ring_beams import construct_ring_beam

logger = get_logger(__name__)

WallAreaMethod = Callable[[WallConstructionArea, bool], ResultStream]
OpeningAssemblyLookup = Callable[[Opening], OpeningAssemblyConfig]

TOLERANCE = 1e-6


class SegmentKind(Enum):
    WALL = "wall"
    OPENING = "opening"


@dataclass(frozen=True)
class WallSegment:
    """A span of the construction window, in wall-local x."""
    kind: SegmentKind
    start: float
    width: float
    openings: Tuple[Opening, ...] = ()
    assembly: Optional[OpeningAssemblyConfig] = None

    @property
    def end(self) -> float:
        return self.start + self.width


@dataclass(frozen=True)
class SegmentationIssue:
    description: str
    opening: Opening


@dataclass
class WallSegmentation:
    segments: List[WallSegment] = field(default_factory=list)
    issues: List[SegmentationIssue] = field(default_factory=list)

    @property
    def wall_segments(self) -> List[WallSegment]:
        return [s for s in self.segments if s.kind is SegmentKind.WALL]

    @property
    def opening_segments(self) -> List[WallSegment]:
        return [s for s in self.segments if s.kind is SegmentKind.OPENING]


@dataclass
class _OpeningGroup:
    start: float
    end: float
    openings: List[Opening]
    assembly: OpeningAssemblyConfig

    @property
    def last(self) -> Opening:
        return self.openings[-1]


def _same_elevations(a: Opening, b: Opening) -> bool:
    return (
        math.isclose(a.sill_elevation, b.sill_elevation, abs_tol=TOLERANCE)
        and math.isclose(a.header_elevation, b.header_elevation, abs_tol=TOLERANCE)
    )


def valid_openings(
    openings: Sequence[Opening],
    wall_length: float,
    issues: Optional[List[SegmentationIssue]] = None,
) -> List[Opening]:
    """
    Openings that get framed, sorted by offset.

    Openings running past the wall end or overlapping the previous opening are
    left out and reported in ``issues`` when a list is given.
    """
    if issues is None:
        issues = []
    valid: List[Opening] = []
    for opening in sorted(openings, key=lambda o: o.offset_from_start):
        if opening.end > wall_length + TOLERANCE:
            issues.append(SegmentationIssue(
                f"Opening extends beyond wall length: ends at {opening.end:.0f}mm "
                f"but the wall is {wall_length:.0f}mm long",
                opening,
            ))
            continue
        if valid and opening.offset_from_start < valid[-1].end - TOLERANCE:
            issues.append(SegmentationIssue(
                f"Opening overlaps with previous opening {valid[-1].id}",
                opening,
            ))
            continue
        valid.append(opening)
    return valid


def segment_wall(
    construction_start: float,
    construction_end: float,
    wall_length: float,
    openings: Sequence[Opening],
    resolve_assembly: OpeningAssemblyLookup,
) -> WallSegmentation:
    """
    Split a construction window into wall and opening segments.

    Args:
        construction_start: Local x where construction starts (negative when
            the wall builds its start corner)
        construction_end: Local x where construction ends
        wall_length: Length openings must fit into
        openings: Openings of the wall, in any order
        resolve_assembly: Returns the opening assembly for an opening

    Returns:
        WallSegmentation whose segments cover the window exactly, plus issues
        for openings that were left out
    """
    segmentation = WallSegmentation()
    groups: List[_OpeningGroup] = []

    for opening in valid_openings(openings, wall_length, segmentation.issues):
        assembly = resolve_assembly(opening)
        start = max(opening.offset_from_start - assembly.padding, construction_start)
        end = min(opening.end + assembly.padding, construction_end)

        if groups and start <= groups[-1].end:
            previous = groups[-1]
            if _same_elevations(previous.last, opening) and previous.assembly.id == assembly.id:
                previous.end = max(previous.end, end)
                previous.openings.append(opening)
                logger.debug(f"Merged opening {opening.id} into segment with {previous.openings[0].id}")
                continue

            middle = (previous.last.end + opening.offset_from_start) / 2
            previous.end = middle
            start = middle

        groups.append(_OpeningGroup(start, end, [opening], assembly))

    cursor = construction_start
    for group in groups:
        if group.start > cursor:
            segmentation.segments.append(WallSegment(SegmentKind.WALL, cursor, group.start - cursor))
        segmentation.segments.append(WallSegment(
            SegmentKind.OPENING,
            group.start,
            group.end - group.start,
            tuple(group.openings),
            group.assembly,
        ))
        cursor = group.end
    if construction_end > cursor:
        segmentation.segments.append(WallSegment(SegmentKind.WALL, cursor, construction_end - cursor))

    return segmentation


# ============================================================================
# Segmented wall construction
# ============================================================================

def _invalid_opening_area(opening: Opening, finished_floor_z: float, thickness: float) -> HighlightedArea:
    return HighlightedArea(
        area_type="invalid-opening",
        label=opening.id,
        bounds=Bounds3D.from_cuboid(
            (opening.offset_from_start, 0.0, finished_floor_z + opening.sill_elevation),
            (opening.width, thickness, opening.height),
        ),
        tags=(TAG_INVALID_OPENING,),
    )


def resolve_ring_beam(store: ConfigStore, assembly_id: Optional[str]):
    if not assembly_id:
        return None
    ring_beam = store.get_ring_beam_assembly(assembly_id)
    if ring_beam is None:
        raise ConfigurationIntegrityError("ring beam assembly", assembly_id)
    return ring_beam


def segmented_wall_construction(
    wall: PerimeterWall,
    perimeter: Perimeter,
    wall_index: int,
    storey_context: WallStoreyContext,
    wall_assembly: BaseWallAssemblyConfig,
    store: ConfigStore,
    construct_wall_area: WallAreaMethod,
    infill_method: InfillMethod,
) -> ResultStream:
    """
    Construct the structural core of a wall.

    Args:
        wall: The wall
        perimeter: Perimeter containing the wall
        wall_index: Index of the wall in the perimeter
        storey_context: Vertical context of the storey
        wall_assembly: Wall assembly configuration
        store: Configuration snapshot
        construct_wall_area: Builds a wall segment area, second argument
            selects the far end as leading edge
        infill_method: Fills the regions above and below openings

    Yields:
        Plates, wall segment and opening results, measurements and corner areas

    Raises:
        ConfigurationIntegrityError: If a ring beam or opening assembly
            cannot be resolved
    """
    corner_info = calculate_perimeter_wall_corner_info(perimeter, wall_index)
    layers = wall_assembly.layers
    core_start = layers.inside_thickness
    core_depth = wall.thickness - layers.inside_thickness - layers.outside_thickness
    total_height = storey_context.total_construction_height
    finished_floor_z = storey_context.finished_floor_z

    x_start = corner_info.construction_start
    length = corner_info.construction_length

    if core_depth <= 0:
        yield error_result(
            f"Wall is thinner than its layers: {wall.thickness:.0f}mm thick, "
            f"layers need {layers.inside_thickness + layers.outside_thickness:.0f}mm"
        )
        return

    base_beam = resolve_ring_beam(store, perimeter.base_ring_beam_assembly_id)
    top_beam = resolve_ring_beam(store, perimeter.top_ring_beam_assembly_id)
    base_height = base_beam.height if base_beam else 0.0
    top_height = top_beam.height if top_beam else 0.0
    core_height = total_height - base_height - top_height

    if core_height <= 0:
        yield error_result(
            f"Ring beams leave no wall height: {total_height:.0f}mm total, "
            f"plates need {base_height + top_height:.0f}mm"
        )
        return

    if base_beam:
        yield from construct_ring_beam(
            WallConstructionArea((x_start, core_start, 0.0), (length, core_depth, base_height)),
            base_beam,
            [TAG_BASE_PLATE],
        )
    if top_beam:
        yield from construct_ring_beam(
            WallConstructionArea((x_start, core_start, total_height - top_height), (length, core_depth, top_height)),
            top_beam,
            [TAG_TOP_PLATE],
        )

    wall_area = WallConstructionArea((x_start, core_start, base_height), (length, core_depth, core_height))

    segmentation = segment_wall(
        x_start,
        x_start + length,
        wall.wall_length,
        wall.openings,
        lambda opening: resolve_opening_assembly(opening, wall_assembly, store).assembly,
    )
    logger.debug(
        f"Wall {wall.id}: {len(segmentation.wall_segments)} wall segments, "
        f"{len(segmentation.opening_segments)} opening segments"
    )

    for issue in segmentation.issues:
        yield area_result(_invalid_opening_area(issue.opening, finished_floor_z, wall.thickness))
        yield error_result(issue.description)

    yield measurement_result(create_measurement(
        (x_start, wall.thickness, total_height),
        (x_start + length, wall.thickness, total_height),
        tags=[TAG_WALL_LENGTH],
    ))

    segments = segmentation.segments
    wall_segment_count = 0
    for index, segment in enumerate(segments):
        segment_area = wall_area.with_x_adjustment(segment.start - x_start, segment.width)

        if segment.kind is SegmentKind.WALL:
            start_at_end = wall_segment_count % 2 == 1
            wall_segment_count += 1
            yield from construct_wall_area(segment_area, start_at_end)

            borders_opening = any(
                0 <= neighbour < len(segments) and segments[neighbour].kind is SegmentKind.OPENING
                for neighbour in (index - 1, index + 1)
            )
            if borders_opening:
                yield measurement_result(create_measurement(
                    (segment.start, 0.0, base_height),
                    (segment.end, 0.0, base_height),
                    tags=[TAG_OPENING_SPACING],
                ))
            continue

        first = segment.openings[0]
        if index > 0 and segments[index - 1].kind is SegmentKind.OPENING:
            # Split neighbours: measure the clear gap between the two openings
            yield measurement_result(create_measurement(
                (segments[index - 1].openings[-1].end, 0.0, base_height),
                (first.offset_from_start, 0.0, base_height),
                tags=[TAG_OPENING_SPACING],
            ))

        assembly = create_opening_assembly(segment.assembly)
        adjusted_header = finished_floor_z + first.header_elevation + assembly.padding
        if first.sill_height:
            adjusted_sill = finished_floor_z + first.sill_elevation - assembly.padding
        else:
            adjusted_sill = wall_area.start("z")

        yield from assembly.construct(
            segment_area,
            segment.openings,
            adjusted_header,
            adjusted_sill,
            finished_floor_z,
            infill_method,
        )

    yield from construct_corner_areas(corner_info, wall.wall_length, wall.thickness, total_height)
