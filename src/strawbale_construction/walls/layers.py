# File: src/strawbale_construction/walls/layers.py
"""
Cladding layer construction.

Inside and outside layers (plaster, boards, battens) are laid out as 2D
polygons in the wall's xz plane, with the openings cut out as holes, and
extruded through their thickness along y. Polygon clipping uses shapely.

Layer extents along the wall:
- Outside layers follow the outside line, inside layers the inside line.
- At a corner the wall builds, the layer runs on towards the corner point,
  stopping where the neighbour's layers of the same side begin.
- At a corner the neighbour builds, the layer is pulled back by the
  neighbour's layer thickness so the two do not overlap.
"""

import math
from typing import Iterator, List, Optional, Tuple

from shapely import affinity
from shapely.geometry import GeometryCollection, MultiPolygon, Polygon, box
from shapely.ops import unary_union

from ..building.records import Perimeter, PerimeterCorner, PerimeterWall
from ..config.schemas import (
    BaseWallAssemblyConfig,
    LayerConfig,
    MonolithicLayerConfig,
    StripedLayerConfig,
)
from ..config.store import ConfigStore
from ..core.elements import ExtrudedPolygon, create_element
from ..core.errors import ConfigurationIntegrityError
from ..core.model import ConstructionModel
from ..core.results import ResultStream, build_construction_model, element_result
from ..core.tags import TAG_LAYER_INSIDE, TAG_LAYER_OUTSIDE, Tag, create_layer_tag
from ..geometry.transform import Transform, distance_2d
from ..utils.logging_config import get_logger
from .context import WallStoreyContext
from .corners import owns_end_corner, owns_start_corner
from .segmentation import resolve_ring_beam, valid_openings

logger = get_logger(__name__)

# Polygons smaller than this (mm²) are clipping slivers
MIN_PART_AREA = 1e-3


def _polygon_parts(geometry) -> Iterator[Polygon]:
    if geometry.is_empty:
        return
    if isinstance(geometry, Polygon):
        if geometry.area > MIN_PART_AREA:
            yield geometry
    elif isinstance(geometry, (MultiPolygon, GeometryCollection)):
        for part in geometry.geoms:
            yield from _polygon_parts(part)


def _extruded_polygon(part: Polygon, thickness: float) -> ExtrudedPolygon:
    return ExtrudedPolygon(
        outer=tuple(part.exterior.coords)[:-1],
        holes=tuple(tuple(ring.coords)[:-1] for ring in part.interiors),
        plane="xz",
        thickness=thickness,
    )


def _layer_elements(geometry, material: str, thickness: float, y: float, tags: List[Tag]) -> ResultStream:
    for part in _polygon_parts(geometry):
        yield element_result(create_element(
            material,
            _extruded_polygon(part, thickness),
            transform=Transform.translate(y=y),
            tags=tags,
        ))


# ============================================================================
# Stripes
# ============================================================================

def _stripe_boxes(min_u: float, max_u: float, min_v: float, max_v: float, stripe: float, gap: float) -> List[Polygon]:
    stripes = []
    u = min_u
    while u < max_u:
        stripes.append(box(u, min_v, min(u + stripe, max_u), max_v))
        u += stripe + gap
    return stripes


def _stripes(polygon: Polygon, layer: StripedLayerConfig):
    min_x, min_z, max_x, max_z = polygon.bounds
    stripe, gap = layer.stripe_width, layer.gap_width

    if layer.direction == "perpendicular":
        stripes = _stripe_boxes(min_x, max_x, min_z, max_z, stripe, gap)
    elif layer.direction == "colinear":
        stripes = []
        z = min_z
        while z < max_z:
            stripes.append(box(min_x, z, max_x, min(z + stripe, max_z)))
            z += stripe + gap
    else:
        centre = ((min_x + max_x) / 2, (min_z + max_z) / 2)
        half = math.hypot(max_x - min_x, max_z - min_z) / 2
        square = _stripe_boxes(centre[0] - half, centre[0] + half, centre[1] - half, centre[1] + half, stripe, gap)
        stripes = [affinity.rotate(s, layer.angle - 90, origin=centre) for s in square]

    return unary_union(stripes).intersection(polygon)


def _construct_layer(polygon: Polygon, layer: LayerConfig, y: float, side_tag: Tag) -> ResultStream:
    tags = [side_tag, create_layer_tag(layer.name)]

    if isinstance(layer, MonolithicLayerConfig):
        yield from _layer_elements(polygon, layer.material, layer.thickness, y, tags)
        return

    stripes = _stripes(polygon, layer)
    yield from _layer_elements(stripes, layer.stripe_material, layer.thickness, y, tags)
    if layer.gap_material is not None and layer.gap_width > 0:
        yield from _layer_elements(polygon.difference(stripes), layer.gap_material, layer.thickness, y, tags)


# ============================================================================
# Layer polygons
# ============================================================================

def _neighbour_layers(store: ConfigStore, wall: PerimeterWall):
    assembly = store.get_wall_assembly(wall.wall_assembly_id)
    if assembly is None:
        raise ConfigurationIntegrityError("wall assembly", wall.wall_assembly_id)
    return assembly.layers


def _corner_offset(
    line_point,
    corner: Optional[PerimeterCorner],
    owned: bool,
    corner_point_attr: str,
    neighbour_thickness: float,
) -> float:
    if corner is None:
        return 0.0
    delta = distance_2d(line_point, getattr(corner, corner_point_attr)) - neighbour_thickness
    return max(delta, 0.0) if owned else min(delta, 0.0)


def layer_extent(
    wall: PerimeterWall,
    perimeter: Perimeter,
    wall_index: int,
    store: ConfigStore,
    side: str,
) -> Tuple[float, float]:
    """
    Local x range a layer side covers.

    Args:
        side: "inside" or "outside"

    Raises:
        ConfigurationIntegrityError: If a neighbouring wall's assembly is missing
    """
    start_corner = perimeter.start_corner(wall_index)
    end_corner = perimeter.end_corner(wall_index)
    previous_layers = _neighbour_layers(store, perimeter.previous_wall(wall_index))
    next_layers = _neighbour_layers(store, perimeter.next_wall(wall_index))

    if side == "inside":
        line = wall.inside_line
        point_attr = "inside_point"
        previous_thickness = previous_layers.inside_thickness
        next_thickness = next_layers.inside_thickness
    else:
        line = wall.outside_line
        point_attr = "outside_point"
        previous_thickness = previous_layers.outside_thickness
        next_thickness = next_layers.outside_thickness

    start_offset = _corner_offset(
        line.start, start_corner, owns_start_corner(start_corner), point_attr, previous_thickness
    )
    end_offset = _corner_offset(
        line.end, end_corner, owns_end_corner(end_corner), point_attr, next_thickness
    )
    return (
        wall.project_onto_axis(line.start) - start_offset,
        wall.project_onto_axis(line.end) + end_offset,
    )


def layer_polygon(
    wall: PerimeterWall,
    start: float,
    end: float,
    bottom: float,
    top: float,
    finished_floor_z: float,
) -> Polygon:
    """Layer rectangle in the xz plane with the framed openings cut out."""
    outline = box(start, bottom, end, top)
    holes = [
        box(
            opening.offset_from_start,
            finished_floor_z + opening.sill_elevation,
            opening.end,
            finished_floor_z + opening.header_elevation,
        )
        for opening in valid_openings(wall.openings, wall.wall_length)
    ]
    if not holes:
        return outline
    return outline.difference(unary_union(holes))


def construct_wall_layers(
    wall: PerimeterWall,
    perimeter: Perimeter,
    wall_index: int,
    storey_context: WallStoreyContext,
    wall_assembly: BaseWallAssemblyConfig,
    store: ConfigStore,
) -> ConstructionModel:
    """
    Construct the inside and outside layers of a wall in its local frame.

    Layers are stacked outwards from the core: inside layers towards y = 0,
    outside layers towards y = thickness. Vertically they cover the wall
    between the base and top plates.

    Raises:
        ConfigurationIntegrityError: If a ring beam or neighbouring wall
            assembly cannot be found
    """
    layers = wall_assembly.layers
    if not layers.inside_layers and not layers.outside_layers:
        return ConstructionModel.empty()

    base_beam = resolve_ring_beam(store, perimeter.base_ring_beam_assembly_id)
    top_beam = resolve_ring_beam(store, perimeter.top_ring_beam_assembly_id)
    bottom = base_beam.height if base_beam else 0.0
    top = storey_context.total_construction_height - (top_beam.height if top_beam else 0.0)
    if top <= bottom:
        return ConstructionModel.empty()

    def results() -> ResultStream:
        if layers.inside_layers:
            start, end = layer_extent(wall, perimeter, wall_index, store, "inside")
            polygon = layer_polygon(wall, start, end, bottom, top, storey_context.finished_floor_z)
            y = layers.inside_thickness
            for layer in layers.inside_layers:
                y -= layer.thickness
                yield from _construct_layer(polygon, layer, y, TAG_LAYER_INSIDE)

        if layers.outside_layers:
            start, end = layer_extent(wall, perimeter, wall_index, store, "outside")
            polygon = layer_polygon(wall, start, end, bottom, top, storey_context.finished_floor_z)
            y = wall.thickness - layers.outside_thickness
            for layer in layers.outside_layers:
                yield from _construct_layer(polygon, layer, y, TAG_LAYER_OUTSIDE)
                y += layer.thickness

    model = build_construction_model(results())
    logger.debug(f"Wall {wall.id}: {len(model.elements)} layer elements")
    return model
