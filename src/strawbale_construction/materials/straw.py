# File: src/strawbale_construction/materials/straw.py
"""
Straw packing: fills a rectangular void with bales, bale pieces, flakes or
stuffed straw.

The void's thickness decides whether bales fit at all. When it matches the
bale width, the void is filled with horizontal courses (or bales on end for
a void exactly one bale-height wide), and every piece is classified by how
much of a whole bale it is.

Usage:
    results = construct_straw(area, straw_material)
"""

from typing import List, Optional, Tuple

from ..core.elements import create_element_from_area
from ..core.results import ResultStream, element_result, error_result, warning_result
from ..core.tags import TAG_FLAKES, TAG_FULL_BALE, TAG_PARTIAL_BALE, TAG_STUFFED, Tag
from ..geometry.area import WallConstructionArea
from ..geometry.transform import Vec3
from ..utils.logging_config import get_logger
from .material import BaseMaterial, StrawbaleMaterial

logger = get_logger(__name__)


def _within(value: float, target: float, tolerance: float) -> bool:
    return abs(value - target) <= tolerance


def get_straw_tags(
    size: Vec3,
    straw: StrawbaleMaterial,
    upright: Optional[bool] = None,
) -> Tuple[Tag, ...]:
    """
    Classifies a straw piece by how much of a whole bale it is.

    Args:
        size: Piece size (along wall, through wall, vertical)
        straw: Bale dimensions
        upright: Whether the bale stands on end (its height running along the
            wall). Detected from the size when not given.

    Returns:
        A single-tag tuple: full bale, partial bale, flakes or stuffed
    """
    tolerance = straw.tolerance
    if not _within(size[1], straw.bale_width, tolerance):
        return (TAG_STUFFED,)

    if upright is None:
        upright = _within(size[0], straw.bale_height, tolerance)
    length, height = (size[2], size[0]) if upright else (size[0], size[2])

    full_length = straw.bale_min_length - tolerance <= length <= straw.bale_max_length + tolerance

    if _within(height, straw.bale_height, tolerance):
        if full_length:
            return (TAG_FULL_BALE,)
        if length > straw.bale_min_length / 2:
            return (TAG_PARTIAL_BALE,)
        if length >= straw.flake_size:
            return (TAG_FLAKES,)
        return (TAG_STUFFED,)

    if height > straw.bale_height - straw.top_cutoff_limit and length >= straw.flake_size:
        return (TAG_PARTIAL_BALE,) if full_length else (TAG_FLAKES,)

    return (TAG_STUFFED,)


def _stuffed(area: WallConstructionArea, material_id: str):
    return create_element_from_area(area, material_id, [TAG_STUFFED])


def _plan_courses(height: float, straw: StrawbaleMaterial) -> Tuple[List[Tuple[float, float]], float]:
    """
    Splits a void height into horizontal courses.

    Returns:
        ([(z_offset, course_height), ...], top_row_height) where top_row_height
        is the height left for a row of upright pieces (0 when there is none)
    """
    bale_height = straw.bale_height
    full_courses = int(height // bale_height)
    remainder = height - full_courses * bale_height
    courses = [(index * bale_height, bale_height) for index in range(full_courses)]

    if remainder <= 0:
        return courses, 0.0

    if bale_height - remainder < straw.top_cutoff_limit:
        # Last course is a bale cut down by less than the cutoff limit
        courses.append((full_courses * bale_height, remainder))
        return courses, 0.0

    if remainder > straw.flake_size:
        return courses, remainder

    if courses:
        z_offset, _ = courses[-1]
        courses[-1] = (z_offset, bale_height + remainder)
        return courses, 0.0

    # Thin void with nothing to absorb the remainder into
    return [(0.0, remainder)], 0.0


def _construct_upright_bales(area: WallConstructionArea, straw: StrawbaleMaterial) -> ResultStream:
    z = 0.0
    while z < area.height:
        piece = area.with_z_adjustment(z, straw.bale_max_length)
        yield element_result(create_element_from_area(
            piece, straw.id, get_straw_tags(piece.size, straw, upright=True)
        ))
        z += straw.bale_max_length


def _construct_courses(area: WallConstructionArea, straw: StrawbaleMaterial) -> ResultStream:
    courses, top_row_height = _plan_courses(area.height, straw)
    logger.trace(f"Straw void {area.width:.0f}x{area.height:.0f}: {len(courses)} courses, top row {top_row_height:.0f}")

    for z_offset, course_height in courses:
        course = area.with_z_adjustment(z_offset, course_height)
        if len(courses) == 1 and course_height <= straw.flake_size:
            yield element_result(_stuffed(course, straw.id))
            continue

        x = 0.0
        while x < course.width:
            piece = course.with_x_adjustment(x, straw.bale_max_length)
            yield element_result(create_element_from_area(
                piece, straw.id, get_straw_tags(piece.size, straw, upright=False)
            ))
            x += straw.bale_max_length

    if top_row_height > 0:
        top_row = area.with_z_adjustment(area.height - top_row_height)
        x = 0.0
        while x < top_row.width:
            piece = top_row.with_x_adjustment(x, straw.bale_height)
            if _within(piece.width, straw.bale_height, straw.tolerance):
                tags = get_straw_tags(piece.size, straw, upright=True)
            elif piece.width >= straw.flake_size:
                tags = (TAG_FLAKES,)
            else:
                tags = (TAG_STUFFED,)
            yield element_result(create_element_from_area(piece, straw.id, tags))
            x += straw.bale_height


def construct_straw(area: WallConstructionArea, material: BaseMaterial) -> ResultStream:
    """
    Fills a void with straw.

    Args:
        area: The void to fill
        material: Straw material; anything other than a straw bale material
            fills the void with one stuffed element

    Yields:
        Straw elements plus an error when the void is too thick for a bale,
        or a warning when it is too thin
    """
    if area.is_empty:
        return

    if not isinstance(material, StrawbaleMaterial):
        yield element_result(_stuffed(area, material.id))
        return

    straw = material
    thickness = area.thickness

    if thickness > straw.bale_width + straw.tolerance:
        element = _stuffed(area, straw.id)
        yield element_result(element)
        yield error_result("Wall is too thick for a single strawbale", [element])
        return

    if thickness < straw.bale_width - straw.tolerance:
        element = _stuffed(area, straw.id)
        yield element_result(element)
        yield warning_result("Wall is too thin for a single strawbale", [element])
        return

    if area.width < straw.flake_size or area.height < straw.flake_size:
        yield element_result(_stuffed(area, straw.id))
        return

    if _within(area.width, straw.bale_height, straw.tolerance):
        yield from _construct_upright_bales(area, straw)
    else:
        yield from _construct_courses(area, straw)
