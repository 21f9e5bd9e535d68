# File: src/strawbale_construction/walls/modules.py
"""
Prefabricated module construction.

A module is a timber frame block of fixed width, filled with straw, that is
reported as one ConstructionGroup. Two wall assembly types place modules:

- **modules**: whole modules tiled end to end from the leading edge, the
  remainder filled with posts and straw.
- **strawhenge**: a module at each end of the segment, then straw fields and
  modules alternating inwards, the leading edge switching sides each step;
  once a field and a module no longer both fit, the rest is infill.

Usage:
    group = construct_module(area, SingleModuleConfig(), "straw")
    results = module_wall_area(area, module, infill, straw_material)
"""

from typing import List

from ..config.schemas import DoubleModuleConfig, InfillConfig, SingleModuleConfig
from ..core.elements import ConstructionElement, ConstructionGroup, create_element_from_area, create_group
from ..core.measurements import create_measurement
from ..core.results import ResultStream, element_result, error_result, measurement_result
from ..core.tags import (
    TAG_MODULE,
    TAG_MODULE_FRAME,
    TAG_MODULE_INFILL,
    TAG_MODULE_SPACER,
    TAG_MODULE_WIDTH,
    TAG_STRAW_INFILL,
)
from ..geometry.area import WallConstructionArea
from ..materials.material import BaseMaterial
from ..utils.logging_config import get_logger
from .infill import infill_wall_area

logger = get_logger(__name__)


# ============================================================================
# Single modules
# ============================================================================

def _frame_members(area: WallConstructionArea, module: SingleModuleConfig) -> List[ConstructionElement]:
    """Bottom, top, left and right frame members within the area's depth."""
    ft = module.frame_thickness
    inner_height = area.height - 2 * ft
    members = [
        area.with_z_adjustment(0, ft),
        area.with_z_adjustment(area.height - ft, ft),
        area.with_x_adjustment(0, ft).with_z_adjustment(ft, inner_height),
        area.with_x_adjustment(area.width - ft, ft).with_z_adjustment(ft, inner_height),
    ]
    return [create_element_from_area(member, module.frame_material, [TAG_MODULE_FRAME]) for member in members]


def _straw_core(area: WallConstructionArea, module: SingleModuleConfig, straw_material: str) -> ConstructionElement:
    ft = module.frame_thickness
    core = area.with_x_adjustment(ft, area.width - 2 * ft).with_z_adjustment(ft, area.height - 2 * ft)
    return create_element_from_area(core, straw_material, [TAG_STRAW_INFILL])


def _construct_single_module(area, module, straw_material):
    children = _frame_members(area, module)
    children.append(_straw_core(area, module, straw_material))
    return children


# ============================================================================
# Double modules
# ============================================================================

def _construct_double_module(area: WallConstructionArea, module: DoubleModuleConfig, straw_material: str):
    ft = module.frame_thickness
    fw = module.frame_width
    gap = area.thickness - 2 * fw

    inner_frame = area.with_y_adjustment(0, fw)
    outer_frame = area.with_y_adjustment(area.thickness - fw, fw)
    children = _frame_members(inner_frame, module) + _frame_members(outer_frame, module)
    children.append(_straw_core(area, module, straw_material))

    if gap <= 0:
        return children

    between = area.with_y_adjustment(fw, gap)
    count = module.spacer_count
    step = (area.height - 2 * ft - module.spacer_size) / (count - 1)
    spacer_z = [ft + index * step for index in range(count)]

    for column in (between.with_x_adjustment(0, ft), between.with_x_adjustment(area.width - ft, ft)):
        for z in spacer_z:
            spacer = column.with_z_adjustment(z, module.spacer_size)
            children.append(create_element_from_area(spacer, module.spacer_material, [TAG_MODULE_SPACER]))
        for lower, upper in zip(spacer_z, spacer_z[1:]):
            gap_start = lower + module.spacer_size
            if upper > gap_start:
                infill = column.with_z_adjustment(gap_start, upper - gap_start)
                children.append(create_element_from_area(infill, module.infill_material, [TAG_MODULE_INFILL]))

    for strip in (between.with_z_adjustment(0, ft), between.with_z_adjustment(area.height - ft, ft)):
        children.append(create_element_from_area(strip, module.infill_material, [TAG_MODULE_INFILL]))

    return children


def construct_module(
    area: WallConstructionArea,
    module: SingleModuleConfig,
    straw_material: str,
) -> ConstructionGroup:
    """
    Build one module filling the given area.

    Args:
        area: Module area; its width is normally the module width
        module: Module configuration
        straw_material: Material id for the straw core

    Returns:
        ConstructionGroup tagged as module

    Raises:
        ValueError: For an unknown module type
    """
    if module.type == "single":
        children = _construct_single_module(area, module, straw_material)
    elif module.type == "double":
        children = _construct_double_module(area, module, straw_material)
    else:
        raise ValueError("Invalid module type")
    return create_group(children, tags=[TAG_MODULE])


# ============================================================================
# Placement
# ============================================================================

def _module_fit_error(area: WallConstructionArea, module: SingleModuleConfig):
    if area.height <= 2 * module.frame_thickness:
        return "Not enough height for a module"
    if isinstance(module, DoubleModuleConfig) and area.thickness < 2 * module.frame_width:
        return "Wall is too thin for a double module"
    return None


def _place_module(area: WallConstructionArea, module: SingleModuleConfig, straw: BaseMaterial) -> ResultStream:
    group = construct_module(area, module, module.straw_material or straw.id)
    logger.trace(f"Module at x {area.start('x'):.0f}-{area.end('x'):.0f}")
    yield element_result(group)
    bottom = area.start("z")
    yield measurement_result(create_measurement(
        (area.start("x"), area.start("y"), bottom),
        (area.end("x"), area.start("y"), bottom),
        tags=[TAG_MODULE_WIDTH],
    ))


def module_wall_area(
    area: WallConstructionArea,
    module: SingleModuleConfig,
    infill: InfillConfig,
    straw: BaseMaterial,
    start_at_end: bool = False,
) -> ResultStream:
    """
    Tile whole modules from the leading edge and infill the remainder.

    Args:
        area: Wall segment area
        module: Module configuration
        infill: Infill rules for the remainder
        straw: Straw material
        start_at_end: Tile from the far end

    Yields:
        Module groups, infill results and module-width measurements
    """
    if area.is_empty:
        return

    fit_error = _module_fit_error(area, module)
    count = int(area.width // module.width)
    if fit_error and count:
        yield error_result(fit_error)
    if fit_error or count == 0:
        yield from infill_wall_area(area, infill, straw, start_at_end)
        return

    modules_width = count * module.width
    remainder = area.width - modules_width
    first_x = remainder if start_at_end else 0.0
    logger.debug(f"Tiling {count} modules, remainder {remainder:.0f}")

    for index in range(count):
        yield from _place_module(area.with_x_adjustment(first_x + index * module.width, module.width), module, straw)

    if remainder > 0:
        remainder_x = 0.0 if start_at_end else modules_width
        yield from infill_wall_area(area.with_x_adjustment(remainder_x, remainder), infill, straw, start_at_end)


def _fill_between_modules(
    area: WallConstructionArea,
    module: SingleModuleConfig,
    infill: InfillConfig,
    straw: BaseMaterial,
    at_start: bool,
) -> ResultStream:
    field_width = infill.max_post_spacing
    if area.width < field_width + module.width:
        yield from infill_wall_area(area, infill, straw, start_at_end=not at_start)
        return

    if at_start:
        field_area = area.with_x_adjustment(0, field_width)
        module_area = area.with_x_adjustment(field_width, module.width)
        rest = area.with_x_adjustment(field_width + module.width)
    else:
        field_area = area.with_x_adjustment(area.width - field_width, field_width)
        module_area = area.with_x_adjustment(area.width - field_width - module.width, module.width)
        rest = area.with_x_adjustment(0, area.width - field_width - module.width)

    yield from infill_wall_area(field_area, infill, straw)
    yield from _place_module(module_area, module, straw)
    yield from _fill_between_modules(rest, module, infill, straw, not at_start)


def strawhenge_wall_area(
    area: WallConstructionArea,
    module: SingleModuleConfig,
    infill: InfillConfig,
    straw: BaseMaterial,
    start_at_end: bool = False,
) -> ResultStream:
    """
    Modules at both ends of the segment, straw fields and modules alternating
    between them.

    A segment narrower than one module is pure infill. A segment that fits
    one module but not two gets one at the leading edge and infill for the rest.
    """
    if area.is_empty:
        return

    fit_error = _module_fit_error(area, module)
    if fit_error and area.width >= module.width:
        yield error_result(fit_error)
    if fit_error or area.width < module.width:
        yield from infill_wall_area(area, infill, straw, start_at_end)
        return

    width = area.width
    leading_x = width - module.width if start_at_end else 0.0
    yield from _place_module(area.with_x_adjustment(leading_x, module.width), module, straw)

    if width - module.width < module.width:
        rest_x = 0.0 if start_at_end else module.width
        yield from infill_wall_area(
            area.with_x_adjustment(rest_x, width - module.width), infill, straw, start_at_end
        )
        return

    trailing_x = 0.0 if start_at_end else width - module.width
    yield from _place_module(area.with_x_adjustment(trailing_x, module.width), module, straw)

    middle = area.with_x_adjustment(module.width, width - 2 * module.width)
    if middle.width > 0:
        yield from _fill_between_modules(middle, module, infill, straw, at_start=not start_at_end)
