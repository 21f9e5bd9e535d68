"""Wall construction: segmentation, infill, modules, openings, layers and placement."""

from .assemblies import (
    InfillWallAssembly,
    ModulesWallAssembly,
    NonStrawbaleWallAssembly,
    StrawhengeWallAssembly,
    WallAssembly,
)
from .construction import WALL_ASSEMBLY_IMPLEMENTATIONS, construct_wall, create_wall_assembly
from .context import WallStoreyContext, create_wall_storey_context
from .corners import WallCornerInfo, calculate_perimeter_wall_corner_info, calculate_wall_corner_info
from .infill import InfillPlan, InfillSpan, SpanKind, infill_wall_area, plan_infill_spans
from .layers import construct_wall_layers
from .modules import construct_module, module_wall_area, strawhenge_wall_area
from .openings import create_opening_assembly
from .perimeter import construct_perimeter, wall_placement
from .posts import construct_post
from .ring_beams import construct_ring_beam
from .segmentation import SegmentKind, WallSegment, segment_wall

__all__ = [
    'InfillWallAssembly',
    'ModulesWallAssembly',
    'NonStrawbaleWallAssembly',
    'StrawhengeWallAssembly',
    'WallAssembly',
    'WALL_ASSEMBLY_IMPLEMENTATIONS',
    'construct_wall',
    'create_wall_assembly',
    'WallStoreyContext',
    'create_wall_storey_context',
    'WallCornerInfo',
    'calculate_perimeter_wall_corner_info',
    'calculate_wall_corner_info',
    'InfillPlan',
    'InfillSpan',
    'SpanKind',
    'infill_wall_area',
    'plan_infill_spans',
    'construct_wall_layers',
    'construct_module',
    'module_wall_area',
    'strawhenge_wall_area',
    'create_opening_assembly',
    'construct_perimeter',
    'wall_placement',
    'construct_post',
    'construct_ring_beam',
    'SegmentKind',
    'WallSegment',
    'segment_wall',
]
