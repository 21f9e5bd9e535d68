# File: src/strawbale_construction/config/defaults.py
"""
Default catalog of materials and assemblies.

These are the records a fresh project starts with. ConfigStore.from_defaults()
builds a store from them; projects add or replace entries by id.
"""

from ..materials.material import (
    DimensionalMaterial,
    GenericMaterial,
    SheetMaterial,
    StrawbaleMaterial,
)
from .schemas import (
    DoublePostConfig,
    DoubleRingBeamConfig,
    EmptyOpeningAssemblyConfig,
    FloorAssemblyConfig,
    FullPostConfig,
    FullRingBeamConfig,
    InfillConfig,
    InfillWallAssemblyConfig,
    ModulesWallAssemblyConfig,
    MonolithicLayerConfig,
    NonStrawbaleWallAssemblyConfig,
    SimpleOpeningAssemblyConfig,
    SingleModuleConfig,
    StrawhengeWallAssemblyConfig,
    StripedLayerConfig,
    WallLayersConfig,
)

# ============================================================================
# Materials
# ============================================================================

DEFAULT_STRAW_MATERIAL_ID = "straw"

DEFAULT_MATERIALS = {
    "straw": StrawbaleMaterial(id="straw", name="Straw bale", color="#e8c66a"),
    "wood": DimensionalMaterial(id="wood", name="Construction timber", color="#c49a6c",
                                width=60, thickness=120),
    "wood_fiber": GenericMaterial(id="wood_fiber", name="Wood fibre insulation", color="#a67b5b"),
    "osb": SheetMaterial(id="osb", name="OSB board", color="#d9b380", thickness=15),
    "clay_plaster": GenericMaterial(id="clay_plaster", name="Clay plaster", color="#b5835a"),
    "lime_plaster": GenericMaterial(id="lime_plaster", name="Lime plaster", color="#f2efe6"),
    "concrete": GenericMaterial(id="concrete", name="Concrete", color="#9e9e9e"),
    "glass": GenericMaterial(id="glass", name="Glazing", color="#a8d8ea"),
}

# ============================================================================
# Opening assemblies
# ============================================================================

DEFAULT_OPENING_ASSEMBLY_ID = "oa_simple_default"

DEFAULT_OPENING_ASSEMBLIES = {
    "oa_simple_default": SimpleOpeningAssemblyConfig(
        id="oa_simple_default",
        name="Simple frame",
        padding=15,
        header_thickness=60,
        header_material="wood",
        sill_thickness=60,
        sill_material="wood",
    ),
    "oa_empty_default": EmptyOpeningAssemblyConfig(
        id="oa_empty_default",
        name="Empty opening",
        padding=15,
    ),
}

# ============================================================================
# Wall assemblies
# ============================================================================

DEFAULT_LAYERS = WallLayersConfig(
    inside_layers=[MonolithicLayerConfig(name="Clay plaster", thickness=30, material="clay_plaster")],
    outside_layers=[MonolithicLayerConfig(name="Lime plaster", thickness=30, material="lime_plaster")],
)

DEFAULT_WALL_ASSEMBLIES = {
    "wa_infill_default": InfillWallAssemblyConfig(
        id="wa_infill_default",
        name="Post and infill",
        infill=InfillConfig(max_post_spacing=900, min_straw_space=70, posts=FullPostConfig(width=60)),
        layers=DEFAULT_LAYERS,
    ),
    "wa_infill_double_post": InfillWallAssemblyConfig(
        id="wa_infill_double_post",
        name="Post and infill (double posts)",
        infill=InfillConfig(posts=DoublePostConfig(width=60, thickness=120)),
        layers=DEFAULT_LAYERS,
    ),
    "wa_strawhenge_default": StrawhengeWallAssemblyConfig(
        id="wa_strawhenge_default",
        name="Strawhenge",
        module=SingleModuleConfig(width=920, frame_thickness=60),
        infill=InfillConfig(),
        layers=DEFAULT_LAYERS,
    ),
    "wa_modules_default": ModulesWallAssemblyConfig(
        id="wa_modules_default",
        name="Modules",
        module=SingleModuleConfig(width=920, frame_thickness=60),
        infill=InfillConfig(),
        layers=WallLayersConfig(
            inside_layers=[MonolithicLayerConfig(name="Clay plaster", thickness=30, material="clay_plaster")],
            outside_layers=[
                StripedLayerConfig(name="Battens", thickness=30, direction="perpendicular",
                                   stripe_width=50, stripe_material="wood", gap_width=450),
            ],
        ),
    ),
    "wa_non_strawbale_default": NonStrawbaleWallAssemblyConfig(
        id="wa_non_strawbale_default",
        name="Concrete wall",
        material="concrete",
    ),
}

# ============================================================================
# Ring beams and floors
# ============================================================================

DEFAULT_RING_BEAM_ASSEMBLIES = {
    "rb_full_default": FullRingBeamConfig(id="rb_full_default", name="Full ring beam",
                                          height=60, width=360),
    "rb_double_default": DoubleRingBeamConfig(id="rb_double_default", name="Double ring beam",
                                              height=120, thickness=120),
}

DEFAULT_FLOOR_ASSEMBLIES = {
    "fa_concrete_default": FloorAssemblyConfig(
        id="fa_concrete_default",
        name="Concrete slab",
        type="monolithic",
        construction_thickness=200,
        top_layers_thickness=60,
    ),
    "fa_joist_default": FloorAssemblyConfig(
        id="fa_joist_default",
        name="Timber joists",
        type="joist",
        construction_thickness=240,
        top_layers_thickness=40,
        bottom_layers_thickness=25,
    ),
}
