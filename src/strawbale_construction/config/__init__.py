"""Configuration schemas, the default catalog, the config store and resolvers."""

from .defaults import (
    DEFAULT_OPENING_ASSEMBLY_ID,
    DEFAULT_STRAW_MATERIAL_ID,
)
from .opening_resolver import OpeningAssemblyResolution, resolve_opening_assembly
from .schemas import (
    DoubleModuleConfig,
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
    WallAssemblyType,
    WallLayersConfig,
)
from .store import ConfigStore

__all__ = [
    "DEFAULT_OPENING_ASSEMBLY_ID",
    "DEFAULT_STRAW_MATERIAL_ID",
    "OpeningAssemblyResolution",
    "resolve_opening_assembly",
    "DoubleModuleConfig",
    "DoublePostConfig",
    "DoubleRingBeamConfig",
    "EmptyOpeningAssemblyConfig",
    "FloorAssemblyConfig",
    "FullPostConfig",
    "FullRingBeamConfig",
    "InfillConfig",
    "InfillWallAssemblyConfig",
    "ModulesWallAssemblyConfig",
    "MonolithicLayerConfig",
    "NonStrawbaleWallAssemblyConfig",
    "SimpleOpeningAssemblyConfig",
    "SingleModuleConfig",
    "StrawhengeWallAssemblyConfig",
    "StripedLayerConfig",
    "WallAssemblyType",
    "WallLayersConfig",
    "ConfigStore",
]
