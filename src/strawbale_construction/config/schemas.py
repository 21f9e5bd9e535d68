# File: src/strawbale_construction/config/schemas.py
"""
Configuration schemas for wall, opening, ring-beam and floor assemblies.

All models are frozen pydantic models. Assemblies of different kinds share a
``type`` field that acts as discriminator, so a plain dict (for example loaded
from JSON) validates straight into the right class.

Usage:
    config = InfillWallAssemblyConfig(id="wa_infill", name="Infill",
                                      infill=InfillConfig(max_post_spacing=800))
"""

from enum import Enum
from typing import Annotated, List, Literal, Optional, Union

from pydantic import BaseModel, ConfigDict, Field, model_validator


class FrozenModel(BaseModel):
    model_config = ConfigDict(frozen=True)


# ============================================================================
# Posts and infill
# ============================================================================

class FullPostConfig(FrozenModel):
    """Single solid post through the full core depth."""
    type: Literal["full"] = "full"
    width: float = Field(default=60, gt=0, description="Post width along the wall")
    material: str = "wood"


class DoublePostConfig(FrozenModel):
    """Two posts on the core faces with insulation between them."""
    type: Literal["double"] = "double"
    width: float = Field(default=60, gt=0, description="Post width along the wall")
    thickness: float = Field(default=120, gt=0, description="Depth of each post through the wall")
    material: str = "wood"
    infill_material: str = "wood_fiber"


PostConfig = Annotated[Union[FullPostConfig, DoublePostConfig], Field(discriminator="type")]


class InfillConfig(FrozenModel):
    """Post and straw spacing rules for infill construction."""
    max_post_spacing: float = Field(default=900, gt=0, description="Widest straw span between posts")
    min_straw_space: float = Field(default=70, gt=0, description="Narrowest straw span worth filling")
    posts: PostConfig = Field(default_factory=FullPostConfig)
    straw_material: Optional[str] = Field(
        default=None,
        description="Straw material id; the store's default straw material when not set",
    )

    @property
    def post_width(self) -> float:
        return self.posts.width


# ============================================================================
# Modules
# ============================================================================

class SingleModuleConfig(FrozenModel):
    """Prefabricated frame of four members around a straw filling."""
    type: Literal["single"] = "single"
    width: float = Field(default=920, gt=0)
    frame_thickness: float = Field(default=60, gt=0)
    frame_material: str = "wood"
    straw_material: Optional[str] = None

    @model_validator(mode='after')
    def validate_frame(self):
        if 2 * self.frame_thickness >= self.width:
            raise ValueError("Module frame thickness leaves no room for straw")
        return self


class DoubleModuleConfig(SingleModuleConfig):
    """
    Two frames on the inside and outside faces, connected by spacers.

    The gap between the frames is closed by spacers along the vertical members
    and by infill between the spacers and along the top and bottom members.
    """
    type: Literal["double"] = "double"
    frame_width: float = Field(default=120, gt=0, description="Depth of each frame through the wall")
    spacer_size: float = Field(default=120, gt=0, description="Vertical size of a spacer")
    spacer_count: int = Field(default=3, ge=2)
    spacer_material: str = "wood"
    infill_material: str = "wood_fiber"


ModuleConfig = Annotated[Union[SingleModuleConfig, DoubleModuleConfig], Field(discriminator="type")]


# ============================================================================
# Cladding layers
# ============================================================================

class MonolithicLayerConfig(FrozenModel):
    type: Literal["monolithic"] = "monolithic"
    name: str
    thickness: float = Field(gt=0)
    material: str


class StripedLayerConfig(FrozenModel):
    """Battens, boards or bracing laid in stripes with gaps between them."""
    type: Literal["striped"] = "striped"
    name: str
    thickness: float = Field(gt=0)
    direction: Literal["perpendicular", "colinear", "diagonal"] = "perpendicular"
    angle: float = Field(default=45, gt=0, lt=90, description="Stripe angle in degrees for diagonal stripes")
    stripe_width: float = Field(gt=0)
    stripe_material: str
    gap_width: float = Field(default=0, ge=0)
    gap_material: Optional[str] = None


LayerConfig = Annotated[Union[MonolithicLayerConfig, StripedLayerConfig], Field(discriminator="type")]


class WallLayersConfig(FrozenModel):
    """Layers listed from the core outwards on each side."""
    inside_layers: List[LayerConfig] = Field(default_factory=list)
    outside_layers: List[LayerConfig] = Field(default_factory=list)

    @property
    def inside_thickness(self) -> float:
        return sum(layer.thickness for layer in self.inside_layers)

    @property
    def outside_thickness(self) -> float:
        return sum(layer.thickness for layer in self.outside_layers)


# ============================================================================
# Wall assemblies
# ============================================================================

class WallAssemblyType(Enum):
    INFILL = "infill"
    STRAWHENGE = "strawhenge"
    MODULES = "modules"
    NON_STRAWBALE = "non-strawbale"


class BaseWallAssemblyConfig(FrozenModel):
    id: str = Field(min_length=1)
    name: str
    layers: WallLayersConfig = Field(default_factory=WallLayersConfig)
    opening_assembly_id: Optional[str] = Field(
        default=None,
        description="Default opening assembly for openings in walls of this assembly",
    )

    @property
    def assembly_type(self) -> WallAssemblyType:
        return WallAssemblyType(self.type)


class InfillWallAssemblyConfig(BaseWallAssemblyConfig):
    type: Literal["infill"] = "infill"
    infill: InfillConfig = Field(default_factory=InfillConfig)


class StrawhengeWallAssemblyConfig(BaseWallAssemblyConfig):
    type: Literal["strawhenge"] = "strawhenge"
    module: ModuleConfig = Field(default_factory=SingleModuleConfig)
    infill: InfillConfig = Field(default_factory=InfillConfig)


class ModulesWallAssemblyConfig(BaseWallAssemblyConfig):
    type: Literal["modules"] = "modules"
    module: ModuleConfig = Field(default_factory=SingleModuleConfig)
    infill: InfillConfig = Field(default_factory=InfillConfig)


class NonStrawbaleWallAssemblyConfig(BaseWallAssemblyConfig):
    type: Literal["non-strawbale"] = "non-strawbale"
    material: str = "concrete"


WallAssemblyConfig = Annotated[
    Union[
        InfillWallAssemblyConfig,
        StrawhengeWallAssemblyConfig,
        ModulesWallAssemblyConfig,
        NonStrawbaleWallAssemblyConfig,
    ],
    Field(discriminator="type"),
]


# ============================================================================
# Opening assemblies
# ============================================================================

class SimpleOpeningAssemblyConfig(FrozenModel):
    """Header and sill framing around the opening."""
    type: Literal["simple"] = "simple"
    id: str = Field(min_length=1)
    name: str
    padding: float = Field(default=15, ge=0, description="Clearance around the finished opening")
    header_thickness: float = Field(default=60, gt=0)
    header_material: str = "wood"
    sill_thickness: float = Field(default=60, gt=0)
    sill_material: str = "wood"
    filling_material: Optional[str] = None
    filling_thickness: Optional[float] = Field(default=None, gt=0)

    @model_validator(mode='after')
    def validate_filling(self):
        if (self.filling_material is None) != (self.filling_thickness is None):
            raise ValueError("filling_material and filling_thickness must be set together")
        return self


class EmptyOpeningAssemblyConfig(FrozenModel):
    """Opening cut out of the wall with clearance only, no frame members."""
    type: Literal["empty"] = "empty"
    id: str = Field(min_length=1)
    name: str
    padding: float = Field(default=15, ge=0)


OpeningAssemblyConfig = Annotated[
    Union[SimpleOpeningAssemblyConfig, EmptyOpeningAssemblyConfig],
    Field(discriminator="type"),
]


# ============================================================================
# Ring beams and floors
# ============================================================================

class FullRingBeamConfig(FrozenModel):
    type: Literal["full"] = "full"
    id: str = Field(min_length=1)
    name: str
    height: float = Field(default=60, gt=0)
    width: float = Field(default=360, gt=0, description="Beam width through the wall")
    offset: float = Field(default=0, ge=0, description="Distance from the core's inside face")
    material: str = "wood"


class DoubleRingBeamConfig(FrozenModel):
    type: Literal["double"] = "double"
    id: str = Field(min_length=1)
    name: str
    height: float = Field(default=120, gt=0)
    thickness: float = Field(default=120, gt=0, description="Width of each beam through the wall")
    material: str = "wood"
    infill_material: str = "wood_fiber"


RingBeamAssemblyConfig = Annotated[
    Union[FullRingBeamConfig, DoubleRingBeamConfig],
    Field(discriminator="type"),
]


class FloorAssemblyConfig(FrozenModel):
    """
    Floor build-up as seen by the walls.

    Walls stand on the floor construction, below the finished floor by
    ``top_layers_thickness``, and end below the next floor's construction.
    """
    id: str = Field(min_length=1)
    name: str
    type: Literal["monolithic", "joist"] = "monolithic"
    construction_thickness: float = Field(default=200, ge=0)
    top_layers_thickness: float = Field(default=0, ge=0)
    bottom_layers_thickness: float = Field(default=0, ge=0)
