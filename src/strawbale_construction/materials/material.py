# File: src/strawbale_construction/materials/material.py
"""
Material definitions.

Elements reference materials by id only; the definitions below are what the
configuration store resolves those ids to. Straw bale materials carry the bale
dimensions the packing algorithm works with.
"""

from typing import Annotated, Literal, Union

from pydantic import BaseModel, ConfigDict, Field, model_validator


class BaseMaterial(BaseModel):
    """Fields shared by every material."""
    model_config = ConfigDict(frozen=True)

    id: str = Field(description="Unique material id, referenced by elements", min_length=1)
    name: str = Field(description="Display name")
    color: str = Field(default="#cccccc", description="Display colour as hex string")


class GenericMaterial(BaseMaterial):
    type: Literal["generic"] = "generic"


class DimensionalMaterial(BaseMaterial):
    """Sawn timber and similar stock with a fixed cross section."""
    type: Literal["dimensional"] = "dimensional"
    width: float = Field(gt=0, description="Cross section width in mm")
    thickness: float = Field(gt=0, description="Cross section thickness in mm")


class SheetMaterial(BaseMaterial):
    type: Literal["sheet"] = "sheet"
    thickness: float = Field(gt=0, description="Sheet thickness in mm")


class StrawbaleMaterial(BaseMaterial):
    """
    Straw bale stock.

    Bales are laid flat: length along the wall, height vertical, width
    through the wall.
    """
    type: Literal["strawbale"] = "strawbale"
    bale_min_length: float = Field(default=800, gt=0)
    bale_max_length: float = Field(default=900, gt=0)
    bale_height: float = Field(default=500, gt=0)
    bale_width: float = Field(default=360, gt=0)
    tolerance: float = Field(default=2, ge=0, description="Dimension tolerance in mm")
    top_cutoff_limit: float = Field(
        default=50, ge=0,
        description="Largest amount a top course bale may be cut down by",
    )
    flake_size: float = Field(default=70, gt=0, description="Smallest usable flake thickness")

    @model_validator(mode='after')
    def validate_bale_dimensions(self) -> 'StrawbaleMaterial':
        """Validate that bale dimension ranges are consistent."""
        if self.bale_min_length > self.bale_max_length:
            raise ValueError(
                f"bale_min_length ({self.bale_min_length}) exceeds bale_max_length ({self.bale_max_length})"
            )
        if self.top_cutoff_limit >= self.bale_height:
            raise ValueError("top_cutoff_limit must be smaller than bale_height")
        return self


Material = Annotated[
    Union[GenericMaterial, DimensionalMaterial, SheetMaterial, StrawbaleMaterial],
    Field(discriminator="type"),
]
