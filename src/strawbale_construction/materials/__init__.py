"""Material definitions and straw packing."""

from .material import (
    BaseMaterial,
    DimensionalMaterial,
    GenericMaterial,
    Material,
    SheetMaterial,
    StrawbaleMaterial,
)
from .straw import construct_straw, get_straw_tags

__all__ = [
    "BaseMaterial",
    "DimensionalMaterial",
    "GenericMaterial",
    "Material",
    "SheetMaterial",
    "StrawbaleMaterial",
    "construct_straw",
    "get_straw_tags",
]
