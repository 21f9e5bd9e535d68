# File: src/strawbale_construction/core/tags.py
"""
Classification tags attached to construction elements and measurements.

Tags drive rendering (colour/visibility per category) and parts-list
classification. The predefined tags below cover every element the engine
produces; layer tags are created per layer name.
"""

import re
from dataclasses import dataclass
from enum import Enum


class TagCategory(Enum):
    """Groups of tags a viewer can toggle together."""
    WALL_ASSEMBLY = "wall-assembly"
    STRAW = "straw"
    OPENING = "opening"
    WALL_LAYER = "wall-layer"
    RING_BEAM = "ring-beam"
    MEASUREMENT = "measurement"
    AREA = "area"


@dataclass(frozen=True)
class Tag:
    id: str
    label: str
    category: TagCategory


def create_layer_tag(layer_name: str) -> Tag:
    """Tag naming a single cladding layer, e.g. "Clay plaster" -> wall-layer_clay-plaster."""
    slug = re.sub(r"[^a-z0-9]+", "-", layer_name.lower()).strip("-") or "layer"
    return Tag(id=f"wall-layer_{slug}", label=layer_name, category=TagCategory.WALL_LAYER)


# Wall assembly
TAG_POST = Tag("wall-assembly_post", "Post", TagCategory.WALL_ASSEMBLY)
TAG_INFILL = Tag("wall-assembly_infill", "Infill", TagCategory.WALL_ASSEMBLY)
TAG_MODULE = Tag("wall-assembly_module", "Module", TagCategory.WALL_ASSEMBLY)
TAG_MODULE_FRAME = Tag("wall-assembly_module-frame", "Module frame", TagCategory.WALL_ASSEMBLY)
TAG_MODULE_SPACER = Tag("wall-assembly_module-spacer", "Module spacer", TagCategory.WALL_ASSEMBLY)
TAG_MODULE_INFILL = Tag("wall-assembly_module-infill", "Module infill", TagCategory.WALL_ASSEMBLY)
TAG_NON_STRAWBALE = Tag("wall-assembly_non-strawbale", "Wall", TagCategory.WALL_ASSEMBLY)

# Straw
TAG_FULL_BALE = Tag("straw_full-bale", "Full bale", TagCategory.STRAW)
TAG_PARTIAL_BALE = Tag("straw_partial-bale", "Partial bale", TagCategory.STRAW)
TAG_FLAKES = Tag("straw_flakes", "Flakes", TagCategory.STRAW)
TAG_STUFFED = Tag("straw_stuffed", "Stuffed", TagCategory.STRAW)
TAG_STRAW_INFILL = Tag("straw_infill", "Straw infill", TagCategory.STRAW)

STRAW_TAGS = (TAG_FULL_BALE, TAG_PARTIAL_BALE, TAG_FLAKES, TAG_STUFFED)

# Openings
TAG_HEADER = Tag("opening_header", "Header", TagCategory.OPENING)
TAG_SILL = Tag("opening_sill", "Sill", TagCategory.OPENING)
TAG_OPENING_FILLING = Tag("opening_filling", "Opening filling", TagCategory.OPENING)

# Ring beams
TAG_BASE_PLATE = Tag("ring-beam_base-plate", "Base plate", TagCategory.RING_BEAM)
TAG_TOP_PLATE = Tag("ring-beam_top-plate", "Top plate", TagCategory.RING_BEAM)

# Layers
TAG_LAYER_INSIDE = Tag("wall-layer_inside", "Inside layer", TagCategory.WALL_LAYER)
TAG_LAYER_OUTSIDE = Tag("wall-layer_outside", "Outside layer", TagCategory.WALL_LAYER)

# Measurements
TAG_WALL_LENGTH = Tag("measurement_wall-length", "Wall length", TagCategory.MEASUREMENT)
TAG_POST_SPACING = Tag("measurement_post-spacing", "Post spacing", TagCategory.MEASUREMENT)
TAG_OPENING_SPACING = Tag("measurement_opening-spacing", "Opening spacing", TagCategory.MEASUREMENT)
TAG_OPENING_WIDTH = Tag("measurement_opening-width", "Opening width", TagCategory.MEASUREMENT)
TAG_OPENING_HEIGHT = Tag("measurement_opening-height", "Opening height", TagCategory.MEASUREMENT)
TAG_HEADER_HEIGHT = Tag("measurement_header-height", "Header height", TagCategory.MEASUREMENT)
TAG_SILL_HEIGHT = Tag("measurement_sill-height", "Sill height", TagCategory.MEASUREMENT)
TAG_MODULE_WIDTH = Tag("measurement_module-width", "Module width", TagCategory.MEASUREMENT)

# Area markers
TAG_CORNER_AREA = Tag("area_corner", "Corner", TagCategory.AREA)
TAG_INVALID_OPENING = Tag("area_invalid-opening", "Invalid opening", TagCategory.AREA)
TAG_MISSING_ELEMENT = Tag("area_missing-element", "Missing element", TagCategory.AREA)
