# File: src/strawbale_construction/core/parts.py
"""
Parts list generation.

Groups the leaf elements of a model into identical parts: same material,
same classification and same dimensions (rounded to whole millimetres,
orientation ignored). Extruded polygons such as plaster layers are grouped
by material and thickness only, with their areas summed into the volume.
"""

from dataclasses import dataclass, field
from typing import Dict, Iterable, List, Tuple

from shapely.geometry import Polygon

from .elements import ConstructionElement, Cuboid, GroupOrElement, iter_elements
from .tags import TagCategory

# Tags that classify a part, in order of preference
_CLASSIFYING_CATEGORIES = (
    TagCategory.WALL_ASSEMBLY,
    TagCategory.STRAW,
    TagCategory.OPENING,
    TagCategory.RING_BEAM,
    TagCategory.WALL_LAYER,
)


@dataclass
class PartInfo:
    part_id: str
    material: str
    label: str
    size: Tuple[int, ...]
    quantity: int = 0
    total_volume: float = 0.0
    element_ids: List[str] = field(default_factory=list)


def dimensional_part_id(material: str, size: Iterable[float]) -> str:
    """Part id from material and dimensions, largest dimension first: wood_3000x120x60."""
    dims = sorted((round(value) for value in size), reverse=True)
    return f"{material}_{'x'.join(str(value) for value in dims)}"


def _label(element: ConstructionElement) -> str:
    for category in _CLASSIFYING_CATEGORIES:
        for tag in element.tags:
            if tag.category is category:
                return tag.label
    return "Part"


def _size_and_volume(element: ConstructionElement) -> Tuple[Tuple[int, ...], float]:
    shape = element.shape
    if isinstance(shape, Cuboid):
        width, depth, height = shape.size
        return tuple(sorted((round(value) for value in shape.size), reverse=True)), width * depth * height
    area = Polygon(shape.outer, list(shape.holes)).area
    return (round(shape.thickness),), area * shape.thickness


def build_parts_list(model_or_elements) -> List[PartInfo]:
    """
    Builds the parts list of a model (or of a sequence of elements/groups).

    Returns:
        PartInfo entries sorted by material, label and part id
    """
    items: Iterable[GroupOrElement] = getattr(model_or_elements, "elements", model_or_elements)
    parts: Dict[Tuple[str, str, Tuple[int, ...]], PartInfo] = {}

    for element in iter_elements(items):
        size, volume = _size_and_volume(element)
        label = _label(element)
        key = (element.material, label, size)
        part = parts.get(key)
        if part is None:
            part = PartInfo(
                part_id=dimensional_part_id(element.material, size),
                material=element.material,
                label=label,
                size=size,
            )
            parts[key] = part
        part.quantity += 1
        part.total_volume += volume
        part.element_ids.append(element.id)

    return sorted(parts.values(), key=lambda part: (part.material, part.label, part.part_id))
