# File: src/strawbale_construction/core/elements.py
"""
Construction elements and groups.

An element is one physical piece (a post, a bale, a header) with a material,
a shape and tags. A group bundles elements that belong together, such as the
frame members and straw of a prefabricated module, so consumers can treat it
as one unit or expand it.
"""

import uuid
from dataclasses import dataclass, field
from typing import Iterable, Iterator, Sequence, Tuple, Union

from ..geometry.area import WallConstructionArea
from ..geometry.bounds import EMPTY_BOUNDS, Bounds3D
from ..geometry.transform import IDENTITY_TRANSFORM, Transform, Vec2, Vec3
from .tags import Tag

Polygon2D = Tuple[Vec2, ...]

# Maps a polygon plane to the (u, v, extrusion) axis indices
PLANE_AXES = {
    "xy": (0, 1, 2),
    "xz": (0, 2, 1),
    "yz": (1, 2, 0),
}


def create_element_id() -> str:
    return f"ce_{uuid.uuid4().hex}"


@dataclass(frozen=True)
class Cuboid:
    """Box shape, given by offset and size in the element's local frame."""
    offset: Vec3
    size: Vec3

    @property
    def bounds(self) -> Bounds3D:
        return Bounds3D.from_cuboid(self.offset, self.size)


@dataclass(frozen=True)
class ExtrudedPolygon:
    """Planar polygon (with optional holes) extruded along the plane normal."""
    outer: Polygon2D
    holes: Tuple[Polygon2D, ...] = ()
    plane: str = "xz"
    thickness: float = 0.0

    def __post_init__(self):
        if self.plane not in PLANE_AXES:
            raise ValueError(f"Unknown polygon plane: {self.plane}")
        if len(self.outer) < 3:
            raise ValueError("Polygon needs at least three points")

    @property
    def bounds(self) -> Bounds3D:
        u_axis, v_axis, w_axis = PLANE_AXES[self.plane]
        us = [p[0] for p in self.outer]
        vs = [p[1] for p in self.outer]
        low = [0.0, 0.0, 0.0]
        high = [0.0, 0.0, 0.0]
        low[u_axis], high[u_axis] = min(us), max(us)
        low[v_axis], high[v_axis] = min(vs), max(vs)
        low[w_axis], high[w_axis] = 0.0, self.thickness
        return Bounds3D(min=tuple(low), max=tuple(high))


Shape = Union[Cuboid, ExtrudedPolygon]


@dataclass(frozen=True)
class ConstructionElement:
    id: str
    material: str
    shape: Shape
    transform: Transform = IDENTITY_TRANSFORM
    tags: Tuple[Tag, ...] = ()
    bounds: Bounds3D = field(init=False, compare=False)

    def __post_init__(self):
        object.__setattr__(self, "bounds", self.shape.bounds.transformed(self.transform))

    def has_tag(self, tag: Tag) -> bool:
        return tag in self.tags


@dataclass(frozen=True)
class ConstructionGroup:
    id: str
    children: Tuple[Union["ConstructionElement", "ConstructionGroup"], ...]
    transform: Transform = IDENTITY_TRANSFORM
    tags: Tuple[Tag, ...] = ()
    bounds: Bounds3D = field(init=False, compare=False)

    def __post_init__(self):
        merged = Bounds3D.merge(child.bounds for child in self.children)
        object.__setattr__(
            self, "bounds", (merged or EMPTY_BOUNDS).transformed(self.transform)
        )

    def has_tag(self, tag: Tag) -> bool:
        return tag in self.tags


GroupOrElement = Union[ConstructionElement, ConstructionGroup]


def create_element(
    material: str,
    shape: Shape,
    transform: Transform = IDENTITY_TRANSFORM,
    tags: Sequence[Tag] = (),
) -> ConstructionElement:
    return ConstructionElement(
        id=create_element_id(),
        material=material,
        shape=shape,
        transform=transform,
        tags=tuple(tags),
    )


def create_element_from_area(
    area: WallConstructionArea,
    material: str,
    tags: Sequence[Tag] = (),
) -> ConstructionElement:
    """Cuboid element filling the given area exactly."""
    return create_element(material, Cuboid(offset=area.position, size=area.size), tags=tags)


def create_group(
    children: Iterable[GroupOrElement],
    transform: Transform = IDENTITY_TRANSFORM,
    tags: Sequence[Tag] = (),
) -> ConstructionGroup:
    return ConstructionGroup(
        id=create_element_id(),
        children=tuple(children),
        transform=transform,
        tags=tuple(tags),
    )


def iter_elements(items: Iterable[GroupOrElement]) -> Iterator[ConstructionElement]:
    """Yields every leaf element, expanding groups depth first (group transforms are not applied)."""
    for item in items:
        if isinstance(item, ConstructionGroup):
            yield from iter_elements(item.children)
        else:
            yield item
