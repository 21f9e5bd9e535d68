# File: src/strawbale_construction/core/model.py
"""
Construction model: the complete, immutable plan returned for a wall.

Also holds the issue and area-marker records the model carries, plus the
helpers that merge models and move them into another coordinate frame.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Iterable, Optional, Sequence, Tuple

from ..geometry.bounds import EMPTY_BOUNDS, Bounds3D
from ..geometry.transform import IDENTITY_TRANSFORM, Transform
from .elements import GroupOrElement, create_group
from .measurements import RawMeasurement
from .tags import Tag


@dataclass(frozen=True)
class ConstructionIssue:
    """An error or warning pointing at the elements it concerns."""
    description: str
    element_ids: Tuple[str, ...] = ()


class RenderPosition(Enum):
    BOTTOM = "bottom"
    TOP = "top"


@dataclass(frozen=True)
class HighlightedArea:
    """
    A region of the plan worth pointing out that is not an element itself,
    such as the corner a wall constructs or a header that could not be placed.
    """
    area_type: str
    label: str
    bounds: Bounds3D
    transform: Transform = IDENTITY_TRANSFORM
    tags: Tuple[Tag, ...] = ()
    render_position: RenderPosition = RenderPosition.BOTTOM

    def transformed(self, transform: Transform) -> "HighlightedArea":
        return HighlightedArea(
            area_type=self.area_type,
            label=self.label,
            bounds=self.bounds.transformed(transform),
            transform=self.transform,
            tags=self.tags,
            render_position=self.render_position,
        )


@dataclass(frozen=True)
class ConstructionModel:
    elements: Tuple[GroupOrElement, ...]
    measurements: Tuple[RawMeasurement, ...]
    areas: Tuple[HighlightedArea, ...]
    errors: Tuple[ConstructionIssue, ...]
    warnings: Tuple[ConstructionIssue, ...]
    bounds: Bounds3D

    @classmethod
    def create(
        cls,
        elements: Sequence[GroupOrElement] = (),
        measurements: Sequence[RawMeasurement] = (),
        areas: Sequence[HighlightedArea] = (),
        errors: Sequence[ConstructionIssue] = (),
        warnings: Sequence[ConstructionIssue] = (),
        bounds: Optional[Bounds3D] = None,
    ) -> "ConstructionModel":
        """Builds a model, deriving bounds from the elements unless given."""
        if bounds is None:
            bounds = Bounds3D.merge(element.bounds for element in elements) or EMPTY_BOUNDS
        return cls(
            elements=tuple(elements),
            measurements=tuple(measurements),
            areas=tuple(areas),
            errors=tuple(errors),
            warnings=tuple(warnings),
            bounds=bounds,
        )

    @classmethod
    def empty(cls) -> "ConstructionModel":
        return cls.create()

    @property
    def has_errors(self) -> bool:
        return bool(self.errors)


def merge_models(models: Iterable[ConstructionModel]) -> ConstructionModel:
    """
    Concatenates models in order.

    Bounds are the union of the non-empty models' bounds, so an empty model
    does not drag the result towards the origin.
    """
    models = list(models)
    elements, measurements, areas, errors, warnings = [], [], [], [], []
    for model in models:
        elements.extend(model.elements)
        measurements.extend(model.measurements)
        areas.extend(model.areas)
        errors.extend(model.errors)
        warnings.extend(model.warnings)

    bounds = Bounds3D.merge(model.bounds for model in models if model.elements)
    return ConstructionModel.create(
        elements=elements,
        measurements=measurements,
        areas=areas,
        errors=errors,
        warnings=warnings,
        bounds=bounds or EMPTY_BOUNDS,
    )


def transform_model(
    model: ConstructionModel,
    transform: Transform,
    tags: Sequence[Tag] = (),
) -> ConstructionModel:
    """
    Moves a whole model into another frame.

    Elements are wrapped into a single group carrying the transform; measurements,
    areas and bounds are mapped through it directly. Issues keep referencing the
    original element ids.
    """
    elements = (create_group(model.elements, transform=transform, tags=tags),) if model.elements else ()
    return ConstructionModel(
        elements=elements,
        measurements=tuple(m.transformed(transform) for m in model.measurements),
        areas=tuple(area.transformed(transform) for area in model.areas),
        errors=model.errors,
        warnings=model.warnings,
        bounds=model.bounds.transformed(transform),
    )
