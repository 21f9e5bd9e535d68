"""Core construction types: elements, results, measurements and the model."""

from .elements import (
    ConstructionElement,
    ConstructionGroup,
    Cuboid,
    ExtrudedPolygon,
    create_element,
    create_element_from_area,
    create_group,
    iter_elements,
)
from .errors import (
    ConfigurationIntegrityError,
    ModelIntegrityError,
    ResourceNotFoundError,
    StrawbaleConstructionError,
)
from .measurements import MeasurementType, RawMeasurement, create_measurement
from .model import (
    ConstructionIssue,
    ConstructionModel,
    HighlightedArea,
    RenderPosition,
    merge_models,
    transform_model,
)
from .parts import PartInfo, build_parts_list, dimensional_part_id
from .results import (
    AggregatedResults,
    ConstructionResult,
    ResultKind,
    ResultStream,
    aggregate_results,
    area_result,
    build_construction_model,
    collect_element_ids,
    element_result,
    error_result,
    measurement_result,
    warning_result,
)

__all__ = [
    "ConstructionElement",
    "ConstructionGroup",
    "Cuboid",
    "ExtrudedPolygon",
    "create_element",
    "create_element_from_area",
    "create_group",
    "iter_elements",
    "ConfigurationIntegrityError",
    "ModelIntegrityError",
    "ResourceNotFoundError",
    "StrawbaleConstructionError",
    "MeasurementType",
    "RawMeasurement",
    "create_measurement",
    "ConstructionIssue",
    "ConstructionModel",
    "HighlightedArea",
    "RenderPosition",
    "merge_models",
    "transform_model",
    "PartInfo",
    "build_parts_list",
    "dimensional_part_id",
    "AggregatedResults",
    "ConstructionResult",
    "ResultKind",
    "ResultStream",
    "aggregate_results",
    "area_result",
    "build_construction_model",
    "collect_element_ids",
    "element_result",
    "error_result",
    "measurement_result",
    "warning_result",
]
