# File: src/strawbale_construction/core/results.py
"""
Result protocol shared by every construction algorithm.

Each algorithm is a generator yielding ConstructionResult values. Algorithms
compose by delegating (``yield from``) so callers never need to know which
sub-step produced a result. A stream is consumed once by aggregate_results.

Usage:
    def construct_something(area):
        post = create_element_from_area(area, "wood")
        yield element_result(post)
        if area.width < 60:
            yield error_result("Post too narrow", [post])

    aggregated = aggregate_results(construct_something(area))
"""

from dataclasses import dataclass
from enum import Enum
from typing import Iterable, Iterator, List, Optional, Sequence, Union

from ..utils.logging_config import get_logger
from .elements import GroupOrElement
from .measurements import RawMeasurement
from .model import ConstructionIssue, ConstructionModel, HighlightedArea

logger = get_logger(__name__)


class ResultKind(Enum):
    ELEMENT = "element"
    MEASUREMENT = "measurement"
    AREA = "area"
    ERROR = "error"
    WARNING = "warning"


ResultPayload = Union[GroupOrElement, RawMeasurement, HighlightedArea, ConstructionIssue]


@dataclass(frozen=True)
class ConstructionResult:
    kind: ResultKind
    payload: ResultPayload


ResultStream = Iterator[ConstructionResult]


@dataclass
class AggregatedResults:
    elements: List[GroupOrElement]
    measurements: List[RawMeasurement]
    areas: List[HighlightedArea]
    errors: List[ConstructionIssue]
    warnings: List[ConstructionIssue]


# ============================================================================
# Result constructors
# ============================================================================

def element_result(element: GroupOrElement) -> ConstructionResult:
    return ConstructionResult(ResultKind.ELEMENT, element)


def measurement_result(measurement: RawMeasurement) -> ConstructionResult:
    return ConstructionResult(ResultKind.MEASUREMENT, measurement)


def area_result(area: HighlightedArea) -> ConstructionResult:
    return ConstructionResult(ResultKind.AREA, area)


def _issue(description: str, elements: Optional[Sequence[Union[GroupOrElement, str]]]) -> ConstructionIssue:
    ids = tuple(
        item if isinstance(item, str) else item.id
        for item in (elements or ())
    )
    return ConstructionIssue(description=description, element_ids=ids)


def error_result(
    description: str,
    elements: Optional[Sequence[Union[GroupOrElement, str]]] = None,
) -> ConstructionResult:
    """Hard construction error referencing elements (or element ids)."""
    logger.debug(f"Construction error: {description}")
    return ConstructionResult(ResultKind.ERROR, _issue(description, elements))


def warning_result(
    description: str,
    elements: Optional[Sequence[Union[GroupOrElement, str]]] = None,
) -> ConstructionResult:
    """Soft construction warning referencing elements (or element ids)."""
    logger.debug(f"Construction warning: {description}")
    return ConstructionResult(ResultKind.WARNING, _issue(description, elements))


# ============================================================================
# Stream helpers
# ============================================================================

def collect_element_ids(results: Iterable[ConstructionResult], sink: List[str]) -> ResultStream:
    """
    Re-yields a result stream while recording the ids of its elements.

    Used when an issue raised after a sub-step must reference whatever the
    sub-step produced.
    """
    for result in results:
        if result.kind is ResultKind.ELEMENT:
            sink.append(result.payload.id)
        yield result


def aggregate_results(results: Iterable[ConstructionResult]) -> AggregatedResults:
    """
    Folds a result stream into lists, preserving order.

    The stream is consumed exactly once.
    """
    aggregated = AggregatedResults([], [], [], [], [])
    targets = {
        ResultKind.ELEMENT: aggregated.elements,
        ResultKind.MEASUREMENT: aggregated.measurements,
        ResultKind.AREA: aggregated.areas,
        ResultKind.ERROR: aggregated.errors,
        ResultKind.WARNING: aggregated.warnings,
    }
    for result in results:
        targets[result.kind].append(result.payload)
    return aggregated



def build_construction_model(results: Iterable[ConstructionResult]) -> ConstructionModel:
    """Aggregates a result stream into an immutable ConstructionModel."""
    aggregated = aggregate_results(results)
    return ConstructionModel.create(
        elements=aggregated.elements,
        measurements=aggregated.measurements,
        areas=aggregated.areas,
        errors=aggregated.errors,
        warnings=aggregated.warnings,
    )
