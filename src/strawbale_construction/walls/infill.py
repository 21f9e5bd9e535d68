# File: src/strawbale_construction/walls/infill.py
"""
Post and straw infill.

An infill area is partitioned along its width into straw spans separated by
posts. Planning is a pure function of the width and the spacing rules, so the
partition can be checked on its own; construction then turns every span into
post or straw elements.

Partition rule for a span of width W (max = max_post_spacing):

- W <= 0: nothing
- W <= max: one straw span
- max < W <= max + post width: straw of W - post width plus a post, flagged
  as an error because no full straw run fits next to the post
- otherwise: a straw run of exactly max at the leading edge, then a post, and
  the remainder is planned again with the leading edge on the other side

The leading edge alternates on every step, so posts spread towards the
middle instead of bunching at one end. Flipping ``start_at_end`` mirrors the
partition.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Dict, List, Tuple

from ..config.schemas import InfillConfig
from ..core.measurements import create_measurement
from ..core.results import (
    ResultStream,
    collect_element_ids,
    error_result,
    measurement_result,
    warning_result,
)
from ..core.tags import TAG_POST_SPACING
from ..geometry.area import WallConstructionArea
from ..materials.material import BaseMaterial
from ..materials.straw import construct_straw
from ..utils.logging_config import get_logger
from .posts import construct_post

logger = get_logger(__name__)


class SpanKind(Enum):
    STRAW = "straw"
    POST = "post"


@dataclass(frozen=True)
class InfillSpan:
    """A straw or post span, ``start`` relative to the planned area."""
    kind: SpanKind
    start: float
    width: float

    @property
    def end(self) -> float:
        return self.start + self.width


@dataclass(frozen=True)
class PlanIssue:
    severity: str  # "error" or "warning"
    description: str
    span_indices: Tuple[int, ...]


@dataclass
class InfillPlan:
    spans: List[InfillSpan] = field(default_factory=list)
    issues: List[PlanIssue] = field(default_factory=list)

    def add(self, kind: SpanKind, start: float, width: float) -> int:
        self.spans.append(InfillSpan(kind, start, width))
        return len(self.spans) - 1

    @property
    def straw_spans(self) -> List[InfillSpan]:
        return [span for span in self.spans if span.kind is SpanKind.STRAW]

    @property
    def post_spans(self) -> List[InfillSpan]:
        return [span for span in self.spans if span.kind is SpanKind.POST]

    @property
    def covered_width(self) -> float:
        return sum(span.width for span in self.spans)


def _plan_spans(
    plan: InfillPlan,
    offset: float,
    width: float,
    at_start: bool,
    max_post_spacing: float,
    post_width: float,
) -> None:
    if width <= 0:
        return

    if width <= max_post_spacing:
        plan.add(SpanKind.STRAW, offset, width)
        return

    if width <= max_post_spacing + post_width:
        if width < post_width:
            index = plan.add(SpanKind.STRAW, offset, width)
            plan.issues.append(PlanIssue("error", "Not enough space for a post", (index,)))
            return

        straw_width = width - post_width
        if at_start:
            straw = plan.add(SpanKind.STRAW, offset, straw_width)
            post = plan.add(SpanKind.POST, offset + straw_width, post_width)
        else:
            straw = plan.add(SpanKind.STRAW, offset + post_width, straw_width)
            post = plan.add(SpanKind.POST, offset, post_width)
        plan.issues.append(PlanIssue(
            "error", "Not enough space for a post and a full straw run", (straw, post)
        ))
        return

    if at_start:
        plan.add(SpanKind.STRAW, offset, max_post_spacing)
        plan.add(SpanKind.POST, offset + max_post_spacing, post_width)
        rest_offset = offset + max_post_spacing + post_width
    else:
        plan.add(SpanKind.STRAW, offset + width - max_post_spacing, max_post_spacing)
        plan.add(SpanKind.POST, offset + width - max_post_spacing - post_width, post_width)
        rest_offset = offset

    _plan_spans(
        plan,
        rest_offset,
        width - max_post_spacing - post_width,
        not at_start,
        max_post_spacing,
        post_width,
    )


def plan_infill_spans(
    width: float,
    max_post_spacing: float,
    post_width: float,
    min_straw_space: float = 0.0,
    start_at_end: bool = False,
) -> InfillPlan:
    """
    Partition a width into straw spans and posts.

    Args:
        width: Width to partition
        max_post_spacing: Widest allowed straw span
        post_width: Post width along the wall
        min_straw_space: Straw spans narrower than this get a warning
        start_at_end: Start the first straw run at the far end

    Returns:
        InfillPlan whose spans cover the width exactly
    """
    plan = InfillPlan()
    _plan_spans(plan, 0.0, width, not start_at_end, max_post_spacing, post_width)

    for index, span in enumerate(plan.spans):
        if span.kind is SpanKind.STRAW and span.width < min_straw_space:
            plan.issues.append(PlanIssue("warning", "Not enough space for infilling straw", (index,)))

    logger.trace(
        f"Planned {width:.0f}mm: {len(plan.straw_spans)} straw spans, {len(plan.post_spans)} posts"
    )
    return plan


def infill_wall_area(
    area: WallConstructionArea,
    infill: InfillConfig,
    straw: BaseMaterial,
    start_at_end: bool = False,
) -> ResultStream:
    """
    Fill an area with posts and straw.

    Args:
        area: Area to fill
        infill: Spacing rules and post configuration
        straw: Straw material for the straw spans
        start_at_end: Lay the first straw run at the area's far end

    Yields:
        Post and straw elements, a post-spacing measurement per straw span,
        and the plan's errors and warnings
    """
    if area.width <= 0 or area.height <= 0:
        return

    plan = plan_infill_spans(
        area.width,
        infill.max_post_spacing,
        infill.post_width,
        infill.min_straw_space,
        start_at_end,
    )

    element_ids: Dict[int, List[str]] = {}
    for index, span in enumerate(plan.spans):
        span_area = area.with_x_adjustment(span.start, span.width)
        ids: List[str] = []
        element_ids[index] = ids

        if span.kind is SpanKind.POST:
            yield from collect_element_ids(construct_post(span_area, infill.posts), ids)
            continue

        yield from collect_element_ids(construct_straw(span_area, straw), ids)
        top = span_area.end("z")
        yield measurement_result(create_measurement(
            (span_area.start("x"), span_area.start("y"), top),
            (span_area.end("x"), span_area.start("y"), top),
            tags=[TAG_POST_SPACING],
        ))

    for issue in plan.issues:
        referenced = [element_id for index in issue.span_indices for element_id in element_ids[index]]
        if issue.severity == "error":
            yield error_result(issue.description, referenced)
        else:
            yield warning_result(issue.description, referenced)

    if area.height < infill.min_straw_space:
        all_ids = [element_id for ids in element_ids.values() for element_id in ids]
        yield warning_result("Not enough vertical space to fill with straw", all_ids)
