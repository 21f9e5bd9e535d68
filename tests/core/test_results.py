# File: tests/core/test_results.py
"""Tests for the construction result protocol."""

import pytest

from strawbale_construction.core.elements import create_element_from_area
from strawbale_construction.core.measurements import create_measurement
from strawbale_construction.core.results import (
    ResultKind,
    aggregate_results,
    build_construction_model,
    collect_element_ids,
    element_result,
    error_result,
    measurement_result,
    warning_result,
)
from strawbale_construction.core.tags import TAG_POST
from strawbale_construction.geometry.area import WallConstructionArea


def create_post(x=0.0):
    return create_element_from_area(WallConstructionArea((x, 0, 0), (60, 360, 2500)), "wood", [TAG_POST])


def construct_two_posts():
    first = create_post(0)
    second = create_post(1000)
    yield element_result(first)
    yield measurement_result(create_measurement((60, 0, 0), (1000, 0, 0)))
    yield element_result(second)
    yield warning_result("Posts far apart", [first, second.id])


class TestResultConstructors:
    """Tests for result helper functions."""

    def test_kinds(self):
        post = create_post()

        assert element_result(post).kind is ResultKind.ELEMENT
        assert error_result("bad").kind is ResultKind.ERROR
        assert warning_result("meh").kind is ResultKind.WARNING

    def test_issue_accepts_elements_and_ids(self):
        post = create_post()
        issue = error_result("Post too thin", [post, "ce_other"]).payload

        assert issue.description == "Post too thin"
        assert issue.element_ids == (post.id, "ce_other")

    def test_issue_without_elements(self):
        assert warning_result("Just a note").payload.element_ids == ()


class TestAggregation:
    """Tests for folding result streams."""

    def test_aggregate_preserves_order(self):
        aggregated = aggregate_results(construct_two_posts())

        assert len(aggregated.elements) == 2
        assert aggregated.elements[0].bounds.min[0] == 0
        assert aggregated.elements[1].bounds.min[0] == 1000
        assert len(aggregated.measurements) == 1
        assert len(aggregated.warnings) == 1
        assert aggregated.errors == []

    def test_stream_is_consumed_once(self):
        stream = construct_two_posts()
        aggregate_results(stream)

        assert list(stream) == []

    def test_model_bounds_are_union(self):
        model = build_construction_model(construct_two_posts())

        assert model.bounds.min == (0, 0, 0)
        assert model.bounds.max == (1060, 360, 2500)

    def test_empty_stream_has_zero_bounds(self):
        model = build_construction_model(iter(()))

        assert model.elements == ()
        assert model.bounds.size == (0, 0, 0)


class TestCollectElementIds:
    """Tests for recording element ids while re-yielding."""

    def test_collects_only_elements(self):
        ids = []
        results = list(collect_element_ids(construct_two_posts(), ids))

        assert len(results) == 4
        assert ids == [results[0].payload.id, results[2].payload.id]

    def test_issue_can_reference_collected_ids(self):
        def construct_with_issue():
            ids = []
            yield from collect_element_ids(construct_two_posts(), ids)
            yield error_result("Wall too short", ids)

        model = build_construction_model(construct_with_issue())

        assert model.errors[0].element_ids == tuple(element.id for element in model.elements)
        assert model.has_errors


def test_measurement_label_from_length():
    measurement = create_measurement((0, 0, 0), (800, 0, 0))

    assert measurement.length == pytest.approx(800)
    assert measurement.label == "800mm"
