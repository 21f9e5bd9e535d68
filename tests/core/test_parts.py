# File: tests/core/test_parts.py
"""Tests for parts list generation."""

import pytest

from strawbale_construction.core.elements import ExtrudedPolygon, create_element, create_element_from_area, create_group
from strawbale_construction.core.model import ConstructionModel
from strawbale_construction.core.parts import build_parts_list, dimensional_part_id
from strawbale_construction.core.tags import TAG_FULL_BALE, TAG_LAYER_INSIDE, TAG_POST
from strawbale_construction.geometry.area import WallConstructionArea


def create_post(x):
    return create_element_from_area(WallConstructionArea((x, 0, 0), (60, 360, 2500)), "wood", [TAG_POST])


class TestBuildPartsList:
    """Tests for grouping identical elements."""

    def test_identical_posts_grouped(self):
        model = ConstructionModel.create(elements=[create_post(0), create_post(900), create_post(1800)])
        parts = build_parts_list(model)

        assert len(parts) == 1
        assert parts[0].quantity == 3
        assert parts[0].label == "Post"
        assert parts[0].size == (2500, 360, 60)
        assert parts[0].part_id == "wood_2500x360x60"
        assert parts[0].total_volume == pytest.approx(3 * 60 * 360 * 2500)

    def test_orientation_ignored(self):
        lying = create_element_from_area(WallConstructionArea((0, 0, 0), (2500, 360, 60)), "wood", [TAG_POST])
        parts = build_parts_list([create_post(0), lying])

        assert len(parts) == 1
        assert parts[0].quantity == 2

    def test_groups_are_expanded(self):
        bale = create_element_from_area(WallConstructionArea((0, 0, 0), (900, 360, 500)), "straw", [TAG_FULL_BALE])
        parts = build_parts_list([create_group([create_post(0), bale])])

        assert {part.label for part in parts} == {"Post", "Full bale"}

    def test_polygons_grouped_by_thickness(self):
        shape = ExtrudedPolygon(outer=((0, 0), (0, 2000), (1000, 2000), (1000, 0)), thickness=30)
        layer = create_element("clay_plaster", shape, tags=[TAG_LAYER_INSIDE])
        parts = build_parts_list([layer])

        assert parts[0].size == (30,)
        assert parts[0].total_volume == pytest.approx(1000 * 2000 * 30)


def test_dimensional_part_id_rounds_and_sorts():
    assert dimensional_part_id("wood", (60.4, 2499.6, 120)) == "wood_2500x120x60"
