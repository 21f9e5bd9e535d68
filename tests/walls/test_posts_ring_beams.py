# File: tests/walls/test_posts_ring_beams.py
"""Tests for posts and ring-beam plates."""

from strawbale_construction.config.schemas import (
    DoublePostConfig,
    DoubleRingBeamConfig,
    FullPostConfig,
    FullRingBeamConfig,
)
from strawbale_construction.core.results import aggregate_results
from strawbale_construction.core.tags import TAG_BASE_PLATE, TAG_INFILL, TAG_POST
from strawbale_construction.geometry.area import WallConstructionArea
from strawbale_construction.walls.posts import construct_post
from strawbale_construction.walls.ring_beams import construct_ring_beam


def create_slot(width=60, thickness=360, height=2500):
    return WallConstructionArea((800, 30, 0), (width, thickness, height))


class TestConstructPost:
    """Tests for full and double posts."""

    def test_full_post_fills_slot(self):
        elements = aggregate_results(construct_post(create_slot(), FullPostConfig())).elements

        assert len(elements) == 1
        assert elements[0].has_tag(TAG_POST)
        assert elements[0].bounds.min == (800, 30, 0)
        assert elements[0].bounds.max == (860, 390, 2500)

    def test_double_post_has_insulation_between(self):
        elements = aggregate_results(construct_post(create_slot(), DoublePostConfig(thickness=120))).elements

        posts = [element for element in elements if element.has_tag(TAG_POST)]
        infill = [element for element in elements if element.has_tag(TAG_INFILL)]
        assert len(posts) == 2
        assert len(infill) == 1
        assert infill[0].material == "wood_fiber"
        assert infill[0].bounds.min[1] == 150
        assert infill[0].bounds.max[1] == 270

    def test_double_post_without_gap(self):
        elements = aggregate_results(construct_post(create_slot(thickness=240), DoublePostConfig(thickness=120))).elements

        assert len(elements) == 2

    def test_double_post_too_thin_is_error(self):
        aggregated = aggregate_results(construct_post(create_slot(thickness=200), DoublePostConfig(thickness=120)))

        assert len(aggregated.elements) == 1
        assert aggregated.errors[0].description == "Wall is too thin for a double post"


class TestConstructRingBeam:
    """Tests for base and top plates."""

    def create_plate_area(self, thickness=360):
        return WallConstructionArea((0, 30, 0), (3000, thickness, 60))

    def test_full_beam(self):
        beam = FullRingBeamConfig(id="rb", name="Beam", width=300, offset=30)
        elements = aggregate_results(construct_ring_beam(self.create_plate_area(), beam, [TAG_BASE_PLATE])).elements

        assert len(elements) == 1
        assert elements[0].has_tag(TAG_BASE_PLATE)
        assert elements[0].bounds.min[1] == 60
        assert elements[0].bounds.max[1] == 360

    def test_full_beam_wider_than_wall_is_error(self):
        beam = FullRingBeamConfig(id="rb", name="Beam", width=400)
        aggregated = aggregate_results(construct_ring_beam(self.create_plate_area(), beam, [TAG_BASE_PLATE]))

        assert aggregated.errors[0].description == "Ring beam is wider than the wall"
        assert aggregated.elements[0].shape.size[1] == 360

    def test_double_beam(self):
        beam = DoubleRingBeamConfig(id="rb", name="Double", thickness=120)
        elements = aggregate_results(construct_ring_beam(self.create_plate_area(), beam, [TAG_BASE_PLATE])).elements

        assert len(elements) == 3
        assert all(element.has_tag(TAG_BASE_PLATE) for element in elements)
        assert sum(element.has_tag(TAG_INFILL) for element in elements) == 1

    def test_double_beam_too_thin_is_error(self):
        beam = DoubleRingBeamConfig(id="rb", name="Double", thickness=200)
        aggregated = aggregate_results(construct_ring_beam(self.create_plate_area(), beam, [TAG_BASE_PLATE]))

        assert aggregated.errors[0].description == "Wall is too thin for a double ring beam"
