# File: tests/walls/test_modules.py
"""Tests for module construction, module tiling and strawhenge placement."""

import pytest

from strawbale_construction.config.schemas import DoubleModuleConfig, InfillConfig, SingleModuleConfig
from strawbale_construction.core.elements import ConstructionGroup, iter_elements
from strawbale_construction.core.results import aggregate_results
from strawbale_construction.core.tags import (
    TAG_MODULE,
    TAG_MODULE_FRAME,
    TAG_MODULE_INFILL,
    TAG_MODULE_SPACER,
    TAG_MODULE_WIDTH,
    TAG_STRAW_INFILL,
)
from strawbale_construction.geometry.area import WallConstructionArea
from strawbale_construction.walls.modules import construct_module, module_wall_area, strawhenge_wall_area


def create_area(width=920, thickness=360, height=2000):
    return WallConstructionArea((0, 30, 60), (width, thickness, height))


def count_tag(group, tag):
    return sum(1 for element in iter_elements([group]) if element.has_tag(tag))


def module_starts(elements):
    return [
        round(item.bounds.min[0])
        for item in elements
        if isinstance(item, ConstructionGroup) and item.has_tag(TAG_MODULE)
    ]


class TestConstructModule:
    """Tests for building a single module group."""

    def test_single_module(self):
        group = construct_module(create_area(), SingleModuleConfig(), "straw")

        assert group.has_tag(TAG_MODULE)
        assert count_tag(group, TAG_MODULE_FRAME) == 4
        assert count_tag(group, TAG_STRAW_INFILL) == 1
        assert group.bounds.min == (0, 30, 60)
        assert group.bounds.max == (920, 390, 2060)

    def test_single_module_straw_inside_frame(self):
        group = construct_module(create_area(), SingleModuleConfig(frame_thickness=60), "straw")

        straw = next(e for e in iter_elements([group]) if e.has_tag(TAG_STRAW_INFILL))
        assert straw.material == "straw"
        assert straw.bounds.min == (60, 30, 120)
        assert straw.bounds.max == (860, 390, 2000)

    def test_double_module(self):
        module = DoubleModuleConfig(frame_width=120, spacer_count=3)
        group = construct_module(create_area(), module, "straw")

        assert count_tag(group, TAG_MODULE_FRAME) == 8
        assert count_tag(group, TAG_STRAW_INFILL) == 1
        assert count_tag(group, TAG_MODULE_SPACER) == 6
        assert count_tag(group, TAG_MODULE_INFILL) == 6

    def test_double_module_spacers_in_gap(self):
        module = DoubleModuleConfig(frame_width=120, spacer_count=2)
        group = construct_module(create_area(), module, "straw")

        spacers = [e for e in iter_elements([group]) if e.has_tag(TAG_MODULE_SPACER)]
        assert all(spacer.bounds.min[1] == 150 and spacer.bounds.max[1] == 270 for spacer in spacers)
        assert sorted(spacer.bounds.min[2] for spacer in spacers) == [120, 120, 1880, 1880]

    def test_double_module_without_gap(self):
        module = DoubleModuleConfig(frame_width=180)
        group = construct_module(create_area(), module, "straw")

        assert count_tag(group, TAG_MODULE_SPACER) == 0
        assert count_tag(group, TAG_MODULE_INFILL) == 0

    def test_invalid_type(self):
        module = SingleModuleConfig.model_construct(type="triple")

        with pytest.raises(ValueError, match="Invalid module type"):
            construct_module(create_area(), module, "straw")


class TestModuleWallArea:
    """Tests for tiling whole modules."""

    def test_modules_tiled_from_start(self, straw_material):
        aggregated = aggregate_results(
            module_wall_area(create_area(width=3000), SingleModuleConfig(), InfillConfig(), straw_material)
        )

        assert module_starts(aggregated.elements) == [0, 920, 1840]
        assert sum(1 for m in aggregated.measurements if TAG_MODULE_WIDTH in m.tags) == 3

    def test_modules_tiled_from_end(self, straw_material):
        aggregated = aggregate_results(
            module_wall_area(create_area(width=3000), SingleModuleConfig(), InfillConfig(), straw_material,
                             start_at_end=True)
        )

        assert module_starts(aggregated.elements) == [240, 1160, 2080]

    def test_remainder_is_infilled(self, straw_material):
        aggregated = aggregate_results(
            module_wall_area(create_area(width=3000), SingleModuleConfig(), InfillConfig(), straw_material)
        )

        loose = [item for item in aggregated.elements if not isinstance(item, ConstructionGroup)]
        assert loose
        assert all(item.bounds.min[0] >= 2760 - 1e-6 for item in loose)

    def test_narrow_area_is_infill_only(self, straw_material):
        aggregated = aggregate_results(
            module_wall_area(create_area(width=500), SingleModuleConfig(), InfillConfig(), straw_material)
        )

        assert module_starts(aggregated.elements) == []
        assert aggregated.errors == []

    def test_low_area_reports_error(self, straw_material):
        aggregated = aggregate_results(
            module_wall_area(create_area(width=2000, height=100), SingleModuleConfig(), InfillConfig(),
                             straw_material)
        )

        assert module_starts(aggregated.elements) == []
        assert any(issue.description == "Not enough height for a module" for issue in aggregated.errors)

    def test_thin_wall_for_double_module(self, straw_material):
        aggregated = aggregate_results(
            module_wall_area(create_area(width=2000, thickness=200), DoubleModuleConfig(frame_width=120),
                             InfillConfig(), straw_material)
        )

        assert module_starts(aggregated.elements) == []
        assert any(issue.description == "Wall is too thin for a double module" for issue in aggregated.errors)

    def test_module_straw_material_override(self, straw_material):
        module = SingleModuleConfig(straw_material="straw_pressed")
        aggregated = aggregate_results(module_wall_area(create_area(), module, InfillConfig(), straw_material))

        straw = [e for e in iter_elements(aggregated.elements) if e.has_tag(TAG_STRAW_INFILL)]
        assert [element.material for element in straw] == ["straw_pressed"]


class TestStrawhengeWallArea:
    """Tests for strawhenge module placement."""

    def test_module_positions(self, straw_material):
        """5000mm segment, 920mm modules, 800mm straw fields."""
        aggregated = aggregate_results(
            strawhenge_wall_area(create_area(width=5000), SingleModuleConfig(width=920),
                                 InfillConfig(max_post_spacing=800), straw_material)
        )

        assert sorted(module_starts(aggregated.elements)) == [0, 1720, 4080]

    def test_single_module_when_two_do_not_fit(self, straw_material):
        aggregated = aggregate_results(
            strawhenge_wall_area(create_area(width=1500), SingleModuleConfig(), InfillConfig(), straw_material)
        )

        assert module_starts(aggregated.elements) == [0]

    def test_single_module_at_far_end(self, straw_material):
        aggregated = aggregate_results(
            strawhenge_wall_area(create_area(width=1500), SingleModuleConfig(), InfillConfig(), straw_material,
                                 start_at_end=True)
        )

        assert module_starts(aggregated.elements) == [580]

    def test_narrow_segment_is_infill(self, straw_material):
        aggregated = aggregate_results(
            strawhenge_wall_area(create_area(width=800), SingleModuleConfig(), InfillConfig(), straw_material)
        )

        assert module_starts(aggregated.elements) == []
        assert aggregated.elements

    def test_modules_at_both_ends(self, straw_material):
        aggregated = aggregate_results(
            strawhenge_wall_area(create_area(width=2500), SingleModuleConfig(), InfillConfig(), straw_material)
        )

        assert sorted(module_starts(aggregated.elements)) == [0, 1580]

    @pytest.mark.parametrize("width", [1840, 2700, 4000, 6543])
    def test_elements_stay_within_area(self, straw_material, width):
        aggregated = aggregate_results(
            strawhenge_wall_area(create_area(width=width), SingleModuleConfig(), InfillConfig(), straw_material)
        )

        for item in aggregated.elements:
            assert item.bounds.min[0] >= -1e-6
            assert item.bounds.max[0] <= width + 1e-6
