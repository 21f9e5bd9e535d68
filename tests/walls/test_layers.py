# File: tests/walls/test_layers.py
"""Tests for inside and outside cladding layers."""

import pytest
from shapely.geometry import Polygon

from strawbale_construction.building.records import Opening
from strawbale_construction.config.schemas import (
    InfillWallAssemblyConfig,
    MonolithicLayerConfig,
    StripedLayerConfig,
    WallLayersConfig,
)
from strawbale_construction.core.errors import ConfigurationIntegrityError
from strawbale_construction.core.tags import TAG_LAYER_INSIDE, TAG_LAYER_OUTSIDE, create_layer_tag
from strawbale_construction.walls.context import WallStoreyContext
from strawbale_construction.walls.layers import construct_wall_layers, layer_extent, layer_polygon

STOREY_CONTEXT = WallStoreyContext(storey_height=2500, floor_top_offset=60, ceiling_bottom_offset=0)


def create_window():
    return Opening(id="window", type="window", offset_from_start=1000, width=900, height=1200, sill_height=900)


def construct_layers(building, config_store, wall_assembly, wall_index=0):
    perimeter = building.perimeters[0]
    return construct_wall_layers(
        perimeter.walls[wall_index], perimeter, wall_index, STOREY_CONTEXT, wall_assembly, config_store,
    )


def create_assembly(outside_layers, inside_layers=()):
    return InfillWallAssemblyConfig(
        id="wa_infill_default",
        name="Layered",
        layers=WallLayersConfig(inside_layers=list(inside_layers), outside_layers=list(outside_layers)),
    )


def area_of(element):
    return Polygon(element.shape.outer, list(element.shape.holes)).area


class TestConstructWallLayers:
    """Tests for layer placement in the wall frame."""

    def test_default_plaster_layers(self, wall_factory, building_factory, config_store):
        building = building_factory([wall_factory()])
        model = construct_layers(building, config_store, config_store.get_wall_assembly("wa_infill_default"))

        inside = [e for e in model.elements if e.has_tag(TAG_LAYER_INSIDE)]
        outside = [e for e in model.elements if e.has_tag(TAG_LAYER_OUTSIDE)]
        assert len(inside) == 1
        assert len(outside) == 1
        assert inside[0].bounds.min == pytest.approx((0, 0, 0))
        assert inside[0].bounds.max == pytest.approx((3000, 30, 2560))
        assert outside[0].bounds.min == pytest.approx((0, 390, 0))
        assert outside[0].bounds.max == pytest.approx((3000, 420, 2560))
        assert inside[0].material == "clay_plaster"
        assert inside[0].has_tag(create_layer_tag("Clay plaster"))

    def test_layers_stack_away_from_core(self, wall_factory, building_factory, config_store):
        assembly = create_assembly(
            outside_layers=[
                MonolithicLayerConfig(name="Base coat", thickness=20, material="lime_plaster"),
                MonolithicLayerConfig(name="Boards", thickness=15, material="osb"),
            ],
            inside_layers=[
                MonolithicLayerConfig(name="Base coat", thickness=20, material="clay_plaster"),
                MonolithicLayerConfig(name="Finish", thickness=10, material="clay_plaster"),
            ],
        )
        model = construct_layers(building_factory([wall_factory()]), config_store, assembly)

        by_name = {
            (element.tags[0], element.tags[1].label): element.bounds for element in model.elements
        }
        assert by_name[(TAG_LAYER_INSIDE, "Base coat")].min[1] == pytest.approx(10)
        assert by_name[(TAG_LAYER_INSIDE, "Finish")].min[1] == pytest.approx(0)
        assert by_name[(TAG_LAYER_OUTSIDE, "Base coat")].min[1] == pytest.approx(385)
        assert by_name[(TAG_LAYER_OUTSIDE, "Boards")].min[1] == pytest.approx(405)

    def test_opening_cut_out(self, wall_factory, building_factory, config_store):
        building = building_factory([wall_factory(openings=[create_window()])])
        model = construct_layers(building, config_store, config_store.get_wall_assembly("wa_infill_default"))

        for element in model.elements:
            assert len(element.shape.holes) == 1
            assert area_of(element) == pytest.approx(3000 * 2560 - 900 * 1200)

    def test_ring_beams_limit_height(self, wall_factory, building_factory, config_store):
        building = building_factory(
            [wall_factory()],
            base_ring_beam_assembly_id="rb_full_default",
            top_ring_beam_assembly_id="rb_double_default",
        )
        model = construct_layers(building, config_store, config_store.get_wall_assembly("wa_infill_default"))

        for element in model.elements:
            assert element.bounds.min[2] == pytest.approx(60)
            assert element.bounds.max[2] == pytest.approx(2440)

    def test_no_layers(self, wall_factory, building_factory, config_store):
        model = construct_layers(
            building_factory([wall_factory()]),
            config_store,
            config_store.get_wall_assembly("wa_non_strawbale_default"),
        )

        assert model.elements == ()

    def test_missing_neighbour_assembly(self, wall_factory, building_factory, config_store):
        building = building_factory([wall_factory(wall_assembly_id="wa_missing")])

        with pytest.raises(ConfigurationIntegrityError):
            construct_layers(building, config_store, config_store.get_wall_assembly("wa_infill_default"))


class TestStripedLayers:
    """Tests for batten and lath layers."""

    def test_perpendicular_battens(self, wall_factory, building_factory, config_store):
        model = construct_layers(
            building_factory([wall_factory()]),
            config_store,
            config_store.get_wall_assembly("wa_modules_default"),
        )

        battens = [e for e in model.elements if e.has_tag(TAG_LAYER_OUTSIDE)]
        assert len(battens) == 6
        assert all(element.material == "wood" for element in battens)
        assert sum(area_of(element) for element in battens) == pytest.approx(6 * 50 * 2560)

    def test_gap_material_fills_between_stripes(self, wall_factory, building_factory, config_store):
        layer = StripedLayerConfig(name="Battens", thickness=30, stripe_width=50, stripe_material="wood",
                                   gap_width=450, gap_material="wood_fiber")
        model = construct_layers(building_factory([wall_factory()]), config_store, create_assembly([layer]))

        stripes = [e for e in model.elements if e.material == "wood"]
        gaps = [e for e in model.elements if e.material == "wood_fiber"]
        assert len(stripes) == 6
        assert len(gaps) == 6
        total = sum(area_of(element) for element in stripes + gaps)
        assert total == pytest.approx(3000 * 2560)

    def test_colinear_stripes(self, wall_factory, building_factory, config_store):
        layer = StripedLayerConfig(name="Laths", thickness=30, direction="colinear", stripe_width=50,
                                   stripe_material="wood", gap_width=450)
        model = construct_layers(building_factory([wall_factory()]), config_store, create_assembly([layer]))

        assert len(model.elements) == 6
        for element in model.elements:
            assert element.bounds.min[0] == pytest.approx(0)
            assert element.bounds.max[0] == pytest.approx(3000)

    def test_diagonal_stripes_stay_within_layer(self, wall_factory, building_factory, config_store):
        layer = StripedLayerConfig(name="Laths", thickness=30, direction="diagonal", angle=45, stripe_width=50,
                                   stripe_material="wood", gap_width=150)
        model = construct_layers(building_factory([wall_factory()]), config_store, create_assembly([layer]))

        assert model.elements
        total = sum(area_of(element) for element in model.elements)
        assert 0 < total < 3000 * 2560
        for element in model.elements:
            assert element.bounds.min[0] >= -1e-6
            assert element.bounds.max[0] <= 3000 + 1e-6
            assert element.bounds.max[2] <= 2560 + 1e-6


class TestLayerExtent:
    """Tests for layer extents at corners."""

    def test_free_wall(self, wall_factory, building_factory, config_store):
        building = building_factory([wall_factory()])
        perimeter = building.perimeters[0]

        assert layer_extent(perimeter.walls[0], perimeter, 0, config_store, "outside") == (0, 3000)

    def test_owning_wall_extends_outside_layer(self, rectangle_building, config_store):
        perimeter = rectangle_building.perimeters[0]
        start, end = layer_extent(perimeter.walls[0], perimeter, 0, config_store, "outside")

        assert start == pytest.approx(-390)
        assert end == pytest.approx(4390)

    def test_other_wall_pulls_back_inside_layer(self, rectangle_building, config_store):
        perimeter = rectangle_building.perimeters[0]
        start, end = layer_extent(perimeter.walls[1], perimeter, 1, config_store, "inside")

        assert start == pytest.approx(30)
        assert end == pytest.approx(5970)


class TestLayerPolygon:
    """Tests for the layer outline."""

    def test_plain_rectangle(self, wall_factory):
        polygon = layer_polygon(wall_factory(), 0, 3000, 0, 2560, 60)

        assert polygon.area == pytest.approx(3000 * 2560)
        assert len(polygon.interiors) == 0

    def test_door_at_edge_opens_outline(self, wall_factory):
        door = Opening(id="door", type="door", offset_from_start=0, width=900, height=2100)
        polygon = layer_polygon(wall_factory(openings=[door]), 0, 3000, 60, 2560, 60)

        assert len(polygon.interiors) == 0
        assert polygon.area == pytest.approx(3000 * 2500 - 900 * 2100)

    def test_rejected_openings_stay_closed(self, wall_factory):
        overlapping = Opening(id="overlap", type="window", offset_from_start=1500, width=600, height=1200,
                              sill_height=900)
        past_end = Opening(id="past_end", type="door", offset_from_start=2500, width=900, height=2100)
        wall = wall_factory(openings=[create_window(), overlapping, past_end])

        polygon = layer_polygon(wall, 0, 3000, 0, 2560, 60)

        assert len(polygon.interiors) == 1
        assert polygon.area == pytest.approx(3000 * 2560 - 900 * 1200)
