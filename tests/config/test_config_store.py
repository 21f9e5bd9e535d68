# File: tests/config/test_config_store.py
"""Tests for the configuration store and schemas."""

import pytest
from pydantic import ValidationError

from strawbale_construction.config.schemas import (
    DoubleModuleConfig,
    InfillConfig,
    InfillWallAssemblyConfig,
    SimpleOpeningAssemblyConfig,
    SingleModuleConfig,
    WallAssemblyType,
)
from strawbale_construction.config.store import ConfigStore
from strawbale_construction.materials.material import GenericMaterial, StrawbaleMaterial


def create_infill_assembly(assembly_id="wa_custom", max_post_spacing=800):
    return InfillWallAssemblyConfig(
        id=assembly_id,
        name="Custom infill",
        infill=InfillConfig(max_post_spacing=max_post_spacing),
    )


class TestDefaults:
    """Tests for the default catalog."""

    def test_default_store_lookups(self, config_store):
        assert config_store.get_wall_assembly("wa_infill_default").assembly_type is WallAssemblyType.INFILL
        assert config_store.get_opening_assembly("oa_simple_default").padding == 15
        assert config_store.get_ring_beam_assembly("rb_full_default").height == 60
        assert config_store.get_floor_assembly("fa_concrete_default").top_layers_thickness == 60

    def test_every_assembly_type_has_a_default(self, config_store):
        types = {assembly.assembly_type for assembly in config_store.wall_assemblies.values()}

        assert types == set(WallAssemblyType)

    def test_missing_ids_return_none(self, config_store):
        assert config_store.get_wall_assembly("nope") is None
        assert config_store.get_material(None) is None
        assert config_store.get_floor_assembly("") is None

    def test_straw_material_falls_back_to_default(self, config_store):
        straw = config_store.get_straw_material()

        assert isinstance(straw, StrawbaleMaterial)
        assert straw.id == "straw"


class TestWithUpdates:
    """Tests for deriving new stores."""

    def test_adds_records_without_touching_original(self, config_store):
        updated = config_store.with_updates(wall_assemblies=[create_infill_assembly()])

        assert updated.get_wall_assembly("wa_custom") is not None
        assert config_store.get_wall_assembly("wa_custom") is None
        assert updated.get_wall_assembly("wa_infill_default") is not None

    def test_replaces_by_id(self, config_store):
        updated = config_store.with_updates(
            materials=[GenericMaterial(id="straw", name="Loose straw")]
        )

        assert not isinstance(updated.get_straw_material(), StrawbaleMaterial)

    def test_scalar_settings(self, config_store):
        updated = config_store.with_updates(default_opening_assembly_id=None)

        assert updated.default_opening_assembly_id is None

    def test_unknown_setting_rejected(self, config_store):
        with pytest.raises(TypeError):
            config_store.with_updates(default_wall_assembly_id="wa_custom")

    def test_store_is_frozen(self, config_store):
        with pytest.raises(ValidationError):
            config_store.default_straw_material_id = "other"


class TestFromDict:
    """Tests for loading a store from plain data."""

    def test_round_trip_through_dict(self, config_store):
        restored = ConfigStore.from_dict(config_store.to_dict())

        assert restored.get_wall_assembly("wa_modules_default") == config_store.get_wall_assembly("wa_modules_default")

    def test_lists_keyed_by_id(self):
        store = ConfigStore.from_dict({
            "materials": [{"id": "straw", "name": "Straw", "type": "strawbale"}],
            "opening_assemblies": [{"id": "oa_1", "name": "Frame", "type": "simple", "padding": 20}],
        })

        assert isinstance(store.get_material("straw"), StrawbaleMaterial)
        assert store.get_opening_assembly("oa_1").padding == 20

    def test_discriminator_selects_module_type(self):
        store = ConfigStore.from_dict({
            "wall_assemblies": [{
                "id": "wa_double",
                "name": "Double modules",
                "type": "modules",
                "module": {"type": "double", "width": 1000, "spacer_count": 4},
            }],
        })

        module = store.get_wall_assembly("wa_double").module
        assert isinstance(module, DoubleModuleConfig)
        assert module.spacer_count == 4

    def test_mismatched_key_rejected(self):
        with pytest.raises(ValidationError):
            ConfigStore.from_dict({
                "materials": {"straw": {"id": "hay", "name": "Hay", "type": "generic"}},
            })


class TestSchemaValidation:
    """Tests for field constraints."""

    def test_post_spacing_must_be_positive(self):
        with pytest.raises(ValidationError):
            InfillConfig(max_post_spacing=0)

    def test_module_frame_must_leave_room(self):
        with pytest.raises(ValidationError):
            SingleModuleConfig(width=100, frame_thickness=50)

    def test_double_module_needs_two_spacers(self):
        with pytest.raises(ValidationError):
            DoubleModuleConfig(spacer_count=1)

    def test_filling_needs_thickness(self):
        with pytest.raises(ValidationError):
            SimpleOpeningAssemblyConfig(id="oa", name="Frame", filling_material="glass")
