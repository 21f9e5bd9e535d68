# File: src/strawbale_construction/config/store.py
"""
Configuration store: an immutable snapshot of every material and assembly a
construction pass may look up.

Lookups return None for unknown ids. Deciding whether a missing record is an
integrity failure is up to the caller, which knows whether the id was required.

Usage:
    store = ConfigStore.from_defaults()
    store = store.with_updates(wall_assemblies=[my_assembly])
    assembly = store.get_wall_assembly("wa_infill_default")
"""

from typing import Any, Dict, Iterable, Optional

from pydantic import BaseModel, ConfigDict, Field, model_validator

from ..materials.material import BaseMaterial, Material, StrawbaleMaterial
from ..utils.logging_config import get_logger
from . import defaults
from .schemas import (
    FloorAssemblyConfig,
    OpeningAssemblyConfig,
    RingBeamAssemblyConfig,
    WallAssemblyConfig,
)

logger = get_logger(__name__)

_RECORD_FIELDS = (
    "materials",
    "wall_assemblies",
    "opening_assemblies",
    "ring_beam_assemblies",
    "floor_assemblies",
)


class ConfigStore(BaseModel):
    model_config = ConfigDict(frozen=True)

    materials: Dict[str, Material] = Field(default_factory=dict)
    wall_assemblies: Dict[str, WallAssemblyConfig] = Field(default_factory=dict)
    opening_assemblies: Dict[str, OpeningAssemblyConfig] = Field(default_factory=dict)
    ring_beam_assemblies: Dict[str, RingBeamAssemblyConfig] = Field(default_factory=dict)
    floor_assemblies: Dict[str, FloorAssemblyConfig] = Field(default_factory=dict)
    default_opening_assembly_id: Optional[str] = None
    default_straw_material_id: Optional[str] = None

    @model_validator(mode='after')
    def validate_record_ids(self) -> 'ConfigStore':
        """Validate that every record is stored under its own id."""
        for field_name in _RECORD_FIELDS:
            for key, record in getattr(self, field_name).items():
                if key != record.id:
                    raise ValueError(
                        f"{field_name} entry '{key}' holds a record with id '{record.id}'"
                    )
        return self

    # ------------------------------------------------------------------
    # Construction
    # ------------------------------------------------------------------

    @classmethod
    def from_defaults(cls) -> "ConfigStore":
        """Store holding the default catalog."""
        return cls(
            materials=dict(defaults.DEFAULT_MATERIALS),
            wall_assemblies=dict(defaults.DEFAULT_WALL_ASSEMBLIES),
            opening_assemblies=dict(defaults.DEFAULT_OPENING_ASSEMBLIES),
            ring_beam_assemblies=dict(defaults.DEFAULT_RING_BEAM_ASSEMBLIES),
            floor_assemblies=dict(defaults.DEFAULT_FLOOR_ASSEMBLIES),
            default_opening_assembly_id=defaults.DEFAULT_OPENING_ASSEMBLY_ID,
            default_straw_material_id=defaults.DEFAULT_STRAW_MATERIAL_ID,
        )

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "ConfigStore":
        """
        Validates a plain dict into a store.

        Record collections may be given as lists; they are keyed by id.
        """
        normalized = dict(data)
        for field_name in _RECORD_FIELDS:
            value = normalized.get(field_name)
            if isinstance(value, list):
                normalized[field_name] = {record["id"]: record for record in value}
        return cls.model_validate(normalized)

    def to_dict(self) -> Dict[str, Any]:
        return self.model_dump(mode="json")

    def with_updates(
        self,
        materials: Iterable[BaseMaterial] = (),
        wall_assemblies: Iterable[WallAssemblyConfig] = (),
        opening_assemblies: Iterable[OpeningAssemblyConfig] = (),
        ring_beam_assemblies: Iterable[RingBeamAssemblyConfig] = (),
        floor_assemblies: Iterable[FloorAssemblyConfig] = (),
        **scalar_updates: Any,
    ) -> "ConfigStore":
        """
        Returns a new store with records added or replaced by id.

        Keyword arguments default_opening_assembly_id and
        default_straw_material_id replace those settings (None clears them).
        """
        unknown = set(scalar_updates) - {"default_opening_assembly_id", "default_straw_material_id"}
        if unknown:
            raise TypeError(f"Unknown store settings: {sorted(unknown)}")

        update: Dict[str, Any] = dict(scalar_updates)
        for field_name, records in (
            ("materials", materials),
            ("wall_assemblies", wall_assemblies),
            ("opening_assemblies", opening_assemblies),
            ("ring_beam_assemblies", ring_beam_assemblies),
            ("floor_assemblies", floor_assemblies),
        ):
            records = list(records)
            if records:
                merged = dict(getattr(self, field_name))
                merged.update({record.id: record for record in records})
                update[field_name] = merged

        return self.model_copy(update=update)

    # ------------------------------------------------------------------
    # Lookups
    # ------------------------------------------------------------------

    def get_material(self, material_id: Optional[str]) -> Optional[BaseMaterial]:
        return self.materials.get(material_id) if material_id else None

    def get_straw_material(self, material_id: Optional[str] = None) -> Optional[BaseMaterial]:
        """
        Resolves a straw material id, falling back to the default straw material.

        The result may be any material; straw packing treats non-bale
        materials as stuffed fill.
        """
        resolved_id = material_id or self.default_straw_material_id
        material = self.get_material(resolved_id)
        if material is not None and not isinstance(material, StrawbaleMaterial):
            logger.debug(f"Straw material '{resolved_id}' is not a straw bale material")
        return material

    def get_wall_assembly(self, assembly_id: Optional[str]) -> Optional[WallAssemblyConfig]:
        return self.wall_assemblies.get(assembly_id) if assembly_id else None

    def get_opening_assembly(self, assembly_id: Optional[str]) -> Optional[OpeningAssemblyConfig]:
        return self.opening_assemblies.get(assembly_id) if assembly_id else None

    def get_ring_beam_assembly(self, assembly_id: Optional[str]) -> Optional[RingBeamAssemblyConfig]:
        return self.ring_beam_assemblies.get(assembly_id) if assembly_id else None

    def get_floor_assembly(self, assembly_id: Optional[str]) -> Optional[FloorAssemblyConfig]:
        return self.floor_assemblies.get(assembly_id) if assembly_id else None
