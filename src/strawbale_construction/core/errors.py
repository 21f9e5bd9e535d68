# File: src/strawbale_construction/core/errors.py
"""
Exceptions raised by the construction engine.

Construction-quality problems (a bale that does not fit, a header without
room) are never raised: they travel as ConstructionIssue data inside the
model. The exceptions here signal that the caller handed the engine an
inconsistent building or configuration snapshot.
"""

from typing import Any, Dict, Optional


class StrawbaleConstructionError(Exception):
    """Base class for engine integrity failures."""

    def __init__(self, detail: str, extra: Optional[Dict[str, Any]] = None):
        self.detail = detail
        self.extra = extra or {}
        super().__init__(detail)


class ResourceNotFoundError(StrawbaleConstructionError):
    """A referenced record does not exist in the snapshot."""

    def __init__(
        self,
        resource_type: str,
        resource_id: Optional[str],
        extra: Optional[Dict[str, Any]] = None,
    ):
        """
        Args:
            resource_type: Type of record (e.g. "wall", "opening assembly")
            resource_id: ID of the missing record
            extra: Optional additional context
        """
        self.resource_type = resource_type
        self.resource_id = resource_id
        detail = f"{resource_type[:1].upper()}{resource_type[1:]} with ID '{resource_id}' not found"
        super().__init__(detail, extra)


class ModelIntegrityError(ResourceNotFoundError):
    """Missing wall, perimeter, corner or storey record."""


class ConfigurationIntegrityError(ResourceNotFoundError):
    """Missing assembly, material or global default configuration."""
