# File: src/strawbale_construction/config/opening_resolver.py

"""Opening assembly resolution.

Each opening is framed by an opening assembly chosen by the first level that
names one that exists:

- **opening**: the opening's own ``opening_assembly_id`` override.
- **wall_assembly**: the containing wall assembly's ``opening_assembly_id``.
- **default**: the store's ``default_opening_assembly_id``.

A level naming an id the store does not know is skipped (and logged), so a
stale override never blocks construction. Only a missing global default is an
integrity failure, because without it there is nothing left to fall back to.

Usage:
    resolution = resolve_opening_assembly(opening, wall_assembly, store)
    padding = resolution.assembly.padding
"""

from dataclasses import dataclass
from typing import List, Optional, Tuple

from ..core.errors import ConfigurationIntegrityError
from ..utils.logging_config import get_logger
from .schemas import BaseWallAssemblyConfig, OpeningAssemblyConfig
from .store import ConfigStore

logger = get_logger(__name__)


# =============================================================================
# Resolution Result
# =============================================================================


@dataclass(frozen=True)
class OpeningAssemblyResolution:
    """Result of resolving the opening assembly for one opening.

    Attributes:
        assembly: The resolved opening assembly configuration.
        source: Level the assembly came from: "opening", "wall_assembly" or "default".
        notes: Ids that were named but not found on the way, for diagnostics.
    """

    assembly: OpeningAssemblyConfig
    source: str
    notes: Tuple[str, ...] = ()


def resolve_opening_assembly(
    opening,
    wall_assembly: Optional[BaseWallAssemblyConfig],
    store: ConfigStore,
) -> OpeningAssemblyResolution:
    """Resolve the opening assembly for an opening.

    Args:
        opening: Opening record (anything with ``id`` and ``opening_assembly_id``).
        wall_assembly: Assembly of the wall containing the opening, if known.
        store: Configuration snapshot.

    Returns:
        OpeningAssemblyResolution for the first level naming an existing assembly.

    Raises:
        ConfigurationIntegrityError: If no level resolves and the global
            default is missing.
    """
    candidates: List[Tuple[str, Optional[str]]] = [
        ("opening", getattr(opening, "opening_assembly_id", None)),
        ("wall_assembly", wall_assembly.opening_assembly_id if wall_assembly else None),
        ("default", store.default_opening_assembly_id),
    ]

    notes: List[str] = []
    for source, assembly_id in candidates:
        if not assembly_id:
            continue
        assembly = store.get_opening_assembly(assembly_id)
        if assembly is not None:
            return OpeningAssemblyResolution(assembly=assembly, source=source, notes=tuple(notes))
        note = f"{source} names unknown opening assembly '{assembly_id}'"
        logger.warning(f"Opening {getattr(opening, 'id', '?')}: {note}")
        notes.append(note)

    raise ConfigurationIntegrityError(
        "default opening assembly",
        store.default_opening_assembly_id,
        extra={"opening_id": getattr(opening, "id", None), "notes": notes},
    )
