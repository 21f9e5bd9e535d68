# src/strawbale_construction/__init__.py
"""
Strawbale construction planning engine.

Turns perimeter walls with openings into dimensioned construction plans:
posts, plates, straw bales, prefabricated modules, opening frames and
cladding layers, with measurements and construction issues carried as data.
"""

from .building.records import BuildingModel, Opening, Perimeter, PerimeterCorner, PerimeterWall, Storey
from .config.store import ConfigStore
from .core.errors import ConfigurationIntegrityError, ModelIntegrityError, StrawbaleConstructionError
from .core.model import ConstructionModel
from .core.parts import build_parts_list
from .walls.construction import construct_wall
from .walls.perimeter import construct_perimeter

__version__ = "0.1.0"

__all__ = [
    'BuildingModel',
    'Opening',
    'Perimeter',
    'PerimeterCorner',
    'PerimeterWall',
    'Storey',
    'ConfigStore',
    'ConfigurationIntegrityError',
    'ModelIntegrityError',
    'StrawbaleConstructionError',
    'ConstructionModel',
    'build_parts_list',
    'construct_wall',
    'construct_perimeter',
]
