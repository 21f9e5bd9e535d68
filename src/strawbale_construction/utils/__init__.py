"""Shared helpers: logging setup and length formatting."""

from .logging_config import StrawbaleLogger, get_logger
from .units import LengthUnit, format_length

__all__ = [
    "StrawbaleLogger",
    "get_logger",
    "LengthUnit",
    "format_length",
]
