# File: src/strawbale_construction/utils/units.py
"""Length helpers. The engine works in millimetres throughout."""

from enum import Enum


class LengthUnit(Enum):
    """Units a length label can be rendered in."""
    MILLIMETERS = "mm"
    CENTIMETERS = "cm"
    METERS = "m"


_MM_PER_UNIT = {
    LengthUnit.MILLIMETERS: 1.0,
    LengthUnit.CENTIMETERS: 10.0,
    LengthUnit.METERS: 1000.0,
}


def convert_from_mm(value: float, target_unit: LengthUnit) -> float:
    """Converts a millimetre value into the target unit."""
    return value / _MM_PER_UNIT[target_unit]


def format_length(value: float, unit: LengthUnit = LengthUnit.MILLIMETERS) -> str:
    """
    Formats a millimetre length for a measurement label.

    Whole numbers are printed without decimals, everything else with at most
    two, trailing zeros stripped: 800 -> "800mm", 1.5 -> "1.5mm",
    1234 in metres -> "1.23m".
    """
    converted = convert_from_mm(value, unit)
    rounded = round(converted, 2)
    if rounded == int(rounded):
        text = str(int(rounded))
    else:
        text = f"{rounded:.2f}".rstrip("0").rstrip(".")
    return f"{text}{unit.value}"
