"""
Mooring Unit Converter

Display-unit conversion for catenary results. Each supported pair has one
fixed multiplier; there is no unit algebra or chaining.
"""

from typing import Optional, Tuple


class UnitConversionError(Exception):
    """No conversion factor exists for the requested unit pair."""


# Conversion factors: (from_unit, to_unit) -> multiplier
# value_in_to_unit = value_in_from_unit * multiplier
UNIT_CONVERSIONS = {
    # Length
    ("m", "ft"): 3.28084,
    ("ft", "m"): 0.3048,
    ("m", "mm"): 1000.0,
    ("mm", "m"): 0.001,
    ("m", "in"): 39.3701,
    ("in", "m"): 0.0254,
    ("mm", "in"): 1 / 25.4,
    ("in", "mm"): 25.4,

    # Force
    ("N", "kN"): 0.001,
    ("kN", "N"): 1000.0,
    ("N", "lbs"): 0.224809,
    ("lbs", "N"): 4.44822,
    ("kN", "lbs"): 224.809,
    ("lbs", "kN"): 0.00444822,
    ("kN", "te"): 1 / 9.80665,
    ("te", "kN"): 9.80665,
    ("N", "te"): 1 / 9806.65,
    ("te", "N"): 9806.65,

    # Weight per unit length
    ("kg/m", "lb/ft"): 0.671969,
    ("lb/ft", "kg/m"): 1.48816,

    # Angle
    ("deg", "rad"): 0.0174533,
    ("rad", "deg"): 57.2958,
}


# Display units accepted for each quantity
LENGTH_UNITS = ("m", "ft", "mm", "in")
FORCE_UNITS = ("N", "kN", "lbs", "te")


class UnitConverter:
    """Converts engine values (SI by convention) into display units."""

    @staticmethod
    def normalize(value: float, from_unit: str, to_unit: str) -> float:
        """
        Re-express a length, force or weight in another unit.

        Identical units pass the value through untouched. Unit names are
        matched case-insensitively, so "KN" resolves to "kN".

        Raises:
            UnitConversionError: No factor is defined for the pair
        """
        if from_unit == to_unit:
            return value

        key = UnitConverter._lookup(from_unit, to_unit)
        if key is None:
            raise UnitConversionError(f"Cannot convert {from_unit!r} to {to_unit!r}")
        return value * UNIT_CONVERSIONS[key]

    @staticmethod
    def _lookup(from_unit: str, to_unit: str) -> Optional[Tuple[str, str]]:
        from_key = from_unit.strip()
        to_key = to_unit.strip()

        key = (from_key, to_key)
        if key in UNIT_CONVERSIONS:
            return key

        lowered = {(a.lower(), b.lower()): (a, b) for a, b in UNIT_CONVERSIONS}
        return lowered.get((from_key.lower(), to_key.lower()))
