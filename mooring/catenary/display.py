"""
Mooring Result Display

Converts engine results into the caller's preferred display units.
Unit preferences are a presentation concern: they are passed in by the
caller and never read from shared state.
"""

from __future__ import annotations
from dataclasses import dataclass
from typing import Any, Dict

from mooring.core.unit_converter import FORCE_UNITS, LENGTH_UNITS, UnitConverter, UnitConversionError

from .models import CatenaryResult
from .safety import safety_status


@dataclass(frozen=True)
class DisplayUnits:
    """
    Display unit preferences.

    Defaults match the application's initial user settings.
    Values are assumed to be computed in SI (m, N).
    """
    length: str = "ft"
    force: str = "lbs"
    base_length: str = "m"
    base_force: str = "N"

    def __post_init__(self):
        if self.length not in LENGTH_UNITS:
            raise UnitConversionError(f"Unsupported length unit: {self.length}")
        if self.force not in FORCE_UNITS:
            raise UnitConversionError(f"Unsupported force unit: {self.force}")

    def to_dict(self) -> Dict[str, str]:
        return {"length": self.length, "force": self.force}


def format_result(
    result: CatenaryResult,
    units: DisplayUnits = DisplayUnits(),
    decimals: int = 2,
) -> Dict[str, Any]:
    """
    Convert a result into display values with unit labels.

    Angles stay in degrees and the safety factor is dimensionless; its
    display tier (Safe, Acceptable, Unsafe) is taken from the unrounded value.
    The curve is converted point by point in the length unit.
    """
    def length(value: float) -> float:
        return round(UnitConverter.normalize(value, units.base_length, units.length), decimals)

    def force(value: float) -> float:
        return round(UnitConverter.normalize(value, units.base_force, units.force), decimals)

    return {
        "fairleadAngle": {"value": round(result.fairlead_angle_deg, decimals), "unit": "deg"},
        "groundedLength": {"value": length(result.grounded_length), "unit": units.length},
        "anchorDistance": {"value": length(result.anchor_distance), "unit": units.length},
        "anchorAngle": {"value": round(result.anchor_angle_deg, decimals), "unit": "deg"},
        "anchorTension": {"value": force(result.anchor_tension), "unit": units.force},
        "safetyFactor": {"value": round(result.safety_factor, decimals), "unit": ""},
        "safetyStatus": safety_status(result.safety_factor).value,
        "curve": {
            "points": [[length(p.x), length(p.y)] for p in result.curve],
            "unit": units.length,
        },
    }
