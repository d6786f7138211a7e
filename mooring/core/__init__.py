"""
core/ - Shared enumerations, constants, parameter bounds and unit conversion.
"""

from .enums import ComponentType, CurveProfile, SafetyStatus
from .constants import (
    DEFAULT_SAMPLE_COUNT,
    DEFAULT_MIN_SAFETY_FACTOR,
    SAFE_SAFETY_FACTOR,
    ACCEPTABLE_SAFETY_FACTOR,
    REQUIRED_NUMERIC_FIELDS,
)
from .parameter_bounds import PARAMETER_BOUNDS, get_bounds
from .unit_converter import UnitConverter, UnitConversionError

__all__ = [
    "ComponentType",
    "CurveProfile",
    "SafetyStatus",
    "DEFAULT_SAMPLE_COUNT",
    "DEFAULT_MIN_SAFETY_FACTOR",
    "SAFE_SAFETY_FACTOR",
    "ACCEPTABLE_SAFETY_FACTOR",
    "REQUIRED_NUMERIC_FIELDS",
    "PARAMETER_BOUNDS",
    "get_bounds",
    "UnitConverter",
    "UnitConversionError",
]
