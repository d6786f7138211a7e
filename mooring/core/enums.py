"""
Mooring Core Enumerations

Enumeration types shared by the catenary engine and its callers.
"""

from enum import Enum


class ComponentType(str, Enum):
    """
    Mooring line component families offered by the component catalog.

    Values match the labels stored with historical calculation records.
    """
    CHAIN = "Chain"
    WIRE_ROPE = "Wire Rope"
    SYNTHETIC_ROPE = "Synthetic Rope"
    POLYESTER_ROPE = "Polyester Rope"

    @classmethod
    def parse(cls, value) -> "ComponentType":
        """Resolve a label, member name or member into a ComponentType."""
        if isinstance(value, cls):
            return value
        text = str(value).strip()
        if not text:
            raise ValueError("Component type is required")
        for member in cls:
            if text == member.value or text.upper() == member.name:
                return member
        # Catalog keys use short prefixes ("Wire-70mm")
        for member in cls:
            if member.value.lower().startswith(text.lower()):
                return member
        raise ValueError(f"Unknown component type: {value!r}")


class CurveProfile(str, Enum):
    """
    Shape functions available for sampling the line profile.

    LEGACY_COSINE is the reference profile historical results were drawn
    with; it reaches twice the water depth at the anchor. LEGACY_HYPERBOLIC
    reproduces the visualization-layer variant. ANCHORED_COSINE is the
    corrected profile that ends at (anchor_distance, water_depth).
    """
    LEGACY_COSINE = "legacy_cosine"
    LEGACY_HYPERBOLIC = "legacy_hyperbolic"
    ANCHORED_COSINE = "anchored_cosine"


class SafetyStatus(str, Enum):
    """Display tier of a safety factor, as shown next to calculation results."""
    SAFE = "Safe"
    ACCEPTABLE = "Acceptable"
    UNSAFE = "Unsafe"
