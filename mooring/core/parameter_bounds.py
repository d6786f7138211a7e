"""
mooring/core/parameter_bounds.py - Form-level bounds for line inputs.

Upper limits applied to raw form submissions before the engine runs.
The engine itself only requires strict positivity.
"""

from typing import Any, Dict


PARAMETER_BOUNDS: Dict[str, Dict[str, Any]] = {
    "fairlead_tension": {"min": 0, "max": 10_000_000, "type": float},
    "water_depth": {"min": 0, "max": 5000, "type": float},
    "component_length": {"min": 0, "max": float("inf"), "type": float},
    "component_weight": {"min": 0, "max": float("inf"), "type": float},
    "component_stiffness": {"min": 0, "max": float("inf"), "type": float},
    "component_mbl": {"min": 0, "max": float("inf"), "type": float},
}


def get_bounds(name: str) -> dict:
    """
    Get bounds for an input field.

    Args:
        name: Field name (e.g., "water_depth")

    Returns:
        Dict with min, max, type keys
    """
    return PARAMETER_BOUNDS.get(
        name,
        {"min": float("-inf"), "max": float("inf"), "type": float}
    )
