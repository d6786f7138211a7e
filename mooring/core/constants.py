"""
Mooring Constants

Engine defaults and safety-factor rule sets.

References:
- API RP 2SK, 3rd Edition, Table 2 - Tension limits and safety factors
- DNV-OS-E301 - Position Mooring (simplified single-factor reading)
"""

from __future__ import annotations
from dataclasses import dataclass
from typing import Dict, Tuple


# =============================================================================
# ENGINE DEFAULTS
# =============================================================================

DEFAULT_SAMPLE_COUNT = 100          # Curve segments (101 points)
DEFAULT_MIN_SAFETY_FACTOR = 1.67    # DNV-style mooring guidance

# Display tiers: Safe at or above SAFE, Acceptable at or above ACCEPTABLE
SAFE_SAFETY_FACTOR = 2.0
ACCEPTABLE_SAFETY_FACTOR = DEFAULT_MIN_SAFETY_FACTOR

# Numeric inputs checked by validation, in check order
REQUIRED_NUMERIC_FIELDS: Tuple[str, ...] = (
    "fairlead_tension",
    "water_depth",
    "component_length",
    "component_weight",
    "component_stiffness",
    "component_mbl",
)


# =============================================================================
# SAFETY FACTOR RULE SETS
# =============================================================================

@dataclass(frozen=True)
class SafetyRuleSet:
    """Minimum safety factor required by a classification rule set."""
    name: str
    min_safety_factor: float
    description: str = ""

    def to_dict(self) -> Dict[str, object]:
        return {
            "name": self.name,
            "min_safety_factor": self.min_safety_factor,
            "description": self.description,
        }


SAFETY_RULE_SETS: Dict[str, SafetyRuleSet] = {
    "default": SafetyRuleSet(
        "default", DEFAULT_MIN_SAFETY_FACTOR, "Simplified DNV-style minimum",
    ),
    "dnv": SafetyRuleSet(
        "dnv", DEFAULT_MIN_SAFETY_FACTOR, "DNV-OS-E301 simplified single factor",
    ),
    "api_rp_2sk_intact_dynamic": SafetyRuleSet(
        "api_rp_2sk_intact_dynamic", 1.67, "API RP 2SK intact, dynamic analysis",
    ),
    "api_rp_2sk_intact_quasi_static": SafetyRuleSet(
        "api_rp_2sk_intact_quasi_static", 2.00, "API RP 2SK intact, quasi-static analysis",
    ),
    "api_rp_2sk_damaged_dynamic": SafetyRuleSet(
        "api_rp_2sk_damaged_dynamic", 1.25, "API RP 2SK damaged (one line broken), dynamic",
    ),
    "api_rp_2sk_damaged_quasi_static": SafetyRuleSet(
        "api_rp_2sk_damaged_quasi_static", 1.43, "API RP 2SK damaged (one line broken), quasi-static",
    ),
}


def required_safety_factor(rule_set: str = "default") -> float:
    """
    Look up the minimum safety factor for a named rule set.

    Raises:
        KeyError: If the rule set is not defined
    """
    key = rule_set.strip().lower()
    if key not in SAFETY_RULE_SETS:
        raise KeyError(
            f"Unknown safety rule set: {rule_set}. "
            f"Available: {sorted(SAFETY_RULE_SETS)}"
        )
    return SAFETY_RULE_SETS[key].min_safety_factor
