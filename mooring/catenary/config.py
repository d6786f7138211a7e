"""
catenary/config.py - Engine configuration.

Options the caller passes into CatenaryEngine. The engine never reads
environment or global state on its own; see bootstrap/config.py for
loading these values from the environment or a file.
"""

from __future__ import annotations
from dataclasses import dataclass
from typing import Any, Dict, Optional
import os

from mooring.core.constants import DEFAULT_MIN_SAFETY_FACTOR, DEFAULT_SAMPLE_COUNT
from mooring.core.enums import CurveProfile


@dataclass
class EngineConfig:
    """Catenary engine options."""

    sample_count: int = DEFAULT_SAMPLE_COUNT
    min_safety_factor: float = DEFAULT_MIN_SAFETY_FACTOR
    curve_profile: CurveProfile = CurveProfile.LEGACY_COSINE
    geometry_model: str = "simplified"

    # Named rule set (see core.constants.SAFETY_RULE_SETS); overrides min_safety_factor
    safety_rule_set: Optional[str] = None

    def __post_init__(self):
        """Validate configuration."""
        self.curve_profile = CurveProfile(self.curve_profile)
        if isinstance(self.sample_count, bool) or not isinstance(self.sample_count, int) or self.sample_count < 1:
            raise ValueError(f"sample_count must be a positive integer: {self.sample_count!r}")
        if not self.min_safety_factor > 0:
            raise ValueError(f"min_safety_factor must be positive: {self.min_safety_factor!r}")

    @classmethod
    def from_env(cls) -> "EngineConfig":
        return cls(
            sample_count=int(os.getenv("MOORING_SAMPLE_COUNT", str(DEFAULT_SAMPLE_COUNT))),
            min_safety_factor=float(os.getenv("MOORING_MIN_SAFETY_FACTOR", str(DEFAULT_MIN_SAFETY_FACTOR))),
            curve_profile=CurveProfile(os.getenv("MOORING_CURVE_PROFILE", CurveProfile.LEGACY_COSINE.value)),
            geometry_model=os.getenv("MOORING_GEOMETRY_MODEL", "simplified"),
            safety_rule_set=os.getenv("MOORING_SAFETY_RULE_SET") or None,
        )

    def to_dict(self) -> Dict[str, Any]:
        return {
            "sample_count": self.sample_count,
            "min_safety_factor": self.min_safety_factor,
            "curve_profile": self.curve_profile.value,
            "geometry_model": self.geometry_model,
            "safety_rule_set": self.safety_rule_set,
        }
