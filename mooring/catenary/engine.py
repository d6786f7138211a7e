"""
Mooring Catenary Engine

Validates line inputs, derives catenary geometry through a pluggable
geometry model, checks the safety factor and samples the line profile.

The engine is pure and stateless. Every call is independent, so a
single instance can be shared between threads. Failures raise one of
the typed errors in mooring.errors; nothing is retried and a failed
compute() never returns a partial result.
"""

from __future__ import annotations
from typing import Any, Mapping, Optional, Tuple, Union
import logging

from mooring.core.constants import required_safety_factor
from mooring.core.enums import CurveProfile

from .config import EngineConfig
from .curve import sample_curve as _sample_curve
from .geometry import GeometryModel, get_geometry_model
from .models import CatenaryResult, CurvePoint, LineInput, SafetyCheck
from .safety import check_safety as _check_safety
from .validation import validate_input as _validate_input

logger = logging.getLogger(__name__)


class CatenaryEngine:
    """
    Entry point for catenary calculations.

    Args:
        config: Engine options (defaults: 100 segments, SF 1.67,
            legacy cosine profile, simplified geometry)
        model: Geometry model instance; overrides config.geometry_model
    """

    def __init__(
        self,
        config: Optional[EngineConfig] = None,
        model: Optional[GeometryModel] = None,
    ):
        self.config = config or EngineConfig()
        self.model = model or get_geometry_model(self.config.geometry_model)

    @property
    def required_safety_factor(self) -> float:
        if self.config.safety_rule_set:
            return required_safety_factor(self.config.safety_rule_set)
        return self.config.min_safety_factor

    def validate_input(self, line: Union[LineInput, Mapping[str, Any]]) -> None:
        """
        Validate a line input without computing anything.

        Raises:
            MissingParameterError, DomainError, GeometryError
        """
        _validate_input(line)

    def compute(self, line: Union[LineInput, Mapping[str, Any]]) -> CatenaryResult:
        """
        Compute the catenary result for one line.

        Re-validates the input first and raises the same error
        validate_input() would.

        Returns:
            CatenaryResult including the sampled curve

        Raises:
            MissingParameterError, DomainError, GeometryError,
            DegenerateInputError
        """
        if isinstance(line, Mapping):
            line = LineInput.from_dict(line)

        _validate_input(line)

        geometry = self.model.compute_geometry(line)
        curve = _sample_curve(
            geometry.anchor_distance,
            line.water_depth,
            self.config.sample_count,
            self.config.curve_profile,
        )

        logger.debug(
            f"Computed catenary ({self.model.name}): "
            f"D={geometry.anchor_distance:.3f}, SF={geometry.safety_factor:.3f}"
        )

        return CatenaryResult(
            fairlead_angle_deg=geometry.fairlead_angle_deg,
            grounded_length=geometry.grounded_length,
            anchor_distance=geometry.anchor_distance,
            anchor_angle_deg=geometry.anchor_angle_deg,
            anchor_tension=geometry.anchor_tension,
            safety_factor=geometry.safety_factor,
            curve=curve,
            water_depth=line.water_depth,
            model=self.model.name,
            curve_profile=self.config.curve_profile,
        )

    def check_safety(
        self,
        mbl: float,
        tension: float,
        min_safety_factor: Optional[float] = None,
    ) -> SafetyCheck:
        """Check mbl / tension against min_safety_factor (engine default if None)."""
        if min_safety_factor is None:
            min_safety_factor = self.required_safety_factor
        return _check_safety(mbl, tension, min_safety_factor)

    def sample_curve(
        self,
        anchor_distance: float,
        water_depth: float,
        sample_count: Optional[int] = None,
        profile: Optional[Union[CurveProfile, str]] = None,
    ) -> Tuple[CurvePoint, ...]:
        """Sample the line profile using engine defaults for unset options."""
        return _sample_curve(
            anchor_distance,
            water_depth,
            self.config.sample_count if sample_count is None else sample_count,
            self.config.curve_profile if profile is None else profile,
        )

    def assess(
        self,
        line: Union[LineInput, Mapping[str, Any]],
    ) -> Tuple[CatenaryResult, SafetyCheck]:
        """Compute the result and check its fairlead safety factor in one call."""
        if isinstance(line, Mapping):
            line = LineInput.from_dict(line)
        result = self.compute(line)
        safety = self.check_safety(line.component_mbl, line.fairlead_tension)
        return result, safety


# =============================================================================
# MODULE-LEVEL API
# =============================================================================

_default_engine = CatenaryEngine()


def validate_input(line: Union[LineInput, Mapping[str, Any]]) -> None:
    """Validate a line input with the default engine."""
    _default_engine.validate_input(line)


def compute(line: Union[LineInput, Mapping[str, Any]]) -> CatenaryResult:
    """Compute a catenary result with the default engine."""
    return _default_engine.compute(line)


def check_safety(
    mbl: float,
    tension: float,
    min_safety_factor: Optional[float] = None,
) -> SafetyCheck:
    """Check a safety factor with the default engine."""
    return _default_engine.check_safety(mbl, tension, min_safety_factor)


def sample_curve(
    anchor_distance: float,
    water_depth: float,
    sample_count: Optional[int] = None,
    profile: Optional[Union[CurveProfile, str]] = None,
) -> Tuple[CurvePoint, ...]:
    """Sample the line profile with the default engine."""
    return _default_engine.sample_curve(anchor_distance, water_depth, sample_count, profile)
