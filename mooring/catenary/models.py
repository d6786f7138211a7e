"""
Mooring Catenary Records

Immutable input and result records for one catenary calculation.

Serialized form uses the camelCase keys of the stored calculation
record so that results can be persisted verbatim next to their inputs.
"""

from __future__ import annotations
from dataclasses import dataclass, field
from typing import Any, Dict, Mapping, Optional, Tuple

from mooring.core.constants import DEFAULT_SAMPLE_COUNT
from mooring.core.enums import ComponentType, CurveProfile
from mooring.errors import DomainError, MissingParameterError


# Stored record key -> attribute name
INPUT_KEYS = {
    "fairleadTension": "fairlead_tension",
    "waterDepth": "water_depth",
    "componentType": "component_type",
    "componentSize": "component_size",
    "componentLength": "component_length",
    "componentWeight": "component_weight",
    "componentStiffness": "component_stiffness",
    "componentMBL": "component_mbl",
}

RESULT_KEYS = {
    "fairleadAngle": "fairlead_angle_deg",
    "groundedLength": "grounded_length",
    "anchorDistance": "anchor_distance",
    "anchorAngle": "anchor_angle_deg",
    "anchorTension": "anchor_tension",
    "safetyFactor": "safety_factor",
}


def _pick(data: Mapping[str, Any], camel: str, snake: str) -> Any:
    if camel in data:
        return data[camel]
    return data.get(snake)


def _parse_component_type(value: Any) -> ComponentType:
    try:
        return ComponentType.parse(value)
    except ValueError as exc:
        if not str(value).strip():
            raise MissingParameterError(
                "component_type is required", field="component_type", expected="value",
            ) from exc
        raise DomainError(
            str(exc),
            field="component_type",
            actual=value,
            expected=[member.value for member in ComponentType],
        ) from exc


# =============================================================================
# LINE INPUT
# =============================================================================

@dataclass(frozen=True)
class LineInput:
    """
    Caller-supplied parameters for one mooring line.

    Units are whatever consistent system the caller chose (the component
    catalog uses N, m and kg/m). Values are not checked on construction;
    run validate_input() before trusting them.
    """
    fairlead_tension: float
    water_depth: float
    component_type: Optional[ComponentType]
    component_length: float
    component_weight: float
    component_stiffness: float
    component_mbl: float

    # Catalog size label, e.g. "76mm" (informational only)
    component_size: Optional[str] = None

    def to_dict(self) -> Dict[str, Any]:
        """Serialize to the stored record layout."""
        component_type = self.component_type
        if isinstance(component_type, ComponentType):
            component_type = component_type.value
        return {
            "fairleadTension": self.fairlead_tension,
            "waterDepth": self.water_depth,
            "componentType": component_type,
            "componentSize": self.component_size,
            "componentLength": self.component_length,
            "componentWeight": self.component_weight,
            "componentStiffness": self.component_stiffness,
            "componentMBL": self.component_mbl,
        }

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "LineInput":
        """
        Deserialize from a stored record or a snake_case mapping.

        Missing numeric fields become None and are reported by validation.

        Raises:
            DomainError: componentType names no known component family
            MissingParameterError: componentType is blank
        """
        values = {snake: _pick(data, camel, snake) for camel, snake in INPUT_KEYS.items()}
        if values["component_type"] is not None:
            values["component_type"] = _parse_component_type(values["component_type"])
        return cls(**values)


# =============================================================================
# CURVE POINT
# =============================================================================

@dataclass(frozen=True)
class CurvePoint:
    """Single sampled point on the line profile."""
    x: float
    y: float

    def to_list(self) -> list:
        return [self.x, self.y]


# =============================================================================
# GEOMETRY
# =============================================================================

@dataclass(frozen=True)
class CatenaryGeometry:
    """
    Scalar outputs of a geometry model.

    Angles are in degrees; lengths and tensions in the input units.
    """
    fairlead_angle_deg: float
    grounded_length: float
    anchor_distance: float
    anchor_angle_deg: float
    anchor_tension: float
    safety_factor: float


# =============================================================================
# CATENARY RESULT
# =============================================================================

@dataclass(frozen=True)
class CatenaryResult:
    """
    Full result of one catenary calculation.

    The curve is determined by anchor_distance, water_depth, the sample
    count and the curve profile alone.
    """
    fairlead_angle_deg: float
    grounded_length: float
    anchor_distance: float
    anchor_angle_deg: float
    anchor_tension: float
    safety_factor: float

    # Profile samples from fairlead (x=0) to anchor (x=anchor_distance)
    curve: Tuple[CurvePoint, ...] = field(default_factory=tuple)

    # Provenance
    water_depth: float = 0.0
    model: str = "simplified"
    curve_profile: CurveProfile = CurveProfile.LEGACY_COSINE

    @property
    def sample_count(self) -> int:
        """Number of curve segments."""
        return max(len(self.curve) - 1, 0)

    @property
    def fairlead_point(self) -> Optional[CurvePoint]:
        return self.curve[0] if self.curve else None

    @property
    def anchor_point(self) -> Optional[CurvePoint]:
        return self.curve[-1] if self.curve else None

    def to_dict(self) -> Dict[str, Any]:
        """Serialize to the stored record layout."""
        return {
            "fairleadAngle": self.fairlead_angle_deg,
            "groundedLength": self.grounded_length,
            "anchorDistance": self.anchor_distance,
            "anchorAngle": self.anchor_angle_deg,
            "anchorTension": self.anchor_tension,
            "safetyFactor": self.safety_factor,
            "waterDepth": self.water_depth,
            "model": self.model,
            "curveProfile": self.curve_profile.value,
            "curve": [p.to_list() for p in self.curve],
        }

    @classmethod
    def from_dict(
        cls,
        data: Mapping[str, Any],
        water_depth: Optional[float] = None,
        sample_count: int = DEFAULT_SAMPLE_COUNT,
    ) -> "CatenaryResult":
        """
        Deserialize from a stored record.

        Historical records carry only the six scalar results. When the
        curve is absent it is re-sampled from anchorDistance and the water
        depth (taken from the record or the water_depth argument).
        """
        values = {snake: _pick(data, camel, snake) for camel, snake in RESULT_KEYS.items()}
        depth = _pick(data, "waterDepth", "water_depth")
        if depth is None:
            depth = water_depth if water_depth is not None else 0.0
        profile = CurveProfile(_pick(data, "curveProfile", "curve_profile") or CurveProfile.LEGACY_COSINE)

        raw_curve = data.get("curve")
        if raw_curve:
            curve = tuple(
                CurvePoint(x=p["x"], y=p["y"]) if isinstance(p, Mapping) else CurvePoint(x=p[0], y=p[1])
                for p in raw_curve
            )
        elif depth > 0:
            from .curve import sample_curve
            curve = sample_curve(values["anchor_distance"], depth, sample_count, profile)
        else:
            curve = ()

        return cls(
            curve=curve,
            water_depth=depth,
            model=data.get("model", "simplified"),
            curve_profile=profile,
            **values,
        )


# =============================================================================
# SAFETY CHECK
# =============================================================================

@dataclass(frozen=True)
class SafetyCheck:
    """Outcome of comparing a safety factor to its required minimum."""
    is_valid: bool
    safety_factor: float
    required_safety_factor: float

    @property
    def margin(self) -> float:
        """Safety factor in excess of the requirement (negative when failing)."""
        return self.safety_factor - self.required_safety_factor

    def to_dict(self) -> Dict[str, Any]:
        return {
            "isValid": self.is_valid,
            "safetyFactor": self.safety_factor,
            "requiredSafetyFactor": self.required_safety_factor,
        }

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "SafetyCheck":
        return cls(
            is_valid=bool(_pick(data, "isValid", "is_valid")),
            safety_factor=_pick(data, "safetyFactor", "safety_factor"),
            required_safety_factor=_pick(data, "requiredSafetyFactor", "required_safety_factor"),
        )
