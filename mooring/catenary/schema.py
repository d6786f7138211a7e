"""
mooring/catenary/schema.py - Pydantic form schema

Coerces and bounds-checks raw form payloads (camelCase keys, numbers
possibly sent as strings) before they reach the engine. pydantic
failures are mapped onto the engine's error taxonomy so callers only
handle one set of exceptions.
"""

from __future__ import annotations

from typing import Any, Dict, List, Mapping, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator
from pydantic import ValidationError as PydanticValidationError

from mooring.core.enums import ComponentType
from mooring.core.parameter_bounds import get_bounds
from mooring.errors import (
    CatenaryError,
    DomainError,
    ErrorCode,
    MissingParameterError,
)

from .models import INPUT_KEYS, LineInput
from .validation import validate_input


# pydantic error types reported as absent / non-numeric input
_MISSING_TYPES = {"missing", "float_parsing", "float_type", "finite_number", "string_type"}


class LineInputForm(BaseModel):
    """Raw calculation form submission."""

    model_config = ConfigDict(populate_by_name=True, frozen=True)

    fairlead_tension: float = Field(
        ...,
        alias="fairleadTension",
        gt=0,
        le=get_bounds("fairlead_tension")["max"],
        allow_inf_nan=False,
        description="Tension at fairlead (N)",
    )
    water_depth: float = Field(
        ...,
        alias="waterDepth",
        gt=0,
        le=get_bounds("water_depth")["max"],
        allow_inf_nan=False,
        description="Water depth (m)",
    )
    component_type: ComponentType = Field(..., alias="componentType")
    component_size: Optional[str] = Field(None, alias="componentSize")
    component_length: float = Field(
        ..., alias="componentLength", gt=0, allow_inf_nan=False, description="Component length (m)"
    )
    component_weight: float = Field(
        ..., alias="componentWeight", gt=0, allow_inf_nan=False, description="Submerged weight (kg/m)"
    )
    component_stiffness: float = Field(
        ..., alias="componentStiffness", gt=0, allow_inf_nan=False, description="Axial stiffness E (N/m²)"
    )
    component_mbl: float = Field(
        ..., alias="componentMBL", gt=0, allow_inf_nan=False, description="Minimum breaking load (N)"
    )

    @field_validator("component_type", mode="before")
    @classmethod
    def _parse_component_type(cls, value: Any) -> ComponentType:
        return ComponentType.parse(value)

    def to_line_input(self) -> LineInput:
        return LineInput(
            fairlead_tension=self.fairlead_tension,
            water_depth=self.water_depth,
            component_type=self.component_type,
            component_length=self.component_length,
            component_weight=self.component_weight,
            component_stiffness=self.component_stiffness,
            component_mbl=self.component_mbl,
            component_size=self.component_size,
        )


def _field_name(loc: tuple) -> Optional[str]:
    if not loc:
        return None
    key = str(loc[0])
    return INPUT_KEYS.get(key, key)


def _to_engine_error(exc: PydanticValidationError) -> CatenaryError:
    errors: List[Dict[str, Any]] = exc.errors()
    # Presence/type problems are reported before range problems
    missing = [e for e in errors if e["type"] in _MISSING_TYPES]
    error = missing[0] if missing else errors[0]

    field = _field_name(error.get("loc", ()))
    message = f"{field}: {error['msg']}"
    actual = error.get("input")
    if isinstance(actual, Mapping):
        actual = None

    if error["type"] == "missing":
        return MissingParameterError(message, field=field, expected="value")
    if error["type"] in _MISSING_TYPES:
        return MissingParameterError(
            message, field=field, actual=actual, expected="finite number",
            code=ErrorCode.VAL_TYPE_MISMATCH,
        )
    if error["type"] in ("less_than_equal", "less_than"):
        return DomainError(
            message, field=field, actual=actual,
            expected=f"<= {error.get('ctx', {}).get('le')}", code=ErrorCode.BND_MAXIMUM,
        )
    if error["type"] == "value_error" and field == "component_type":
        if actual is None or not str(actual).strip():
            return MissingParameterError(message, field=field, expected="value")
        return DomainError(
            message, field=field, actual=actual,
            expected=[member.value for member in ComponentType],
        )
    return DomainError(message, field=field, actual=actual, expected="> 0")


def parse_form(payload: Mapping[str, Any]) -> LineInput:
    """
    Turn a raw form payload into a validated LineInput.

    Args:
        payload: Form values keyed by camelCase (or snake_case) names

    Returns:
        LineInput that has passed validate_input()

    Raises:
        MissingParameterError: A field is absent or not a finite number
        DomainError: A field is out of range or the component type is unknown
        GeometryError: Component length does not exceed water depth
    """
    try:
        form = LineInputForm.model_validate(dict(payload))
    except PydanticValidationError as exc:
        raise _to_engine_error(exc) from exc

    line = form.to_line_input()
    validate_input(line)
    return line
