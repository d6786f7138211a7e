"""
Mooring Line Input Validation

Fail-fast checks run before any numeric derivation:

1. every numeric field is present, numeric and finite
2. every numeric field is strictly positive
3. component length exceeds water depth

Callable on its own so form layers can validate before submission.
"""

from __future__ import annotations
from typing import Any, Mapping, Union
import logging
import math
import numbers

from mooring.core.constants import REQUIRED_NUMERIC_FIELDS
from mooring.errors import (
    ErrorCode,
    MissingParameterError,
    DomainError,
    GeometryError,
)

from .models import LineInput

logger = logging.getLogger(__name__)


def _check_present(name: str, value: Any) -> None:
    if value is None:
        raise MissingParameterError(
            f"{name} is required",
            field=name,
            expected="finite number",
        )
    # bool is an int subclass but never a meaningful measurement
    if isinstance(value, bool) or not isinstance(value, numbers.Real):
        raise MissingParameterError(
            f"{name} must be numeric, got {type(value).__name__}",
            field=name,
            actual=value,
            expected="finite number",
            code=ErrorCode.VAL_TYPE_MISMATCH,
        )
    try:
        finite = math.isfinite(value)
    except OverflowError:
        raise MissingParameterError(
            f"{name} exceeds the float range",
            field=name,
            actual=value,
            expected="finite number",
            code=ErrorCode.VAL_NOT_FINITE,
        ) from None
    if not finite:
        raise MissingParameterError(
            f"{name} must be finite, got {value}",
            field=name,
            actual=value,
            expected="finite number",
            code=ErrorCode.VAL_NOT_FINITE,
        )


def validate_input(line: Union[LineInput, Mapping[str, Any]]) -> None:
    """
    Validate a line input record.

    Args:
        line: LineInput, or a mapping in stored-record or snake_case layout

    Raises:
        MissingParameterError: A numeric field is absent, non-numeric or non-finite
        DomainError: A numeric field is not strictly positive
        GeometryError: Component length does not exceed water depth
    """
    if isinstance(line, Mapping):
        line = LineInput.from_dict(line)

    values = {name: getattr(line, name, None) for name in REQUIRED_NUMERIC_FIELDS}

    for name in REQUIRED_NUMERIC_FIELDS:
        _check_present(name, values[name])

    for name in REQUIRED_NUMERIC_FIELDS:
        if values[name] <= 0:
            raise DomainError(
                f"{name} must be positive, got {values[name]}",
                field=name,
                actual=values[name],
                expected="> 0",
            )

    if values["component_length"] <= values["water_depth"]:
        raise GeometryError(
            "component length must exceed water depth",
            field="component_length",
            actual=values["component_length"],
            expected=f"> {values['water_depth']}",
        )

    logger.debug(
        f"Line input valid: T={values['fairlead_tension']}, "
        f"d={values['water_depth']}, L={values['component_length']}"
    )
