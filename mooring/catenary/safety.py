"""
Mooring Safety Factor Check

Compares the ratio of minimum breaking load to applied tension against
a required minimum. The default minimum follows DNV-style mooring
guidance; callers may override it per classification-society rule set.
"""

from __future__ import annotations
from typing import Optional
import logging
import math
import numbers

from mooring.core.constants import (
    ACCEPTABLE_SAFETY_FACTOR,
    DEFAULT_MIN_SAFETY_FACTOR,
    SAFE_SAFETY_FACTOR,
    required_safety_factor,
)
from mooring.core.enums import SafetyStatus
from mooring.errors import DomainError, MissingParameterError

from .models import SafetyCheck

logger = logging.getLogger(__name__)


def _is_finite_number(value) -> bool:
    if value is None or isinstance(value, bool) or not isinstance(value, numbers.Real):
        return False
    try:
        return math.isfinite(value)
    except OverflowError:
        return False


def _require_positive(name: str, value) -> None:
    if not _is_finite_number(value):
        raise MissingParameterError(
            f"{name} must be a finite number, got {value!r}",
            field=name,
            actual=value,
            expected="finite number",
        )
    if value <= 0:
        raise DomainError(
            f"{name} must be positive, got {value}",
            field=name,
            actual=value,
            expected="> 0",
        )


def check_safety(
    mbl: float,
    tension: float,
    min_safety_factor: float = DEFAULT_MIN_SAFETY_FACTOR,
    rule_set: Optional[str] = None,
) -> SafetyCheck:
    """
    Check a line's safety factor against the required minimum.

    Args:
        mbl: Minimum breaking load
        tension: Applied tension (same force unit as mbl)
        min_safety_factor: Required minimum safety factor
        rule_set: Named rule set; overrides min_safety_factor when given

    Returns:
        SafetyCheck with safety_factor == mbl / tension

    Raises:
        MissingParameterError: An argument is absent or non-numeric
        DomainError: An argument is not strictly positive
        KeyError: rule_set is not defined
    """
    if rule_set is not None:
        min_safety_factor = required_safety_factor(rule_set)

    _require_positive("mbl", mbl)
    _require_positive("tension", tension)
    _require_positive("min_safety_factor", min_safety_factor)

    safety_factor = mbl / tension
    is_valid = safety_factor >= min_safety_factor

    if not is_valid:
        logger.debug(
            f"Safety factor {safety_factor:.3f} below required {min_safety_factor:.3f}"
        )

    return SafetyCheck(
        is_valid=is_valid,
        safety_factor=safety_factor,
        required_safety_factor=min_safety_factor,
    )


def safety_status(safety_factor: float) -> SafetyStatus:
    """
    Classify a safety factor into its display tier.

    Safe at or above 2.0, Acceptable at or above 1.67, otherwise Unsafe.
    Independent of the rule set used by check_safety().
    """
    if safety_factor >= SAFE_SAFETY_FACTOR:
        return SafetyStatus.SAFE
    if safety_factor >= ACCEPTABLE_SAFETY_FACTOR:
        return SafetyStatus.ACCEPTABLE
    return SafetyStatus.UNSAFE
