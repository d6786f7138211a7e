"""
Mooring Curve Sampling

Samples the line profile for plotting, from the fairlead (x=0) to the
anchor (x=anchor_distance).

Guarantees for every profile:
- sample_count + 1 points
- x uniformly spaced and strictly increasing
- x[0] == 0 and x[-1] == anchor_distance exactly
"""

from __future__ import annotations
from typing import Tuple, Union
import logging
import math
import numbers

import numpy as np

from mooring.core.constants import DEFAULT_SAMPLE_COUNT
from mooring.core.enums import CurveProfile
from mooring.errors import DegenerateInputError, DomainError, MissingParameterError

from .models import CurvePoint

logger = logging.getLogger(__name__)


def _legacy_cosine(x: np.ndarray, span: float, depth: float) -> np.ndarray:
    # y = d·(1 - cos(πx/D)); ends at 2d, kept for stored results
    return depth * (1.0 - np.cos(np.pi * x / span))


def _anchored_cosine(x: np.ndarray, span: float, depth: float) -> np.ndarray:
    # y = d·(1 - cos(πx/D))/2; ends at (D, d)
    return 0.5 * depth * (1.0 - np.cos(np.pi * x / span))


def _log_sinh(a: np.ndarray) -> np.ndarray:
    return a + np.log(-np.expm1(-2.0 * a)) - math.log(2.0)


def _legacy_hyperbolic(x: np.ndarray, span: float, depth: float) -> np.ndarray:
    """
    Visualization-layer profile a·(cosh(x - D/2) - cosh(-D/2)),
    a = d / (cosh(D/2) - 1).

    Rewritten as -d·sinh(x/2)·sinh((D-x)/2) / sinh²(D/4) and evaluated in
    log space so the unscaled cosh terms cannot overflow.
    """
    y = np.zeros_like(x)
    interior = (x > 0.0) & (x < span)
    xi = x[interior]
    log_ratio = _log_sinh(xi / 2.0) + _log_sinh((span - xi) / 2.0) - 2.0 * _log_sinh(np.float64(span / 4.0))
    y[interior] = -depth * np.exp(log_ratio)
    return y


def _is_finite(value) -> bool:
    try:
        return math.isfinite(value)
    except OverflowError:
        return False


_PROFILES = {
    CurveProfile.LEGACY_COSINE: _legacy_cosine,
    CurveProfile.LEGACY_HYPERBOLIC: _legacy_hyperbolic,
    CurveProfile.ANCHORED_COSINE: _anchored_cosine,
}


def sample_curve(
    anchor_distance: float,
    water_depth: float,
    sample_count: int = DEFAULT_SAMPLE_COUNT,
    profile: Union[CurveProfile, str] = CurveProfile.LEGACY_COSINE,
) -> Tuple[CurvePoint, ...]:
    """
    Sample the line profile at uniformly spaced x positions.

    Args:
        anchor_distance: Horizontal fairlead-to-anchor distance
        water_depth: Water depth
        sample_count: Number of segments (returns sample_count + 1 points)
        profile: Shape function, see CurveProfile

    Returns:
        Tuple of CurvePoints ordered from fairlead to anchor

    Raises:
        DegenerateInputError: anchor_distance is non-positive or non-finite
        DomainError: water_depth is non-positive or sample_count < 1
        MissingParameterError: an argument is absent or non-numeric
    """
    profile = CurveProfile(profile)

    for name, value in (("anchor_distance", anchor_distance), ("water_depth", water_depth)):
        if value is None or isinstance(value, bool) or not isinstance(value, numbers.Real):
            raise MissingParameterError(
                f"{name} must be numeric, got {value!r}",
                field=name,
                actual=value,
                expected="finite number",
            )

    if not _is_finite(anchor_distance) or anchor_distance <= 0:
        raise DegenerateInputError(
            f"Cannot sample curve: anchor distance must be positive, got {anchor_distance}",
            field="anchor_distance",
            actual=anchor_distance,
            expected="> 0",
        )
    if not _is_finite(water_depth) or water_depth <= 0:
        raise DomainError(
            f"water_depth must be positive, got {water_depth}",
            field="water_depth",
            actual=water_depth,
            expected="> 0",
        )
    if isinstance(sample_count, bool) or not isinstance(sample_count, numbers.Integral) or sample_count < 1:
        raise DomainError(
            f"sample_count must be a positive integer, got {sample_count!r}",
            field="sample_count",
            actual=sample_count,
            expected=">= 1",
        )

    span = float(anchor_distance)
    depth = float(water_depth)
    x = np.linspace(0.0, span, int(sample_count) + 1)

    # Spacing can collapse for subnormal spans
    if not np.all(np.diff(x) > 0.0):
        raise DegenerateInputError(
            f"Anchor distance {anchor_distance} too small for {sample_count} segments",
            field="anchor_distance",
            actual=anchor_distance,
            expected="> 0",
        )

    y = _PROFILES[profile](x, span, depth)

    logger.debug(f"Sampled {len(x)} points ({profile.value}) over D={span:.3f}, d={depth:.3f}")

    return tuple(CurvePoint(x=float(xi), y=float(yi)) for xi, yi in zip(x, y))
