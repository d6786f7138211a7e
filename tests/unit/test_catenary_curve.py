"""
Unit tests for mooring/catenary/curve.py

Tests the sampling contract shared by every profile and the shape of
each profile.
"""

import math

import pytest

from mooring.catenary.curve import sample_curve
from mooring.core.enums import CurveProfile
from mooring.errors import DegenerateInputError, DomainError, MissingParameterError


ALL_PROFILES = list(CurveProfile)


class TestSamplingContract:
    """Length, ordering and endpoints hold for every profile."""

    @pytest.mark.parametrize("profile", ALL_PROFILES)
    @pytest.mark.parametrize("n", [1, 2, 7, 100, 1000])
    def test_point_count(self, profile, n):
        points = sample_curve(282.84, 100.0, n, profile)
        assert len(points) == n + 1

    @pytest.mark.parametrize("profile", ALL_PROFILES)
    def test_x_strictly_increasing(self, profile):
        points = sample_curve(282.84, 100.0, 100, profile)
        xs = [p.x for p in points]
        assert all(a < b for a, b in zip(xs, xs[1:]))

    @pytest.mark.parametrize("profile", ALL_PROFILES)
    @pytest.mark.parametrize("span", [1e-6, 0.37, 282.842712474619, 1e6])
    def test_exact_endpoints(self, profile, span):
        points = sample_curve(span, 100.0, 100, profile)
        assert points[0].x == 0.0
        assert points[-1].x == span

    def test_uniform_spacing(self):
        points = sample_curve(200.0, 50.0, 4)
        assert [p.x for p in points] == [0.0, 50.0, 100.0, 150.0, 200.0]

    def test_default_sample_count(self):
        """Default 100 segments -> 101 points."""
        assert len(sample_curve(282.84, 100.0)) == 101

    def test_returns_python_floats(self):
        point = sample_curve(10.0, 5.0, 3)[1]
        assert type(point.x) is float
        assert type(point.y) is float

    def test_deterministic(self):
        assert sample_curve(282.84, 100.0) == sample_curve(282.84, 100.0)

    def test_profile_by_name(self):
        assert sample_curve(10.0, 5.0, 4, "anchored_cosine") == sample_curve(
            10.0, 5.0, 4, CurveProfile.ANCHORED_COSINE
        )


class TestDegenerateInput:
    """Invalid spans and counts never produce empty or NaN curves."""

    @pytest.mark.parametrize("span", [0.0, -1.0, math.nan, math.inf, 10 ** 400])
    def test_bad_anchor_distance(self, span):
        with pytest.raises(DegenerateInputError):
            sample_curve(span, 100.0)

    def test_zero_anchor_distance(self):
        """anchorDistance=0 -> DegenerateInputError."""
        with pytest.raises(DegenerateInputError) as exc_info:
            sample_curve(0, 100.0)
        assert exc_info.value.field == "anchor_distance"

    def test_subnormal_span_rejected(self):
        """Spacing collapses to zero for subnormal spans."""
        with pytest.raises(DegenerateInputError):
            sample_curve(5e-324, 100.0, 100)

    @pytest.mark.parametrize("n", [0, -5, 2.5, True])
    def test_bad_sample_count(self, n):
        with pytest.raises(DomainError):
            sample_curve(100.0, 50.0, n)

    @pytest.mark.parametrize("depth", [0.0, -10.0, math.nan])
    def test_bad_depth(self, depth):
        with pytest.raises(DomainError):
            sample_curve(100.0, depth)

    def test_missing_argument(self):
        with pytest.raises(MissingParameterError):
            sample_curve(None, 100.0)

    def test_unknown_profile(self):
        with pytest.raises(ValueError):
            sample_curve(100.0, 50.0, 10, "parabolic")


class TestLegacyCosine:
    """Reference profile y = d·(1 - cos(πx/D))."""

    def test_formula(self):
        span, depth = 282.84, 100.0
        for p in sample_curve(span, depth, 10):
            expected = depth * (1 - math.cos(math.pi * p.x / span))
            assert p.y == pytest.approx(expected, abs=1e-9)

    def test_starts_at_fairlead(self):
        assert sample_curve(282.84, 100.0)[0].y == 0.0

    def test_ends_at_twice_depth(self):
        """Known inconsistency kept for compatibility: anchor end sits at 2d."""
        assert sample_curve(282.84, 100.0)[-1].y == pytest.approx(200.0)

    def test_midpoint_at_depth(self):
        assert sample_curve(282.84, 100.0, 2)[1].y == pytest.approx(100.0)

    def test_is_default(self):
        assert sample_curve(50.0, 20.0, 10) == sample_curve(50.0, 20.0, 10, CurveProfile.LEGACY_COSINE)


class TestAnchoredCosine:
    """Corrected profile passing through (D, d)."""

    def test_ends_at_anchor(self):
        points = sample_curve(282.84, 100.0, 100, CurveProfile.ANCHORED_COSINE)
        assert points[0].y == 0.0
        assert points[-1].x == 282.84
        assert points[-1].y == pytest.approx(100.0)

    def test_monotonic_descent(self):
        points = sample_curve(282.84, 100.0, 50, CurveProfile.ANCHORED_COSINE)
        ys = [p.y for p in points]
        assert all(a <= b for a, b in zip(ys, ys[1:]))

    def test_half_of_legacy(self):
        legacy = sample_curve(120.0, 40.0, 12, CurveProfile.LEGACY_COSINE)
        anchored = sample_curve(120.0, 40.0, 12, CurveProfile.ANCHORED_COSINE)
        for a, b in zip(legacy, anchored):
            assert b.y == pytest.approx(a.y / 2.0)


class TestLegacyHyperbolic:
    """Visualization-layer profile a·(cosh(x - D/2) - cosh(-D/2))."""

    @pytest.mark.parametrize("span", [0.5, 4.0, 10.0, 40.0])
    def test_matches_direct_formula(self, span):
        """Agrees with the unscaled formula where that does not overflow."""
        depth = 25.0
        a = depth / (math.cosh(span / 2) - 1)
        for p in sample_curve(span, depth, 20, CurveProfile.LEGACY_HYPERBOLIC):
            expected = a * (math.cosh(p.x - span / 2) - math.cosh(-span / 2))
            assert p.y == pytest.approx(expected, rel=1e-9, abs=1e-9)

    def test_endpoints_zero(self):
        points = sample_curve(282.84, 100.0, 100, CurveProfile.LEGACY_HYPERBOLIC)
        assert points[0].y == 0.0
        assert points[-1].y == 0.0

    def test_midpoint_at_minus_depth(self):
        points = sample_curve(10.0, 30.0, 2, CurveProfile.LEGACY_HYPERBOLIC)
        assert points[1].y == pytest.approx(-30.0)

    def test_large_span_finite(self):
        """cosh(1000) overflows a float; the sampled curve must not."""
        points = sample_curve(2000.0, 100.0, 100, CurveProfile.LEGACY_HYPERBOLIC)
        assert all(math.isfinite(p.y) for p in points)
        assert points[50].y == pytest.approx(-100.0)
