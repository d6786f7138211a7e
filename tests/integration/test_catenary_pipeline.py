"""
Integration tests for the catenary calculation pipeline.

Tests the full flow a form handler drives: catalog defaults, form
parsing, computation, safety check, persistence round trip and display.
"""

import math
import threading

import pytest

from mooring.bootstrap import MooringConfig, create_engine
from mooring.catenary import (
    CatenaryEngine,
    CatenaryResult,
    DisplayUnits,
    EngineConfig,
    LineInput,
    format_result,
    get_component_defaults,
    parse_form,
)
from mooring.core.enums import ComponentType, CurveProfile
from mooring.errors import CatenaryError, GeometryError


class MockCalculationStore:
    """In-memory stand-in for the calculation persistence layer."""

    def __init__(self):
        self._records = []

    def save(self, line: LineInput, result: CatenaryResult) -> int:
        self._records.append({"inputs": line.to_dict(), "results": result.to_dict()})
        return len(self._records) - 1

    def load(self, record_id: int):
        record = self._records[record_id]
        return LineInput.from_dict(record["inputs"]), CatenaryResult.from_dict(record["results"])


class TestCatenaryPipeline:
    """Test the end-to-end calculation flow."""

    def setup_method(self):
        self.engine = create_engine(MooringConfig())
        self.store = MockCalculationStore()

    def test_form_to_display(self):
        """Catalog defaults -> form payload -> result -> stored -> displayed."""
        spec = get_component_defaults("Chain", "76mm")
        payload = {
            "fairleadTension": "500000",
            "waterDepth": "100",
            "componentType": spec.component_type.value,
            "componentSize": spec.size_label,
            "componentLength": str(spec.default_length),
            "componentWeight": spec.weight,
            "componentStiffness": spec.stiffness,
            "componentMBL": spec.mbl,
        }

        line = parse_form(payload)
        result, safety = self.engine.assess(line)

        assert result.anchor_distance == pytest.approx(math.sqrt(300.0 ** 2 - 100.0 ** 2))
        assert result.fairlead_angle_deg == pytest.approx(math.degrees(math.atan2(100, 150)))
        assert result.safety_factor == pytest.approx(8.74)
        assert safety.is_valid

        record_id = self.store.save(line, result)
        loaded_line, loaded_result = self.store.load(record_id)
        assert loaded_line == line
        assert loaded_result == result

        display = format_result(loaded_result, DisplayUnits(length="m", force="kN"))
        assert display["safetyFactor"]["value"] == 8.74
        assert len(display["curve"]["points"]) == 101

    def test_rejected_form_never_computes(self):
        payload = {
            "fairleadTension": 500000,
            "waterDepth": 100,
            "componentType": "Chain",
            "componentLength": 50,
            "componentWeight": 113.5,
            "componentStiffness": 5.9e10,
            "componentMBL": 4370000,
        }
        with pytest.raises(GeometryError) as exc_info:
            parse_form(payload)
        assert exc_info.value.to_dict()["kind"] == "GeometryError"

    @pytest.mark.parametrize("key", [
        "Chain-84mm", "Wire-90mm", "Synthetic-100mm", "Polyester-140mm",
    ])
    def test_every_component_family(self, key):
        ctype, size = key.split("-")
        spec = get_component_defaults(ctype, size)
        line = spec.to_line_input(fairlead_tension=2_000_000.0, water_depth=250.0)
        result = self.engine.compute(line)

        assert result.anchor_tension <= line.fairlead_tension
        assert result.curve[0].x == 0.0
        assert result.curve[-1].x == result.anchor_distance
        assert result.safety_factor == spec.mbl / 2_000_000.0

    def test_stored_historical_result_redrawn(self):
        """Legacy records without curves are redrawn with the legacy profile."""
        line = get_component_defaults(ComponentType.WIRE_ROPE, "80mm").to_line_input(1e6, 200.0)
        result = self.engine.compute(line)
        scalars = {k: v for k, v in result.to_dict().items() if k not in ("curve", "waterDepth")}

        redrawn = CatenaryResult.from_dict(scalars, water_depth=line.water_depth)
        assert redrawn.curve == result.curve
        assert redrawn.curve[-1].y == pytest.approx(2 * line.water_depth)

    def test_corrected_profile_side_by_side(self, chain_line):
        legacy = CatenaryEngine().compute(chain_line)
        corrected = CatenaryEngine(EngineConfig(curve_profile=CurveProfile.ANCHORED_COSINE)).compute(chain_line)

        # Scalar results do not depend on the profile
        assert legacy.anchor_distance == corrected.anchor_distance
        assert legacy.anchor_tension == corrected.anchor_tension
        assert legacy.curve[-1].y == pytest.approx(2 * chain_line.water_depth)
        assert corrected.curve[-1].y == pytest.approx(chain_line.water_depth)

    def test_concurrent_calls_independent(self, chain_line):
        """A shared engine gives identical results from many threads."""
        expected = self.engine.compute(chain_line)
        results, errors = [], []

        def worker():
            try:
                results.append(self.engine.compute(chain_line))
            except CatenaryError as exc:
                errors.append(exc)

        threads = [threading.Thread(target=worker) for _ in range(8)]
        for t in threads:
            t.start()
        for t in threads:
            t.join()

        assert not errors
        assert len(results) == 8
        assert all(r == expected for r in results)
