"""
Mooring Test Configuration and Fixtures
"""

import pytest

from mooring.catenary import LineInput
from mooring.core.enums import ComponentType


@pytest.fixture
def chain_line():
    """76mm R3 studless chain in 100m water (reference scenario)."""
    return LineInput(
        fairlead_tension=500000.0,
        water_depth=100.0,
        component_type=ComponentType.CHAIN,
        component_length=300.0,
        component_weight=113.5,
        component_stiffness=5.9e10,
        component_mbl=4370000.0,
        component_size="76mm",
    )


@pytest.fixture
def chain_record():
    """Stored-record form of the reference scenario."""
    return {
        "fairleadTension": 500000,
        "waterDepth": 100,
        "componentType": "Chain",
        "componentSize": "76mm",
        "componentLength": 300,
        "componentWeight": 113.5,
        "componentStiffness": 5.9e10,
        "componentMBL": 4370000,
    }
