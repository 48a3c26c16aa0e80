from __future__ import annotations

import sys
from pathlib import Path

import pytest

# Make project root importable
PROJECT_ROOT = Path(__file__).resolve().parent.parent
sys.path.insert(0, str(PROJECT_ROOT))

from core.config import DEFAULT_FINANCIAL_CONFIG, ProjectionInput  # noqa: E402


@pytest.fixture
def default_config():
    return DEFAULT_FINANCIAL_CONFIG


@pytest.fixture
def scenario_a_input():
    return ProjectionInput(
        property_value=3_500_000,
        nightly_rate=1800,
        occupancy_rate=74,
        annual_growth_rate=5,
        horizon_years=1,
    )


@pytest.fixture
def ten_year_input():
    return ProjectionInput(
        property_value=3_500_000,
        nightly_rate=1800,
        occupancy_rate=74,
        annual_growth_rate=5,
        horizon_years=10,
    )
