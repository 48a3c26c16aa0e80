from pathlib import Path

import pytest

from app.streamlit_app import CONFIG_LABEL, SCENARIO_PRESETS, _scenario_defaults
from inputs.resolver import ConfigResolver
from inputs.store import load_config_store
from inputs.validators import MARKET_RATE_BOUNDS

EXAMPLE_CSV = Path(__file__).resolve().parent.parent / "data" / "config" / "example.csv"


@pytest.fixture
def resolver():
    return ConfigResolver(load_config_store(str(EXAMPLE_CSV)))


# =====================================================
# Scenario defaults
# =====================================================
def test_configuration_is_the_first_choice():
    assert CONFIG_LABEL not in SCENARIO_PRESETS


def test_resolved_occupancy_survives_without_a_preset(resolver):
    base = resolver.resolve_inputs(
        property_value=3_500_000, horizon_years=10, annual_growth_rate=5, property_key="playa-norte")
    occupancy, growth = _scenario_defaults(CONFIG_LABEL, base)
    assert occupancy == 80
    assert growth == 5


def test_company_occupancy_survives_without_a_preset(resolver):
    base = resolver.resolve_inputs(property_value=3_500_000, horizon_years=10, annual_growth_rate=3)
    assert _scenario_defaults(CONFIG_LABEL, base) == (72, 3)


@pytest.mark.parametrize("name", list(SCENARIO_PRESETS))
def test_explicit_preset_replaces_the_baseline(resolver, name):
    base = resolver.resolve_inputs(
        property_value=3_500_000, horizon_years=10, annual_growth_rate=5, property_key="playa-norte")
    occupancy, growth = _scenario_defaults(name, base)
    assert occupancy == SCENARIO_PRESETS[name]["occupancy"]
    assert growth == SCENARIO_PRESETS[name]["growth"]


# =====================================================
# Sidebar bounds
# =====================================================
def test_resolved_market_rates_fit_the_sidebar_inputs(resolver):
    low, high = MARKET_RATE_BOUNDS
    for key in [None, "playa-norte", "centro-lofts"]:
        cfg = resolver.resolve(key)
        assert low <= cfg.annual_appreciation_pct <= high
        assert low <= cfg.alternative_interest_pct <= high
