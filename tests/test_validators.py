from dataclasses import replace

import pytest

from core.checks import financial_config_errors, projection_input_errors
from core.config import DEFAULT_FINANCIAL_CONFIG, ExpenseSetting, ProjectionInput
from inputs.validators import validate_financial_config, validate_projection_input


def test_typical_input_passes_cleanly(scenario_a_input):
    result = validate_projection_input(scenario_a_input)
    assert result.is_valid
    assert result.warnings == []
    assert "All checks passed" in result.summary()


@pytest.mark.parametrize("changes,fragment", [
    ({"property_value": 0}, "property_value"),
    ({"horizon_years": 0}, "horizon_years"),
    ({"horizon_years": 1.5}, "whole number"),
    ({"occupancy_rate": float("nan")}, "Non-finite"),
])
def test_blocking_problems(scenario_a_input, changes, fragment):
    result = validate_projection_input(replace(scenario_a_input, **changes))
    assert not result.is_valid
    assert fragment in result.summary()


@pytest.mark.parametrize("changes", [
    {"property_value": 500_000},
    {"horizon_years": 30},
    {"occupancy_rate": 30},
    {"occupancy_rate": 120},
    {"annual_growth_rate": 12},
    {"nightly_rate": -100},
])
def test_out_of_range_values_only_warn(scenario_a_input, changes):
    result = validate_projection_input(replace(scenario_a_input, **changes))
    assert result.is_valid
    assert len(result.warnings) == 1
    assert "WARNINGS (1)" in result.summary()


def test_default_config_is_clean():
    result = validate_financial_config(DEFAULT_FINANCIAL_CONFIG)
    assert result.is_valid
    assert result.warnings == []


def test_config_warnings():
    cfg = replace(
        DEFAULT_FINANCIAL_CONFIG,
        operator_commission_pct=150,
        maintenance=ExpenseSetting(120, True),
        fixed_expenses=ExpenseSetting(-10, False),
    )
    result = validate_financial_config(cfg)
    assert result.is_valid
    assert len(result.warnings) == 3


def test_config_non_finite_is_an_error():
    cfg = replace(DEFAULT_FINANCIAL_CONFIG, taxes=ExpenseSetting(float("nan"), True))
    result = validate_financial_config(cfg)
    assert not result.is_valid
    assert "taxes" in result.errors[0]


def test_fractional_horizon_input_type():
    result = validate_projection_input(ProjectionInput(property_value=2_000_000, horizon_years=3.0))
    assert result.is_valid


# =====================================================
# Shared blocking checks
# =====================================================
@pytest.mark.parametrize("changes", [
    {},
    {"property_value": -5},
    {"horizon_years": 0},
    {"nightly_rate": float("inf")},
    {"property_value": 0, "horizon_years": 2.5},
])
def test_validator_errors_match_engine_checks(scenario_a_input, changes):
    inputs = replace(scenario_a_input, **changes)
    assert validate_projection_input(inputs).errors == projection_input_errors(inputs)


def test_config_errors_match_engine_checks():
    cfg = replace(DEFAULT_FINANCIAL_CONFIG, annual_appreciation_pct=float("nan"), fixed_expenses=None)
    errors = financial_config_errors(cfg)
    assert validate_financial_config(cfg).errors == errors
    assert len(errors) == 2
