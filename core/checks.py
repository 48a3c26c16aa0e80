"""
Blocking checks shared by the engine and inputs/validators.py.

Each helper returns a message when the value cannot be projected, else None.
"""

from __future__ import annotations

from dataclasses import fields
from typing import List, Optional

from .config import ExpenseSetting, FinancialConfig, ProjectionInput
from .utils import is_finite_number

CONFIG_RATE_FIELDS = (
    "operator_commission_pct",
    "annual_appreciation_pct",
    "alternative_interest_pct",
)
CONFIG_EXPENSE_FIELDS = ("maintenance", "fixed_expenses", "variable_expenses", "taxes")


def non_finite_fields(inputs: ProjectionInput) -> List[str]:
    return [f.name for f in fields(inputs) if not is_finite_number(getattr(inputs, f.name))]


def property_value_error(value: float) -> Optional[str]:
    if value <= 0:
        return f"property_value must be positive (got {value})."
    return None


def horizon_error(horizon) -> Optional[str]:
    if isinstance(horizon, bool) or float(horizon) != int(horizon):
        return f"horizon_years must be a whole number of years (got {horizon})."
    if horizon < 1:
        return f"horizon_years must be at least 1 (got {horizon})."
    return None


def rate_error(name: str, value) -> Optional[str]:
    if not is_finite_number(value):
        return f"{name} is not a finite number ({value!r})."
    return None


def expense_error(name: str, setting) -> Optional[str]:
    if not isinstance(setting, ExpenseSetting) or not is_finite_number(setting.value):
        return f"{name} is not a valid expense setting ({setting!r})."
    return None


def projection_input_errors(inputs: ProjectionInput) -> List[str]:
    non_finite = non_finite_fields(inputs)
    if non_finite:
        return [f"Non-finite or non-numeric inputs: {non_finite}"]
    problems = [property_value_error(inputs.property_value), horizon_error(inputs.horizon_years)]
    return [p for p in problems if p]


def financial_config_errors(config: FinancialConfig) -> List[str]:
    problems = [rate_error(name, getattr(config, name)) for name in CONFIG_RATE_FIELDS]
    problems += [expense_error(name, getattr(config, name)) for name in CONFIG_EXPENSE_FIELDS]
    return [p for p in problems if p]
