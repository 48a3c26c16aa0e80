"""
Sanity checks for projection inputs and resolved configurations before they
enter the engine.

Catches problems early:
- Non-positive property value or horizon (blocking)
- Non-finite numbers (blocking)
- Negative nightly rates (informational)
- Values outside the ranges the dashboard offers (informational)
- Percentages outside 0..100 (informational)

The blocking checks live in core/checks.py so the engine can run them without
importing this package.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import List

from core.checks import (
    CONFIG_EXPENSE_FIELDS,
    CONFIG_RATE_FIELDS,
    expense_error,
    horizon_error,
    non_finite_fields,
    property_value_error,
    rate_error,
)
from core.config import FinancialConfig, ProjectionInput

# Slider ranges offered by the dashboard.
PROPERTY_VALUE_BOUNDS = (1_000_000.0, 50_000_000.0)
HORIZON_BOUNDS = (1, 20)
OCCUPANCY_BOUNDS = (40.0, 100.0)
GROWTH_BOUNDS = (0.0, 10.0)
# Appreciation and alternative-investment rates accepted from stored records.
MARKET_RATE_BOUNDS = (-20.0, 50.0)


@dataclass
class ValidationResult:
    """Collects all validation warnings/errors for one projection run."""
    errors: List[str] = field(default_factory=list)
    warnings: List[str] = field(default_factory=list)

    @property
    def is_valid(self) -> bool:
        return len(self.errors) == 0

    def summary(self) -> str:
        lines = []
        if self.errors:
            lines.append(f"ERRORS ({len(self.errors)}):")
            for e in self.errors:
                lines.append(f"  ✗ {e}")
        if self.warnings:
            lines.append(f"WARNINGS ({len(self.warnings)}):")
            for w in self.warnings:
                lines.append(f"  ⚠ {w}")
        if not lines:
            lines.append("✓ All checks passed.")
        return "\n".join(lines)


def validate_projection_input(inputs: ProjectionInput) -> ValidationResult:
    """
    Run all checks on a ProjectionInput.
    Returns a ValidationResult with errors (blocking) and warnings (informational).
    """
    result = ValidationResult()

    # --- Finite numbers ---
    non_finite = non_finite_fields(inputs)
    if non_finite:
        result.errors.append(f"Non-finite or non-numeric inputs: {non_finite}")
        return result  # nothing else is meaningful

    # --- Property value ---
    error = property_value_error(inputs.property_value)
    if error:
        result.errors.append(error)
    elif not PROPERTY_VALUE_BOUNDS[0] <= inputs.property_value <= PROPERTY_VALUE_BOUNDS[1]:
        result.warnings.append(
            f"property_value {inputs.property_value:,.0f} is outside the usual range "
            f"{PROPERTY_VALUE_BOUNDS[0]:,.0f}–{PROPERTY_VALUE_BOUNDS[1]:,.0f}."
        )

    # --- Horizon ---
    error = horizon_error(inputs.horizon_years)
    if error:
        result.errors.append(error)
    elif inputs.horizon_years > HORIZON_BOUNDS[1]:
        result.warnings.append(
            f"horizon_years {inputs.horizon_years} exceeds the usual maximum of {HORIZON_BOUNDS[1]}."
        )

    # --- Nightly rate ---
    if inputs.nightly_rate < 0:
        result.warnings.append(f"nightly_rate is negative (got {inputs.nightly_rate}).")

    # --- Occupancy ---
    occ = inputs.occupancy_rate
    if not 0.0 <= occ <= 100.0:
        result.warnings.append(f"occupancy_rate {occ} is outside 0–100%.")
    elif occ < OCCUPANCY_BOUNDS[0]:
        result.warnings.append(
            f"occupancy_rate {occ}% is below the usual minimum of {OCCUPANCY_BOUNDS[0]:.0f}%."
        )

    # --- Growth ---
    if not GROWTH_BOUNDS[0] <= inputs.annual_growth_rate <= GROWTH_BOUNDS[1]:
        result.warnings.append(
            f"annual_growth_rate {inputs.annual_growth_rate}% is outside "
            f"{GROWTH_BOUNDS[0]:.0f}–{GROWTH_BOUNDS[1]:.0f}%."
        )

    return result


def validate_financial_config(config: FinancialConfig) -> ValidationResult:
    """Check a resolved FinancialConfig. Only non-finite values block a run."""
    result = ValidationResult()

    for name in CONFIG_RATE_FIELDS:
        value = getattr(config, name)
        error = rate_error(name, value)
        if error:
            result.errors.append(error)
        elif not 0.0 <= value <= 100.0:
            result.warnings.append(f"{name} {value}% is outside 0–100%.")

    for name in CONFIG_EXPENSE_FIELDS:
        setting = getattr(config, name)
        error = expense_error(name, setting)
        if error:
            result.errors.append(error)
        elif setting.is_percentage and not 0.0 <= setting.value <= 100.0:
            result.warnings.append(f"{name} {setting.value}% is outside 0–100%.")
        elif not setting.is_percentage and setting.value < 0:
            result.warnings.append(f"{name} flat amount {setting.value} is negative.")

    return result
