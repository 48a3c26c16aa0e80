"""
Projection configuration.
Engine-facing value types and the hard-coded fallback defaults used when
neither a per-property override nor a company-level record supplies a field.
Raw store records are modelled separately in inputs/records.py.
"""

from __future__ import annotations

from dataclasses import dataclass, field

# Hard-coded fallbacks (last tier of config resolution)
DEFAULT_OPERATOR_COMMISSION_PCT: float = 15.0
DEFAULT_MAINTENANCE_VALUE: float = 5.0
DEFAULT_MAINTENANCE_IS_PERCENTAGE: bool = True
DEFAULT_FIXED_EXPENSES_VALUE: float = 2500.0
DEFAULT_FIXED_EXPENSES_IS_PERCENTAGE: bool = False
DEFAULT_VARIABLE_EXPENSES_VALUE: float = 12.0
DEFAULT_VARIABLE_EXPENSES_IS_PERCENTAGE: bool = True
DEFAULT_TAXES_VALUE: float = 35.0
DEFAULT_TAXES_IS_PERCENTAGE: bool = True
DEFAULT_ANNUAL_APPRECIATION_PCT: float = 4.0
DEFAULT_ALTERNATIVE_INTEREST_PCT: float = 7.0
DEFAULT_NIGHTLY_RATE: float = 1800.0
DEFAULT_OCCUPANCY_RATE: float = 74.0
DEFAULT_CURRENCY: str = "MXN"


@dataclass(frozen=True)
class ExpenseSetting:
    """
    An expense given either as a percentage of some base or as a flat amount.

    Flat amounts are constant across years (never inflated by growth).
    """
    value: float
    is_percentage: bool

    def amount(self, base: float) -> float:
        if self.is_percentage:
            return base * self.value / 100.0
        return self.value


@dataclass(frozen=True)
class FinancialConfig:
    operator_commission_pct: float = DEFAULT_OPERATOR_COMMISSION_PCT

    # maintenance and fixed expenses: base is the property value
    maintenance: ExpenseSetting = field(
        default_factory=lambda: ExpenseSetting(
            DEFAULT_MAINTENANCE_VALUE, DEFAULT_MAINTENANCE_IS_PERCENTAGE
        )
    )
    fixed_expenses: ExpenseSetting = field(
        default_factory=lambda: ExpenseSetting(
            DEFAULT_FIXED_EXPENSES_VALUE, DEFAULT_FIXED_EXPENSES_IS_PERCENTAGE
        )
    )
    # variable expenses: base is the year's gross revenue
    variable_expenses: ExpenseSetting = field(
        default_factory=lambda: ExpenseSetting(
            DEFAULT_VARIABLE_EXPENSES_VALUE, DEFAULT_VARIABLE_EXPENSES_IS_PERCENTAGE
        )
    )
    # taxes: base is the taxable base (may be negative)
    taxes: ExpenseSetting = field(
        default_factory=lambda: ExpenseSetting(
            DEFAULT_TAXES_VALUE, DEFAULT_TAXES_IS_PERCENTAGE
        )
    )

    annual_appreciation_pct: float = DEFAULT_ANNUAL_APPRECIATION_PCT
    alternative_interest_pct: float = DEFAULT_ALTERNATIVE_INTEREST_PCT

    currency: str = DEFAULT_CURRENCY  # display only


@dataclass(frozen=True)
class ProjectionInput:
    property_value: float
    nightly_rate: float = DEFAULT_NIGHTLY_RATE
    occupancy_rate: float = DEFAULT_OCCUPANCY_RATE  # percent, 0..100
    annual_growth_rate: float = 5.0  # percent, compounds revenue and nightly rate
    horizon_years: int = 10


DEFAULT_FINANCIAL_CONFIG = FinancialConfig()
