"""
Year-by-year projection of a short-term-rental investment against a passive
alternative investment of the same principal.

Key rules:
  1. Revenue growth compounds with exponent (year - 1): year 1 has no growth.
  2. Appreciation and the alternative investment compound with exponent year,
     always from the original property value.
  3. Flat expenses are constant across years; percentage expenses follow their base.
  4. Taxes apply to the taxable base as-is, so a negative base yields a negative tax.
  5. yearly_roi is stored rounded to 1 decimal (half away from zero).
  6. effective_occupancy_rate ramps up 2 points a year until year 5. It is a
     display value only; revenue always uses the baseline occupancy.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict, List

from core.checks import financial_config_errors, projection_input_errors
from core.config import ExpenseSetting, FinancialConfig, ProjectionInput
from core.errors import InvalidInputError
from core.schema import YEAR_PROJECTION_COLUMNS
from core.utils import round_half_away

DAYS_PER_YEAR = 365
OCCUPANCY_RAMP_YEARS = 5
OCCUPANCY_RAMP_STEP = 2.0  # percentage points per year


@dataclass(frozen=True)
class YearProjection:
    """Projected outcome for one year of the horizon."""
    year: int
    property_value: float

    # Revenue and costs
    gross_revenue: float
    operator_commission: float
    maintenance_cost: float
    variable_expenses_cost: float
    fixed_expenses_cost: float
    taxable_base: float
    tax_amount: float
    net_profit_this_year: float
    cumulative_net_profit: float

    # Comparison
    property_appreciation: float
    alternative_investment_gain: float
    cumulative_rental_value: float
    alternative_investment_value: float
    value_difference: float
    yearly_roi: float

    # Display values
    effective_occupancy_rate: float
    effective_nightly_rate: float

    # Echoed configuration
    operator_commission_pct: float
    maintenance: ExpenseSetting
    fixed_expenses: ExpenseSetting
    variable_expenses: ExpenseSetting
    tax_rate: float

    def to_record(self) -> Dict[str, Any]:
        """Flat dict in YEAR_PROJECTION_COLUMNS order."""
        flat = {
            "maintenance_value": self.maintenance.value,
            "maintenance_is_percentage": self.maintenance.is_percentage,
            "fixed_expenses_value": self.fixed_expenses.value,
            "fixed_expenses_is_percentage": self.fixed_expenses.is_percentage,
            "variable_expenses_value": self.variable_expenses.value,
            "variable_expenses_is_percentage": self.variable_expenses.is_percentage,
        }
        return {c: flat[c] if c in flat else getattr(self, c) for c in YEAR_PROJECTION_COLUMNS}


def growth_factor(rate_pct: float, periods: int) -> float:
    """(1 + rate/100) ** periods."""
    return (1.0 + rate_pct / 100.0) ** periods


def cumulative_gain(principal: float, rate_pct: float, years: int) -> float:
    """Gain on principal compounded for `years` at rate_pct, from the original principal."""
    return principal * (growth_factor(rate_pct, years) - 1.0)


def effective_occupancy(occupancy_rate: float, year: int) -> float:
    if year <= OCCUPANCY_RAMP_YEARS:
        return occupancy_rate - (OCCUPANCY_RAMP_YEARS - year) * OCCUPANCY_RAMP_STEP
    return occupancy_rate


def _check_inputs(inputs: ProjectionInput, config: FinancialConfig) -> None:
    problems = projection_input_errors(inputs) + financial_config_errors(config)
    if problems:
        raise InvalidInputError("Cannot project: " + " ".join(problems))


def project(inputs: ProjectionInput, config: FinancialConfig) -> List[YearProjection]:
    """
    Project `inputs.horizon_years` years of rental operation vs. the alternative investment.

    Parameters
    ----------
    inputs : ProjectionInput
        Property value, baseline nightly rate, occupancy, growth and horizon.
    config : FinancialConfig
        Fully resolved commission, expenses, taxes, appreciation and alternative rate.

    Returns
    -------
    List of YearProjection, years 1..horizon_years in ascending order.

    Raises
    ------
    InvalidInputError
        If property_value <= 0, horizon_years < 1, or any number is non-finite.
    """
    _check_inputs(inputs, config)

    property_value = float(inputs.property_value)
    base_annual_revenue = inputs.nightly_rate * DAYS_PER_YEAR * (inputs.occupancy_rate / 100.0)

    rows: List[YearProjection] = []
    cumulative_net_profit = 0.0

    for year in range(1, int(inputs.horizon_years) + 1):
        g = growth_factor(inputs.annual_growth_rate, year - 1)
        revenue = base_annual_revenue * g

        commission = revenue * config.operator_commission_pct / 100.0
        maintenance = config.maintenance.amount(property_value)
        variable = config.variable_expenses.amount(revenue)
        fixed = config.fixed_expenses.amount(property_value)

        taxable_base = revenue - commission - maintenance - variable - fixed
        tax = config.taxes.amount(taxable_base)
        net_profit = taxable_base - tax
        cumulative_net_profit += net_profit

        appreciation = cumulative_gain(property_value, config.annual_appreciation_pct, year)
        alternative_gain = cumulative_gain(property_value, config.alternative_interest_pct, year)

        rental_value = property_value + cumulative_net_profit + appreciation
        alternative_value = property_value + alternative_gain

        rows.append(
            YearProjection(
                year=year,
                property_value=property_value,
                gross_revenue=revenue,
                operator_commission=commission,
                maintenance_cost=maintenance,
                variable_expenses_cost=variable,
                fixed_expenses_cost=fixed,
                taxable_base=taxable_base,
                tax_amount=tax,
                net_profit_this_year=net_profit,
                cumulative_net_profit=cumulative_net_profit,
                property_appreciation=appreciation,
                alternative_investment_gain=alternative_gain,
                cumulative_rental_value=rental_value,
                alternative_investment_value=alternative_value,
                value_difference=rental_value - alternative_value,
                yearly_roi=round_half_away(net_profit / property_value * 100.0, 1),
                effective_occupancy_rate=effective_occupancy(inputs.occupancy_rate, year),
                effective_nightly_rate=inputs.nightly_rate * g,
                operator_commission_pct=config.operator_commission_pct,
                maintenance=config.maintenance,
                fixed_expenses=config.fixed_expenses,
                variable_expenses=config.variable_expenses,
                tax_rate=config.taxes.value,
            )
        )

    return rows
