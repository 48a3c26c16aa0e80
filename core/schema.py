from __future__ import annotations

from typing import Tuple

# Canonical column order of the tabulated projection (one row per year).
# Expense settings are flattened into <name>_value / <name>_is_percentage.
YEAR_PROJECTION_COLUMNS: Tuple[str, ...] = (
    "year",
    "property_value",
    "gross_revenue",
    "operator_commission",
    "maintenance_cost",
    "variable_expenses_cost",
    "fixed_expenses_cost",
    "taxable_base",
    "tax_amount",
    "net_profit_this_year",
    "cumulative_net_profit",
    "property_appreciation",
    "alternative_investment_gain",
    "cumulative_rental_value",
    "alternative_investment_value",
    "value_difference",
    "yearly_roi",
    "effective_occupancy_rate",
    "effective_nightly_rate",
    "operator_commission_pct",
    "maintenance_value",
    "maintenance_is_percentage",
    "fixed_expenses_value",
    "fixed_expenses_is_percentage",
    "variable_expenses_value",
    "variable_expenses_is_percentage",
    "tax_rate",
)

# Money columns shown in the dashboard table.
CURRENCY_COLUMNS: Tuple[str, ...] = (
    "gross_revenue",
    "net_profit_this_year",
    "cumulative_rental_value",
    "alternative_investment_value",
    "value_difference",
    "effective_nightly_rate",
)

# Keys a stored financial configuration record may carry.
CONFIG_RECORD_FIELDS: Tuple[str, ...] = (
    "nightly_rate",
    "occupancy_rate",
    "operator_commission_pct",
    "maintenance_value",
    "maintenance_is_percentage",
    "fixed_expenses_value",
    "fixed_expenses_is_percentage",
    "variable_expenses_value",
    "variable_expenses_is_percentage",
    "taxes_value",
    "taxes_is_percentage",
    "annual_appreciation_pct",
    "alternative_interest_pct",
    "currency",
)
