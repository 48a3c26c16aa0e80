"""Financial configuration record — one row as stored per property or per company."""

from __future__ import annotations

from typing import Optional

from pydantic import BaseModel, ConfigDict, Field, model_validator

from .validators import MARKET_RATE_BOUNDS


class FinancialConfigRecord(BaseModel):
    """Partially-filled financial configuration.

    Every field is optional: ``None`` means "not set at this tier" and the
    resolver falls through to the next tier (property → company → defaults).
    Percentages are plain numbers on a 0–100 scale.
    """

    model_config = ConfigDict(extra="ignore", frozen=True)

    # --- Baseline rental assumptions ---
    nightly_rate: Optional[float] = Field(
        default=None, gt=0,
        description="Average daily rate charged per booked night.",
    )
    occupancy_rate: Optional[float] = Field(
        default=None, ge=0, le=100,
        description="Annual occupancy (% of nights booked).",
    )
    operator_commission_pct: Optional[float] = Field(
        default=None, ge=0, le=100,
        description="Operator commission as % of gross revenue.",
    )

    # --- Expenses: value + percentage flag ---
    maintenance_value: Optional[float] = Field(default=None, ge=0)
    maintenance_is_percentage: Optional[bool] = None
    fixed_expenses_value: Optional[float] = Field(default=None, ge=0)
    fixed_expenses_is_percentage: Optional[bool] = None
    variable_expenses_value: Optional[float] = Field(default=None, ge=0)
    variable_expenses_is_percentage: Optional[bool] = None
    taxes_value: Optional[float] = Field(default=None, ge=0)
    taxes_is_percentage: Optional[bool] = None

    # --- Market ---
    annual_appreciation_pct: Optional[float] = Field(
        default=None, ge=MARKET_RATE_BOUNDS[0], le=MARKET_RATE_BOUNDS[1],
        description="Annual property value appreciation (%).",
    )
    alternative_interest_pct: Optional[float] = Field(
        default=None, ge=MARKET_RATE_BOUNDS[0], le=MARKET_RATE_BOUNDS[1],
        description="Annual rate of the comparison investment (%).",
    )

    # --- Display ---
    currency: Optional[str] = None

    @model_validator(mode="after")
    def _percentages_in_range(self) -> "FinancialConfigRecord":
        for name in ("maintenance", "fixed_expenses", "variable_expenses", "taxes"):
            value = getattr(self, f"{name}_value")
            if value is not None and getattr(self, f"{name}_is_percentage") and value > 100:
                raise ValueError(f"{name}_value is a percentage and must be between 0 and 100")
        return self
