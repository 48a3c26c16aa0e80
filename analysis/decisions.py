"""
Investment decision support — the headline comparison plus warning flags.

Translates a projection into statements a buyer can act on:
  Q1: "Does renting it out beat investing elsewhere?" → final value difference
  Q2: "Does it make money every year?"                 → negative net profit years
  Q3: "When do I get my money back?"                   → payback year
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import List, Optional, Sequence

import pandas as pd

from core.utils import fmt_currency
from engine.projection import YearProjection

from .metrics import compute_summary_metrics


@dataclass
class InvestmentReport:
    """Structured comparison output."""
    property_name: str
    currency: str
    horizon_years: int
    property_value: float

    final_rental_value: float
    final_alternative_value: float
    final_value_difference: float
    total_net_profit: float
    average_roi: float

    crossover_year: Optional[int]
    payback_year: Optional[int]

    flags: List[str] = field(default_factory=list)

    @property
    def rental_outperforms(self) -> bool:
        return self.final_value_difference > 0

    def to_dataframe(self) -> pd.DataFrame:
        """Convert to a display-friendly table."""
        c = self.currency
        rows = [
            {"Metric": "Property", "Value": self.property_name, "Unit": ""},
            {"Metric": "Horizon", "Value": str(self.horizon_years), "Unit": "years"},
            {"Metric": "Property Value", "Value": fmt_currency(self.property_value, c), "Unit": ""},
            {"Metric": "Rental Total Value", "Value": fmt_currency(self.final_rental_value, c), "Unit": ""},
            {"Metric": "Alternative Total Value", "Value": fmt_currency(self.final_alternative_value, c), "Unit": ""},
            {"Metric": "Value Difference", "Value": fmt_currency(self.final_value_difference, c), "Unit": ""},
            {"Metric": "Total Net Rental Profit", "Value": fmt_currency(self.total_net_profit, c), "Unit": ""},
            {"Metric": "Average Annual ROI", "Value": f"{self.average_roi:.1f}", "Unit": "%"},
            {
                "Metric": "Rental Overtakes Alternative",
                "Value": f"Year {self.crossover_year}" if self.crossover_year else "Never",
                "Unit": "",
            },
            {
                "Metric": "Payback From Rental Profit",
                "Value": f"Year {self.payback_year}" if self.payback_year else "Not within horizon",
                "Unit": "",
            },
        ]
        if self.flags:
            rows.append({"Metric": "FLAGS", "Value": " | ".join(self.flags), "Unit": ""})
        return pd.DataFrame(rows)


def generate_investment_report(
    projections: Sequence[YearProjection],
    *,
    property_name: str = "Unnamed Property",
    currency: str = "MXN",
) -> InvestmentReport:
    """
    Build an InvestmentReport from engine output.

    Parameters
    ----------
    projections : sequence of YearProjection
        Output of engine.projection.project()
    property_name : str
        Label for the report
    currency : str
        Currency code used when formatting amounts
    """
    m = compute_summary_metrics(projections)

    flags = []
    if m["final_value_difference"] <= 0:
        flags.append("ALTERNATIVE_OUTPERFORMS: alternative investment ends ahead")
    loss_years = [p.year for p in projections if p.net_profit_this_year < 0]
    if loss_years:
        flags.append(f"NEGATIVE_NET_PROFIT: loss in year(s) {loss_years}")
    if any(p.taxable_base < 0 for p in projections):
        flags.append("NEGATIVE_TAXABLE_BASE: expenses exceed revenue, tax is negative")
    if m["payback_year"] is None:
        flags.append("NO_PAYBACK_IN_HORIZON: rental profit does not recover the property value")

    return InvestmentReport(
        property_name=property_name,
        currency=currency,
        horizon_years=m["horizon_years"],
        property_value=m["property_value"],
        final_rental_value=m["final_rental_value"],
        final_alternative_value=m["final_alternative_value"],
        final_value_difference=m["final_value_difference"],
        total_net_profit=m["total_net_profit"],
        average_roi=m["average_roi"],
        crossover_year=m["crossover_year"],
        payback_year=m["payback_year"],
        flags=flags,
    )
