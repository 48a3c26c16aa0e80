"""
Summary metrics over one projection run.

Condenses the year-by-year records into the headline numbers shown above the
chart: where each strategy ends up, the average annual ROI, and when (if ever)
the rental overtakes the alternative or pays back the purchase price.
"""

from __future__ import annotations

from typing import Dict, Optional, Sequence

import numpy as np

from core.utils import round_half_away
from engine.projection import YearProjection


def _first_year(projections: Sequence[YearProjection], predicate) -> Optional[int]:
    for p in projections:
        if predicate(p):
            return p.year
    return None


def compute_summary_metrics(projections: Sequence[YearProjection]) -> Dict[str, object]:
    """
    Compute headline metrics for a projection.

    Returns
    -------
    Dict with:
        horizon_years, property_value, final_rental_value, final_alternative_value,
        final_value_difference, total_net_profit, average_roi, crossover_year,
        payback_year
    """
    if len(projections) == 0:
        raise ValueError("No projections to summarize.")

    last = projections[-1]
    property_value = last.property_value

    # average of the displayed (already rounded) yearly ROIs
    roi = np.array([p.yearly_roi for p in projections], dtype=float)
    average_roi = round_half_away(float(np.mean(roi)), 1)

    return {
        "horizon_years": len(projections),
        "property_value": float(property_value),
        "final_rental_value": float(last.cumulative_rental_value),
        "final_alternative_value": float(last.alternative_investment_value),
        "final_value_difference": float(last.value_difference),
        "total_net_profit": float(last.cumulative_net_profit),
        "average_roi": average_roi,
        "crossover_year": _first_year(projections, lambda p: p.value_difference > 0),
        "payback_year": _first_year(
            projections, lambda p: p.cumulative_net_profit >= property_value
        ),
    }
