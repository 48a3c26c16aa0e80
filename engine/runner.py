"""
Projection runner — the explicit recompute entry point used by the dashboard.

Callers invoke run_projection() whenever any input changes. It runs the pure
engine, tabulates the result, and hands the raw records to an optional
callback for further aggregation.
"""

from __future__ import annotations

import logging
from typing import Callable, Dict, List, Optional, Sequence, Tuple

import pandas as pd

from core.config import FinancialConfig, ProjectionInput
from core.schema import YEAR_PROJECTION_COLUMNS

from .projection import YearProjection, project

logger = logging.getLogger(__name__)

ProjectionCallback = Callable[[List[YearProjection]], None]


def projections_to_dataframe(projections: Sequence[YearProjection]) -> pd.DataFrame:
    """One row per year, columns in YEAR_PROJECTION_COLUMNS order."""
    return pd.DataFrame(
        [p.to_record() for p in projections],
        columns=list(YEAR_PROJECTION_COLUMNS),
    )


def run_projection(
    inputs: ProjectionInput,
    config: FinancialConfig,
    *,
    on_update: Optional[ProjectionCallback] = None,
) -> Tuple[pd.DataFrame, Dict]:
    """
    Run the projection and tabulate it.

    Parameters
    ----------
    inputs : ProjectionInput
        Baseline property economics and horizon
    config : FinancialConfig
        Resolved financial configuration
    on_update : callable, optional
        Receives the list of YearProjection after every run

    Returns
    -------
    (table, raw_results)
    table: DataFrame with YEAR_PROJECTION_COLUMNS, one row per year
    raw_results: dict with projections, inputs, config and horizon
    """
    projections = project(inputs, config)
    table = projections_to_dataframe(projections)

    last = projections[-1]
    logger.debug(
        "Projected %d years: rental=%.2f alternative=%.2f difference=%.2f",
        len(projections),
        last.cumulative_rental_value,
        last.alternative_investment_value,
        last.value_difference,
    )

    if on_update is not None:
        on_update(projections)

    raw_results = {
        "projections": projections,
        "inputs": inputs,
        "config": config,
        "horizon": len(projections),
    }
    return table, raw_results
