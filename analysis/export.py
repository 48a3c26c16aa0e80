from __future__ import annotations

import logging
from pathlib import Path

import pandas as pd

from core.schema import YEAR_PROJECTION_COLUMNS
from core.utils import require_columns

logger = logging.getLogger(__name__)


def export_projection_table(table: pd.DataFrame, path: str) -> Path:
    """
    Write a projection table to .csv or .xlsx (openpyxl), chosen by file suffix.
    """
    require_columns(table, YEAR_PROJECTION_COLUMNS)
    p = Path(path)
    suffix = p.suffix.lower()
    if suffix == ".xlsx":
        table.to_excel(p, index=False, sheet_name="Projection", engine="openpyxl")
    elif suffix == ".csv":
        table.to_csv(p, index=False)
    else:
        raise ValueError(f"Unsupported export format {suffix!r}; use .csv or .xlsx")
    logger.info("Exported %d projection rows to %s", len(table), p)
    return p
