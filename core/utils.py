from __future__ import annotations

import math
from typing import Iterable

import numpy as np
import pandas as pd


def require_columns(df: pd.DataFrame, cols: Iterable[str]) -> None:
    missing = [c for c in cols if c not in df.columns]
    if missing:
        raise ValueError(f"Missing required columns: {missing}")


def round_half_away(x, decimals: int = 1):
    """Round half away from zero (vectorized). 3.25 -> 3.3, -3.25 -> -3.3."""
    m = 10 ** decimals
    arr = np.asarray(x, dtype=float)
    out = np.sign(arr) * (np.floor(np.abs(arr) * m + 0.5) / m)
    if out.ndim == 0:
        return float(out)
    return out


def is_finite_number(value) -> bool:
    try:
        return math.isfinite(float(value))
    except (TypeError, ValueError):
        return False


def fmt_currency(value: float, currency: str = "MXN") -> str:
    """Whole-unit currency string, e.g. '$3,755,317 MXN'."""
    value = float(value)
    sign = "-" if value < 0 else ""
    return f"{sign}${abs(value):,.0f} {currency}"
