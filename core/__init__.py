"""
Core package — value types, defaults, column schema, errors and shared utilities.
No business logic lives here.
"""

from .schema import YEAR_PROJECTION_COLUMNS
from .config import (
    DEFAULT_FINANCIAL_CONFIG,
    ExpenseSetting,
    FinancialConfig,
    ProjectionInput,
)
from .errors import ConfigResolutionError, InvalidInputError
from .utils import require_columns, round_half_away

__all__ = [
    "YEAR_PROJECTION_COLUMNS",
    "DEFAULT_FINANCIAL_CONFIG",
    "ExpenseSetting",
    "FinancialConfig",
    "ProjectionInput",
    "ConfigResolutionError",
    "InvalidInputError",
    "require_columns",
    "round_half_away",
]
