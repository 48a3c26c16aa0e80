"""
Inputs — configuration records, stores, resolution, and validation.
"""

from .records import FinancialConfigRecord
from .store import ConfigStore, InMemoryConfigStore, load_config_store
from .resolver import ConfigResolver, merge_config_records
from .validators import (
    ValidationResult,
    validate_financial_config,
    validate_projection_input,
)

__all__ = [
    "FinancialConfigRecord",
    "ConfigStore",
    "InMemoryConfigStore",
    "load_config_store",
    "ConfigResolver",
    "merge_config_records",
    "ValidationResult",
    "validate_financial_config",
    "validate_projection_input",
]
