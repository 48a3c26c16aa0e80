from __future__ import annotations


class InvalidInputError(ValueError):
    """Projection inputs the engine refuses to run on (e.g. non-positive property value)."""


class ConfigResolutionError(ValueError):
    """A stored configuration record could not be turned into a FinancialConfig."""
