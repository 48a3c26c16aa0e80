"""
Financial configuration resolution — turns stored records into a FinancialConfig.

Precedence, field by field:
  1. Per-property override record (keyed by property/unit identifier)
  2. Company-level default record
  3. Hard-coded defaults (core/config.py)

An expense's percentage flag is taken from the same tier as its value, so a
flat override never inherits a percentage flag from a lower tier.

The engine never calls into this module; callers resolve once, then pass the
plain FinancialConfig to engine.projection.project().
"""

from __future__ import annotations

import logging
from typing import Any, Mapping, Optional, Union

from pydantic import ValidationError

from core import config as defaults
from core.config import ExpenseSetting, FinancialConfig, ProjectionInput
from core.errors import ConfigResolutionError

from .records import FinancialConfigRecord
from .store import ConfigStore

logger = logging.getLogger(__name__)

RecordLike = Union[FinancialConfigRecord, Mapping[str, Any], None]

_EXPENSE_DEFAULTS = {
    "maintenance": (defaults.DEFAULT_MAINTENANCE_VALUE, defaults.DEFAULT_MAINTENANCE_IS_PERCENTAGE),
    "fixed_expenses": (defaults.DEFAULT_FIXED_EXPENSES_VALUE, defaults.DEFAULT_FIXED_EXPENSES_IS_PERCENTAGE),
    "variable_expenses": (defaults.DEFAULT_VARIABLE_EXPENSES_VALUE, defaults.DEFAULT_VARIABLE_EXPENSES_IS_PERCENTAGE),
    "taxes": (defaults.DEFAULT_TAXES_VALUE, defaults.DEFAULT_TAXES_IS_PERCENTAGE),
}


def to_record(raw: RecordLike, *, source: str = "record") -> FinancialConfigRecord:
    """Validate a raw mapping into a FinancialConfigRecord (None → empty record)."""
    if raw is None:
        return FinancialConfigRecord()
    if isinstance(raw, FinancialConfigRecord):
        return raw
    try:
        return FinancialConfigRecord.model_validate(dict(raw))
    except ValidationError as exc:
        raise ConfigResolutionError(f"Invalid financial configuration in {source}: {exc}") from exc


def _first(*values):
    for v in values:
        if v is not None:
            return v
    return None


def _resolve_expense(name: str, *records: FinancialConfigRecord) -> ExpenseSetting:
    default_value, default_is_pct = _EXPENSE_DEFAULTS[name]
    for rec in records:
        value = getattr(rec, f"{name}_value")
        if value is not None:
            is_pct = getattr(rec, f"{name}_is_percentage")
            is_pct = default_is_pct if is_pct is None else bool(is_pct)
            if is_pct and value > 100:
                raise ConfigResolutionError(
                    f"{name}_value {value} resolves to a percentage and must be between 0 and 100"
                )
            return ExpenseSetting(float(value), is_pct)
    return ExpenseSetting(default_value, default_is_pct)


def merge_config_records(
    property_record: RecordLike = None,
    company_record: RecordLike = None,
) -> FinancialConfig:
    """Merge property override → company default → hard-coded defaults."""
    prop = to_record(property_record, source="property record")
    company = to_record(company_record, source="company record")

    return FinancialConfig(
        operator_commission_pct=float(_first(
            prop.operator_commission_pct,
            company.operator_commission_pct,
            defaults.DEFAULT_OPERATOR_COMMISSION_PCT,
        )),
        maintenance=_resolve_expense("maintenance", prop, company),
        fixed_expenses=_resolve_expense("fixed_expenses", prop, company),
        variable_expenses=_resolve_expense("variable_expenses", prop, company),
        taxes=_resolve_expense("taxes", prop, company),
        annual_appreciation_pct=float(_first(
            prop.annual_appreciation_pct,
            company.annual_appreciation_pct,
            defaults.DEFAULT_ANNUAL_APPRECIATION_PCT,
        )),
        alternative_interest_pct=float(_first(
            prop.alternative_interest_pct,
            company.alternative_interest_pct,
            defaults.DEFAULT_ALTERNATIVE_INTEREST_PCT,
        )),
        currency=_first(prop.currency, company.currency, defaults.DEFAULT_CURRENCY),
    )


class ConfigResolver:
    """
    Resolves configurations and baseline inputs from a ConfigStore.

    Usage:
        resolver = ConfigResolver(store, company_key="company")
        cfg = resolver.resolve(property_key="dev-42")
        inputs = resolver.resolve_inputs(property_value=3_500_000, horizon_years=10,
                                         annual_growth_rate=5, property_key="dev-42")
    """

    def __init__(self, store: ConfigStore, *, company_key: str = "company"):
        self.store = store
        self.company_key = company_key

    def _fetch(self, key: Optional[str]) -> FinancialConfigRecord:
        if key is None:
            return FinancialConfigRecord()
        raw = self.store.fetch(key)
        if raw is None:
            logger.debug("No configuration stored for %r; falling back", key)
            return FinancialConfigRecord()
        return to_record(raw, source=f"record {key!r}")

    def resolve(self, property_key: Optional[str] = None) -> FinancialConfig:
        prop = self._fetch(property_key)
        company = self._fetch(self.company_key)
        cfg = merge_config_records(prop, company)
        logger.debug("Resolved financial config for %r: %s", property_key, cfg)
        return cfg

    def resolve_inputs(
        self,
        *,
        property_value: float,
        horizon_years: int,
        annual_growth_rate: float,
        property_key: Optional[str] = None,
        unit_price: Optional[float] = None,
    ) -> ProjectionInput:
        """
        Build the baseline ProjectionInput.

        Without a unit price, nightly rate and occupancy come from the fully
        resolved configuration (property → company → defaults). With a known
        unit/prototype price, property_value becomes that price and nightly
        rate/occupancy stay at the generic company → defaults values.
        """
        company = self._fetch(self.company_key)
        if unit_price is not None:
            prop = FinancialConfigRecord()
            property_value = float(unit_price)
        else:
            prop = self._fetch(property_key)

        nightly = _first(prop.nightly_rate, company.nightly_rate, defaults.DEFAULT_NIGHTLY_RATE)
        occupancy = _first(prop.occupancy_rate, company.occupancy_rate, defaults.DEFAULT_OCCUPANCY_RATE)

        return ProjectionInput(
            property_value=float(property_value),
            nightly_rate=float(nightly),
            occupancy_rate=float(occupancy),
            annual_growth_rate=float(annual_growth_rate),
            horizon_years=int(horizon_years),
        )
