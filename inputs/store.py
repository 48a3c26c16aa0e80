"""
Configuration stores — where financial configuration records are fetched by key.

The remote store used in production only needs to implement ``fetch``; the
in-memory store and file loader here are what the dashboard and tests use.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Any, Dict, Mapping, Optional

import pandas as pd

from core.schema import CONFIG_RECORD_FIELDS
from core.utils import require_columns

logger = logging.getLogger(__name__)


class ConfigStore:
    """Interface for looking up a raw configuration record by key."""

    def fetch(self, key: str) -> Optional[Mapping[str, Any]]:
        raise NotImplementedError


class InMemoryConfigStore(ConfigStore):
    """Dict-backed store. Keys are property identifiers or the company key."""

    def __init__(self, records: Optional[Mapping[str, Mapping[str, Any]]] = None):
        self._records: Dict[str, Dict[str, Any]] = {
            str(k): dict(v) for k, v in (records or {}).items()
        }

    def fetch(self, key: str) -> Optional[Mapping[str, Any]]:
        record = self._records.get(str(key))
        return dict(record) if record is not None else None

    def put(self, key: str, record: Mapping[str, Any]) -> None:
        self._records[str(key)] = dict(record)

    def keys(self):
        return list(self._records)

    def __len__(self) -> int:
        return len(self._records)


def _clean_value(value: Any) -> Any:
    if value is None:
        return None
    if isinstance(value, float) and pd.isna(value):
        return None
    if hasattr(value, "item"):  # numpy scalar
        return value.item()
    return value


def load_config_store(path: str, *, key_column: str = "key") -> InMemoryConfigStore:
    """
    Load configuration records from a CSV or JSON table (one row per key).
    Empty cells become missing values so the resolver falls through to the next tier.
    Columns that are not configuration fields are ignored.
    """
    p = Path(path)
    if p.suffix.lower() == ".json":
        df = pd.read_json(p, orient="records", dtype={key_column: str})
    else:
        df = pd.read_csv(p, dtype={key_column: str})

    require_columns(df, [key_column])
    if df[key_column].duplicated().any():
        dups = df.loc[df[key_column].duplicated(), key_column].tolist()
        raise ValueError(f"Duplicate configuration keys: {dups}")

    field_cols = [c for c in df.columns if c in CONFIG_RECORD_FIELDS]
    ignored = [c for c in df.columns if c != key_column and c not in CONFIG_RECORD_FIELDS]
    if ignored:
        logger.debug("Ignoring non-config columns in %s: %s", p.name, ignored)

    records = {}
    for row in df.to_dict(orient="records"):
        records[str(row[key_column])] = {c: _clean_value(row[c]) for c in field_cols}

    logger.info("Loaded %d configuration records from %s", len(records), p)
    return InMemoryConfigStore(records)
