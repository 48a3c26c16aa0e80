import json
from pathlib import Path

import pytest

from core.config import DEFAULT_FINANCIAL_CONFIG, ExpenseSetting
from core.errors import ConfigResolutionError
from inputs.records import FinancialConfigRecord
from inputs.resolver import ConfigResolver, merge_config_records
from inputs.store import InMemoryConfigStore, load_config_store

EXAMPLE_CSV = Path(__file__).resolve().parent.parent / "data" / "config" / "example.csv"


@pytest.fixture
def store():
    return InMemoryConfigStore({
        "company": {
            "nightly_rate": 1900,
            "occupancy_rate": 72,
            "operator_commission_pct": 18,
            "maintenance_value": 6,
            "maintenance_is_percentage": True,
            "taxes_value": 30,
            "taxes_is_percentage": True,
            "alternative_interest_pct": 8,
        },
        "dev-1": {
            "nightly_rate": 2400,
            "occupancy_rate": 80,
            "maintenance_value": 12_000,
            "maintenance_is_percentage": False,
        },
    })


# =====================================================
# Merge precedence
# =====================================================
def test_no_records_gives_hard_coded_defaults():
    assert merge_config_records(None, None) == DEFAULT_FINANCIAL_CONFIG


def test_hard_coded_defaults():
    cfg = DEFAULT_FINANCIAL_CONFIG
    assert cfg.operator_commission_pct == 15
    assert cfg.maintenance == ExpenseSetting(5, True)
    assert cfg.fixed_expenses == ExpenseSetting(2500, False)
    assert cfg.variable_expenses == ExpenseSetting(12, True)
    assert cfg.taxes == ExpenseSetting(35, True)
    assert cfg.annual_appreciation_pct == 4
    assert cfg.alternative_interest_pct == 7
    assert cfg.currency == "MXN"


def test_property_overrides_company_overrides_defaults():
    cfg = merge_config_records(
        {"operator_commission_pct": 20},
        {"operator_commission_pct": 18, "taxes_value": 30, "taxes_is_percentage": True},
    )
    assert cfg.operator_commission_pct == 20
    assert cfg.taxes == ExpenseSetting(30, True)
    assert cfg.variable_expenses == ExpenseSetting(12, True)
    assert cfg.annual_appreciation_pct == 4


def test_percentage_flag_comes_from_the_same_tier_as_the_value():
    cfg = merge_config_records(
        {"maintenance_value": 12_000, "maintenance_is_percentage": False},
        {"maintenance_value": 6, "maintenance_is_percentage": True},
    )
    assert cfg.maintenance == ExpenseSetting(12_000, False)


def test_value_without_flag_uses_default_flag():
    cfg = merge_config_records({"fixed_expenses_value": 4_000}, None)
    assert cfg.fixed_expenses == ExpenseSetting(4_000, False)


def test_accepts_validated_records():
    cfg = merge_config_records(FinancialConfigRecord(annual_appreciation_pct=3.5), None)
    assert cfg.annual_appreciation_pct == 3.5


@pytest.mark.parametrize("record", [
    {"occupancy_rate": 150},
    {"operator_commission_pct": -1},
    {"maintenance_value": 150, "maintenance_is_percentage": True},
    {"nightly_rate": 0},
    {"annual_appreciation_pct": 60},
    {"alternative_interest_pct": -25},
])
def test_invalid_records_raise(record):
    with pytest.raises(ConfigResolutionError):
        merge_config_records(record, None)


@pytest.mark.parametrize("name", ["maintenance", "variable_expenses", "taxes"])
def test_flagless_value_over_100_on_a_percentage_default_raises(name):
    with pytest.raises(ConfigResolutionError, match=f"{name}_value"):
        merge_config_records({f"{name}_value": 150}, None)


def test_flagless_value_over_100_on_a_flat_default_is_fine():
    cfg = merge_config_records({"fixed_expenses_value": 150}, None)
    assert cfg.fixed_expenses == ExpenseSetting(150, False)


def test_flagless_company_percentage_is_range_checked(store):
    store.put("company", {"taxes_value": 140})
    with pytest.raises(ConfigResolutionError):
        ConfigResolver(store).resolve("dev-1")


def test_large_flat_amount_is_fine():
    cfg = merge_config_records({"maintenance_value": 150_000, "maintenance_is_percentage": False}, None)
    assert cfg.maintenance == ExpenseSetting(150_000, False)


def test_unknown_keys_are_ignored():
    cfg = merge_config_records({"id": 7, "name": "x", "operator_commission_pct": 12}, None)
    assert cfg.operator_commission_pct == 12


def test_exchange_rate_is_not_a_config_field():
    record = FinancialConfigRecord.model_validate({"currency": "USD", "exchange_rate": 17.2})
    assert "exchange_rate" not in record.model_dump()
    assert merge_config_records(record, None).currency == "USD"


# =====================================================
# Resolver against a store
# =====================================================
def test_resolve_property(store):
    cfg = ConfigResolver(store).resolve("dev-1")
    assert cfg.maintenance == ExpenseSetting(12_000, False)
    assert cfg.operator_commission_pct == 18
    assert cfg.taxes == ExpenseSetting(30, True)
    assert cfg.alternative_interest_pct == 8
    assert cfg.annual_appreciation_pct == 4


def test_resolve_unknown_property_falls_back_to_company(store):
    cfg = ConfigResolver(store).resolve("missing")
    assert cfg == ConfigResolver(store).resolve(None)
    assert cfg.maintenance == ExpenseSetting(6, True)


def test_resolve_with_empty_store():
    assert ConfigResolver(InMemoryConfigStore()).resolve("dev-1") == DEFAULT_FINANCIAL_CONFIG


def test_resolve_inputs_uses_property_rates(store):
    inputs = ConfigResolver(store).resolve_inputs(
        property_value=3_000_000, horizon_years=10, annual_growth_rate=5, property_key="dev-1")
    assert inputs.property_value == 3_000_000
    assert inputs.nightly_rate == 2400
    assert inputs.occupancy_rate == 80
    assert inputs.horizon_years == 10


def test_resolve_inputs_with_unit_price_uses_generic_rates(store):
    inputs = ConfigResolver(store).resolve_inputs(
        property_value=3_000_000, horizon_years=10, annual_growth_rate=5,
        property_key="dev-1", unit_price=4_200_000)
    assert inputs.property_value == 4_200_000
    assert inputs.nightly_rate == 1900
    assert inputs.occupancy_rate == 72


def test_resolve_inputs_defaults_without_any_record():
    inputs = ConfigResolver(InMemoryConfigStore()).resolve_inputs(
        property_value=3_000_000, horizon_years=5, annual_growth_rate=2)
    assert inputs.nightly_rate == 1800
    assert inputs.occupancy_rate == 74


def test_invalid_stored_record_raises(store):
    store.put("bad", {"occupancy_rate": 101})
    with pytest.raises(ConfigResolutionError, match="bad"):
        ConfigResolver(store).resolve("bad")


# =====================================================
# File loading
# =====================================================
def test_load_example_csv():
    store = load_config_store(str(EXAMPLE_CSV))
    assert set(store.keys()) == {"company", "playa-norte", "centro-lofts"}

    resolver = ConfigResolver(store)
    playa = resolver.resolve("playa-norte")
    assert playa.operator_commission_pct == 20
    assert playa.maintenance == ExpenseSetting(4, True)
    assert playa.fixed_expenses == ExpenseSetting(3000, False)
    assert playa.variable_expenses == ExpenseSetting(12, True)
    assert playa.taxes == ExpenseSetting(30, True)
    assert playa.annual_appreciation_pct == 5
    assert playa.alternative_interest_pct == 8

    lofts = resolver.resolve("centro-lofts")
    assert lofts.maintenance == ExpenseSetting(12000, False)
    assert lofts.variable_expenses == ExpenseSetting(10, True)
    assert lofts.operator_commission_pct == 18

    inputs = resolver.resolve_inputs(
        property_value=2_000_000, horizon_years=3, annual_growth_rate=0, property_key="centro-lofts")
    assert inputs.nightly_rate == 1500
    assert inputs.occupancy_rate == 72


def test_load_json(tmp_path):
    path = tmp_path / "config.json"
    path.write_text(json.dumps([
        {"key": "company", "nightly_rate": 2000, "taxes_value": 25, "taxes_is_percentage": True},
        {"key": "p1", "occupancy_rate": 66, "taxes_is_percentage": True, "notes": "ignored"},
    ]))
    resolver = ConfigResolver(load_config_store(str(path)))
    assert resolver.resolve("p1").taxes == ExpenseSetting(25, True)
    inputs = resolver.resolve_inputs(
        property_value=2_000_000, horizon_years=3, annual_growth_rate=0, property_key="p1")
    assert inputs.nightly_rate == 2000
    assert inputs.occupancy_rate == 66


def test_load_rejects_duplicate_keys(tmp_path):
    path = tmp_path / "dup.csv"
    path.write_text("key,nightly_rate\na,100\na,200\n")
    with pytest.raises(ValueError, match="Duplicate"):
        load_config_store(str(path))


def test_load_requires_key_column(tmp_path):
    path = tmp_path / "nokey.csv"
    path.write_text("id,nightly_rate\na,100\n")
    with pytest.raises(ValueError, match="Missing required columns"):
        load_config_store(str(path))
