"""
Rental Projection Dashboard
===========================

Compares a short-term-rental property against investing the same money
elsewhere, year by year:
  1. Property inputs:   value, nightly rate, occupancy, growth, horizon
  2. Financial config:  resolved from a config file (property → company → defaults)
                        or edited by hand in the sidebar
  3. Outputs:           value comparison chart, yearly ROI, summary KPIs,
                        full projection table and a sensitivity grid

Run: streamlit run app/streamlit_app.py
"""

from __future__ import annotations

import logging
import sys
from dataclasses import replace
from pathlib import Path
from typing import Optional

import altair as alt
import pandas as pd
import streamlit as st

# ---------------------------------------------------------------------------
# Make project root importable
# ---------------------------------------------------------------------------
PROJECT_ROOT = Path(__file__).resolve().parent.parent
sys.path.insert(0, str(PROJECT_ROOT))

from core.config import (
    DEFAULT_FINANCIAL_CONFIG,
    DEFAULT_NIGHTLY_RATE,
    DEFAULT_OCCUPANCY_RATE,
    ExpenseSetting,
    FinancialConfig,
    ProjectionInput,
)
from core.errors import ConfigResolutionError, InvalidInputError
from core.schema import CURRENCY_COLUMNS
from core.utils import fmt_currency

from inputs.resolver import ConfigResolver
from inputs.store import InMemoryConfigStore, load_config_store
from inputs.validators import (
    GROWTH_BOUNDS,
    HORIZON_BOUNDS,
    MARKET_RATE_BOUNDS,
    OCCUPANCY_BOUNDS,
    PROPERTY_VALUE_BOUNDS,
    validate_financial_config,
    validate_projection_input,
)

from engine.runner import run_projection

from analysis.metrics import compute_summary_metrics
from analysis.sensitivity import run_sensitivity, summarize_sensitivity
from analysis.decisions import generate_investment_report

logger = logging.getLogger(__name__)

# ---------------------------------------------------------------------------
# Data directories
# ---------------------------------------------------------------------------
CONFIG_DIR = PROJECT_ROOT / "data" / "config"

# ---------------------------------------------------------------------------
# Scenario presets (occupancy / growth pairs)
# ---------------------------------------------------------------------------
SCENARIO_PRESETS: dict[str, dict[str, object]] = {
    "Base": {
        "occupancy": DEFAULT_OCCUPANCY_RATE, "growth": 5.0,
        "description": "Typical occupancy, steady rate growth",
    },
    "Conservative": {
        "occupancy": 60.0, "growth": 2.5,
        "description": "Softer demand, rates barely beat inflation",
    },
    "Optimistic": {
        "occupancy": 85.0, "growth": 7.0,
        "description": "Prime location, strong rate growth",
    },
    "Stress": {
        "occupancy": 45.0, "growth": 0.0,
        "description": "Oversupplied market, flat rates",
    },
}
CONFIG_LABEL = "From configuration"
DEFAULT_GROWTH_RATE = 5.0


# ---------------------------------------------------------------------------
# Cached loaders
# ---------------------------------------------------------------------------
@st.cache_data(show_spinner="Loading configuration...")
def _load_store_records(path: str) -> dict:
    store = load_config_store(path)
    return {k: store.fetch(k) for k in store.keys()}


def _available_config_files() -> list:
    if not CONFIG_DIR.exists():
        return []
    return sorted(str(p) for p in CONFIG_DIR.iterdir() if p.suffix.lower() in (".csv", ".json"))


# ---------------------------------------------------------------------------
# Chart helpers
# ---------------------------------------------------------------------------
def _plot_value_comparison(table: pd.DataFrame, *, currency: str, height=340):
    d = table[["year", "cumulative_rental_value", "alternative_investment_value"]].rename(
        columns={
            "cumulative_rental_value": "Rental property",
            "alternative_investment_value": "Alternative investment",
        }
    )
    long = d.melt(id_vars=["year"], var_name="series", value_name="value")
    chart = (
        alt.Chart(long).mark_line(point=True, strokeWidth=3)
        .encode(
            x=alt.X("year:O", title="Year"),
            y=alt.Y("value:Q", title=f"Total value ({currency})", axis=alt.Axis(format=",.0f")),
            color=alt.Color("series:N", title="Strategy",
                            scale=alt.Scale(range=["#4F46E5", "#14B8A6"])),
            tooltip=["year", "series", alt.Tooltip("value:Q", format=",.0f")],
        )
        .properties(title="Rental vs. Alternative Investment", height=height)
    )
    st.altair_chart(chart, use_container_width=True)


def _plot_roi(table: pd.DataFrame, height=240):
    chart = (
        alt.Chart(table).mark_bar(opacity=0.8)
        .encode(
            x=alt.X("year:O", title="Year"),
            y=alt.Y("yearly_roi:Q", title="ROI (%)"),
            color=alt.condition(alt.datum.yearly_roi >= 0, alt.value("#4F46E5"), alt.value("#B00020")),
            tooltip=["year", "yearly_roi"],
        )
        .properties(title="Yearly ROI on Property Value", height=height)
    )
    st.altair_chart(chart, use_container_width=True)


def _plot_sensitivity_heatmap(grid: pd.DataFrame, height=260):
    chart = (
        alt.Chart(grid).mark_rect()
        .encode(
            x=alt.X("annual_growth_rate:O", title="Growth (%)"),
            y=alt.Y("occupancy_rate:O", title="Occupancy (%)", sort="descending"),
            color=alt.Color("final_value_difference:Q", title="Difference",
                            scale=alt.Scale(scheme="redblue", domainMid=0)),
            tooltip=[
                "occupancy_rate", "annual_growth_rate",
                alt.Tooltip("final_value_difference:Q", format=",.0f"),
                "average_roi",
            ],
        )
        .properties(title="Final Value Difference by Occupancy × Growth", height=height)
    )
    st.altair_chart(chart, use_container_width=True)


def _display_table(table: pd.DataFrame, currency: str):
    display = table.copy()
    for col in CURRENCY_COLUMNS:
        display[col] = display[col].apply(lambda v: fmt_currency(v, currency))
    display["yearly_roi"] = display["yearly_roi"].map(lambda v: f"{v:.1f}%")
    display["effective_occupancy_rate"] = display["effective_occupancy_rate"].map(lambda v: f"{v:.0f}%")
    st.dataframe(
        display[[
            "year", "effective_nightly_rate", "effective_occupancy_rate", "gross_revenue",
            "net_profit_this_year", "yearly_roi", "cumulative_rental_value",
            "alternative_investment_value", "value_difference",
        ]],
        use_container_width=True,
        hide_index=True,
    )


# ---------------------------------------------------------------------------
# Sidebar sections
# ---------------------------------------------------------------------------
def _sidebar_config() -> tuple[FinancialConfig, Optional[ConfigResolver], Optional[str]]:
    """Pick a configuration source and return (config, resolver, property_key)."""
    st.header("Financial configuration")
    files = _available_config_files()
    source = st.radio("Source", ["Defaults", "Config file"] if files else ["Defaults"], horizontal=True)

    resolver = None
    property_key = None
    cfg = DEFAULT_FINANCIAL_CONFIG

    if source == "Config file":
        path = st.selectbox("File", files, format_func=lambda p: Path(p).name)
        store = InMemoryConfigStore(_load_store_records(path))
        company_key = st.text_input("Company key", "company")
        resolver = ConfigResolver(store, company_key=company_key)
        keys = [k for k in store.keys() if k != company_key]
        property_key = st.selectbox("Property", ["(company defaults)"] + keys)
        if property_key == "(company defaults)":
            property_key = None
        cfg = resolver.resolve(property_key)

    with st.expander("Adjust expenses", expanded=False):
        cfg = replace(
            cfg,
            operator_commission_pct=st.number_input(
                "Operator commission (% of revenue)", 0.0, 100.0, cfg.operator_commission_pct, 0.5),
            maintenance=_expense_input("Maintenance", cfg.maintenance, "of property value"),
            fixed_expenses=_expense_input("Fixed expenses", cfg.fixed_expenses, "of property value"),
            variable_expenses=_expense_input("Variable expenses", cfg.variable_expenses, "of revenue"),
            taxes=_expense_input("Taxes", cfg.taxes, "of taxable base"),
            annual_appreciation_pct=st.number_input(
                "Appreciation (%/yr)", *MARKET_RATE_BOUNDS, cfg.annual_appreciation_pct, 0.5),
            alternative_interest_pct=st.number_input(
                "Alternative investment (%/yr)", *MARKET_RATE_BOUNDS, cfg.alternative_interest_pct, 0.5),
        )
    return cfg, resolver, property_key


def _expense_input(label: str, setting: ExpenseSetting, base_label: str) -> ExpenseSetting:
    c1, c2 = st.columns([2, 1])
    is_pct = c2.toggle("%", value=setting.is_percentage, key=f"{label}_pct")
    value = c1.number_input(
        f"{label} ({'%' if is_pct else 'flat'} {base_label if is_pct else 'per year'})",
        min_value=0.0, value=float(setting.value), step=0.5 if is_pct else 100.0, key=f"{label}_val",
    )
    return ExpenseSetting(value, is_pct)


def _scenario_defaults(preset_name: str, base: ProjectionInput) -> tuple[float, float]:
    """(occupancy, growth) slider defaults. Only an explicit preset replaces the resolved baseline."""
    preset = SCENARIO_PRESETS.get(preset_name)
    if preset is None:
        return float(base.occupancy_rate), float(base.annual_growth_rate)
    return float(preset["occupancy"]), float(preset["growth"])


def _sidebar_inputs(resolver: Optional[ConfigResolver], property_key: Optional[str]) -> ProjectionInput:
    st.header("Property")

    preset_name = st.selectbox("Scenario", [CONFIG_LABEL] + list(SCENARIO_PRESETS))
    preset = SCENARIO_PRESETS.get(preset_name)
    if preset is not None:
        st.caption(str(preset["description"]))

    unit_price = st.number_input(
        "Unit price (optional, overrides property value)", min_value=0.0, value=0.0, step=100_000.0)
    property_value = st.slider(
        "Property value", int(PROPERTY_VALUE_BOUNDS[0]), int(PROPERTY_VALUE_BOUNDS[1]),
        3_500_000, 100_000, format="%d")
    years = st.slider("Projection years", HORIZON_BOUNDS[0], HORIZON_BOUNDS[1], 10, 1)

    if resolver is not None:
        base = resolver.resolve_inputs(
            property_value=property_value,
            horizon_years=years,
            annual_growth_rate=DEFAULT_GROWTH_RATE,
            property_key=property_key,
            unit_price=unit_price or None,
        )
    else:
        base = ProjectionInput(
            property_value=unit_price or property_value,
            nightly_rate=DEFAULT_NIGHTLY_RATE,
            occupancy_rate=DEFAULT_OCCUPANCY_RATE,
            annual_growth_rate=DEFAULT_GROWTH_RATE,
            horizon_years=years,
        )

    occupancy_default, growth_default = _scenario_defaults(preset_name, base)
    occupancy_default = min(max(occupancy_default, 0.0), OCCUPANCY_BOUNDS[1])
    growth_default = min(max(growth_default, GROWTH_BOUNDS[0]), GROWTH_BOUNDS[1])

    growth = st.slider("Annual growth (%)", GROWTH_BOUNDS[0], GROWTH_BOUNDS[1], growth_default, 0.5)
    nightly = st.number_input("Average nightly rate", min_value=0.0, value=float(base.nightly_rate), step=50.0)
    occupancy = st.slider(
        "Annual occupancy (%)", min(OCCUPANCY_BOUNDS[0], occupancy_default), OCCUPANCY_BOUNDS[1],
        occupancy_default, 1.0)

    return replace(base, nightly_rate=nightly, occupancy_rate=occupancy, annual_growth_rate=growth)


# ---------------------------------------------------------------------------
# Page
# ---------------------------------------------------------------------------
def render():
    st.set_page_config(page_title="Rental Projection", page_icon="🏠", layout="wide")
    st.title("Rental Property vs. Alternative Investment")

    with st.sidebar:
        try:
            cfg, resolver, property_key = _sidebar_config()
            inputs = _sidebar_inputs(resolver, property_key)
        except ConfigResolutionError as exc:
            st.error(str(exc))
            st.stop()
        property_name = st.text_input("Report label", property_key or "Property")

    checks = validate_projection_input(inputs)
    cfg_checks = validate_financial_config(cfg)
    for w in checks.warnings + cfg_checks.warnings:
        st.warning(w)

    try:
        table, raw = run_projection(inputs, cfg)
    except InvalidInputError as exc:
        st.error(str(exc))
        st.stop()

    projections = raw["projections"]
    metrics = compute_summary_metrics(projections)
    currency = cfg.currency

    k1, k2, k3, k4 = st.columns(4)
    k1.metric("Rental total value", fmt_currency(metrics["final_rental_value"], currency))
    k2.metric("Alternative total value", fmt_currency(metrics["final_alternative_value"], currency))
    k3.metric("Difference", fmt_currency(metrics["final_value_difference"], currency))
    k4.metric("Average annual ROI", f"{metrics['average_roi']:.1f}%")

    st.caption(
        f"Alternative investment at {cfg.alternative_interest_pct:g}%/yr; "
        f"appreciation {cfg.annual_appreciation_pct:g}%/yr. Occupancy shown per year "
        f"ramps up over the first five years; revenue uses the baseline occupancy."
    )

    tab_chart, tab_table, tab_sens, tab_report = st.tabs(
        ["Comparison", "Yearly detail", "Sensitivity", "Report"])

    with tab_chart:
        _plot_value_comparison(table, currency=currency)
        _plot_roi(table)

    with tab_table:
        _display_table(table, currency)
        st.download_button(
            "Download CSV",
            table.to_csv(index=False).encode("utf-8"),
            file_name="projection.csv",
            mime="text/csv",
        )

    with tab_sens:
        grid = run_sensitivity(inputs, cfg)
        _plot_sensitivity_heatmap(grid)
        st.dataframe(summarize_sensitivity(grid), use_container_width=True, hide_index=True)

    with tab_report:
        report = generate_investment_report(projections, property_name=property_name, currency=currency)
        st.dataframe(report.to_dataframe(), use_container_width=True, hide_index=True)


def main():
    """Console entry point: launch the dashboard with `streamlit run`."""
    from streamlit.web import cli as stcli

    sys.argv = ["streamlit", "run", str(Path(__file__).resolve())]
    sys.exit(stcli.main())


if __name__ == "__main__":
    logging.basicConfig(level=logging.INFO, format="%(asctime)s %(levelname)s %(name)s: %(message)s")
    render()
