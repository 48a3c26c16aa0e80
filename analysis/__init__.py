"""
Analysis outputs — summary metrics, sensitivity grids, decision support, export.
"""

from .metrics import compute_summary_metrics
from .sensitivity import run_sensitivity, summarize_sensitivity
from .decisions import InvestmentReport, generate_investment_report
from .export import export_projection_table

__all__ = [
    "compute_summary_metrics",
    "run_sensitivity",
    "summarize_sensitivity",
    "InvestmentReport",
    "generate_investment_report",
    "export_projection_table",
]
