"""
Projection engine — pure year-by-year rental vs. alternative investment math + runner.
"""

from .projection import YearProjection, project
from .runner import projections_to_dataframe, run_projection

__all__ = ["YearProjection", "project", "projections_to_dataframe", "run_projection"]
