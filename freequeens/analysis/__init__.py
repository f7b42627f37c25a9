"""
Analysis and orchestration package for freequeens experiments.

This package contains:
- settings: global knobs for batch experiments and output naming
- stats: typed summaries and aggregation helpers
- experiments: seeded GA batch runner with result shaping
- reporting: CSV exports of aggregates, raw runs and generation histories
- plots: visualization utilities
- cli: top-level pipeline entry points and argument parser
"""

from . import settings as settings  # re-export for convenience
from .stats import (
    ExperimentResults,
    GAResultEntry,
    GenerationRecord,
    ProgressPrinter,
    RunRecord,
    StatsSummary,
    compute_detailed_statistics,
    compute_grouped_statistics,
)

__all__ = [
    # types
    "StatsSummary",
    "RunRecord",
    "GenerationRecord",
    "GAResultEntry",
    "ExperimentResults",
    # utils
    "compute_detailed_statistics",
    "compute_grouped_statistics",
    "ProgressPrinter",
    # settings module
    "settings",
]
