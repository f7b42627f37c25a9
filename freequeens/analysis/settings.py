"""Global settings for the freequeens analysis pipeline.

This module centralizes tunable constants used across the orchestration code.
Values can be overridden at runtime via the configuration loader in
`freequeens.analysis.cli.apply_configuration`.
"""
from __future__ import annotations

from datetime import datetime
from typing import List, Optional

# Board sizes to evaluate (Q = N for every batch run)
N_VALUES: List[int] = [4, 5, 6, 8]

# Number of independent runs per board size
RUNS_GA_FINAL: int = 20

# Population size and generation budget for batch runs
POPULATION_SIZE: int = 200
MAX_GENERATIONS: int = 500

# Seed of the first run; run k of a batch uses BASE_SEED + k (None = wall clock)
BASE_SEED: Optional[int] = 12345

# Output directory for CSV and charts
OUT_DIR: str = "results_freequeens"

# Output naming policy --------------------------------------------------------

# When True, results and plots include a datestamp suffix (e.g., _20251113-142530)
# applied consistently across all artifacts produced within the same run.
DATE_IN_FILENAMES: bool = True

# Unique run identifier used for filename stamping; set once at import time.
RUN_ID: str = datetime.now().strftime("%Y%m%d-%H%M%S")

# Optional run label appended to filenames to avoid overwriting outputs
RUN_TAG: Optional[str] = None


def filename_suffix() -> str:
    """Return the ``_<tag>_<run id>`` suffix configured for output files (or empty)."""
    parts: List[str] = []
    if RUN_TAG:
        parts.append(str(RUN_TAG))
    if DATE_IN_FILENAMES and RUN_ID:
        parts.append(str(RUN_ID))
    return ("_" + "_".join(parts)) if parts else ""
