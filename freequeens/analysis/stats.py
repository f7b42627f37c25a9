"""Typed result shapes and statistics helpers for the analysis pipeline.

Defines ``TypedDict`` structures for experiment outputs and provides utilities
to compute aggregate statistics across per-run records.
"""
from __future__ import annotations

import statistics
from typing import Any, Dict, List, Optional, TypedDict

METRICS = ["time", "gen", "evals", "best_fitness"]


class StatsSummary(TypedDict, total=False):
    count: int
    mean: Optional[float]
    median: Optional[float]
    std: Optional[float]
    min: Optional[float]
    max: Optional[float]
    q25: Optional[float]
    q75: Optional[float]
    range: Optional[float]


class RunRecord(TypedDict):
    seed: Optional[int]
    success: bool
    gen: int
    time: float
    best_fitness: float
    evals: int
    best_genome: List[int]


class GenerationRecord(TypedDict):
    N: int
    run: int
    generation: int
    total: float
    average: float
    best: float
    runner_up: float


class GAResultEntry(TypedDict, total=False):
    success_rate: float
    failure_rate: float
    total_runs: int
    successes: int
    failures: int
    success_gen: StatsSummary
    success_time: StatsSummary
    success_evals: StatsSummary
    success_best_fitness: StatsSummary
    failure_gen: StatsSummary
    failure_time: StatsSummary
    failure_evals: StatsSummary
    failure_best_fitness: StatsSummary
    all_gen: StatsSummary
    all_time: StatsSummary
    all_evals: StatsSummary
    all_best_fitness: StatsSummary
    pop_size: int
    max_gen: int
    raw_runs: List[RunRecord]
    history: List[GenerationRecord]


ExperimentResults = Dict[int, GAResultEntry]


class ProgressPrinter:
    """Minimal, stdout-only progress reporter for long-running loops.

    Parameters
    ----------
    total : int
        Total number of steps expected. Values <= 0 are coerced to 1 so that
        the percentage stays defined.
    label : str
        Short label printed in front of the progress counters.
    """

    def __init__(self, total: int, label: str):
        self.total = max(1, total)
        self.label = label

    def update(self, index: int, detail: str = "") -> None:
        """Print a single-line progress update to stdout."""
        percent = (index / self.total) * 100
        suffix = f" - {detail}" if detail else ""
        print(f"[{self.label}] {index}/{self.total} ({percent:.0f}%)" + suffix)


def compute_detailed_statistics(values: List[float]) -> StatsSummary:
    """Compute summary statistics for a numeric sequence.

    Returns count, mean, median, population std, min, max, 25th and 75th
    percentiles and range. On empty input every numeric field is ``None`` and
    ``count`` is 0, which keeps CSV columns stable.
    """
    if not values:
        return {
            "count": 0,
            "mean": None,
            "median": None,
            "std": None,
            "min": None,
            "max": None,
            "q25": None,
            "q75": None,
            "range": None,
        }

    sorted_vals = sorted(values)
    n = len(values)

    min_val = min(values)
    max_val = max(values)

    return {
        "count": n,
        "mean": statistics.mean(values),
        "median": statistics.median(values),
        "std": statistics.pstdev(values) if n > 1 else 0,
        "min": min_val,
        "max": max_val,
        "q25": sorted_vals[n // 4] if n >= 4 else min_val,
        "q75": sorted_vals[3 * n // 4] if n >= 4 else max_val,
        "range": max_val - min_val,
    }


def compute_grouped_statistics(results_list: List[Dict[str, Any]], success_key: str = "success") -> Dict[str, Any]:
    """Aggregate run metrics overall and by outcome (success, failure).

    Parameters
    ----------
    results_list : List[Dict[str, Any]]
        Per-run records, typically ``RunRecord`` dictionaries.
    success_key : str, optional
        The key to interpret as the success flag (default: ``"success"``).

    Returns
    -------
    Dict[str, Any]
        Rates and counters plus ``all_<metric>``, ``success_<metric>`` and
        ``failure_<metric>`` summaries for every metric present in
        ``METRICS``.
    """
    successes = [r for r in results_list if r.get(success_key, False)]
    failures = [r for r in results_list if not r.get(success_key, False)]
    total = len(results_list)

    stats: Dict[str, Any] = {
        "total_runs": total,
        "successes": len(successes),
        "failures": len(failures),
        "success_rate": len(successes) / total if total else 0,
        "failure_rate": len(failures) / total if total else 0,
    }

    for group, records in (("all", results_list), ("success", successes), ("failure", failures)):
        for metric in METRICS:
            if any(metric in r for r in records):
                values = [r[metric] for r in records if metric in r]
                stats[f"{group}_{metric}"] = compute_detailed_statistics(values)

    return stats
