"""CSV export utilities for experiment outputs (aggregates, raw runs, histories).

Tables are built as pandas DataFrames and written with ``DataFrame.to_csv``.
Filenames carry the suffix configured in ``freequeens.analysis.settings`` so
that repeated pipelines do not overwrite each other.
"""
from __future__ import annotations

import os
from typing import Any, Dict, List

import pandas as pd

from . import settings
from .stats import ExperimentResults

SUMMARY_METRICS = ["gen", "time", "evals", "best_fitness"]


def _stat(entry: Dict[str, Any], key: str, field: str) -> Any:
    return entry.get(key, {}).get(field)


def results_to_frame(results: ExperimentResults, N_values: List[int]) -> pd.DataFrame:
    """Return one row of aggregate metrics per board size."""
    rows = []
    for N in N_values:
        entry: Dict[str, Any] = dict(results.get(N, {}))
        row: Dict[str, Any] = {
            "n": N,
            "pop_size": entry.get("pop_size"),
            "max_gen": entry.get("max_gen"),
            "total_runs": entry.get("total_runs", 0),
            "successes": entry.get("successes", 0),
            "success_rate": entry.get("success_rate", 0.0),
        }
        for metric in SUMMARY_METRICS:
            row[f"success_{metric}_mean"] = _stat(entry, f"success_{metric}", "mean")
            row[f"success_{metric}_std"] = _stat(entry, f"success_{metric}", "std")
            row[f"all_{metric}_mean"] = _stat(entry, f"all_{metric}", "mean")
            row[f"all_{metric}_median"] = _stat(entry, f"all_{metric}", "median")
        rows.append(row)
    return pd.DataFrame(rows)


def raw_runs_to_frame(results: ExperimentResults, N_values: List[int]) -> pd.DataFrame:
    """Return one row per individual GA run."""
    rows = []
    for N in N_values:
        for run, record in enumerate(results.get(N, {}).get("raw_runs", [])):
            rows.append({
                "n": N,
                "run": run,
                "seed": record["seed"],
                "success": record["success"],
                "generations": record["gen"],
                "time_seconds": record["time"],
                "evaluations": record["evals"],
                "best_fitness": record["best_fitness"],
                "best_genome": " ".join(str(g) for g in record["best_genome"]),
            })
    return pd.DataFrame(rows, columns=[
        "n", "run", "seed", "success", "generations", "time_seconds",
        "evaluations", "best_fitness", "best_genome",
    ])


def history_to_frame(results: ExperimentResults, N_values: List[int]) -> pd.DataFrame:
    """Return the per-generation statistics of every run as a long table."""
    rows = []
    for N in N_values:
        rows.extend(results.get(N, {}).get("history", []))
    return pd.DataFrame(rows, columns=["N", "run", "generation", "total", "average", "best", "runner_up"])


def save_results_to_csv(results: ExperimentResults, N_values: List[int], out_dir: str) -> str:
    """Write per-N aggregate metrics and return the file path."""
    os.makedirs(out_dir, exist_ok=True)
    filename = os.path.join(out_dir, f"results_GA{settings.filename_suffix()}.csv")
    results_to_frame(results, N_values).to_csv(filename, index=False)
    print(f"Saved aggregate results: {filename}")
    return filename


def save_raw_data_to_csv(results: ExperimentResults, N_values: List[int], out_dir: str) -> str:
    """Write every run record and return the file path."""
    os.makedirs(out_dir, exist_ok=True)
    filename = os.path.join(out_dir, f"raw_data_GA{settings.filename_suffix()}.csv")
    raw_runs_to_frame(results, N_values).to_csv(filename, index=False)
    print(f"Saved raw run data: {filename}")
    return filename


def save_history_to_csv(results: ExperimentResults, N_values: List[int], out_dir: str) -> str:
    """Write the generation history of every run and return the file path."""
    os.makedirs(out_dir, exist_ok=True)
    filename = os.path.join(out_dir, f"history_GA{settings.filename_suffix()}.csv")
    history_to_frame(results, N_values).to_csv(filename, index=False)
    print(f"Saved generation history: {filename}")
    return filename
