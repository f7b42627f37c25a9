"""Visualization utilities for experiment outputs.

Charts are written as PNG files into ``out_dir`` and carry the filename suffix
configured in ``freequeens.analysis.settings``.

Chart map
---------
- 01_success_rate_vs_N.png: share of runs reaching fitness 1.0 per board size.
    - X: N (board size). Y: success rate in [0, 1].
- 02_generations_vs_N.png: generations to solution (successful runs only),
  mean with a population std error bar.
- 03_fitness_history_N{N}.png: average and best fitness per generation for
  each board size, aggregated over runs (mean line with a confidence band).
    - X: generation. Y: fitness in [0, 1].
"""
from __future__ import annotations

import os
from typing import Any, Dict, List, cast

import matplotlib

matplotlib.use("Agg")

import matplotlib.pyplot as plt  # noqa: E402
import numpy as np  # noqa: E402
import seaborn as sns  # noqa: E402

from . import settings  # noqa: E402
from .reporting import history_to_frame  # noqa: E402
from .stats import ExperimentResults  # noqa: E402


def plot_success_rate(results: ExperimentResults, N_values: List[int], out_dir: str) -> str:
    """Plot the success rate per board size and return the image path."""
    os.makedirs(out_dir, exist_ok=True)
    rates = np.array([cast(float, results[N].get("success_rate", 0.0) or 0.0) for N in N_values])

    plt.figure(figsize=(10, 6))
    plt.plot(N_values, rates, marker="o", linewidth=2, markersize=8, label="GA")
    plt.xlabel("N (board size)", fontsize=12)
    plt.ylabel("Success rate", fontsize=12)
    plt.title("Success Rate vs N\n(Share of runs reaching fitness 1.0)", fontsize=14)
    plt.ylim(-0.05, 1.05)
    plt.xticks(N_values)
    plt.grid(True, alpha=0.3)
    plt.legend()

    fname = os.path.join(out_dir, f"01_success_rate_vs_N{settings.filename_suffix()}.png")
    plt.savefig(fname, bbox_inches="tight", dpi=150)
    plt.close()
    print(f"Saved success-rate chart: {fname}")
    return fname


def plot_generations(results: ExperimentResults, N_values: List[int], out_dir: str) -> str:
    """Plot mean generations to solution per board size and return the image path."""
    os.makedirs(out_dir, exist_ok=True)
    means = []
    stds = []
    for N in N_values:
        gen_stats = cast(Dict[str, Any], results[N].get("success_gen", {}))
        means.append(gen_stats.get("mean") or 0)
        stds.append(gen_stats.get("std") or 0)
    means_arr = np.array(means, dtype=float)
    stds_arr = np.array(stds, dtype=float)

    plt.figure(figsize=(10, 6))
    bars = plt.bar([str(N) for N in N_values], means_arr, yerr=stds_arr, alpha=0.8, capsize=5)
    plt.xlabel("N (board size)", fontsize=12)
    plt.ylabel("Average generations +/- std", fontsize=12)
    plt.title("Convergence Speed vs N\n(Successful runs only)", fontsize=14)
    plt.grid(True, alpha=0.3, axis="y")
    for bar, mean, std in zip(bars, means_arr, stds_arr):
        if mean > 0:
            plt.text(bar.get_x() + bar.get_width() / 2, bar.get_height() + std + 0.5, f"{mean:.1f}", ha="center", va="bottom")

    fname = os.path.join(out_dir, f"02_generations_vs_N{settings.filename_suffix()}.png")
    plt.savefig(fname, bbox_inches="tight", dpi=150)
    plt.close()
    print(f"Saved generations chart: {fname}")
    return fname


def plot_fitness_history(results: ExperimentResults, N_values: List[int], out_dir: str) -> List[str]:
    """Plot average and best fitness per generation for each board size."""
    os.makedirs(out_dir, exist_ok=True)
    frame = history_to_frame(results, N_values)
    saved: List[str] = []
    if frame.empty:
        print("Fitness history plot skipped: no generations recorded.")
        return saved

    sns.set_theme(style="whitegrid")
    for N in N_values:
        subset = frame[frame["N"] == N]
        if subset.empty:
            continue
        long_form = subset.melt(
            id_vars=["run", "generation"],
            value_vars=["average", "best"],
            var_name="statistic",
            value_name="fitness",
        )
        plt.figure(figsize=(12, 6))
        sns.lineplot(data=long_form, x="generation", y="fitness", hue="statistic")
        plt.ylim(-0.05, 1.05)
        plt.xlabel("Generation", fontsize=12)
        plt.ylabel("Fitness", fontsize=12)
        plt.title(f"Fitness per Generation (N={N}, mean over runs)", fontsize=14)

        fname = os.path.join(out_dir, f"03_fitness_history_N{N}{settings.filename_suffix()}.png")
        plt.savefig(fname, bbox_inches="tight", dpi=150)
        plt.close()
        print(f"Saved fitness history for N={N}: {fname}")
        saved.append(fname)
    return saved


def plot_and_save(results: ExperimentResults, N_values: List[int], out_dir: str) -> None:
    """Generate every chart of the chart map."""
    plot_success_rate(results, N_values, out_dir)
    plot_generations(results, N_values, out_dir)
    plot_fitness_history(results, N_values, out_dir)
