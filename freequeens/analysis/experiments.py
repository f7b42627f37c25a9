"""Batch experiment runner for the adaptive GA.

For each board size N the runner performs a number of independent, seeded GA
runs with Q = N queens and shapes the outcomes into dictionaries suitable for
CSV export and plotting. The optional validation hook decodes the reported
best genome again and checks it against the attack rules.
"""
from __future__ import annotations

import random
from typing import Dict, List, Optional, Tuple

from .stats import (
    ExperimentResults,
    GAResultEntry,
    GenerationRecord,
    ProgressPrinter,
    RunRecord,
    compute_grouped_statistics,
)
from freequeens.board import decode
from freequeens.config import GAConfig
from freequeens.genetic import ga_freequeens
from freequeens.utils import is_valid_solution


def run_single_ga_experiment(
    N: int,
    pop_size: int,
    max_gen: int,
    seed: Optional[int] = None,
    run: int = 0,
) -> Tuple[RunRecord, List[GenerationRecord]]:
    """Execute one silent GA run and return its record and generation history."""
    config = GAConfig(queens=N, board_size=N, population_size=pop_size, max_generations=max_gen)
    rng = random.Random(seed) if seed is not None else None
    result = ga_freequeens(config, rng=rng, log=None)
    record: RunRecord = {
        "seed": seed,
        "success": result.success,
        "gen": result.generations,
        "time": result.elapsed,
        "best_fitness": result.best_fitness,
        "evals": result.evaluations,
        "best_genome": result.best_genome,
    }
    history: List[GenerationRecord] = [
        {
            "N": N,
            "run": run,
            "generation": stats.generation,
            "total": stats.total,
            "average": stats.average,
            "best": stats.best,
            "runner_up": stats.runner_up,
        }
        for stats in result.history
    ]
    return record, history


def validate_run(record: RunRecord, N: int) -> None:
    """Raise ``AssertionError`` if a run's success flag disagrees with its board."""
    board, placed = decode(record["best_genome"], N)
    valid = is_valid_solution(board.queens(), N, N)
    if record["success"] and not valid:
        raise AssertionError(f"Run reported success for N={N} but genome {record['best_genome']} is not a solution")
    if placed != round(record["best_fitness"] * N):
        raise AssertionError(
            f"Fitness {record['best_fitness']} inconsistent with {placed} placed queens for N={N}"
        )


def run_experiments(
    N_values: List[int],
    runs: int,
    pop_size: int,
    max_gen: int,
    base_seed: Optional[int] = None,
    progress_label: Optional[str] = None,
    validate: bool = False,
) -> ExperimentResults:
    """Run ``runs`` seeded GA searches per board size and aggregate them.

    Run ``k`` (0-based, counted across all sizes) uses seed ``base_seed + k``
    so that the whole batch is reproducible. With ``base_seed=None`` every run
    is seeded from the wall clock.
    """
    results: ExperimentResults = {}
    progress = ProgressPrinter(len(N_values), progress_label) if progress_label else None
    counter = 0

    for index, N in enumerate(N_values, start=1):
        if progress:
            progress.update(index, f"N={N}")
        print(f"=== N = {N}, {runs} GA runs (population {pop_size}, budget {max_gen}) ===")

        raw_runs: List[RunRecord] = []
        history: List[GenerationRecord] = []
        for run in range(runs):
            seed = base_seed + counter if base_seed is not None else None
            counter += 1
            record, run_history = run_single_ga_experiment(N, pop_size, max_gen, seed=seed, run=run)
            if validate:
                validate_run(record, N)
            raw_runs.append(record)
            history.extend(run_history)

        grouped: Dict[str, object] = compute_grouped_statistics(list(raw_runs))
        entry: GAResultEntry = dict(grouped)  # type: ignore[assignment]
        entry["pop_size"] = pop_size
        entry["max_gen"] = max_gen
        entry["raw_runs"] = raw_runs
        entry["history"] = history
        results[N] = entry
        print(f"  success rate {entry['success_rate']:.2f} ({entry['successes']}/{entry['total_runs']})")

    return results
