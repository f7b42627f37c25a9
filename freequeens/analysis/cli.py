"""Command-line interface and high-level pipelines for freequeens.

Two pipelines are available:

- ``solve``: a single GA run using the ``ga_settings`` section of the
  configuration, streaming per-generation statistics to stdout and printing the
  best board at the end.
- ``experiment``: seeded batches over several board sizes, followed by CSV
  export and charts.

I/O, argument parsing and progress reporting live here so that the core
modules stay easy to test programmatically.
"""
from __future__ import annotations

import argparse
import os
import random
import tempfile
import time
from pathlib import Path
from typing import Optional, Tuple

from . import settings
from .experiments import run_experiments
from .plots import plot_and_save
from .reporting import save_history_to_csv, save_raw_data_to_csv, save_results_to_csv
from config_manager import ConfigManager
from freequeens.board import decode
from freequeens.config import GAConfig
from freequeens.fitness import fitness
from freequeens.genetic import ga_freequeens
from freequeens.utils import is_valid_solution


# ------------- Configuration ------------------------------------------------

def apply_configuration(config_path: str) -> Tuple[ConfigManager, GAConfig]:
    """Load configuration, update ``settings`` in place and build a ``GAConfig``.

    Raises ``FileNotFoundError`` for a missing file and ``ValueError`` for
    unknown or non-positive GA settings.
    """
    config_mgr = ConfigManager(config_path)

    experiment_settings = config_mgr.get_experiment_settings()
    if experiment_settings:
        settings.N_VALUES = [int(n) for n in experiment_settings.get("N_values", settings.N_VALUES)]
        settings.RUNS_GA_FINAL = int(experiment_settings.get("runs_ga_final", settings.RUNS_GA_FINAL))
        settings.POPULATION_SIZE = int(experiment_settings.get("population_size", settings.POPULATION_SIZE))
        settings.MAX_GENERATIONS = int(experiment_settings.get("max_generations", settings.MAX_GENERATIONS))
        settings.BASE_SEED = experiment_settings.get("base_seed", settings.BASE_SEED)
        settings.OUT_DIR = experiment_settings.get("output_dir", settings.OUT_DIR)

    ga_config = GAConfig.from_dict(config_mgr.get_ga_settings()).validate()
    return config_mgr, ga_config


def override_ga_config(config: GAConfig, args: argparse.Namespace) -> GAConfig:
    """Apply command-line overrides on top of the configured GA settings."""
    values = config.to_dict()
    for key in ("queens", "board_size", "population_size", "max_generations"):
        value = getattr(args, key, None)
        if value is not None:
            values[key] = value
    return GAConfig.from_dict(values).validate()


# ------------- Pipelines ----------------------------------------------------

def main_solve(config: GAConfig, seed: Optional[int] = None, validate: bool = False, quiet: bool = False) -> bool:
    """Run one search and return True when a solution was found."""
    print(f"Solving with {config!r}")
    rng = random.Random(seed if seed is not None else time.time_ns())
    result = ga_freequeens(config, rng=rng, log=None if quiet else print)

    if validate:
        board, _ = decode(result.best_genome, config.board_size)
        valid = is_valid_solution(board.queens(), config.board_size, config.queens)
        if result.success != valid:
            raise AssertionError(f"Success flag {result.success} disagrees with board validity {valid}")

    status = "solved" if result.success else "budget exhausted"
    print(
        f"Result: {status} after {result.generations} generations, "
        f"best fitness {result.best_fitness:.3f}, {result.evaluations} evaluations, {result.elapsed:.2f}s"
    )
    print("Best genome:", result.best_genome)
    return result.success


def main_experiment(validate: bool = False) -> None:
    """Run seeded batches for every configured N, then export CSV and charts."""
    os.makedirs(settings.OUT_DIR, exist_ok=True)
    print(f"Board sizes: {settings.N_VALUES}, runs per size: {settings.RUNS_GA_FINAL}")
    results = run_experiments(
        settings.N_VALUES,
        runs=settings.RUNS_GA_FINAL,
        pop_size=settings.POPULATION_SIZE,
        max_gen=settings.MAX_GENERATIONS,
        base_seed=settings.BASE_SEED,
        progress_label="Experiments GA",
        validate=validate,
    )
    save_results_to_csv(results, settings.N_VALUES, settings.OUT_DIR)
    save_raw_data_to_csv(results, settings.N_VALUES, settings.OUT_DIR)
    save_history_to_csv(results, settings.N_VALUES, settings.OUT_DIR)
    plot_and_save(results, settings.N_VALUES, settings.OUT_DIR)
    print("\nExperiment pipeline completed.")


# ------------- Quick regression -------------------------------------------

def run_quick_regression_tests() -> None:
    """Execute a fast smoke test of decode, the GA and the batch pipeline.

    Verifies that:
    - The golden N=4 genomes decode to their known fitness values.
    - Two GA runs with the same seed produce identical results.
    - Small boards are solved by at least one of a few seeded runs.
    - The experiment pipeline produces a non-empty CSV in a temporary folder.
    """
    print("Running quick regression tests...")

    if fitness([1, 0, 0, 0], 4) != 1.0:
        raise AssertionError("Genome [1, 0, 0, 0] should solve the 4-queens board.")
    if fitness([1, 1, 1, 1], 4) != 0.75:
        raise AssertionError("Genome [1, 1, 1, 1] should place exactly three queens.")
    print("  Decode: golden genomes OK")

    config = GAConfig(queens=5, board_size=5, population_size=60, max_generations=50)
    first = ga_freequeens(config, rng=random.Random(42), log=None)
    second = ga_freequeens(config, rng=random.Random(42), log=None)
    if (first.success, first.generations, first.best_genome) != (second.success, second.generations, second.best_genome):
        raise AssertionError("GA runs with the same seed diverged.")
    print("  Genetic Algorithm: seeded runs reproducible")

    results = run_experiments([4, 5], runs=3, pop_size=100, max_gen=300, base_seed=42, validate=True)
    if not any(results[N]["successes"] > 0 for N in (4, 5)):
        raise AssertionError("No seeded run solved a small board.")

    with tempfile.TemporaryDirectory() as tmpdir:
        csv_path = Path(save_results_to_csv(results, [4, 5], tmpdir))
        if not csv_path.exists() or csv_path.stat().st_size == 0:
            raise AssertionError("Results CSV was not generated successfully during quick tests.")

    print("Quick regression tests passed.")


# ------------- CLI wiring --------------------------------------------------

def build_arg_parser():
    """Construct the argument parser for the CLI entry point."""
    parser = argparse.ArgumentParser(description="Search N-Queens placements with an adaptive GA.")
    parser.add_argument(
        "--mode",
        choices=["solve", "experiment"],
        default="solve",
        help="solve: single run with per-generation output (default); experiment: seeded batches with CSV and charts.",
    )
    parser.add_argument("--config", default="config.json", help="Path to configuration file (default: config.json).")
    parser.add_argument("--queens", type=int, help="Override the number of queens.")
    parser.add_argument("--board-size", dest="board_size", type=int, help="Override the board width.")
    parser.add_argument("--population", dest="population_size", type=int, help="Override the population size.")
    parser.add_argument("--generations", dest="max_generations", type=int, help="Override the generation budget.")
    parser.add_argument("--seed", type=int, help="Seed for the solve run (default: wall clock).")
    parser.add_argument("--tag", help="Label appended to output filenames.")
    parser.add_argument("--quiet", action="store_true", help="Suppress per-generation output in solve mode.")
    parser.add_argument("--quick-test", action="store_true", help="Run quick regression tests and exit.")
    parser.add_argument("--validate", action="store_true", help="Validate reported solutions (extra assertions).")
    return parser


def main() -> None:
    """CLI entry point: parse arguments and dispatch to the chosen pipeline."""
    parser = build_arg_parser()
    args = parser.parse_args()

    if args.quick_test:
        run_quick_regression_tests()
        return

    try:
        _, ga_config = apply_configuration(args.config)
        ga_config = override_ga_config(ga_config, args)
    except FileNotFoundError as exc:
        print(f"Configuration file not found: {exc}")
        raise SystemExit(1) from exc
    except ValueError as exc:
        print(f"Configuration error: {exc}")
        raise SystemExit(1) from exc

    if args.tag:
        settings.RUN_TAG = args.tag

    try:
        if args.mode == "solve":
            main_solve(ga_config, seed=args.seed, validate=args.validate, quiet=args.quiet)
        else:
            main_experiment(validate=args.validate)
    except KeyboardInterrupt:
        print("\nExecution interrupted by user.")
        raise SystemExit(130) from None


if __name__ == "__main__":
    main()
