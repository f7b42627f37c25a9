"""N-Queens search with free-position genomes and an adaptive GA."""

from .board import Board, CellState, PlacementUnavailable, Position, decode, render_board
from .config import GAConfig
from .fitness import decoded_fitness, fitness, population_fitness
from .genetic import (
    AdaptiveRates,
    GAResult,
    GenerationStats,
    ReplacementPolicy,
    adaptive_rates,
    evolve_generation,
    ga_freequeens,
    select_best,
)
from .population import crossover, mutate, new_population, random_genome
from .utils import conflicts, conflicts_on2, is_valid_solution

__all__ = [
    "Board",
    "CellState",
    "PlacementUnavailable",
    "Position",
    "decode",
    "render_board",
    "GAConfig",
    "fitness",
    "decoded_fitness",
    "population_fitness",
    "AdaptiveRates",
    "GAResult",
    "GenerationStats",
    "ReplacementPolicy",
    "adaptive_rates",
    "evolve_generation",
    "ga_freequeens",
    "select_best",
    "crossover",
    "mutate",
    "new_population",
    "random_genome",
    "conflicts",
    "conflicts_on2",
    "is_valid_solution",
]
