"""Adaptive Genetic Algorithm over free-position genomes.

The population evolves in place. Each generation evaluates every individual,
derives population statistics (average, best, runner-up), stops when a
perfect individual exists, and otherwise walks the population once applying
fitness-dependent replacement, probabilistic elitism, mutation, crossover and
random immigration.

Contract (public API)
---------------------
- Input: a ``GAConfig`` and optionally a ``random.Random`` instance.
- Output: a ``GAResult`` named tuple:
    (success, generations, elapsed, best_fitness, evaluations, best_genome, history)

Where:
- success: True when an individual reached fitness 1.0.
- generations: index of the generation where the run stopped (the budget when
  it was exhausted).
- elapsed: wall time measured with ``perf_counter()``.
- best_fitness: fitness of the best individual of the last evaluated generation.
- evaluations: number of fitness evaluations performed.
- best_genome: copy of that individual as it was evaluated.
- history: one ``GenerationStats`` per evaluated generation.

Behavioural notes
-----------------
- Best and runner-up are found by one left-to-right scan where ``>=`` shifts
  the previous best into the runner-up slot. On ties the *last* maximal
  individual wins and the runner-up is whichever individual held the best
  slot just before it, not the second-highest distinct score. The mutation
  rate is tripled whenever ``best == runner_up``, so the tie policy shapes the
  search.
- The best index survives between generations; the first individual of a scan
  therefore pushes the previous generation's best index into the runner-up
  slot.
- Mutation hits a random member of the whole population, not the individual
  currently visited.
- Crossover reads the parents from the population as it is at that moment,
  so slots rewritten earlier in the same pass (including the elite slots) are
  visible to later individuals.

Determinism
-----------
All random decisions go through the ``rng`` argument. Pass a seeded
``random.Random`` for reproducible runs; without one, a generator is seeded
once from the wall clock.
"""

from __future__ import annotations

import random
import time
from time import perf_counter
from typing import Callable, List, NamedTuple, Optional, Sequence, Tuple

from .board import decode, render_board
from .config import GAConfig
from .fitness import population_fitness
from .population import Genome, Population, crossover, mutate, new_population, random_genome

Log = Optional[Callable[[str], None]]

RESET = "reset"
COIN = "coin"
KEEP = "keep"

# Probability of replacing a weak individual in the "coin" band
COIN_REPLACE_PROBABILITY: float = 0.5
# Probability of skipping every operator for a near-best individual
ELITE_SKIP_PROBABILITY: float = 0.9
ELITE_THRESHOLD: float = 0.9


class GenerationStats(NamedTuple):
    generation: int
    total: float
    average: float
    best: float
    runner_up: float
    best_index: int
    runner_up_index: int


class ReplacementPolicy(NamedTuple):
    """Replacement decision for one individual given the population average."""

    average: float

    def decide(self, fitness: float) -> str:
        """Return ``RESET`` (always replace), ``COIN`` (replace at 50%) or ``KEEP``."""
        average = self.average
        if (
            (average > 0.9 and fitness < 0.7)
            or (average > 0.8 and fitness < 0.6)
            or (average > 0.7 and fitness < 0.5)
        ):
            return RESET
        if fitness < average * 0.3:
            return COIN
        return KEEP


class AdaptiveRates(NamedTuple):
    replacement: ReplacementPolicy
    mutation_rate: float
    crossover_rate: float
    new_random_rate: float


class GAResult(NamedTuple):
    success: bool
    generations: int
    elapsed: float
    best_fitness: float
    evaluations: int
    best_genome: Genome
    history: List[GenerationStats]


def adaptive_rates(average: float, best: float, runner_up: float) -> AdaptiveRates:
    """Derive the operator rates of a generation from its statistics.

    - ``best > average``: slow down (mutation 0.15, crossover 0.07),
      otherwise mutation 0.4 and crossover 0.4.
    - ``best == runner_up``: the mutation rate is tripled.
    - New random individuals: 0.4 when ``average > 0.9``, else 0.2.
    """
    if best > average:
        mutation_rate, crossover_rate = 0.15, 0.07
    else:
        mutation_rate, crossover_rate = 0.4, 0.4
    if best == runner_up:
        mutation_rate *= 3.0
    new_random_rate = 0.4 if average > 0.9 else 0.2
    return AdaptiveRates(ReplacementPolicy(average), mutation_rate, crossover_rate, new_random_rate)


def select_best(fitness_values: Sequence[float], previous_best_index: int = 0) -> Tuple[float, int, float, int]:
    """Scan fitness values once, returning (best, best_index, runner_up, runner_up_index)."""
    best = 0.0
    runner_up = 0.0
    best_index = previous_best_index
    runner_up_index = 0
    for index, value in enumerate(fitness_values):
        if value >= best:
            runner_up = best
            best = value
            runner_up_index = best_index
            best_index = index
    return best, best_index, runner_up, runner_up_index


def generation_stats(generation: int, fitness_values: Sequence[float], previous_best_index: int = 0) -> GenerationStats:
    total = sum(fitness_values)
    average = total / len(fitness_values)
    best, best_index, runner_up, runner_up_index = select_best(fitness_values, previous_best_index)
    return GenerationStats(generation, total, average, best, runner_up, best_index, runner_up_index)


def is_protected(fitness: float, best: float) -> bool:
    """Return True for near-best individuals eligible for the elitism skip."""
    return fitness > best * ELITE_THRESHOLD


def evolve_generation(
    population: Population,
    fitness_values: Sequence[float],
    stats: GenerationStats,
    rates: AdaptiveRates,
    config: GAConfig,
    rng: random.Random,
) -> None:
    """Apply replacement, elitism and the stochastic operators in place.

    ``fitness_values`` are the scores evaluated at the start of the
    generation; they are not refreshed as slots are rewritten.
    """
    pop_size = len(population)
    for index, value in enumerate(fitness_values):
        decision = rates.replacement.decide(value)
        if decision == RESET:
            population[index] = random_genome(config.queens, config.board_size, rng)
        elif decision == COIN and rng.random() <= COIN_REPLACE_PROBABILITY:
            population[index] = random_genome(config.queens, config.board_size, rng)

        if is_protected(value, stats.best) and rng.random() <= ELITE_SKIP_PROBABILITY:
            continue

        if rng.random() <= rates.mutation_rate:
            mutate(population[rng.randrange(pop_size)], config.board_size, rng)

        if rng.random() <= rates.crossover_rate:
            point = rng.randrange(config.queens)
            population[index] = crossover(
                population[stats.best_index], population[stats.runner_up_index], point
            )

        if rng.random() <= rates.new_random_rate:
            population[index] = random_genome(config.queens, config.board_size, rng)


def _emit(log: Log, message: str) -> None:
    if log is not None:
        log(message)


def ga_freequeens(config: GAConfig, rng: Optional[random.Random] = None, log: Log = print) -> GAResult:
    """Run the adaptive GA until a perfect individual or the generation budget.

    Parameters
    ----------
    config : GAConfig
        Queens, board size, population size and generation budget.
    rng : random.Random | None
        Source of every random decision. Seeded from the wall clock when
        omitted.
    log : Callable[[str], None] | None, default print
        Line-oriented sink for per-generation statistics and the final board.
        ``None`` disables output.

    Returns
    -------
    GAResult
        Named tuple (success, generations, elapsed, best_fitness, evaluations,
        best_genome, history).
    """
    config.validate()
    if rng is None:
        rng = random.Random(time.time_ns())

    start = perf_counter()
    population = new_population(config.population_size, config.queens, config.board_size, rng)
    history: List[GenerationStats] = []
    evaluations = 0
    best_index = 0
    best_fitness = 0.0
    best_genome: Genome = population[0][:]
    success = False

    generation = 0
    while generation < config.max_generations:
        _emit(log, f"Generation {generation}")
        fitness_values = population_fitness(population, config.board_size, config.queens)
        evaluations += len(population)

        stats = generation_stats(generation, fitness_values, best_index)
        history.append(stats)
        best_index = stats.best_index
        best_fitness = stats.best
        best_genome = population[best_index][:]
        _emit(log, f"total = {stats.total}")
        _emit(log, f"average = {stats.average}")
        _emit(log, f"best = {stats.best}")
        _emit(log, f"nextbest = {stats.runner_up}")

        if stats.best == 1.0:
            _emit(log, "Found fitness 1")
            success = True
            break

        rates = adaptive_rates(stats.average, stats.best, stats.runner_up)
        evolve_generation(population, fitness_values, stats, rates, config, rng)
        generation += 1

    elapsed = perf_counter() - start
    _emit(log, f"generation {generation}")
    if log is not None:
        board, _ = decode(best_genome, config.board_size)
        log(render_board(board))
    return GAResult(success, generation, elapsed, best_fitness, evaluations, best_genome, history)
