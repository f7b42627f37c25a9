"""Population construction and variation operators.

Genes are drawn uniformly from ``[0, N^2)`` and are not checked against the
shrinking free-cell count; an unsatisfiable ordinal simply fails to place at
decode time and lowers the fitness.
"""

from __future__ import annotations

import random
from typing import List, Sequence

Genome = List[int]
Population = List[Genome]


def random_genome(queens: int, board_size: int, rng: random.Random) -> Genome:
    """Return ``queens`` ordinals drawn independently from ``[0, board_size**2)``."""
    cells = board_size * board_size
    return [rng.randrange(cells) for _ in range(queens)]


def new_population(size: int, queens: int, board_size: int, rng: random.Random) -> Population:
    return [random_genome(queens, board_size, rng) for _ in range(size)]


def crossover(a: Sequence[int], b: Sequence[int], point: int) -> Genome:
    """Single-point crossover: ``a[:point]`` followed by ``b[point:]``.

    The child is a new list; both parents are left untouched.
    """
    if len(a) != len(b):
        raise ValueError(f"Parents differ in length ({len(a)} != {len(b)})")
    if not 0 <= point <= len(a):
        raise ValueError(f"Crossover point {point} outside [0, {len(a)}]")
    return list(a[:point]) + list(b[point:])


def mutate(genome: Genome, board_size: int, rng: random.Random) -> None:
    """Replace one uniformly chosen gene with a new random ordinal, in place."""
    gene = rng.randrange(len(genome))
    genome[gene] = rng.randrange(board_size * board_size)
