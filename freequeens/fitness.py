"""Fitness evaluation for free-position genomes.

The score of a genome is the fraction of its queens that could be placed while
decoding it on an empty board: ``placed / Q``. A score of 1.0 means every
queen found a free cell, which is exactly a conflict-free placement.

Scores are never cached. Genomes are mutated in place between evaluations, so
every call decodes again from a fresh board.
"""

from __future__ import annotations

from typing import List, Optional, Sequence, Tuple

from .board import Board, decode


def decoded_fitness(genome: Sequence[int], board_size: int, queens: Optional[int] = None) -> Tuple[Board, float]:
    """Decode ``genome`` once and return the board together with its score.

    Parameters
    ----------
    genome : Sequence[int]
        Free-position ordinals, one per queen.
    board_size : int
        Board dimension N.
    queens : int | None
        Queen count Q used as the denominator. Defaults to ``len(genome)``.
    """
    total = len(genome) if queens is None else queens
    if total < 1:
        raise ValueError("Fitness is undefined for a genome without queens")
    board, placed = decode(genome, board_size)
    return board, placed / total


def fitness(genome: Sequence[int], board_size: int, queens: Optional[int] = None) -> float:
    """Return the fraction of queens placed when decoding ``genome``."""
    return decoded_fitness(genome, board_size, queens)[1]


def population_fitness(population: Sequence[Sequence[int]], board_size: int, queens: int) -> List[float]:
    """Evaluate every individual of a population, preserving order."""
    return [fitness(genome, board_size, queens) for genome in population]
