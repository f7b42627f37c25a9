"""Validation helpers for decoded queen placements.

These primitives work on absolute ``(x, y)`` positions, as returned by
``Board.queens()``, and are independent of the ordinal encoding. They are used
to cross-check the fitness score against the classic attack rules.
"""

from __future__ import annotations

from collections import Counter
from typing import Sequence, Tuple

Coordinate = Tuple[int, int]


def conflicts(positions: Sequence[Coordinate]) -> int:
    """Compute the number of attacking queen pairs in O(Q).

    Counts occurrences per column, row and both diagonals and sums the pairs
    within each line.
    """
    columns: Counter[int] = Counter()
    rows: Counter[int] = Counter()
    diag1: Counter[int] = Counter()
    diag2: Counter[int] = Counter()

    for x, y in positions:
        columns[x] += 1
        rows[y] += 1
        diag1[x - y] += 1
        diag2[x + y] += 1

    def _pairs(counter: Counter[int]) -> int:
        total = 0
        for count in counter.values():
            if count > 1:
                total += count * (count - 1) // 2
        return total

    return _pairs(columns) + _pairs(rows) + _pairs(diag1) + _pairs(diag2)


def conflicts_on2(positions: Sequence[Coordinate]) -> int:
    """Compute the number of attacking queen pairs in O(Q^2).

    Reference implementation for validation. Prefer ``conflicts`` elsewhere.
    """
    count = 0
    for i in range(len(positions)):
        xi, yi = positions[i]
        for j in range(i + 1, len(positions)):
            xj, yj = positions[j]
            if xi == xj or yi == yj or abs(xi - xj) == abs(yi - yj):
                count += 1
    return count


def is_valid_solution(positions: Sequence[Coordinate], board_size: int, queens: int) -> bool:
    """Return True if ``positions`` is a complete non-attacking placement.

    Contract
    - Exactly ``queens`` positions, each within ``[0, board_size)`` on both axes
    - No two positions share a row, column or diagonal
    """
    if queens < 1 or len(positions) != queens:
        return False
    for x, y in positions:
        if not (0 <= x < board_size and 0 <= y < board_size):
            return False
    return conflicts(positions) == 0
