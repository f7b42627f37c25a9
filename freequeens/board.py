"""Board model and free-position decoding for the N-Queens genome.

A genome does not store absolute coordinates. Each gene is a *free-position
ordinal*: the 0-based rank of a cell among the cells that are still free when
the gene is decoded, counted in row-major order. Placing a queen covers its
row, its column and both diagonals, so the same ordinal can select different
cells depending on the genes decoded before it.

Representation
--------------
Cells are stored in a flat list indexed by ``y * width + x``. A fresh board is
entirely ``CellState.FREE``; no state survives between decodes.
"""

from __future__ import annotations

from enum import IntEnum
from typing import List, NamedTuple, Sequence, Tuple


class CellState(IntEnum):
    FREE = 0
    QUEEN = 1
    COVERED = 2


class Position(NamedTuple):
    x: int
    y: int


class PlacementUnavailable(LookupError):
    """Raised when an ordinal exceeds the number of free cells left."""

    def __init__(self, ordinal: int, free_cells: int):
        super().__init__(f"No free position for ordinal {ordinal} ({free_cells} free cells left)")
        self.ordinal = ordinal
        self.free_cells = free_cells


class Board:
    """An N x N grid of ``CellState`` values supporting ordinal placement.

    Parameters
    ----------
    width : int
        Board dimension N. The board holds ``width * width`` cells.
    """

    def __init__(self, width: int):
        if width < 1:
            raise ValueError(f"Board width must be positive, got {width}")
        self.width = width
        self.cells: List[CellState] = [CellState.FREE] * (width * width)

    def __len__(self) -> int:
        return len(self.cells)

    def index_to_position(self, index: int) -> Position:
        """Return the ``(x, y)`` coordinate of a row-major board index."""
        if not 0 <= index < len(self.cells):
            raise IndexError(f"Board index {index} out of range for width {self.width}")
        y, x = divmod(index, self.width)
        return Position(x, y)

    def position_to_index(self, x: int, y: int) -> int:
        return y * self.width + x

    def state_at(self, x: int, y: int) -> CellState:
        return self.cells[self.position_to_index(x, y)]

    def free_count(self) -> int:
        return sum(1 for cell in self.cells if cell == CellState.FREE)

    def queens(self) -> List[Position]:
        """Return the placed queens in row-major order."""
        return [
            self.index_to_position(index)
            for index, cell in enumerate(self.cells)
            if cell == CellState.QUEEN
        ]

    def place(self, ordinal: int) -> int:
        """Place a queen at the ``ordinal``-th free cell and cover its lines.

        Parameters
        ----------
        ordinal : int
            0-based rank among the currently free cells in row-major order.

        Returns
        -------
        int
            The absolute board index of the placed queen.

        Raises
        ------
        PlacementUnavailable
            When fewer than ``ordinal + 1`` cells are free. The board is left
            unchanged.
        """
        free_seen = 0
        for index, cell in enumerate(self.cells):
            if cell != CellState.FREE:
                continue
            if free_seen == ordinal:
                self._cover_lines(index)
                self.cells[index] = CellState.QUEEN
                return index
            free_seen += 1
        raise PlacementUnavailable(ordinal, free_seen)

    def _cover_lines(self, index: int) -> None:
        """Mark row, column and both diagonals through ``index`` as covered."""
        width = self.width
        qx, qy = self.index_to_position(index)
        for y in range(width):
            # Cells of row y lying on the queen's column and diagonals
            targets = [qx, qx + (y - qy), qx - (y - qy)]
            if y == qy:
                targets = range(width)
            for x in targets:
                if 0 <= x < width:
                    self._cover(y * width + x)

    def _cover(self, index: int) -> None:
        if self.cells[index] != CellState.QUEEN:
            self.cells[index] = CellState.COVERED


def decode(genome: Sequence[int], board_size: int) -> Tuple[Board, int]:
    """Decode a genome on a fresh board.

    Genes are applied strictly in order. A gene whose ordinal cannot be
    satisfied is skipped and does not count as a placed queen; the remaining
    genes are still decoded.

    Returns
    -------
    Tuple[Board, int]
        The resulting board and the number of queens placed.
    """
    board = Board(board_size)
    placed = 0
    for ordinal in genome:
        try:
            board.place(ordinal)
        except PlacementUnavailable:
            continue
        placed += 1
    return board, placed


def render_board(board: Board) -> str:
    """Render a board as text: ``q`` queen, ``.`` covered, space free."""
    symbols = {CellState.FREE: " ", CellState.QUEEN: "q", CellState.COVERED: "."}
    lines = []
    for y in range(board.width):
        row = board.cells[y * board.width:(y + 1) * board.width]
        lines.append("".join(symbols[cell] for cell in row))
    return "\n".join(lines) + "\n\n"
