"""Decode tests for the free-position board."""

from pathlib import Path
import random
import sys
import unittest

ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from freequeens.board import Board, CellState, PlacementUnavailable, Position, decode, render_board
from freequeens.utils import conflicts

F, Q, C = CellState.FREE, CellState.QUEEN, CellState.COVERED


class BoardPlacementTests(unittest.TestCase):
    """Single placements on a fresh board."""

    def test_fresh_board_is_free(self):
        board = Board(4)
        self.assertEqual(len(board), 16)
        self.assertEqual(board.free_count(), 16)
        self.assertEqual(board.queens(), [])

    def test_place_corner_covers_lines(self):
        board = Board(4)
        self.assertEqual(board.place(0), 0)
        self.assertEqual(board.cells, [
            Q, C, C, C,
            C, C, F, F,
            C, F, C, F,
            C, F, F, C,
        ])

    def test_place_center_clips_diagonals(self):
        board = Board(5)
        self.assertEqual(board.place(12), 12)
        self.assertEqual(board.index_to_position(12), Position(2, 2))
        self.assertEqual(board.free_count(), 8)
        for x, y in [(1, 0), (3, 0), (0, 1), (4, 1), (0, 3), (4, 3), (1, 4), (3, 4)]:
            self.assertEqual(board.state_at(x, y), CellState.FREE, (x, y))

    def test_ordinal_counts_only_free_cells(self):
        board = Board(4)
        board.place(1)
        # Free cells are now 7, 8, 10, 12, 14, 15
        self.assertEqual(board.place(1), 8)

    def test_unavailable_ordinal_leaves_board_unchanged(self):
        board = Board(4)
        board.place(0)
        before = list(board.cells)
        with self.assertRaises(PlacementUnavailable) as ctx:
            board.place(6)
        self.assertEqual(ctx.exception.free_cells, 6)
        self.assertEqual(board.cells, before)

    def test_out_of_range_ordinal_on_fresh_board(self):
        board = Board(4)
        with self.assertRaises(PlacementUnavailable):
            board.place(16)
        self.assertEqual(board.free_count(), 16)

    def test_invalid_width(self):
        with self.assertRaises(ValueError):
            Board(0)


class DecodeTests(unittest.TestCase):
    """Whole-genome decoding."""

    def test_golden_ones_genome(self):
        board, placed = decode([1, 1, 1, 1], 4)
        self.assertEqual(placed, 3)
        self.assertEqual(board.queens(), [Position(1, 0), Position(0, 2), Position(2, 3)])
        self.assertEqual(board.cells, [
            C, Q, C, C,
            C, C, C, F,
            Q, C, C, C,
            C, C, Q, C,
        ])

    def test_golden_render(self):
        board, _ = decode([1, 1, 1, 1], 4)
        self.assertEqual(render_board(board), ".q..\n... \nq...\n..q.\n\n")

    def test_all_zero_genome(self):
        board, placed = decode([0, 0, 0, 0], 4)
        self.assertEqual(placed, 3)
        self.assertEqual(board.queens(), [Position(0, 0), Position(2, 1), Position(1, 3)])

        board, placed = decode([0] * 8, 8)
        self.assertEqual(placed, 5)
        self.assertEqual(board.queens()[0], Position(0, 0))

    def test_solution_genome(self):
        board, placed = decode([1, 0, 0, 0], 4)
        self.assertEqual(placed, 4)
        self.assertEqual(board.queens(), [Position(1, 0), Position(3, 1), Position(0, 2), Position(2, 3)])
        self.assertEqual(board.free_count(), 0)

    def test_failed_gene_does_not_stop_decoding(self):
        _, placed = decode([15, 1, 0], 4)
        # 15 places at the last cell; 1 and 0 still find free cells
        self.assertEqual(placed, 3)
        board, placed = decode([0, 15, 0, 0], 4)
        self.assertEqual(placed, 3)
        self.assertEqual(board.queens(), [Position(0, 0), Position(2, 1), Position(1, 3)])

    def test_decode_is_deterministic(self):
        rng = random.Random(3)
        for _ in range(50):
            genome = [rng.randrange(36) for _ in range(6)]
            first, placed_first = decode(genome, 6)
            second, placed_second = decode(genome, 6)
            self.assertEqual(first.cells, second.cells)
            self.assertEqual(placed_first, placed_second)

    def test_decoded_queens_never_attack(self):
        rng = random.Random(11)
        for _ in range(200):
            genome = [rng.randrange(49) for _ in range(7)]
            board, placed = decode(genome, 7)
            queens = board.queens()
            self.assertEqual(len(queens), placed)
            self.assertEqual(conflicts(queens), 0)
            self.assertEqual(sum(1 for cell in board.cells if cell == CellState.QUEEN), placed)


if __name__ == "__main__":
    unittest.main()
