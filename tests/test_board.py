import unittest

from tictactoe.config import WINNING_LINES
from tictactoe.core.board import Board, Square

from helpers import TIE_MOVES, board_with


class TestBoard(unittest.TestCase):
    def test_new_board_is_empty(self) -> None:
        b = Board()
        self.assertEqual(b.unmarked_keys(), list(range(1, 10)))
        self.assertFalse(b.full())
        self.assertIsNone(b.winning_mark())
        self.assertFalse(b.someone_won())

    def test_top_row_win(self) -> None:
        b = board_with([(1, "X"), (2, "X"), (3, "X")])
        self.assertTrue(b.someone_won())
        self.assertEqual(b.winning_mark(), "X")
        self.assertEqual(b.winning_line(), ("X", (1, 2, 3)))
        self.assertFalse(b.full())

    def test_every_line_wins_for_either_mark(self) -> None:
        for line in WINNING_LINES:
            for mark in ("X", "O"):
                with self.subTest(line=line, mark=mark):
                    b = board_with([(p, mark) for p in line])
                    self.assertTrue(b.someone_won())
                    self.assertEqual(b.winning_mark(), mark)

    def test_line_win_ignores_other_squares(self) -> None:
        b = board_with([(3, "O"), (5, "O"), (7, "O"), (1, "X"), (2, "X"), (9, "X")])
        self.assertEqual(b.winning_mark(), "O")

    def test_mixed_or_partial_lines_do_not_win(self) -> None:
        self.assertIsNone(board_with([(1, "X"), (2, "X")]).winning_mark())
        self.assertIsNone(board_with([(1, "X"), (2, "O"), (3, "X")]).winning_mark())

    def test_full_board_without_line_is_a_tie(self) -> None:
        b = board_with(TIE_MOVES)
        self.assertTrue(b.full())
        self.assertFalse(b.someone_won())
        self.assertIsNone(b.winning_mark())
        self.assertEqual(b.unmarked_keys(), [])

    def test_unmarked_keys_shrink_by_one_per_place(self) -> None:
        b = Board()
        placed = []
        for pos, mark in TIE_MOVES:
            before = len(b.unmarked_keys())
            b.place(pos, mark)
            placed.append(pos)
            keys = b.unmarked_keys()
            self.assertEqual(len(keys), before - 1)
            self.assertFalse(set(placed) & set(keys))
            self.assertEqual(keys, sorted(keys))

    def test_place_rejects_taken_and_unknown_squares(self) -> None:
        b = board_with([(5, "X")])
        with self.assertRaises(ValueError):
            b.place(5, "O")
        with self.assertRaises(ValueError):
            b.place(0, "O")
        with self.assertRaises(ValueError):
            b.place(10, "O")
        self.assertEqual(b.mark_at(5), "X")

    def test_reset_clears_marks(self) -> None:
        b = board_with([(1, "X"), (2, "X"), (3, "X")])
        b.reset()
        self.assertEqual(b.unmarked_keys(), list(range(1, 10)))
        self.assertIsNone(b.winning_mark())

    def test_partial_square_map_is_rejected(self) -> None:
        with self.assertRaises(ValueError):
            Board({1: Square(), 2: Square()})
        with self.assertRaises(ValueError):
            Board({p: Square() for p in range(0, 9)})

    def test_complete_square_map_is_kept(self) -> None:
        b = Board({p: Square("O" if p == 5 else None) for p in range(1, 10)})
        self.assertEqual(b.mark_at(5), "O")
        self.assertEqual(len(b.unmarked_keys()), 8)


if __name__ == "__main__":
    unittest.main()
