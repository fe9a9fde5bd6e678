import unittest
from mcts.core.board import Board
from mcts.core.constants import ROWS, COLS, ME, OPPONENT, FREE, Outcome


def drawn_board() -> Board:
    """
    Full board without any 4-in-a-row.
    Cell value flips every column and every second row (counted from the bottom),
    which caps every line at 2.
    """
    board = Board()
    for c in range(COLS):
        for rb in range(ROWS):
            board.drop(c, ME if ((rb // 2) + c) % 2 == 0 else OPPONENT)
    return board


class TestBoard(unittest.TestCase):
    def test_drop_applies_gravity(self):
        board = Board()
        self.assertEqual(board.drop(3, ME), ROWS - 1)
        self.assertEqual(board.drop(3, OPPONENT), ROWS - 2)
        self.assertEqual(board.grid[ROWS - 1][3], ME)
        self.assertEqual(board.grid[ROWS - 2][3], OPPONENT)
        self.assertEqual(board.grid[0][3], FREE)

    def test_full_column_is_not_playable(self):
        board = Board()
        for i in range(ROWS):
            board.drop(2, ME if i % 2 == 0 else OPPONENT)

        self.assertFalse(board.can_play(2))
        self.assertEqual(board.valid_moves(), [0, 1, 3, 4, 5, 6])
        with self.assertRaises(IndexError):
            board.drop(2, ME)

    def test_copy_is_independent(self):
        board = Board()
        board.drop(0, ME)
        clone = board.copy()
        clone.drop(0, OPPONENT)

        self.assertEqual(board.grid[ROWS - 2][0], FREE)
        self.assertEqual(clone.grid[ROWS - 2][0], OPPONENT)


class TestEvaluate(unittest.TestCase):
    def test_vertical_win(self):
        board = Board()
        for _ in range(3):
            board.drop(0, ME)
        board.drop(1, OPPONENT)
        row = board.drop(0, ME)

        self.assertEqual(board.evaluate(0, row), Outcome.WIN)

    def test_horizontal_win_completed_in_the_middle(self):
        """
        Scenario: ME holds cols 0, 1 and 3 on the bottom row and fills col 2 last.
        The run has to be counted in both directions from the anchor.
        """
        board = Board()
        for c in (0, 1, 3):
            board.drop(c, ME)
        row = board.drop(2, ME)

        self.assertEqual(board.evaluate(2, row), Outcome.WIN)

    def test_diagonal_win_rising(self):
        """
        Scenario: '/' diagonal (5,0), (4,1), (3,2), (2,3).
        Col N is padded with N opponent pieces first.
        """
        board = Board()
        for c in range(3):
            for _ in range(c):
                board.drop(c, OPPONENT)
            board.drop(c, ME)
        for _ in range(3):
            board.drop(3, OPPONENT)
        row = board.drop(3, ME)

        self.assertEqual(row, 2)
        self.assertEqual(board.evaluate(3, row), Outcome.WIN)

    def test_diagonal_win_falling(self):
        """Scenario: '\\' diagonal (2,3), (3,4), (4,5), (5,6)."""
        board = Board()
        for c in (6, 5, 4):
            for _ in range(6 - c):
                board.drop(c, OPPONENT)
            board.drop(c, ME)
        for _ in range(3):
            board.drop(3, OPPONENT)
        row = board.drop(3, ME)

        self.assertEqual(board.evaluate(3, row), Outcome.WIN)

    def test_three_in_a_row_is_ongoing(self):
        board = Board()
        for c in range(3):
            row = board.drop(c, ME)

        self.assertEqual(board.evaluate(2, row), Outcome.ONGOING)

    def test_only_the_anchored_cell_is_inspected(self):
        """An older OPPONENT line does not make ME's unrelated move a win."""
        board = Board()
        for c in range(4):
            board.drop(c, OPPONENT)
        row = board.drop(6, ME)

        self.assertEqual(board.evaluate(6, row), Outcome.ONGOING)
        self.assertIsNotNone(board.winning_row())

    def test_full_board_without_line_is_draw(self):
        board = drawn_board()

        self.assertTrue(board.is_full())
        self.assertEqual(board.evaluate(COLS - 1, 0), Outcome.DRAW)
        self.assertIsNone(board.winning_row())


class TestWinningRow(unittest.TestCase):
    def test_empty_board(self):
        self.assertIsNone(Board().winning_row())

    def test_finds_line_anywhere(self):
        board = Board()
        for c in range(2, 6):
            board.drop(c, OPPONENT)

        self.assertEqual(board.winning_row(), [(5, 2), (5, 3), (5, 4), (5, 5)])

    def test_finds_vertical_line(self):
        board = Board()
        for _ in range(4):
            board.drop(6, ME)

        self.assertEqual(board.winning_row(), [(2, 6), (3, 6), (4, 6), (5, 6)])

    def test_render(self):
        board = Board()
        board.drop(0, ME)
        board.drop(1, OPPONENT)
        lines = board.render().split("\n")

        self.assertEqual(lines[0], "0 1 2 3 4 5 6")
        self.assertEqual(lines[-1], "O X . . . . .")
        self.assertEqual(len(lines), ROWS + 1)


if __name__ == '__main__':
    unittest.main()
