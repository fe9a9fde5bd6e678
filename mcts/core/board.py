# mcts/core/board.py
from typing import List, Optional, Tuple
from .constants import ROWS, COLS, CONNECT, FREE, ME, OPPONENT, DIRECTIONS, Outcome

SYMBOLS = {FREE: ".", ME: "O", OPPONENT: "X"}


class Board:
    def __init__(self, grid: Optional[List[List[int]]] = None):
        """
        Board uses (row, col) indexing.
        Row 0 is the TOP of the board.
        Row 5 is the BOTTOM of the board.
        Values: FREE, ME, OPPONENT
        """
        self.grid = grid if grid is not None else [[FREE for _ in range(COLS)] for _ in range(ROWS)]

    def copy(self) -> 'Board':
        return Board([row[:] for row in self.grid])

    def can_play(self, col: int) -> bool:
        """Checks if the top cell of the column is empty."""
        return self.grid[0][col] == FREE

    def valid_moves(self) -> List[int]:
        return [c for c in range(COLS) if self.grid[0][c] == FREE]

    def is_full(self) -> bool:
        return all(self.grid[0][c] != FREE for c in range(COLS))

    def drop(self, col: int, player: int) -> int:
        """
        Drops a piece for player into col and returns the row it landed on.
        The column must not be full.
        """
        # Gravity: Find the lowest empty row
        for r in range(ROWS - 1, -1, -1):
            if self.grid[r][col] == FREE:
                self.grid[r][col] = player
                return r
        raise IndexError(f"Column {col} is full")

    def evaluate(self, col: int, row: int) -> Outcome:
        """
        Result of the move that just landed at (row, col), for the player who made it.
        Only lines through that cell are inspected.
        """
        player = self.grid[row][col]
        for dr, dc in DIRECTIONS:
            length = 1 + self._run(row, col, dr, dc, player) + self._run(row, col, -dr, -dc, player)
            if length >= CONNECT:
                return Outcome.WIN

        if self.is_full():
            return Outcome.DRAW
        return Outcome.ONGOING

    def _run(self, row: int, col: int, dr: int, dc: int, player: int) -> int:
        count = 0
        r, c = row + dr, col + dc
        while 0 <= r < ROWS and 0 <= c < COLS and self.grid[r][c] == player:
            count += 1
            r, c = r + dr, c + dc
        return count

    def winning_row(self) -> Optional[List[Tuple[int, int]]]:
        """
        Scans the whole board for any 4-in-a-row.
        Returns the (row, col) cells of the first line found, or None.
        """
        for r in range(ROWS):
            for c in range(COLS):
                player = self.grid[r][c]
                if player == FREE:
                    continue
                for dr, dc in DIRECTIONS:
                    cells = [(r + i * dr, c + i * dc) for i in range(CONNECT)]
                    if all(0 <= nr < ROWS and 0 <= nc < COLS and self.grid[nr][nc] == player
                           for nr, nc in cells):
                        return cells
        return None

    def render(self) -> str:
        """Generates an ASCII grid representation."""
        header = " ".join(str(c) for c in range(COLS))
        rows_str = [" ".join(SYMBOLS[cell] for cell in row) for row in self.grid]
        return header + "\n" + "\n".join(rows_str)
