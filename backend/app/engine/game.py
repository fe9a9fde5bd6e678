import logging
from typing import List, Optional, Tuple, Dict, Any

from mcts.core.board import Board
from mcts.core.constants import COLS, ME, OPPONENT
from mcts.core.engine import SearchEngine
from mcts.core.node import Node
from mcts.core.selector import select_move

# Logger setup
logger = logging.getLogger(__name__)


class GameSession:
    def __init__(self, engine: Optional[SearchEngine] = None):
        """
        Owns the real board and the search tree carried between turns.
        ME is the engine, OPPONENT the other side.
        """
        self.board = Board()
        self.engine = engine if engine is not None else SearchEngine()
        self.root: Optional[Node] = None
        self.history: List[Dict[str, Any]] = []

    def play_ai(self, time_budget_ms: int) -> Tuple[int, str]:
        """
        Searches, commits the chosen column for ME and re-roots to it.
        Returns the column and a summary of the chosen line.
        """
        root = self.engine.search(self.root, self.board, time_budget_ms)
        chosen = select_move(root)

        self.board.drop(chosen.action, ME)
        self.root = chosen

        summary = chosen.summary()
        self.history.append({
            "player": ME,
            "column": chosen.action,
            "summary": summary,
            "rollouts": self.engine.last_rollouts
        })
        logger.debug("AI plays column %d (%s)", chosen.action, summary)
        return chosen.action, summary

    def play_opponent(self, col: int):
        """
        Commits col for OPPONENT. The column must be playable.
        Keeps the matching subtree if it was explored, otherwise drops the tree.
        """
        self.board.drop(col, OPPONENT)
        self.history.append({"player": OPPONENT, "column": col})

        if self.root is not None:
            self.root = self.root.child_for(col)

    def can_play(self, col: int) -> bool:
        if col < 0 or col >= COLS:
            return False
        if self.winning_row() is not None:
            return False
        return self.board.can_play(col)

    def winning_row(self) -> Optional[List[Tuple[int, int]]]:
        return self.board.winning_row()

    @property
    def winner(self) -> Optional[int]:
        cells = self.winning_row()
        if cells is None:
            return None
        r, c = cells[0]
        return self.board.grid[r][c]

    def is_draw(self) -> bool:
        """Returns True if board is full and no winner."""
        return self.winning_row() is None and self.board.is_full()

    def get_valid_moves(self) -> List[int]:
        return self.board.valid_moves()

    def get_visual_board(self) -> str:
        return self.board.render()
