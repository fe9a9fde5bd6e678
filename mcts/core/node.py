# mcts/core/node.py
import math
import random
from typing import List, Optional
from .board import Board
from .constants import COLS, Outcome


class Node:
    """
    Decision point for the player about to move.
    Statistics (n, w) and outcome are from the perspective of the player
    who moved INTO this node.
    """

    def __init__(self, action: Optional[int] = None):
        self.n = 0
        self.w = 0.0
        self.action = action
        self.children: Optional[List['Node']] = None
        self.outcome = Outcome.UNKNOWN

    def evaluate(self, board: Board, col: Optional[int], row: Optional[int]) -> Outcome:
        if self.outcome is not Outcome.UNKNOWN:
            return self.outcome
        if row is None:
            # Root without a last move: keep playing, nothing to memoize
            return Outcome.ONGOING
        self.outcome = board.evaluate(col, row)
        return self.outcome

    def expand(self, board: Board):
        """Builds one empty child per playable column, in column order."""
        self.children = [Node(col) for col in range(COLS) if board.can_play(col)]

    def select_child(self, board: Board, total_visits: int, rng=random) -> 'Node':
        """
        Unvisited children first (uniformly random order), then UCB1.
        total_visits is the root's visit count for the whole descent, not this node's.
        """
        if self.children is None:
            self.expand(board)
        children = self.children

        if self.n < len(children):
            # Partial Fisher-Yates: children[:n] are the ones already handed out
            swap = rng.randrange(self.n, len(children))
            children[swap], children[self.n] = children[self.n], children[swap]
            return children[self.n]

        log_total = math.log(total_visits)
        best_value = -math.inf
        best = None
        for child in children:
            value = child.w / child.n + math.sqrt(2 * log_total / child.n)
            if value > best_value:
                best_value = value
                best = child
        return best

    def child_for(self, action: int) -> Optional['Node']:
        if self.children is None:
            return None
        return next((c for c in self.children if c.action == action), None)

    @property
    def mean_value(self) -> float:
        return self.w / self.n

    def summary(self) -> str:
        if self.outcome is Outcome.WIN:
            return "I win!"
        if self.outcome is Outcome.LOSS:
            return "I lose!"
        if self.outcome is Outcome.DRAW:
            return "Draw"
        return f"{self.w:.1f} / {self.n} ({100 * self.w / self.n:.2f}%)"

    def __str__(self):
        return self.summary()

    def __repr__(self):
        return f"Node(action={self.action}, n={self.n}, w={self.w}, outcome={self.outcome.name})"
