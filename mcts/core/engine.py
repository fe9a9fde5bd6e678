# mcts/core/engine.py
import logging
import random
import time
from typing import Callable, Optional
from .board import Board
from .constants import ME, ROLLOUT_BATCH, Outcome, other
from .node import Node

logger = logging.getLogger(__name__)


class SearchEngine:
    def __init__(self, rng: Optional[random.Random] = None, clock: Callable[[], float] = time.perf_counter):
        """
        rng: source for the unvisited-child order (seed it for reproducible searches).
        clock: returns seconds; only differences are used.
        """
        self.rng = rng if rng is not None else random.Random()
        self.clock = clock
        self.rollouts = 0
        self.last_rollouts = 0

    def search(self, root: Optional[Node], board: Board, time_budget_ms: int, player: int = ME) -> Node:
        """
        Runs rollouts from root (a fresh one if None) on copies of board
        until the root is solved or the budget is spent. Returns the root.
        """
        if root is None:
            root = Node()

        start = self.clock()
        budget = time_budget_ms / 1000.0
        performed = 0

        while True:
            self.rollout(root, player, root.n, board.copy())
            performed += 1

            if root.outcome.is_solved:
                break
            # Time is only checked once per batch
            if root.n % ROLLOUT_BATCH == 0 and self.clock() - start >= budget:
                break

        self.rollouts += performed
        self.last_rollouts = performed
        logger.debug(
            "Search finished: %d rollouts in %.3fs, root n=%d w=%.1f outcome=%s",
            performed, self.clock() - start, root.n, root.w, root.outcome.name
        )
        return root

    def rollout(self, node: Node, player: int, total_visits: int, board: Board,
                col: Optional[int] = None, row: Optional[int] = None) -> float:
        """
        One descent from node. board is mutated along the path.
        Returns the value for the side to move at node (1 - value for its mover).
        """
        # 1. Result of the move that led here
        outcome = node.evaluate(board, col, row)
        if outcome.is_solved:
            node.n += 1
            node.w += outcome.score
            return 1 - outcome.score

        # 2. Descend
        child = node.select_child(board, total_visits, self.rng)
        child_row = board.drop(child.action, player)
        result = self.rollout(child, other(player), total_visits, board, child.action, child_row)
        node.n += 1
        node.w += result

        # 3. Solver: a winning reply refutes this node, all losing replies prove it
        if child.outcome is Outcome.WIN:
            node.outcome = Outcome.LOSS
        if all(c.outcome is Outcome.LOSS for c in node.children):
            node.outcome = Outcome.WIN

        return 1 - result
