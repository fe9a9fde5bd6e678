# mcts/core/selector.py
from typing import List
from .constants import Outcome
from .node import Node


def _most_visited(nodes: List[Node]) -> Node:
    return max(nodes, key=lambda c: c.n)


def select_move(root: Node) -> Node:
    """
    Picks the child of an expanded root to play.
    Proven results take priority over visit statistics.
    """
    children = root.children

    # 1. Forced win
    wins = [c for c in children if c.outcome is Outcome.WIN]
    if wins:
        return _most_visited(wins)

    # 2. Losing anyway: play the best analysed line
    if all(c.outcome is Outcome.LOSS for c in children):
        return _most_visited(children)

    draws = [c for c in children if c.outcome is Outcome.DRAW]
    unresolved = [c for c in children if not c.outcome.is_solved]

    # 3. Classic MCTS choice
    if not draws:
        return _most_visited(unresolved)

    # 4. Draw with the longest analysis, hope for opponent mistakes
    if not unresolved:
        return _most_visited(draws)

    best = _most_visited(unresolved)
    if best.mean_value < 0.5:
        return _most_visited(draws)  # take the draw, don't risk anything
    return best  # try to enforce the win
