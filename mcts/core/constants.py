# mcts/core/constants.py
from enum import Enum

# --- Board Dimensions ---
ROWS = 6
COLS = 7
CONNECT = 4

# --- Cell / Player Tags ---
FREE = 0
ME = 1
OPPONENT = 2

# --- Search Budget ---
# The clock is only consulted when the root visit count is a multiple of this,
# so a search may overshoot its budget by up to ROLLOUT_BATCH - 1 rollouts.
ROLLOUT_BATCH = 128

# Line directions as (d_row, d_col): Vertical, Diagonal /, Diagonal \, Horizontal
DIRECTIONS = [(1, 0), (1, -1), (1, 1), (0, 1)]


class Outcome(Enum):
    """
    Exact result of a node, seen by the player who moved INTO the node.
    WIN / DRAW / LOSS are proven and permanent.
    """
    UNKNOWN = "UNKNOWN"
    ONGOING = "ONGOING"
    WIN = "WIN"
    DRAW = "DRAW"
    LOSS = "LOSS"

    @property
    def is_solved(self) -> bool:
        return self in OUTCOME_SCORES

    @property
    def score(self) -> float:
        return OUTCOME_SCORES[self]


OUTCOME_SCORES = {
    Outcome.WIN: 1.0,
    Outcome.DRAW: 0.5,
    Outcome.LOSS: 0.0,
}


def other(player: int) -> int:
    return OPPONENT if player == ME else ME
