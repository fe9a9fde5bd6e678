"""
Game Service - In-memory Game Store

This service is the single source of truth for all game state modifications.
It handles:
- Game creation (and eviction once the store is full)
- Move processing (human and AI)
- Status / winner bookkeeping
- Move history with timing

Each game is guarded by its own lock so a search tree is never touched by two
requests at once. Nothing is persisted: games live as long as the process.
"""

import logging
import random
import threading
import time
from itertools import count
from typing import Dict, List, Optional

from backend.app.core.config import EngineSettings, settings
from backend.app.engine.game import GameSession
from backend.app.models.enums import GameStatus, PlayerType
from mcts.core.constants import ME
from mcts.core.engine import SearchEngine

logger = logging.getLogger(__name__)


class GameNotFoundError(ValueError):
    pass


class InvalidMoveError(ValueError):
    pass


def _player_type(player: int) -> PlayerType:
    return PlayerType.AI if player == ME else PlayerType.HUMAN


class GameRecord:
    """A session plus the bookkeeping the API needs around it"""
    def __init__(self, game_id: int, session: GameSession, time_budget_ms: int):
        self.id = game_id
        self.session = session
        self.time_budget_ms = time_budget_ms
        self.status = GameStatus.IN_PROGRESS
        self.winner: Optional[PlayerType] = None
        self.current_turn = PlayerType.HUMAN
        self.lock = threading.Lock()


class GameState:
    """Represents the current state of a game for API responses"""
    def __init__(self, record: GameRecord):
        session = record.session
        self.id = record.id
        self.status = record.status.value
        self.winner = record.winner.value if record.winner else None
        self.current_turn = record.current_turn.value
        self.time_budget_ms = record.time_budget_ms
        self.board = [row[:] for row in session.board.grid]
        self.winning_row = session.winning_row()
        self.history = [
            dict(move, player=_player_type(move["player"]).value) for move in session.history
        ]
        ai_moves = [m for m in self.history if m["player"] == PlayerType.AI]
        self.last_summary = ai_moves[-1]["summary"] if ai_moves else None
        self.move_count = len(self.history)


class GameService:
    """Centralized service for all game operations"""

    def __init__(self, engine_settings: EngineSettings = settings):
        self.settings = engine_settings
        self.games: Dict[int, GameRecord] = {}
        self._ids = count(1)
        self._store_lock = threading.Lock()

    def create_game(self, ai_first: bool = False, time_budget_ms: Optional[int] = None) -> GameState:
        """Create a new game; the AI opens immediately when ai_first is set"""
        seed = self.settings.seed
        engine = SearchEngine(rng=random.Random(seed) if seed is not None else random.Random())
        budget = time_budget_ms or self.settings.time_budget_ms

        with self._store_lock:
            self._evict_if_full()
            record = GameRecord(next(self._ids), GameSession(engine), budget)
            self.games[record.id] = record

        logger.info("Created game %d (ai_first=%s, budget=%dms)", record.id, ai_first, budget)

        if ai_first:
            record.current_turn = PlayerType.AI
            return self.step_ai_turn(record.id)
        return GameState(record)

    def list_games(self) -> List[GameState]:
        with self._store_lock:
            records = list(self.games.values())
        return [GameState(r) for r in records]

    def get_game_state(self, game_id: int) -> GameState:
        record = self._get_game(game_id)
        with record.lock:
            return GameState(record)

    def delete_game(self, game_id: int):
        with self._store_lock:
            if game_id not in self.games:
                raise GameNotFoundError(f"Game {game_id} not found")
            del self.games[game_id]

    def process_human_move(self, game_id: int, column: int) -> GameState:
        """Validate and apply a human move"""
        start_time = time.time()
        record = self._get_game(game_id)

        with record.lock:
            if record.status != GameStatus.IN_PROGRESS:
                raise InvalidMoveError(f"Game {game_id} is already finished")
            if record.current_turn != PlayerType.HUMAN:
                raise InvalidMoveError("It is not the human's turn")
            if not record.session.can_play(column):
                raise InvalidMoveError(f"Invalid move: column {column}")

            record.session.play_opponent(column)
            record.session.history[-1]["duration"] = round(time.time() - start_time, 3)

            logger.info("Game %d: human plays column %d", game_id, column)
            self._finish_turn(record, next_turn=PlayerType.AI)
            return GameState(record)

    def step_ai_turn(self, game_id: int) -> GameState:
        """Execute one AI turn and return new game state"""
        record = self._get_game(game_id)

        with record.lock:
            # Nothing to do if the game is over or it's the human's turn
            if record.status != GameStatus.IN_PROGRESS or record.current_turn != PlayerType.AI:
                return GameState(record)

            # --- TIMER START ---
            start_time = time.time()
            column, summary = record.session.play_ai(record.time_budget_ms)
            duration = round(time.time() - start_time, 3)
            record.session.history[-1]["duration"] = duration

            logger.info(
                "Game %d: AI plays column %d after %d rollouts in %.3fs (%s)",
                game_id, column, record.session.engine.last_rollouts, duration, summary
            )
            self._finish_turn(record, next_turn=PlayerType.HUMAN)
            return GameState(record)

    def _get_game(self, game_id: int) -> GameRecord:
        with self._store_lock:
            record = self.games.get(game_id)
        if record is None:
            raise GameNotFoundError(f"Game {game_id} not found")
        return record

    def _finish_turn(self, record: GameRecord, next_turn: PlayerType):
        session = record.session
        if session.winner is not None:
            record.status = GameStatus.COMPLETED
            record.winner = _player_type(session.winner)
            logger.info("Game %d finished: %s wins", record.id, record.winner)
        elif session.is_draw():
            record.status = GameStatus.DRAW
            logger.info("Game %d finished: draw", record.id)
        else:
            record.current_turn = next_turn

    def _evict_if_full(self):
        """Drops the oldest finished game, or the oldest game if none has finished"""
        if len(self.games) < self.settings.max_games:
            return
        finished = [gid for gid, r in self.games.items() if r.status != GameStatus.IN_PROGRESS]
        victim = finished[0] if finished else next(iter(self.games))
        del self.games[victim]
        logger.info("Game store full, evicted game %d", victim)


# Singleton instance
game_service = GameService()
