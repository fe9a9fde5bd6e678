from fastapi import FastAPI, HTTPException
from fastapi.middleware.cors import CORSMiddleware
from typing import List
import logging

from backend.app.schemas.game_schema import (
    GameCreate, GameResponse, GameSummary, MoveRequest, SettingsResponse
)
from backend.app.services.game_service import game_service, GameNotFoundError, InvalidMoveError

logging.basicConfig(level=logging.INFO, format="%(asctime)s %(levelname)s %(name)s: %(message)s")

app = FastAPI(title="Connect Four MCTS Solver")

app.add_middleware(
    CORSMiddleware,
    allow_origins=["http://localhost:5173", "http://localhost:3000"], # Allow Vite (5173) and React default (3000)
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# Endpoints are plain 'def': searches are CPU bound and run in the threadpool.
# The service serialises access to each game.

@app.get("/config", response_model=SettingsResponse)
def get_config():
    """Returns the effective engine settings."""
    return SettingsResponse(**game_service.settings.model_dump())

@app.post("/games", response_model=GameResponse)
def create_game(game_data: GameCreate):
    state = game_service.create_game(
        ai_first=game_data.ai_first,
        time_budget_ms=game_data.time_budget_ms
    )
    return GameResponse.model_validate(state)

@app.get("/games", response_model=List[GameSummary])
def list_games():
    return [GameSummary.model_validate(s) for s in game_service.list_games()]

@app.get("/games/{game_id}", response_model=GameResponse)
def get_game(game_id: int):
    try:
        state = game_service.get_game_state(game_id)
    except GameNotFoundError:
        raise HTTPException(status_code=404, detail="Game not found")
    return GameResponse.model_validate(state)

@app.post("/games/{game_id}/moves", response_model=GameResponse)
def play_move(game_id: int, move: MoveRequest, auto_reply: bool = True):
    """
    Applies the human move. Unless auto_reply is false, the AI answers
    in the same request when the game is still running.
    """
    try:
        state = game_service.process_human_move(game_id, move.column)
        if auto_reply:
            state = game_service.step_ai_turn(game_id)
    except GameNotFoundError:
        raise HTTPException(status_code=404, detail="Game not found")
    except InvalidMoveError as e:
        raise HTTPException(status_code=400, detail=str(e))
    return GameResponse.model_validate(state)

@app.post("/games/{game_id}/ai", response_model=GameResponse)
def play_ai(game_id: int):
    """Asks the AI to move now (no-op if it's not its turn)."""
    try:
        state = game_service.step_ai_turn(game_id)
    except GameNotFoundError:
        raise HTTPException(status_code=404, detail="Game not found")
    return GameResponse.model_validate(state)

@app.delete("/games/{game_id}")
def delete_game(game_id: int):
    try:
        game_service.delete_game(game_id)
    except GameNotFoundError:
        raise HTTPException(status_code=404, detail="Game not found")
    return {"message": f"Game {game_id} deleted"}
