from pydantic import BaseModel, ConfigDict, Field
from typing import List, Optional

class MoveRecord(BaseModel):
    # Allow extra fields so history entries can grow without breaking responses
    model_config = ConfigDict(extra='ignore')

    player: str
    column: int
    summary: Optional[str] = None
    rollouts: Optional[int] = None
    duration: Optional[float] = 0.0

class GameCreate(BaseModel):
    ai_first: bool = False
    time_budget_ms: Optional[int] = Field(default=None, gt=0)

class MoveRequest(BaseModel):
    column: int

class GameResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    status: str
    winner: Optional[str] = None
    current_turn: str
    time_budget_ms: int

    board: List[List[int]]  # 6 rows x 7 cols, row 0 is the top
    winning_row: Optional[List[List[int]]] = None
    last_summary: Optional[str] = None

    history: List[MoveRecord]

class GameSummary(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    status: str
    move_count: int

class SettingsResponse(BaseModel):
    time_budget_ms: int
    seed: Optional[int] = None
    max_games: int
