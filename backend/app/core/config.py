import os
import yaml
from pathlib import Path
from dotenv import load_dotenv
from pydantic import BaseModel, Field
from typing import Optional

load_dotenv()

DEFAULT_CONFIG_PATH = Path(__file__).resolve().parents[2] / "config" / "engine.yaml"

class EngineSettings(BaseModel):
    time_budget_ms: int = Field(default=1000, gt=0)
    seed: Optional[int] = None  # Seeds every game's random source when set
    max_games: int = Field(default=100, gt=0)

def load_settings(config_path: Optional[str] = None) -> EngineSettings:
    """
    Reads the 'engine' section of the YAML config, then applies env overrides.
    A missing file means defaults.
    """
    path = Path(config_path or os.getenv("MCTS_CONFIG_PATH") or DEFAULT_CONFIG_PATH)
    data = {}
    if path.exists():
        with open(path, "r") as f:
            data = (yaml.safe_load(f) or {}).get("engine", {}) or {}

    if os.getenv("MCTS_TIME_BUDGET_MS"):
        data["time_budget_ms"] = int(os.getenv("MCTS_TIME_BUDGET_MS"))
    if os.getenv("MCTS_SEED"):
        data["seed"] = int(os.getenv("MCTS_SEED"))

    return EngineSettings(**data)

# Singleton instance
settings = load_settings()
