"""Game state resource describing the active high-level mode."""
from dataclasses import dataclass
from enum import Enum, auto
from typing import Optional


class GameMode(Enum):
    """High-level game modes that drive which systems run."""
    MENU = auto()
    LOADING = auto()
    PLAYING = auto()


@dataclass
class GameState:
    """Singleton component storing the currently active game mode."""
    mode: GameMode = GameMode.MENU
    last_error: Optional[str] = None
