"""Components used by the start/restart button."""
from dataclasses import dataclass
from enum import Enum, auto


class MenuAction(Enum):
    """Actions that a menu button can trigger."""
    START_GAME = auto()


@dataclass
class MenuButton:
    """Interactive button drawn under the board."""
    label: str
    action: MenuAction
    x: float
    y: float
    width: float = 240.0
    height: float = 56.0
    enabled: bool = True

