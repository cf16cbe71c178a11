from dataclasses import dataclass
from enum import Enum, auto


class RevealState(Enum):
    """Per-clue progress marker. Only ever moves forward."""
    HIDDEN = auto()
    QUESTION = auto()
    ANSWER = auto()


@dataclass(slots=True)
class Clue:
    question: str
    answer: str
    reveal_state: RevealState = RevealState.HIDDEN
