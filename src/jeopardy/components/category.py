from dataclasses import dataclass, field
from typing import List

from jeopardy.components.clue import Clue


@dataclass(slots=True)
class Category:
    """One column of the board: a title and its sampled clues."""
    title: str
    clues: List[Clue] = field(default_factory=list)
