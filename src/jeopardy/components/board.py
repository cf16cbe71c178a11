from dataclasses import dataclass, field
from typing import List

from jeopardy.components.category import Category


@dataclass(slots=True)
class Board:
    """Full trivia grid for one game session.

    Columns are categories, rows are clue indices. A restart deletes the
    entity holding this component and attaches a freshly built one.
    """
    categories: List[Category] = field(default_factory=list)

    @property
    def category_count(self) -> int:
        return len(self.categories)

    @property
    def clues_per_category(self) -> int:
        if not self.categories:
            return 0
        return len(self.categories[0].clues)

    @property
    def titles(self) -> List[str]:
        return [category.title for category in self.categories]
