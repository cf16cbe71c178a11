"""Data-source contract consumed by the board builder."""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Hashable, List, Protocol, Sequence


@dataclass(frozen=True, slots=True)
class CategorySummary:
    id: Hashable
    title: str


@dataclass(frozen=True, slots=True)
class ClueData:
    question: str
    answer: str


@dataclass(frozen=True, slots=True)
class CategoryDetail:
    title: str
    clues: List[ClueData] = field(default_factory=list)


class TriviaSource(Protocol):
    """Read-only access to a remote trivia catalog.

    Implementations raise ``SourceUnavailable`` when a request cannot be
    completed.
    """

    def list_categories(self, limit: int) -> Sequence[CategorySummary]:
        ...

    def get_category_detail(self, category_id: Hashable) -> CategoryDetail:
        ...
