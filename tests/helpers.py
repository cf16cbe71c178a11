from __future__ import annotations

from typing import Hashable, Iterable, Sequence

from jeopardy.components.board import Board
from jeopardy.components.category import Category
from jeopardy.components.clue import Clue
from jeopardy.data.source import CategoryDetail, CategorySummary, ClueData
from jeopardy.errors import SourceUnavailable


class StubSource:
    """In-memory trivia source with optional failure injection."""

    def __init__(
        self,
        categories: Sequence[tuple[Hashable, str, Sequence[tuple[str, str]]]],
        *,
        fail_listing: bool = False,
        fail_on_detail_call: int | None = None,
    ) -> None:
        self._summaries = [CategorySummary(id=cid, title=title) for cid, title, _ in categories]
        self._details = {
            cid: CategoryDetail(title=title, clues=[ClueData(question=q, answer=a) for q, a in clues])
            for cid, title, clues in categories
        }
        self.fail_listing = fail_listing
        self.fail_on_detail_call = fail_on_detail_call
        self.list_calls: list[int] = []
        self.detail_calls: list[Hashable] = []

    def list_categories(self, limit: int) -> list[CategorySummary]:
        self.list_calls.append(limit)
        if self.fail_listing:
            raise SourceUnavailable("listing down", operation="list_categories")
        return self._summaries[:limit]

    def get_category_detail(self, category_id: Hashable) -> CategoryDetail:
        self.detail_calls.append(category_id)
        if self.fail_on_detail_call is not None and len(self.detail_calls) == self.fail_on_detail_call:
            raise SourceUnavailable(f"detail {category_id} down", operation="get_category_detail")
        return self._details[category_id]


def numbered_catalog(category_count: int, clues_each: int) -> list[tuple[int, str, list[tuple[str, str]]]]:
    return [
        (
            cid,
            f"Category {cid}",
            [(f"Q{cid}.{n}", f"A{cid}.{n}") for n in range(clues_each)],
        )
        for cid in range(1, category_count + 1)
    ]


def make_board(columns: Iterable[tuple[str, Sequence[tuple[str, str]]]]) -> Board:
    return Board(
        categories=[
            Category(title=title, clues=[Clue(question=q, answer=a) for q, a in clues])
            for title, clues in columns
        ]
    )
