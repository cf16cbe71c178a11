"""Board construction: sample categories and clues from a trivia source."""
from __future__ import annotations

import logging
import random
from typing import Hashable, List

from jeopardy.components.board import Board
from jeopardy.components.category import Category
from jeopardy.components.clue import Clue, RevealState
from jeopardy.constants import CATEGORY_POOL_SIZE
from jeopardy.data.source import TriviaSource
from jeopardy.errors import InsufficientData

logger = logging.getLogger(__name__)


class BoardBuilder:
    """Builds a fresh :class:`Board` from a :class:`TriviaSource`.

    Sampling is uniform and without replacement. When the source pool is
    smaller than requested, the selection helpers return what is available;
    ``build_board`` is the place that insists on exact counts.
    """

    def __init__(
        self,
        source: TriviaSource,
        *,
        rng: random.Random | None = None,
        pool_size: int = CATEGORY_POOL_SIZE,
    ) -> None:
        self.source = source
        self._rng = rng or random.SystemRandom()
        self.pool_size = pool_size

    def select_category_ids(self, pool_size: int, count: int) -> List[Hashable]:
        """Return up to ``count`` distinct category ids from a pool of ``pool_size`` candidates."""
        summaries = self.source.list_categories(pool_size)
        candidates: List[Hashable] = []
        seen: set = set()
        for summary in summaries:
            if summary.id in seen:
                continue
            seen.add(summary.id)
            candidates.append(summary.id)
        take = max(0, min(count, len(candidates)))
        return self._rng.sample(candidates, take)

    def fetch_category(self, identifier: Hashable, clues_per_category: int) -> Category:
        detail = self.source.get_category_detail(identifier)
        take = max(0, min(clues_per_category, len(detail.clues)))
        picked = self._rng.sample(list(detail.clues), take)
        clues = [
            Clue(question=data.question, answer=data.answer, reveal_state=RevealState.HIDDEN)
            for data in picked
        ]
        return Category(title=detail.title, clues=clues)

    def build_board(self, category_count: int, clues_per_category: int) -> Board:
        """Assemble a complete board, fetching categories one after another.

        Any failure discards the categories fetched so far and propagates.
        """
        identifiers = self.select_category_ids(self.pool_size, category_count)
        if len(identifiers) < category_count:
            raise InsufficientData(
                f"Catalog offered {len(identifiers)} categories, board needs {category_count}",
                requested=category_count,
                available=len(identifiers),
                operation="list_categories",
            )
        categories: List[Category] = []
        for identifier in identifiers:
            logger.debug("Fetching category %r", identifier)
            category = self.fetch_category(identifier, clues_per_category)
            if len(category.clues) < clues_per_category:
                raise InsufficientData(
                    f"Category {category.title!r} has {len(category.clues)} clues, board needs {clues_per_category}",
                    requested=clues_per_category,
                    available=len(category.clues),
                    operation="get_category_detail",
                )
            categories.append(category)
        board = Board(categories=categories)
        logger.info("Built board with categories %s", board.titles)
        return board
