"""httpx-backed trivia source for the jService-style API."""

from __future__ import annotations

import html
import logging
import re
from typing import Any, Hashable, List

import httpx

from jeopardy.constants import API_URL, REQUEST_TIMEOUT
from jeopardy.data.source import CategoryDetail, CategorySummary, ClueData
from jeopardy.errors import SourceUnavailable

logger = logging.getLogger(__name__)

_TAG_RE = re.compile(r"</?[A-Za-z][^<>]*>")


def clean_text(value: Any) -> str:
    """Return display text for an API field.

    Answers come back as numbers now and then and often carry inline markup
    (``<i>Hamlet</i>``) or entities.
    """
    if value is None:
        return ""
    text = _TAG_RE.sub("", str(value))
    text = html.unescape(text)
    return " ".join(text.split())


class HttpTriviaSource:
    """Resolver for ``/categories`` and ``/category`` over httpx."""

    def __init__(
        self,
        api_url: str = API_URL,
        *,
        timeout: float = REQUEST_TIMEOUT,
        client: httpx.Client | None = None,
    ) -> None:
        self.api_url = api_url.rstrip("/")
        self._owns_client = client is None
        self._http = client or httpx.Client(timeout=timeout)

    def __enter__(self) -> "HttpTriviaSource":
        return self

    def __exit__(self, *exc_info) -> None:
        self.close()

    def close(self) -> None:
        if self._owns_client:
            self._http.close()

    def list_categories(self, limit: int) -> List[CategorySummary]:
        payload = self._get_json("/categories", {"count": int(limit)}, operation="list_categories")
        if not isinstance(payload, list):
            raise SourceUnavailable("Category list is not a JSON array", operation="list_categories")
        categories: List[CategorySummary] = []
        try:
            for entry in payload:
                categories.append(CategorySummary(id=entry["id"], title=clean_text(entry.get("title"))))
        except (KeyError, TypeError, AttributeError) as exc:
            raise SourceUnavailable(f"Malformed category entry: {exc!r}", operation="list_categories") from exc
        return categories

    def get_category_detail(self, category_id: Hashable) -> CategoryDetail:
        payload = self._get_json("/category", {"id": category_id}, operation="get_category_detail")
        try:
            clues = [
                ClueData(question=clean_text(raw["question"]), answer=clean_text(raw["answer"]))
                for raw in payload.get("clues") or []
            ]
            return CategoryDetail(title=clean_text(payload.get("title")), clues=clues)
        except (KeyError, TypeError, AttributeError) as exc:
            raise SourceUnavailable(
                f"Malformed detail for category {category_id!r}: {exc!r}",
                operation="get_category_detail",
            ) from exc

    def _get_json(self, path: str, params: dict[str, Any], *, operation: str) -> Any:
        url = f"{self.api_url}{path}"
        logger.debug("GET %s params=%s", url, params)
        try:
            response = self._http.get(url, params=params)
            response.raise_for_status()
            return response.json()
        except httpx.HTTPStatusError as exc:
            raise SourceUnavailable(
                f"{operation} failed with HTTP {exc.response.status_code}",
                operation=operation,
            ) from exc
        except httpx.HTTPError as exc:
            raise SourceUnavailable(f"{operation} failed: {exc}", operation=operation) from exc
        except ValueError as exc:
            raise SourceUnavailable(f"{operation} returned invalid JSON", operation=operation) from exc
