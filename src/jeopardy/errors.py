"""Error types raised by board construction and clue dispatch."""


class TriviaError(Exception):
    """Base class for every error raised by the jeopardy package."""


class SourceUnavailable(TriviaError):
    """The trivia data source could not satisfy a request.

    ``operation`` names the call that failed (``"list_categories"`` or
    ``"get_category_detail"``) so callers can log something useful.
    """

    def __init__(self, message: str, *, operation: str | None = None):
        super().__init__(message)
        self.operation = operation


class InsufficientData(SourceUnavailable):
    """The source answered, but with fewer categories or clues than the board needs."""

    def __init__(self, message: str, *, requested: int, available: int, operation: str | None = None):
        super().__init__(message, operation=operation)
        self.requested = requested
        self.available = available


class IndexOutOfRange(TriviaError, IndexError):
    """A click coordinate does not address a cell of the current board."""

    def __init__(self, category_index: int, clue_index: int):
        super().__init__(f"No clue at category {category_index}, clue {clue_index}")
        self.category_index = category_index
        self.clue_index = clue_index
