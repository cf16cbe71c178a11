"""Runtime settings: constants overridable through ``JEOPARDY_*`` environment variables."""
from __future__ import annotations

import os
from dataclasses import dataclass
from typing import Mapping

from jeopardy.constants import API_URL, NUM_CATEGORIES, NUM_CLUES_PER_CAT, REQUEST_TIMEOUT

_LOG_LEVELS = {"CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG"}


@dataclass(frozen=True, slots=True)
class Settings:
    api_url: str = API_URL
    num_categories: int = NUM_CATEGORIES
    num_clues: int = NUM_CLUES_PER_CAT
    request_timeout: float = REQUEST_TIMEOUT
    log_level: str = "INFO"

    def __post_init__(self) -> None:
        if self.num_categories <= 0:
            raise ValueError(f"num_categories must be positive, got {self.num_categories}")
        if self.num_clues <= 0:
            raise ValueError(f"num_clues must be positive, got {self.num_clues}")
        if self.request_timeout <= 0:
            raise ValueError(f"request_timeout must be positive, got {self.request_timeout}")
        if self.log_level not in _LOG_LEVELS:
            raise ValueError(f"Unknown log level {self.log_level!r}")


def _int(environ: Mapping[str, str], key: str, default: int) -> int:
    raw = environ.get(key)
    if raw is None or raw.strip() == "":
        return default
    try:
        return int(raw)
    except ValueError:
        raise ValueError(f"{key} must be an integer, got {raw!r}") from None


def _float(environ: Mapping[str, str], key: str, default: float) -> float:
    raw = environ.get(key)
    if raw is None or raw.strip() == "":
        return default
    try:
        return float(raw)
    except ValueError:
        raise ValueError(f"{key} must be a number, got {raw!r}") from None


def load_settings(environ: Mapping[str, str] | None = None) -> Settings:
    env = os.environ if environ is None else environ
    return Settings(
        api_url=env.get("JEOPARDY_API_URL") or API_URL,
        num_categories=_int(env, "JEOPARDY_NUM_CATEGORIES", NUM_CATEGORIES),
        num_clues=_int(env, "JEOPARDY_NUM_CLUES", NUM_CLUES_PER_CAT),
        request_timeout=_float(env, "JEOPARDY_REQUEST_TIMEOUT", REQUEST_TIMEOUT),
        log_level=(env.get("JEOPARDY_LOG_LEVEL") or "INFO").upper(),
    )
