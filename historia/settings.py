"""Shared settings loaded from environment variables."""
from __future__ import annotations

import os
from functools import lru_cache

from dotenv import load_dotenv

load_dotenv()

_DEFAULT_CACHE_SIZE = 1024
_DEFAULT_TOPIC_CACHE_SIZE = 64
_DEFAULT_LOG_LEVEL = "INFO"


def _int_env(name: str, default: int | None) -> int | None:
    raw = os.getenv(name)
    if raw is None or not raw.strip():
        return default
    try:
        return int(raw)
    except ValueError as exc:
        raise RuntimeError(f"Invalid integer in environment variable {name!r}: {raw}") from exc


@lru_cache(maxsize=None)
def get_cache_size() -> int:
    """Return the capacity of the per-operation extraction cache."""

    return _int_env("HISTORIA_CACHE_SIZE", _DEFAULT_CACHE_SIZE)


@lru_cache(maxsize=None)
def get_topic_cache_size() -> int:
    """Return how many processed topics are kept in memory."""

    return _int_env("HISTORIA_TOPIC_CACHE_SIZE", _DEFAULT_TOPIC_CACHE_SIZE)


@lru_cache(maxsize=None)
def get_random_seed() -> int | None:
    """Return the seed for quiz shuffling and placeholder coordinates, if any."""

    return _int_env("HISTORIA_RANDOM_SEED", None)


@lru_cache(maxsize=None)
def get_log_level() -> str:
    return os.getenv("HISTORIA_LOG_LEVEL", _DEFAULT_LOG_LEVEL)


__all__ = [
    "get_cache_size",
    "get_log_level",
    "get_random_seed",
    "get_topic_cache_size",
]
