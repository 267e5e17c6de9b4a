"""Module containing the default ghcache configuration."""

from __future__ import annotations

from pathlib import Path
from typing import Final

DEFAULT_API_BASE: Final[str] = "https://api.github.com"
"""Base URL of the remote JSON API."""

DEFAULT_CACHE_DIRNAME: Final[str] = "data"
"""Name of the cache root created inside the current working directory."""

DEFAULT_CHUNK_SIZE: Final[int] = 8192
"""Size of the buffer used when streaming a response body to disk."""

DEFAULT_TIMEOUT: Final[float] = 30.0
"""Seconds to wait for the remote API before giving up."""


def cache_dir_or_default(cache_dir: str | Path | None) -> Path:
    """
    Return cache_dir as a Path if not empty. Otherwise return the
    default value for the cache_dir (i.e., `./data`).
    """
    return Path.cwd() / DEFAULT_CACHE_DIRNAME if cache_dir is None else Path(cache_dir)
