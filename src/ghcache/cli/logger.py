"""Logging helpers for the ghcache CLI."""

from __future__ import annotations

import logging
import os
import sys

import colorlog

LOG_COLORS = {
    "DEBUG": "bold_cyan",
    "INFO": "bold_green",
    "WARNING": "bold_yellow",
    "ERROR": "bold_red",
    "CRITICAL": "bold_red,bg_white",
}

LOG_FORMAT = "[%(asctime)s] <%(name)s> %(levelname)s: %(message)s"
LOG_DATEFMT = "%Y-%m-%d %H:%M:%S"

# Third-party loggers that are only interesting in verbose mode.
NOISY_LOGGERS = ("urllib3", "filelock")


def _use_color() -> bool:
    if os.getenv("NO_COLOR") is not None:
        return False
    return sys.stderr.isatty()


def configure_logging(verbose: bool) -> None:
    """Send log messages to stderr, using colors when stderr is a terminal."""
    level = logging.DEBUG if verbose else logging.INFO
    for name in NOISY_LOGGERS:
        logging.getLogger(name).setLevel(logging.NOTSET if verbose else logging.WARNING)

    if not _use_color():
        logging.basicConfig(level=level, format=LOG_FORMAT, datefmt=LOG_DATEFMT)
        return

    handler = logging.StreamHandler()
    handler.setFormatter(
        colorlog.ColoredFormatter(
            fmt="%(log_color)s[%(asctime)s] <%(name)s> %(levelname)s:%(reset)s %(message)s",
            log_colors=LOG_COLORS,
            datefmt=LOG_DATEFMT,
        )
    )
    logging.basicConfig(level=level, handlers=[handler])


log = logging.getLogger("ghcache.cli")
"""Logger that the CLI commands should use."""
