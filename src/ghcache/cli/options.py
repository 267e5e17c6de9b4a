"""Options shared by the commands that access the cache."""

from __future__ import annotations

import sys
from collections.abc import Callable
from typing import Any

import click

from ..cache import RepoCache, ResourceKind
from ..config import DEFAULT_API_BASE, DEFAULT_TIMEOUT
from ..errors import PathError
from ..transport import RequestsTransport

KIND_CHOICE = click.Choice([kind.value for kind in ResourceKind])


def cache_options(func: Callable[..., Any]) -> Callable[..., Any]:
    """Decorate a command with the options needed by open_cache."""
    decorators = [
        click.option(
            "-d",
            "--dir",
            "cache_dir",
            default=None,
            envvar="GHCACHE_DIR",
            help="Cache directory (default: ./data)",
        ),
        click.option(
            "--api-base",
            default=DEFAULT_API_BASE,
            show_default=True,
            envvar="GHCACHE_API_BASE",
            help="Base URL of the remote API",
        ),
        click.option(
            "--timeout",
            default=DEFAULT_TIMEOUT,
            show_default=True,
            type=float,
            help="Seconds to wait for the remote API",
        ),
    ]
    for decorator in reversed(decorators):
        func = decorator(func)
    return func


def open_cache(
    repo: str,
    *,
    cache_dir: str | None,
    api_base: str,
    timeout: float,
) -> RepoCache:
    """Create a RepoCache or exit with a usage error for invalid repositories."""
    try:
        return RepoCache(
            repo,
            cache_dir=cache_dir,
            api_base=api_base,
            transport=RequestsTransport(timeout=timeout),
            progress=sys.stderr.isatty(),
        )
    except PathError as exc:
        raise click.BadParameter(str(exc), param_hint="REPO") from exc
