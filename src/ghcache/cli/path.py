"""Path command."""

import click

from ..cache import ResourceKind
from . import cli
from .options import KIND_CHOICE, cache_options, open_cache


@cli.command()
@click.argument("repo")
@click.argument("kind", type=KIND_CHOICE)
@cache_options
def path(repo: str, kind: str, cache_dir: str | None, api_base: str, timeout: float) -> None:
    """Print the cache file path of KIND for REPO without fetching it."""
    cache = open_cache(repo, cache_dir=cache_dir, api_base=api_base, timeout=timeout)
    click.echo(cache.entry(ResourceKind(kind)).file_path())
