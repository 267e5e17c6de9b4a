"""Fetch command."""

import click

from ..cache import ResourceKind
from . import cli
from .interceptor import Interceptor
from .logger import configure_logging
from .options import KIND_CHOICE, cache_options, open_cache


@cli.command()
@click.argument("repo")
@click.argument("kinds", nargs=-1, type=KIND_CHOICE)
@cache_options
@click.option("-v", "--verbose", is_flag=True, default=False, help="Verbose mode.")
def fetch(
    repo: str,
    kinds: tuple[str, ...],
    cache_dir: str | None,
    api_base: str,
    timeout: float,
    verbose: bool,
) -> None:
    """Download the given KINDS of REPO (default: all) unless cached.

    Prints the path of each cache file. Files already in the cache
    are never downloaded again.
    """
    configure_logging(verbose)
    cache = open_cache(repo, cache_dir=cache_dir, api_base=api_base, timeout=timeout)
    selected = [ResourceKind(kind) for kind in kinds] or list(ResourceKind)

    interceptor = Interceptor()
    for kind in selected:
        with interceptor:
            entry = cache.materialize(kind)
            click.echo(entry.file_path())

    raise SystemExit(interceptor.exitcode())
