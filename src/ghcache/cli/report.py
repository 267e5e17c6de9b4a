"""Report command."""

import click

from ..report import DEFAULT_ISSUES_LIMIT, render_issues, render_milestones
from . import cli
from .interceptor import Interceptor
from .logger import configure_logging, log
from .options import cache_options, open_cache


@cli.command()
@click.argument("repo")
@cache_options
@click.option(
    "-n",
    "--limit",
    default=DEFAULT_ISSUES_LIMIT,
    show_default=True,
    type=click.IntRange(min=0),
    help="Number of issues to print",
)
@click.option("-v", "--verbose", is_flag=True, default=False, help="Verbose mode.")
def report(
    repo: str,
    cache_dir: str | None,
    api_base: str,
    timeout: float,
    limit: int,
    verbose: bool,
) -> None:
    """Print a report of the issues and milestones of REPO.

    Resources missing from the cache are downloaded first. When
    one resource cannot be obtained, the report continues with
    the other one and the command exits with status 1.
    """
    configure_logging(verbose)
    cache = open_cache(repo, cache_dir=cache_dir, api_base=api_base, timeout=timeout)
    interceptor = Interceptor()

    with interceptor:
        issues = cache.issues()
        log.info("found %d issues", len(issues))
        click.echo(render_issues(issues, limit=limit), nl=False)

    with interceptor:
        milestones = cache.milestones()
        log.info("found %d milestones", len(milestones))
        click.echo(render_milestones(milestones), nl=False)

    raise SystemExit(interceptor.exitcode())
