"""ghcache command-line interface."""

from importlib.metadata import version

import click

_PACKAGE_NAME = "ghcache"

_EPILOG = """\b
Cache layout:
  DIR/<owner>/<name>/issues.json
  DIR/<owner>/<name>/milestones.json

\b
Files are downloaded once and never refreshed: delete
a file to download it again.
"""


def _get_version() -> str:
    """Return the installed package version string."""
    return version(_PACKAGE_NAME)


@click.group(context_settings={"help_option_names": ["-h", "--help"]}, epilog=_EPILOG)
@click.version_option(message="%(version)s", package_name=_PACKAGE_NAME)
def cli() -> None:
    """Write-once local cache for GitHub repository resources."""


@cli.command(hidden=True)
def help() -> None:
    """Show usage information."""
    click.echo('Use "ghcache --help" for usage information.')
    click.echo('Use "ghcache <command> --help" for help on a specific command.')


@cli.command("version")
def version_cmd() -> None:
    """Print the version number."""
    click.echo(_get_version())


# Register subcommands (must be after cli is defined)
from . import fetch as _fetch  # noqa: E402, F401
from . import path as _path  # noqa: E402, F401
from . import report as _report  # noqa: E402, F401
