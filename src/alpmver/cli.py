# SPDX-License-Identifier: MIT
"""CLI entry point for the alpmver command."""

from __future__ import annotations

import logging
import sys

import click

from .vercmp import Ordering
from .version import Version

logger = logging.getLogger(__name__)

FORMATS = ("name", "number")


def setup_logging(verbose: bool) -> None:
    """Configure the root logger to write to stderr.

    Calling it again does not add a second handler.
    """
    root = logging.getLogger()
    level = logging.DEBUG if verbose else logging.WARNING
    root.setLevel(level)

    if root.handlers:
        return

    handler = logging.StreamHandler(sys.stderr)
    handler.setLevel(level)
    handler.setFormatter(logging.Formatter("[%(levelname).4s] %(message)s"))
    root.addHandler(handler)


def echo_error(message: str) -> None:
    """Print an error message to stderr."""
    click.secho(f"Error: {message}", fg="red", err=True)


def format_ordering(ordering: Ordering, output_format: str) -> str:
    """Render an ordering as its name or as -1/0/1."""
    if output_format == "number":
        return str(int(ordering))
    return str(ordering)


@click.command()
@click.version_option(package_name="alpmver")
@click.argument("v1")
@click.argument("v2")
@click.option(
    "-f",
    "--format",
    "output_format",
    type=click.Choice(FORMATS),
    default="name",
    show_default=True,
    envvar="ALPMVER_FORMAT",
    help="Print the ordering name (Less, Equal, Greater) or a number (-1, 0, 1).",
)
@click.option(
    "-v",
    "--verbose",
    is_flag=True,
    envvar="ALPMVER_VERBOSE",
    help="Log the decomposition of both versions to stderr.",
)
def cli(v1: str, v2: str, output_format: str, verbose: bool) -> None:
    """Compare two package versions.

    Prints how V1 orders relative to V2. The exit status is 0 whatever the
    result.

    \b
    Examples:
        alpmver 1.0.0 1.0.1
        alpmver 1:1.0-1 2.0-1
        alpmver --format number 1.0a 1.0
    """
    setup_logging(verbose)

    version1 = Version(v1)
    version2 = Version(v2)
    logger.debug("v1 %r -> %r", v1, version1.components())
    logger.debug("v2 %r -> %r", v2, version2.components())

    ordering = version1.compare(version2)
    click.echo(format_ordering(ordering, output_format))


def main() -> None:
    """Main entry point for the CLI."""
    try:
        cli()
    except Exception as e:
        echo_error(f"Unexpected error: {e}")
        sys.exit(1)


if __name__ == "__main__":
    main()
