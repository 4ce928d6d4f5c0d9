"""flowpaste CLI entry point: Click group with subcommands."""

import logging

import click

from flowpaste import __version__


@click.group()
@click.version_option(version=__version__, prog_name="flowpaste")
@click.option("-v", "--verbose", is_flag=True, help="Log conversion details to stderr")
def cli(verbose: bool) -> None:
    """flowpaste - compile HTML and CSS into Webflow clipboard JSON."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )


# Import and register subcommands
from flowpaste.cli.convert import convert  # noqa: E402
from flowpaste.cli.inspect import inspect  # noqa: E402
from flowpaste.cli.styles import styles  # noqa: E402

cli.add_command(convert)
cli.add_command(inspect)
cli.add_command(styles)
