"""mistcss CLI entry point: Click group with subcommands."""

import click

from mistcss import __version__


@click.group()
@click.version_option(version=__version__, prog_name="mistcss")
def cli() -> None:
    """mistcss - typed React components from scoped stylesheets."""


# Import and register subcommands
from mistcss.cli.build import build  # noqa: E402
from mistcss.cli.inspect import inspect  # noqa: E402

cli.add_command(build)
cli.add_command(inspect)
