"""CLI command: mistcss build -- generate .mist.tsx files."""

from __future__ import annotations

import sys

import click

from mistcss.driver import gen_file
from mistcss.errors import MistError


@click.command()
@click.argument("files", nargs=-1, required=True, type=click.Path(exists=True, dir_okay=False))
def build(files: tuple[str, ...]) -> None:
    """Generate a component module for each FILES entry.

    Every ``<name>.mist.css`` produces ``<name>.mist.tsx`` beside it.  Files
    that fail are reported and the rest are still processed; the exit code is
    1 if any file failed.
    """
    failed = 0
    for filename in files:
        try:
            out = gen_file(filename)
        except MistError as exc:
            click.echo(f"Parse error: {filename}: {exc}", err=True)
            failed += 1
            continue
        click.echo(f"Generated {out}")

    if failed:
        sys.exit(1)
