"""CLI command: mistcss inspect -- display the component model."""

from __future__ import annotations

import sys
from pathlib import Path

import click

from mistcss.driver import build_model, module_name_for
from mistcss.errors import MistError
from mistcss.model.component import EnumAttribute


@click.command()
@click.argument("cssfile", type=click.Path(exists=True, dir_okay=False))
def inspect(cssfile: str) -> None:
    """Parse a stylesheet and display the components it declares.

    Shows each component with its tag and data attributes.
    """
    css_path = Path(cssfile)

    try:
        source = css_path.read_text(encoding="utf-8")
        components = build_model(source, module_name_for(css_path))
    except MistError as exc:
        click.echo(f"Parse error: {exc}", err=True)
        sys.exit(1)

    click.echo(f"Module:     {module_name_for(css_path)}")
    click.echo(f"Components: {len(components)}")
    click.echo()

    for name, component in components.items():
        click.echo(f"{name}  tag={component.tag or '(unbound)'}  class=.{component.class_name}")
        for attribute, spec in component.data.items():
            if isinstance(spec, EnumAttribute):
                values = " | ".join(f"'{v}'" for v in spec.values)
                click.echo(f"  {attribute}: {values}")
            else:
                click.echo(f"  {attribute}: boolean")
