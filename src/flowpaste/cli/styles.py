"""CLI command: flowpaste styles -- display compiled style records."""

from __future__ import annotations

from pathlib import Path

import click

from flowpaste.stylesheet import compile_responsive_styles, extract_class_names


@click.command()
@click.argument("cssfile", type=click.Path(exists=True, dir_okay=False))
@click.option("--class", "class_names", multiple=True, help="Class to compile (repeatable)")
def styles(cssfile: str, class_names: tuple[str, ...]) -> None:
    """Compile a CSS file and print one line per class style.

    Without --class, every class used in a selector is compiled.
    """
    css = Path(cssfile).read_text(encoding="utf-8")
    names = list(class_names) or extract_class_names(css)
    result = compile_responsive_styles(css, names)

    for style in result.styles:
        click.echo(f".{style.name}: {style.style_less or '(empty)'}")
        for tier, style_less in style.variants.items():
            click.echo(f"  @{tier}: {style_less}")

    if result.advanced_css:
        click.echo()
        click.echo("Advanced CSS:")
        click.echo(result.advanced_css)
