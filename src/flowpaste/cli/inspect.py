"""CLI command: flowpaste inspect -- display the compiled node tree."""

from __future__ import annotations

import sys
from pathlib import Path

import click

from flowpaste.convert import convert as run_convert
from flowpaste.errors import FlowpasteError
from flowpaste.tree import render_tree


@click.command()
@click.argument("htmlfile", type=click.Path(exists=True, dir_okay=False))
@click.option("--css", "cssfile", type=click.Path(exists=True, dir_okay=False), help="Stylesheet")
def inspect(htmlfile: str, cssfile: str | None) -> None:
    """Compile an HTML file and display its node tree.

    Shows node and style counts, then each root subtree with node types.
    """
    html = Path(htmlfile).read_text(encoding="utf-8")
    css = Path(cssfile).read_text(encoding="utf-8") if cssfile else ""
    try:
        result = run_convert(html, css)
    except FlowpasteError as exc:
        click.echo(f"Conversion failed: {exc}", err=True)
        sys.exit(1)

    stats = result.envelope().stats()
    click.echo(f"Nodes:  {stats.total_nodes} ({stats.element_nodes} elements, {stats.text_nodes} text)")
    click.echo(f"Styles: {stats.styles}")
    click.echo(f"Roots:  {len(result.tree.root_ids)}")
    click.echo(f"Chunks: {len(result.chunks)}")
    click.echo()
    click.echo(render_tree(result.tree.nodes, result.tree.root_ids))
