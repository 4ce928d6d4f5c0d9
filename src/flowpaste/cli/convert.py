"""CLI command: flowpaste convert -- write clipboard JSON for a page."""

from __future__ import annotations

import sys
from pathlib import Path

import click

from flowpaste.config import ConverterConfig
from flowpaste.convert import convert as run_convert
from flowpaste.errors import FlowpasteError


def _read(path: str | None) -> str:
    if not path:
        return ""
    return Path(path).read_text(encoding="utf-8")


@click.command()
@click.argument("htmlfile", type=click.Path(exists=True, dir_okay=False))
@click.option("--css", "cssfile", type=click.Path(exists=True, dir_okay=False), help="Stylesheet")
@click.option("--js", "jsfile", type=click.Path(exists=True, dir_okay=False), help="Extra JavaScript")
@click.option("-o", "--output", default=None, help="Write the envelope here instead of stdout")
@click.option("--split", "split_dir", default=None, help="Also write one envelope per chunk")
@click.option("--chunk-size", default=25, show_default=True, type=int, help="Nodes per chunk")
@click.option("--base-only", is_flag=True, help="Ignore @media breakpoint variants")
def convert(
    htmlfile: str,
    cssfile: str | None,
    jsfile: str | None,
    output: str | None,
    split_dir: str | None,
    chunk_size: int,
    base_only: bool,
) -> None:
    """Convert an HTML file (and optional CSS/JS) to Webflow clipboard JSON.

    Custom code that must be pasted into an HTML Embed by hand is reported
    on stderr.
    """
    config = ConverterConfig(max_nodes_per_chunk=chunk_size, responsive=not base_only)
    try:
        result = run_convert(_read(htmlfile), _read(cssfile), _read(jsfile), config=config)
    except FlowpasteError as exc:
        click.echo(f"Conversion failed: {exc}", err=True)
        sys.exit(1)

    envelope = result.envelope()
    if output:
        envelope.save(Path(output))
        click.echo(f"Wrote {output}: {envelope.stats()}", err=True)
    else:
        click.echo(envelope.to_json(indent=2))

    if split_dir:
        out_dir = Path(split_dir)
        for index, (chunk, data) in enumerate(
            zip(result.chunks, result.chunk_envelopes()), start=1
        ):
            slug = chunk.label.lower().replace(" ", "-")
            path = out_dir / f"{index:02d}-{slug}.json"
            data.save(path)
            click.echo(f"Wrote {path} ({chunk.node_count} nodes)", err=True)

    if result.needs_custom_code:
        click.echo("\nCustom code for an HTML Embed element:", err=True)
        click.echo(result.custom_code, err=True)
