"""End-to-end conversion: HTML + CSS (+ JS) -> clipboard envelopes."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field

from flowpaste.chunker import chunk
from flowpaste.config import ConverterConfig
from flowpaste.errors import require_text
from flowpaste.ids import IdFactory, uuid_ids
from flowpaste.model.chunk import Chunk
from flowpaste.model.envelope import ClipboardData
from flowpaste.stylesheet import compile_responsive_styles, compile_styles, extract_class_names
from flowpaste.stylesheet.compiler import StyleSheetResult
from flowpaste.tree import build_custom_code, compile_tree, extract_javascript
from flowpaste.tree.compiler import CompiledTree

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Conversion:
    """Result of converting one page."""

    tree: CompiledTree
    stylesheet: StyleSheetResult
    chunks: list[Chunk] = field(default_factory=list)
    custom_js: str = ""
    custom_code: str = ""

    @property
    def needs_custom_code(self) -> bool:
        return bool(self.custom_code)

    def envelope(self) -> ClipboardData:
        """The whole page in a single envelope."""
        return ClipboardData.from_parts(self.tree.nodes, self.stylesheet.styles)

    def chunk_envelopes(self) -> list[ClipboardData]:
        """One envelope per chunk; every envelope carries all styles."""
        return [
            ClipboardData.from_parts(c.nodes, self.stylesheet.styles) for c in self.chunks
        ]


def _combine_js(html_js: str, js_text: str) -> str:
    parts = [html_js.strip(), js_text.strip()]
    return "\n\n".join(p for p in parts if p)


def convert(
    html_text: str,
    css_text: str = "",
    js_text: str = "",
    config: ConverterConfig | None = None,
    new_id: IdFactory | None = None,
) -> Conversion:
    """Run the full pipeline on one page.

    Classes are taken from the CSS, so a class that appears only in the
    HTML is not referenced from any node.
    """
    html_text = require_text(html_text, "html_text")
    css_text = require_text(css_text, "css_text")
    js_text = require_text(js_text, "js_text")
    config = config or ConverterConfig()
    new_id = new_id or uuid_ids()

    class_names = extract_class_names(css_text)
    compile_fn = compile_responsive_styles if config.responsive else compile_styles
    stylesheet = compile_fn(css_text, class_names, new_id=new_id)

    tree = compile_tree(
        html_text, stylesheet.class_to_id, new_id=new_id, parser=config.html_parser
    )
    chunks = chunk(tree.nodes, tree.root_ids, config.max_nodes_per_chunk)

    custom_js = _combine_js(extract_javascript(html_text, config.html_parser), js_text)
    custom_code = ""
    if config.include_custom_code:
        custom_code = build_custom_code(stylesheet.advanced_css, custom_js)

    logger.info(
        "Converted %d nodes and %d styles into %d chunk(s)",
        len(tree.nodes),
        len(stylesheet.styles),
        len(chunks),
    )
    return Conversion(
        tree=tree,
        stylesheet=stylesheet,
        chunks=chunks,
        custom_js=custom_js,
        custom_code=custom_code,
    )
