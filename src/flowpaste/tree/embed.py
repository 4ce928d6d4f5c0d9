"""Custom code: advanced CSS and JavaScript packaged for an HTML Embed."""

from __future__ import annotations

import logging

from flowpaste.ids import IdFactory, uuid_ids
from flowpaste.model.node import ElementData, ElementNode, NodeType

logger = logging.getLogger(__name__)


def build_custom_code(custom_css: str = "", custom_js: str = "") -> str:
    """Wrap CSS in ``<style>`` and JS in ``<script>``; blank parts are omitted."""
    code = ""
    if custom_css and custom_css.strip():
        code += f"<style>\n{custom_css}\n</style>\n"
    if custom_js and custom_js.strip():
        code += f"<script>\n{custom_js}\n</script>"
    return code


def create_html_embed_node(
    custom_css: str = "",
    custom_js: str = "",
    new_id: IdFactory | None = None,
) -> ElementNode:
    """Return an ``HtmlEmbed`` element carrying the given custom code."""
    new_id = new_id or uuid_ids()
    content = build_custom_code(custom_css, custom_js)
    logger.info("Created HTML embed (%d characters)", len(content))
    return ElementNode(
        id=new_id(),
        type=NodeType.HTML_EMBED,
        tag="div",
        data=ElementData(
            type=NodeType.HTML_EMBED,
            tag="div",
            attr={"id": ""},
            extra={"embed": {"type": "code", "content": content}},
        ),
    )
