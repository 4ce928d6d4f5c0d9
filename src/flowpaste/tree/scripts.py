"""Script extraction: JavaScript that must be re-added as custom code."""

from __future__ import annotations

import logging
import re

from flowpaste.errors import require_text
from flowpaste.tree.compiler import parse_html

logger = logging.getLogger(__name__)

# Absolute or protocol-relative URLs; CDN scripts survive, local files cannot.
_REMOTE_SRC_RE = re.compile(r"^(https?:)?//", re.IGNORECASE)


def extract_javascript(html_text: str, parser: str = "html.parser") -> str:
    """Collect every ``<script>`` in *html_text* as embeddable code.

    Remote ``src`` references become ``<script src>`` tags, inline bodies
    are kept as-is. Parts are separated by blank lines.
    """
    html_text = require_text(html_text, "html_text")
    parts: list[str] = []
    for script in parse_html(html_text, parser).find_all("script"):
        src = script.get("src")
        if src:
            if _REMOTE_SRC_RE.match(src):
                parts.append(f'<script src="{src}"></script>')
            else:
                logger.warning("Skipping local script reference: %s", src)
        body = (script.string or "").strip()
        if body:
            parts.append(body)
    return "\n\n".join(parts)
