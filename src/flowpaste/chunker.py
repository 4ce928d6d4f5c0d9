"""Chunker: split a compiled tree into groups of whole root subtrees.

The Designer limits how many nodes a single paste may hold, so large pages
are imported in several chunks. A chunk never separates a node from its
descendants; the size limit is a target, and a single oversized root subtree
still travels whole in its own chunk.
"""

from __future__ import annotations

import logging
from typing import Sequence

from flowpaste.errors import ContractError
from flowpaste.model.chunk import Chunk
from flowpaste.model.node import ElementNode, Node

__all__ = ["chunk", "subtree_ids", "ROOT_LABELS"]

logger = logging.getLogger(__name__)

ROOT_LABELS: dict[str, str] = {
    "header": "Header",
    "nav": "Navigation",
    "section": "Section",
    "footer": "Footer",
    "main": "Main Content",
    "article": "Article",
    "aside": "Sidebar",
    "form": "Form",
}

COMPLETE_PAGE = "Complete Page"


def subtree_ids(by_id: dict[str, Node], root_id: str) -> list[str]:
    """Return *root_id* and every id reachable from it, depth-first."""
    collected: list[str] = []
    stack = [root_id]
    while stack:
        node_id = stack.pop()
        node = by_id.get(node_id)
        if node is None:
            continue
        collected.append(node_id)
        stack.extend(reversed(node.children))
    return collected


def _root_label(node: Node | None) -> str | None:
    if not isinstance(node, ElementNode):
        return None
    return ROOT_LABELS.get(node.tag.lower())


def chunk(
    nodes: Sequence[Node],
    root_ids: Sequence[str],
    max_nodes_per_chunk: int = 100,
) -> list[Chunk]:
    """Greedily pack whole root subtrees into chunks of at most the limit.

    Single-root chunks are labelled after their root tag where the tag has a
    label; otherwise chunks are numbered, and a lone chunk is the complete
    page.
    """
    if max_nodes_per_chunk is None or max_nodes_per_chunk < 1:
        raise ContractError(
            f"max_nodes_per_chunk must be a positive integer, got {max_nodes_per_chunk!r}",
            argument="max_nodes_per_chunk",
        )
    by_id = {n.id: n for n in nodes}

    groups: list[tuple[list[str], set[str]]] = []
    current_roots: list[str] = []
    current_ids: set[str] = set()
    for root_id in root_ids:
        ids = subtree_ids(by_id, root_id)
        if current_ids and len(current_ids) + len(ids) > max_nodes_per_chunk:
            groups.append((current_roots, current_ids))
            current_roots, current_ids = [], set()
        current_roots.append(root_id)
        current_ids.update(ids)
    if current_ids:
        groups.append((current_roots, current_ids))

    chunks: list[Chunk] = []
    for index, (roots, ids) in enumerate(groups, start=1):
        label = _root_label(by_id.get(roots[0])) if len(roots) == 1 else None
        if label is None:
            label = COMPLETE_PAGE if len(groups) == 1 else f"Chunk {index}"
        chunks.append(Chunk(label=label, nodes=tuple(n for n in nodes if n.id in ids)))

    placed = sum(c.node_count for c in chunks)
    if placed != len(nodes):
        logger.warning(
            "%d of %d nodes are not reachable from any root", len(nodes) - placed, len(nodes)
        )
    return chunks
