"""Plain-text rendering of a compiled tree, for diagnostics."""

from __future__ import annotations

from typing import Iterable

from flowpaste.model.node import ElementNode, Node


def render_tree(nodes: Iterable[Node], root_ids: Iterable[str]) -> str:
    """Render the subtrees under *root_ids* as an indented outline."""
    by_id = {n.id: n for n in nodes}
    lines: list[str] = []
    stack = [(root_id, 0) for root_id in reversed(list(root_ids))]
    while stack:
        node_id, depth = stack.pop()
        node = by_id.get(node_id)
        if node is None:
            continue
        indent = "  " * depth
        if not isinstance(node, ElementNode):
            lines.append(f'{indent}[TEXT] "{node.value}"')
            continue
        lines.append(f"{indent}<{node.tag}> ({node.type}) [{node.id[:8]}]")
        if node.classes:
            lines.append(f"{indent}  classes: {len(node.classes)}")
        stack.extend((child_id, depth + 1) for child_id in reversed(node.children))
    return "\n".join(lines)
