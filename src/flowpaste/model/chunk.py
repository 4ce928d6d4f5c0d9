"""Chunk model: a subtree-preserving slice of a compiled node list."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from flowpaste.model.node import Node


@dataclass(frozen=True)
class Chunk:
    """One or more whole root subtrees, in original node order."""

    label: str
    nodes: tuple[Node, ...]

    @property
    def node_count(self) -> int:
        return len(self.nodes)

    def to_dict(self) -> dict[str, Any]:
        return {
            "label": self.label,
            "nodes": [n.to_dict() for n in self.nodes],
            "nodeCount": self.node_count,
        }
