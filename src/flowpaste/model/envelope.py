"""Clipboard envelope: the ``@webflow/XscpData`` document and its stats."""

from __future__ import annotations

import json
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Iterable

from flowpaste.model.node import Node
from flowpaste.model.style import StyleRecord

DOCUMENT_TYPE = "@webflow/XscpData"


@dataclass(frozen=True)
class ClipboardStats:
    """Summary counts shown to the user after a conversion."""

    total_nodes: int
    element_nodes: int
    text_nodes: int
    styles: int
    assets: int
    size_in_bytes: int

    @property
    def size_in_kb(self) -> str:
        return f"{self.size_in_bytes / 1024:.2f} KB"

    def __str__(self) -> str:
        return (
            f"{self.total_nodes} nodes ({self.element_nodes} elements, "
            f"{self.text_nodes} text), {self.styles} styles, {self.size_in_kb}"
        )


@dataclass(frozen=True)
class ClipboardData:
    """Nodes and styles wrapped for the Designer's clipboard import.

    Assets are never produced by the compilers; the list is carried so an
    externally populated one can be embedded unchanged.
    """

    nodes: tuple[Node, ...]
    styles: tuple[StyleRecord, ...]
    assets: tuple[dict[str, Any], ...] = field(default=())

    @classmethod
    def from_parts(
        cls,
        nodes: Iterable[Node],
        styles: Iterable[StyleRecord],
        assets: Iterable[dict[str, Any]] = (),
    ) -> ClipboardData:
        return cls(nodes=tuple(nodes), styles=tuple(styles), assets=tuple(assets))

    # --- serialisation --------------------------------------------------------

    def to_dict(self) -> dict[str, Any]:
        return {
            "type": DOCUMENT_TYPE,
            "payload": {
                "nodes": [n.to_dict() for n in self.nodes],
                "styles": [s.to_dict() for s in self.styles],
                "assets": list(self.assets),
                "ix1": [],
                "ix2": {"interactions": [], "events": [], "actionLists": []},
            },
            "meta": {
                "unlinkedSymbolCount": 0,
                "droppedLinks": 0,
                "dynBindRemovedCount": 0,
                "dynListBindRemovedCount": 0,
                "paginationRemovedCount": 0,
            },
        }

    def to_json(self, indent: int | None = None) -> str:
        """Serialise to JSON; without *indent* the output is compact."""
        separators = (",", ":") if indent is None else None
        return json.dumps(
            self.to_dict(), indent=indent, separators=separators, ensure_ascii=False
        )

    def save(self, path: Path, indent: int | None = 2) -> None:
        """Write the envelope as JSON to *path*, creating parent directories."""
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(self.to_json(indent=indent), encoding="utf-8")

    # --- statistics -----------------------------------------------------------

    def stats(self) -> ClipboardStats:
        text_nodes = sum(1 for n in self.nodes if n.is_text)
        return ClipboardStats(
            total_nodes=len(self.nodes),
            element_nodes=len(self.nodes) - text_nodes,
            text_nodes=text_nodes,
            styles=len(self.styles),
            assets=len(self.assets),
            size_in_bytes=len(self.to_json().encode("utf-8")),
        )
