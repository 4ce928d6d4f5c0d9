"""flowpaste model layer -- public type re-exports."""

from flowpaste.model.chunk import Chunk
from flowpaste.model.envelope import DOCUMENT_TYPE, ClipboardData, ClipboardStats
from flowpaste.model.node import (
    FIELD_PRESENCE,
    CustomElementData,
    DataShape,
    ElementData,
    ElementNode,
    Node,
    NodeType,
    TextNode,
)
from flowpaste.model.style import Breakpoint, StyleRecord

__all__ = [
    # node
    "NodeType",
    "DataShape",
    "FIELD_PRESENCE",
    "ElementData",
    "CustomElementData",
    "ElementNode",
    "TextNode",
    "Node",
    # style
    "Breakpoint",
    "StyleRecord",
    # chunk
    "Chunk",
    # envelope
    "DOCUMENT_TYPE",
    "ClipboardData",
    "ClipboardStats",
]
