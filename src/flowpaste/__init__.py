"""flowpaste: compile HTML and CSS into Webflow clipboard data."""

from flowpaste.chunker import chunk
from flowpaste.config import ConverterConfig
from flowpaste.convert import Conversion, convert
from flowpaste.errors import ContractError, FlowpasteError
from flowpaste.ids import sequential_ids, uuid_ids
from flowpaste.model import ClipboardData, StyleRecord
from flowpaste.stylesheet import compile_responsive_styles, compile_styles
from flowpaste.tree import compile_tree, compile_tree_with_styles

__version__ = "0.1.0"

__all__ = [
    "compile_styles",
    "compile_responsive_styles",
    "compile_tree",
    "compile_tree_with_styles",
    "chunk",
    "convert",
    "Conversion",
    "ConverterConfig",
    "ClipboardData",
    "StyleRecord",
    "FlowpasteError",
    "ContractError",
    "uuid_ids",
    "sequential_ids",
    "__version__",
]
