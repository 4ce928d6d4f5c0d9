from flowpaste.tree.classify import TAG_TO_TYPE, classify
from flowpaste.tree.compiler import (
    CompiledTree,
    compile_tree,
    compile_tree_with_styles,
    content_elements,
    parse_html,
)
from flowpaste.tree.embed import build_custom_code, create_html_embed_node
from flowpaste.tree.payload import build_payload, extract_attributes
from flowpaste.tree.render import render_tree
from flowpaste.tree.scripts import extract_javascript

__all__ = [
    "compile_tree",
    "compile_tree_with_styles",
    "CompiledTree",
    "parse_html",
    "content_elements",
    "classify",
    "TAG_TO_TYPE",
    "build_payload",
    "extract_attributes",
    "extract_javascript",
    "build_custom_code",
    "create_html_embed_node",
    "render_tree",
]
