"""Tag classification: HTML tag name -> node type."""

from __future__ import annotations

from typing import Mapping

from flowpaste.model.node import NodeType

TAG_TO_TYPE: dict[str, NodeType] = {
    # Block elements
    "div": NodeType.BLOCK,
    "section": NodeType.SECTION,
    "article": NodeType.BLOCK,
    "aside": NodeType.BLOCK,
    "nav": NodeType.BLOCK,
    "header": NodeType.BLOCK,
    "footer": NodeType.BLOCK,
    "main": NodeType.BLOCK,
    # Headings
    "h1": NodeType.HEADING,
    "h2": NodeType.HEADING,
    "h3": NodeType.HEADING,
    "h4": NodeType.HEADING,
    "h5": NodeType.HEADING,
    "h6": NodeType.HEADING,
    # Text
    "p": NodeType.PARAGRAPH,
    "span": NodeType.BLOCK,
    "strong": NodeType.BLOCK,
    "em": NodeType.BLOCK,
    "b": NodeType.BLOCK,
    "i": NodeType.BLOCK,
    # Links and media
    "a": NodeType.LINK,
    "img": NodeType.IMAGE,
    # Lists
    "ul": NodeType.LIST,
    "ol": NodeType.LIST,
    "li": NodeType.LIST_ITEM,
    # Forms; a plain <button> is a Block, only <input type=submit> is a FormButton
    "form": NodeType.FORM_FORM,
    "button": NodeType.BLOCK,
    # Custom tag used by some page builders
    "container": NodeType.CONTAINER,
}

# Tags that only become form fields when they sit inside a <form>.
_FORM_FIELD_TYPES: dict[str, NodeType] = {
    "textarea": NodeType.FORM_TEXTAREA,
    "select": NodeType.FORM_SELECT,
    "label": NodeType.FORM_BLOCK_LABEL,
}

_INPUT_TYPES: dict[str, NodeType] = {
    "submit": NodeType.FORM_BUTTON,
    "button": NodeType.FORM_BUTTON,
    "radio": NodeType.FORM_RADIO_INPUT,
    "checkbox": NodeType.FORM_CHECKBOX_INPUT,
}


def input_type(attrs: Mapping[str, str]) -> str:
    """Return the lower-cased ``type`` attribute of an input, default ``text``."""
    return (attrs.get("type") or "text").lower()


def classify(tag: str, attrs: Mapping[str, str], inside_form: bool = False) -> NodeType:
    """Return the node type for an element.

    ``input``, ``textarea``, ``select`` and ``label`` classify as form fields
    only inside a ``<form>``; elsewhere they are plain Blocks. Tags missing
    from the table become ``DOM`` custom elements.
    """
    tag = tag.lower()
    if tag == "input":
        if not inside_form:
            return NodeType.BLOCK
        return _INPUT_TYPES.get(input_type(attrs), NodeType.FORM_TEXT_INPUT)
    if tag in _FORM_FIELD_TYPES:
        return _FORM_FIELD_TYPES[tag] if inside_form else NodeType.BLOCK
    return TAG_TO_TYPE.get(tag, NodeType.DOM)
