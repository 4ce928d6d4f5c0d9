"""Element payloads: the type-shaped ``data`` object of each element node.

Two layers feed an :class:`ElementData`:

* ``extract_attributes`` fills the ``attr`` bag from the tag name;
* ``TYPE_DATA`` builds the fields specific to the node type.

Which of ``text``/``tag`` a payload carries is fixed by
:data:`flowpaste.model.node.FIELD_PRESENCE`.
"""

from __future__ import annotations

import logging
import re
from typing import Any, Callable, Mapping

from bs4 import Tag

from flowpaste.model.node import (
    AttrValue,
    CustomElementData,
    ElementData,
    NodeType,
)

__all__ = [
    "extract_attributes",
    "build_payload",
    "select_options",
    "TYPE_DATA",
]

logger = logging.getLogger(__name__)

Attrs = Mapping[str, Any]

_LEADING_INT_RE = re.compile(r"^\s*[-+]?\d+")

# Placeholder options used when a <select> has no <option> children.
DEFAULT_SELECT_OPTIONS: tuple[dict[str, str], ...] = (
    {"v": "", "t": "Select one..."},
    {"v": "Option 1", "t": "Option 1"},
)


def _get(attrs: Attrs, name: str) -> str:
    """Return an attribute as a string; missing attributes read as ``""``."""
    value = attrs.get(name)
    if value is None:
        return ""
    if isinstance(value, (list, tuple)):
        return " ".join(value)
    return str(value)


def _has(attrs: Attrs, name: str) -> bool:
    return name in attrs


def _int_or(value: str, default: int) -> int:
    match = _LEADING_INT_RE.match(value)
    if match is None:
        return default
    return int(match.group(0)) or default


def _data_name(attrs: Attrs) -> str:
    return _get(attrs, "data-name") or _get(attrs, "name")


# ---------------------------------------------------------------------------
# attr bag, keyed by tag
# ---------------------------------------------------------------------------


def _img_attrs(attrs: Attrs) -> dict[str, AttrValue]:
    return {
        "width": _get(attrs, "width") or "auto",
        "height": _get(attrs, "height") or "auto",
        "alt": _get(attrs, "alt"),
        "src": _get(attrs, "src"),
        "loading": "eager" if _get(attrs, "loading") == "eager" else "lazy",
    }


def _form_attrs(attrs: Attrs) -> dict[str, AttrValue]:
    return {
        "name": _get(attrs, "name"),
        "data-name": _data_name(attrs),
        "action": _get(attrs, "action"),
        "method": _get(attrs, "method") or "get",
        "redirect": _get(attrs, "redirect"),
        "data-redirect": _get(attrs, "data-redirect"),
    }


def _input_attrs(attrs: Attrs) -> dict[str, AttrValue]:
    kind = _get(attrs, "type") or "text"
    bag: dict[str, AttrValue] = {
        "type": kind,
        "name": _get(attrs, "name"),
        "data-name": _data_name(attrs),
        "placeholder": _get(attrs, "placeholder"),
        "required": _has(attrs, "required"),
        "disabled": _has(attrs, "disabled"),
        "autofocus": _has(attrs, "autofocus"),
    }
    if kind in ("submit", "button"):
        bag["value"] = _get(attrs, "value") or "Submit"
        bag["data-wait"] = _get(attrs, "data-wait") or "Please wait..."
    elif kind in ("radio", "checkbox"):
        bag["value"] = _get(attrs, "value")
        bag["checked"] = _has(attrs, "checked")
    else:
        bag["maxlength"] = _int_or(_get(attrs, "maxlength"), 256)
    return bag


def _textarea_attrs(attrs: Attrs) -> dict[str, AttrValue]:
    return {
        "name": _get(attrs, "name"),
        "data-name": _data_name(attrs),
        "placeholder": _get(attrs, "placeholder"),
        "required": _has(attrs, "required"),
        "autofocus": _has(attrs, "autofocus"),
        "maxlength": _int_or(_get(attrs, "maxlength"), 5000),
    }


def _select_attrs(attrs: Attrs) -> dict[str, AttrValue]:
    return {
        "name": _get(attrs, "name"),
        "data-name": _data_name(attrs),
        "required": _has(attrs, "required"),
        "multiple": _has(attrs, "multiple"),
    }


_TAG_ATTRS: dict[str, Callable[[Attrs], dict[str, AttrValue]]] = {
    "img": _img_attrs,
    "form": _form_attrs,
    "input": _input_attrs,
    "textarea": _textarea_attrs,
    "select": _select_attrs,
    "button": lambda attrs: {"type": _get(attrs, "type") or "button"},
    "label": lambda attrs: {"for": _get(attrs, "for")},
}


def extract_attributes(tag: str, attrs: Attrs) -> dict[str, AttrValue]:
    """Build the ``attr`` bag: ``id`` first, then tag-specific attributes.

    Links carry only ``id``; their href lives in ``data.link``.
    """
    bag: dict[str, AttrValue] = {"id": _get(attrs, "id")}
    extractor = _TAG_ATTRS.get(tag)
    if extractor is not None:
        bag.update(extractor(attrs))
    return bag


# ---------------------------------------------------------------------------
# type-specific fields
# ---------------------------------------------------------------------------


def select_options(element: Tag | None) -> list[dict[str, str]]:
    """Read ``<option>`` descendants as ``{"v": value, "t": text}`` pairs."""
    if element is None:
        return [dict(o) for o in DEFAULT_SELECT_OPTIONS]
    options = []
    for option in element.find_all("option"):
        text = option.get_text(strip=True)
        value = option.get("value")
        options.append({"v": text if value is None else str(value), "t": text})
    return options or [dict(o) for o in DEFAULT_SELECT_OPTIONS]


def _link_data(attrs: Attrs, element: Tag | None) -> dict[str, Any]:
    href = _get(attrs, "href")
    return {
        "button": "button" in _get(attrs, "class"),
        "block": "",
        "link": {
            "mode": "external" if href.startswith("http") else "internal",
            "url": href or "#",
        },
        "eventIds": [],
    }


def _form_form_data(attrs: Attrs, element: Tag | None) -> dict[str, Any]:
    return {
        "form": {
            "type": "form",
            "name": _get(attrs, "name") or _get(attrs, "id") or "Form",
        },
        "Source": {"tag": "Default form", "val": {}},
    }


def _form_button_data(attrs: Attrs, element: Tag | None) -> dict[str, Any]:
    return {
        "style": {"base": {"main": {"noPseudo": {"justifySelf": "start"}}}},
        "form": {"type": "button"},
        "eventIds": [],
    }


def _named_field(form_type: str, default_name: str, **extra: Any):
    def build(attrs: Attrs, element: Tag | None) -> dict[str, Any]:
        name = _get(attrs, "name") or _get(attrs, "id") or default_name
        return {"form": {"type": form_type, "name": name, **extra}}

    return build


def _form_select_data(attrs: Attrs, element: Tag | None) -> dict[str, Any]:
    return {
        "form": {
            "type": "select",
            "opts": select_options(element),
            "name": _get(attrs, "name") or _get(attrs, "id") or "Select",
        }
    }


def _choice_input(form_type: str, default_name: str):
    def build(attrs: Attrs, element: Tag | None) -> dict[str, Any]:
        return {
            "form": {"type": form_type, "name": _get(attrs, "name") or default_name},
            "inputType": "custom",
        }

    return build


def _form_only(form_type: str, **extra: Any):
    def build(attrs: Attrs, element: Tag | None) -> dict[str, Any]:
        return {"form": {"type": form_type, **extra}}

    return build


TYPE_DATA: dict[NodeType, Callable[[Attrs, Tag | None], dict[str, Any]]] = {
    NodeType.LINK: _link_data,
    NodeType.IMAGE: lambda attrs, element: {
        "img": {"id": ""},
        "srcsetDisabled": False,
        "sizes": [],
    },
    NodeType.GRID: lambda attrs, element: {"grid": "two-by-two"},
    NodeType.FORM_WRAPPER: _form_only("wrapper"),
    NodeType.FORM_FORM: _form_form_data,
    NodeType.FORM_BUTTON: _form_button_data,
    NodeType.FORM_TEXT_INPUT: _named_field("input", "Field", passwordPage=False),
    NodeType.FORM_TEXTAREA: _named_field("textarea", "Message"),
    NodeType.FORM_SELECT: _form_select_data,
    NodeType.FORM_BLOCK_LABEL: _form_only("label", passwordPage=False),
    NodeType.FORM_INLINE_LABEL: _form_only("radio-label"),
    NodeType.FORM_RADIO_INPUT: _choice_input("radio-input", "Radio"),
    NodeType.FORM_CHECKBOX_INPUT: _choice_input("checkbox-input", "Checkbox"),
    NodeType.FORM_RADIO_WRAPPER: _form_only("radio"),
    NodeType.FORM_CHECKBOX_WRAPPER: _form_only("checkbox"),
    NodeType.FORM_SUCCESS_MESSAGE: _form_only("msg-done"),
    NodeType.FORM_ERROR_MESSAGE: _form_only("msg-fail"),
}


def _custom_attributes(attrs: Attrs) -> tuple[tuple[str, str], ...]:
    pairs = []
    for name in attrs:
        if name in ("class", "id"):
            continue
        # The Designer rejects empty attribute values.
        pairs.append((name, _get(attrs, name) or " "))
    return tuple(pairs)


def build_payload(
    tag: str,
    node_type: NodeType,
    attrs: Attrs,
    element: Tag | None = None,
) -> ElementData | CustomElementData:
    """Return the ``data`` payload for an element of *node_type*.

    *element* is only consulted for content-derived fields such as the
    options of a select.
    """
    if node_type is NodeType.DOM:
        logger.debug("Custom element for <%s>", tag)
        return CustomElementData(tag=tag, attributes=_custom_attributes(attrs))
    builder = TYPE_DATA.get(node_type)
    return ElementData(
        type=node_type,
        tag=tag,
        attr=extract_attributes(tag, attrs),
        extra=builder(attrs, element) if builder else {},
    )
