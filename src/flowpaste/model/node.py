"""Node model: element and text records of a compiled tree.

The wire format validates the shape of each element's ``data`` payload
structurally, so which optional fields a type carries is fixed by
``FIELD_PRESENCE`` rather than assembled ad hoc.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum, StrEnum
from typing import Any, Union


class NodeType(StrEnum):
    """Closed vocabulary of element node types."""

    BLOCK = "Block"
    SECTION = "Section"
    CONTAINER = "Container"
    GRID = "Grid"
    HEADING = "Heading"
    PARAGRAPH = "Paragraph"
    LINK = "Link"
    IMAGE = "Image"
    LIST = "List"
    LIST_ITEM = "ListItem"
    HTML_EMBED = "HtmlEmbed"
    FORM_WRAPPER = "FormWrapper"
    FORM_FORM = "FormForm"
    FORM_BUTTON = "FormButton"
    FORM_TEXT_INPUT = "FormTextInput"
    FORM_TEXTAREA = "FormTextarea"
    FORM_SELECT = "FormSelect"
    FORM_BLOCK_LABEL = "FormBlockLabel"
    FORM_INLINE_LABEL = "FormInlineLabel"
    FORM_RADIO_WRAPPER = "FormRadioWrapper"
    FORM_RADIO_INPUT = "FormRadioInput"
    FORM_CHECKBOX_WRAPPER = "FormCheckboxWrapper"
    FORM_CHECKBOX_INPUT = "FormCheckboxInput"
    FORM_SUCCESS_MESSAGE = "FormSuccessMessage"
    FORM_ERROR_MESSAGE = "FormErrorMessage"
    DOM = "DOM"  # custom element: original tag preserved in data

    @property
    def is_form(self) -> bool:
        return self.value.startswith("Form")


class DataShape(Enum):
    """Which of the optional ``text``/``tag`` fields a payload carries."""

    TEXT_AND_TAG = "text_and_tag"
    TAG_ONLY = "tag_only"
    NEITHER = "neither"


FIELD_PRESENCE: dict[NodeType, DataShape] = {
    NodeType.BLOCK: DataShape.TEXT_AND_TAG,
    NodeType.SECTION: DataShape.TEXT_AND_TAG,
    NodeType.CONTAINER: DataShape.TEXT_AND_TAG,
    NodeType.HTML_EMBED: DataShape.TEXT_AND_TAG,
    NodeType.HEADING: DataShape.TAG_ONLY,
    NodeType.GRID: DataShape.NEITHER,
    NodeType.PARAGRAPH: DataShape.NEITHER,
    NodeType.LINK: DataShape.NEITHER,
    NodeType.IMAGE: DataShape.NEITHER,
    NodeType.LIST: DataShape.NEITHER,
    NodeType.LIST_ITEM: DataShape.NEITHER,
    NodeType.FORM_WRAPPER: DataShape.NEITHER,
    NodeType.FORM_FORM: DataShape.NEITHER,
    NodeType.FORM_BUTTON: DataShape.NEITHER,
    NodeType.FORM_TEXT_INPUT: DataShape.NEITHER,
    NodeType.FORM_TEXTAREA: DataShape.NEITHER,
    NodeType.FORM_SELECT: DataShape.NEITHER,
    NodeType.FORM_BLOCK_LABEL: DataShape.NEITHER,
    NodeType.FORM_INLINE_LABEL: DataShape.NEITHER,
    NodeType.FORM_RADIO_WRAPPER: DataShape.NEITHER,
    NodeType.FORM_RADIO_INPUT: DataShape.NEITHER,
    NodeType.FORM_CHECKBOX_WRAPPER: DataShape.NEITHER,
    NodeType.FORM_CHECKBOX_INPUT: DataShape.NEITHER,
    NodeType.FORM_SUCCESS_MESSAGE: DataShape.NEITHER,
    NodeType.FORM_ERROR_MESSAGE: DataShape.NEITHER,
}

AttrValue = Union[str, bool, int]


@dataclass(frozen=True)
class ElementData:
    """Payload of a standard (non-custom) element.

    Attributes:
        type: Node type the payload is shaped for.
        tag: Original tag name, emitted only where FIELD_PRESENCE allows.
        attr: Attribute bag; always contains ``id``.
        extra: Type-specific fields, emitted between the tag fields and the
            common trailer in insertion order.
    """

    type: NodeType
    tag: str
    attr: dict[str, AttrValue] = field(default_factory=dict)
    extra: dict[str, Any] = field(default_factory=dict)

    def __post_init__(self) -> None:
        if self.type not in FIELD_PRESENCE:
            raise ValueError(f"No payload shape defined for node type {self.type!r}")

    @property
    def shape(self) -> DataShape:
        return FIELD_PRESENCE[self.type]

    def to_dict(self) -> dict[str, Any]:
        data: dict[str, Any] = {"attr": dict(self.attr), "xattr": []}
        if self.shape is DataShape.TEXT_AND_TAG:
            data["text"] = False
            data["tag"] = self.tag
        elif self.shape is DataShape.TAG_ONLY:
            data["tag"] = self.tag
        data.update(self.extra)
        data["devlink"] = {"runtimeProps": {}, "slot": ""}
        data["displayName"] = ""
        data["search"] = {"exclude": self.type is NodeType.FORM_WRAPPER}
        data["visibility"] = {"conditions": []}
        return data


@dataclass(frozen=True)
class CustomElementData:
    """Payload of a ``DOM`` node: the original tag and attributes verbatim."""

    tag: str
    attributes: tuple[tuple[str, str], ...] = ()

    def to_dict(self) -> dict[str, Any]:
        return {
            "editable": True,
            "tag": self.tag,
            "attributes": [{"name": n, "value": v} for n, v in self.attributes],
        }


@dataclass(frozen=True)
class ElementNode:
    """A typed element with attributes, style references and children."""

    id: str
    type: NodeType
    tag: str
    data: ElementData | CustomElementData
    classes: tuple[str, ...] = ()
    children: tuple[str, ...] = ()

    def __post_init__(self) -> None:
        if not self.id:
            raise ValueError("Node id must be a non-empty string")

    @property
    def is_text(self) -> bool:
        return False

    def to_dict(self) -> dict[str, Any]:
        return {
            "_id": self.id,
            "classes": list(self.classes),
            "type": str(self.type),
            # Custom elements sit in a div at the node level.
            "tag": "div" if self.type is NodeType.DOM else self.tag,
            "data": self.data.to_dict(),
            "children": list(self.children),
        }


@dataclass(frozen=True)
class TextNode:
    """Literal, already-trimmed text content."""

    id: str
    value: str

    def __post_init__(self) -> None:
        if not self.id:
            raise ValueError("Node id must be a non-empty string")
        if not self.value.strip():
            raise ValueError("Text node value must not be blank")

    @property
    def is_text(self) -> bool:
        return True

    @property
    def children(self) -> tuple[str, ...]:
        return ()

    def to_dict(self) -> dict[str, Any]:
        return {"_id": self.id, "text": True, "v": self.value, "children": []}


Node = Union[ElementNode, TextNode]
