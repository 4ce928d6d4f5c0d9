"""Tree compiler: HTML text -> flat, parent-first list of typed nodes."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Iterator, Mapping

from bs4 import BeautifulSoup, NavigableString, Tag
from bs4.element import PageElement, PreformattedString

from flowpaste.errors import ContractError, require_text
from flowpaste.ids import IdFactory, uuid_ids
from flowpaste.model.node import ElementNode, Node, TextNode
from flowpaste.tree.classify import classify
from flowpaste.tree.payload import build_payload

__all__ = [
    "CompiledTree",
    "compile_tree",
    "compile_tree_with_styles",
    "parse_html",
    "content_elements",
    "discover_class_names",
]

logger = logging.getLogger(__name__)

# Document-shell tags that cannot be pasted; their children are still searched.
DOCUMENT_STRUCTURE_TAGS = frozenset(
    {"html", "head", "body", "title", "meta", "link", "script", "style", "base"}
)


@dataclass(frozen=True)
class CompiledTree:
    """Flat node list in parent-before-child order plus the top-level ids.

    ``class_to_id`` is filled only by :func:`compile_tree_with_styles`.
    """

    nodes: tuple[Node, ...] = ()
    root_ids: tuple[str, ...] = ()
    class_to_id: dict[str, str] = field(default_factory=dict)

    def by_id(self) -> dict[str, Node]:
        return {n.id: n for n in self.nodes}

    @property
    def element_count(self) -> int:
        return sum(1 for n in self.nodes if not n.is_text)

    @property
    def text_count(self) -> int:
        return sum(1 for n in self.nodes if n.is_text)


def parse_html(html_text: str, parser: str = "html.parser") -> BeautifulSoup:
    """Parse HTML keeping attribute values exactly as written."""
    return BeautifulSoup(html_text, parser, multi_valued_attributes=None)


def split_classes(value: object) -> list[str]:
    if not value:
        return []
    if isinstance(value, (list, tuple)):
        value = " ".join(value)
    return str(value).split()


def content_elements(soup: BeautifulSoup) -> list[Tag]:
    """Return the elements that become root nodes.

    A ``<body>`` contributes its direct element children, minus scripts and
    styles. Outside a body, document-shell tags are skipped but searched.
    """
    found: list[Tag] = []

    def traverse(node: Tag) -> None:
        tag = node.name.lower()
        if tag == "body":
            found.extend(
                child
                for child in node.children
                if isinstance(child, Tag) and child.name.lower() not in ("script", "style")
            )
            return
        if tag in DOCUMENT_STRUCTURE_TAGS:
            for child in node.children:
                if isinstance(child, Tag):
                    traverse(child)
            return
        found.append(node)

    for child in soup.children:
        if isinstance(child, Tag):
            traverse(child)
    return found


def _is_text(node: object) -> bool:
    # Comments, doctypes and CDATA are NavigableStrings too.
    return isinstance(node, NavigableString) and not isinstance(node, PreformattedString)


@dataclass
class _Frame:
    """An element whose children are still being walked."""

    element: Tag
    inside_form: bool
    node_id: str
    slot: int
    pending: Iterator[PageElement]
    child_ids: list[str] = field(default_factory=list)

    @property
    def children_inside_form(self) -> bool:
        return self.inside_form or self.element.name.lower() == "form"


@dataclass
class _Compilation:
    class_to_id: Mapping[str, str]
    new_id: IdFactory

    def _node(self, frame: _Frame) -> ElementNode:
        tag = frame.element.name.lower()
        attrs = frame.element.attrs
        node_type = classify(tag, attrs, frame.inside_form)
        classes = tuple(
            self.class_to_id[name]
            for name in split_classes(attrs.get("class"))
            if name in self.class_to_id
        )
        return ElementNode(
            id=frame.node_id,
            type=node_type,
            tag=tag,
            data=build_payload(tag, node_type, attrs, frame.element),
            classes=classes,
            children=tuple(frame.child_ids),
        )

    def element(self, element: Tag, inside_form: bool) -> list[Node]:
        """Compile *element* and its subtree; the element's own node is first.

        The walk keeps its own stack, so nesting depth is not bounded by the
        interpreter's recursion limit. Each element reserves its slot when
        entered and is filled in once its children are known.
        """
        slots: list[Node | None] = []
        stack: list[_Frame] = []

        def enter(tag: Tag, in_form: bool) -> str:
            frame = _Frame(
                element=tag,
                inside_form=in_form,
                node_id=self.new_id(),
                slot=len(slots),
                pending=iter(tag.children),
            )
            slots.append(None)
            stack.append(frame)
            return frame.node_id

        enter(element, inside_form)
        while stack:
            frame = stack[-1]
            child = next(frame.pending, None)
            if child is None:
                stack.pop()
                slots[frame.slot] = self._node(frame)
            elif isinstance(child, Tag):
                frame.child_ids.append(enter(child, frame.children_inside_form))
            elif _is_text(child):
                text = str(child).strip()
                if text:
                    text_node = TextNode(id=self.new_id(), value=text)
                    frame.child_ids.append(text_node.id)
                    slots.append(text_node)
        return [n for n in slots if n is not None]


def _compile_soup(
    soup: BeautifulSoup, class_to_id: Mapping[str, str], new_id: IdFactory
) -> CompiledTree:
    compilation = _Compilation(class_to_id=class_to_id, new_id=new_id)
    nodes: list[Node] = []
    root_ids: list[str] = []
    for element in content_elements(soup):
        subtree = compilation.element(element, inside_form=False)
        root_ids.append(subtree[0].id)
        nodes.extend(subtree)
    logger.debug("Compiled %d nodes under %d roots", len(nodes), len(root_ids))
    return CompiledTree(nodes=tuple(nodes), root_ids=tuple(root_ids))


def compile_tree(
    html_text: str,
    class_to_id: Mapping[str, str],
    new_id: IdFactory | None = None,
    parser: str = "html.parser",
) -> CompiledTree:
    """Compile HTML into a flat node list.

    Every element node appears before all of its descendants. Classes absent
    from *class_to_id* are dropped from the node's style references.
    """
    html_text = require_text(html_text, "html_text")
    if class_to_id is None:
        raise ContractError("class_to_id must not be None", argument="class_to_id")
    return _compile_soup(parse_html(html_text, parser), class_to_id, new_id or uuid_ids())


def discover_class_names(soup: BeautifulSoup) -> list[str]:
    """Every class used in the document, in first-seen order."""
    names: dict[str, None] = {}
    for element in soup.find_all(True):
        for name in split_classes(element.get("class")):
            names.setdefault(name, None)
    return list(names)


def compile_tree_with_styles(
    html_text: str,
    new_id: IdFactory | None = None,
    parser: str = "html.parser",
) -> CompiledTree:
    """Compile HTML without a stylesheet, giving every class a fresh style id.

    The generated map is returned as ``CompiledTree.class_to_id``.
    """
    html_text = require_text(html_text, "html_text")
    new_id = new_id or uuid_ids()
    soup = parse_html(html_text, parser)
    class_to_id = {name: new_id() for name in discover_class_names(soup)}
    tree = _compile_soup(soup, class_to_id, new_id)
    return CompiledTree(nodes=tree.nodes, root_ids=tree.root_ids, class_to_id=class_to_id)
