"""Tests for the HTML tree compiler."""

import pytest

from flowpaste.errors import ContractError
from flowpaste.ids import sequential_ids
from flowpaste.model.node import ElementNode, NodeType, TextNode
from flowpaste.tree import compile_tree, compile_tree_with_styles


def _compile(html: str, class_to_id: dict[str, str] | None = None):
    return compile_tree(html, class_to_id or {}, new_id=sequential_ids("n"))


def _elements(tree) -> list[ElementNode]:
    return [n for n in tree.nodes if isinstance(n, ElementNode)]


# ---------------------------------------------------------------------------
# Basic shape
# ---------------------------------------------------------------------------


class TestBasicTree:
    def test_div_with_paragraph(self):
        tree = _compile('<div class="c"><p>Hello</p></div>', {"c": "S"})
        div, p, text = tree.nodes
        assert len(_elements(tree)) == 2

        assert isinstance(div, ElementNode)
        assert div.type is NodeType.BLOCK
        assert div.classes == ("S",)
        assert div.children == (p.id,)

        assert isinstance(p, ElementNode)
        assert p.type is NodeType.PARAGRAPH
        assert p.children == (text.id,)

        assert isinstance(text, TextNode)
        assert text.value == "Hello"
        assert tree.root_ids == (div.id,)

    def test_sequential_ids_follow_document_order(self):
        tree = _compile("<div><p>Hello</p></div>")
        assert [n.id for n in tree.nodes] == ["n-1", "n-2", "n-3"]

    def test_whitespace_only_text_is_dropped(self):
        tree = _compile("<div>   </div>")
        assert len(tree.nodes) == 1
        assert tree.nodes[0].children == ()

    def test_text_is_trimmed(self):
        tree = _compile("<p>\n   Hello world  \n</p>")
        assert tree.nodes[1].value == "Hello world"

    def test_mixed_text_and_elements_keep_order(self):
        tree = _compile("<p>Hello <strong>big</strong> world</p>")
        p = tree.nodes[0]
        kinds = [tree.by_id()[cid] for cid in p.children]
        assert [getattr(k, "value", None) or k.tag for k in kinds] == ["Hello", "strong", "world"]

    def test_comments_are_not_text(self):
        tree = _compile("<div><!-- note --></div>")
        assert tree.nodes[0].children == ()

    def test_counts(self):
        tree = _compile("<ul><li>a</li><li>b</li></ul>")
        assert tree.element_count == 3
        assert tree.text_count == 2


class TestParentFirstOrdering:
    HTML = """
    <section>
      <div>
        <ul>
          <li><a href="/x">One</a></li>
          <li><span>Two</span></li>
        </ul>
      </div>
      <p>Tail</p>
    </section>
    <footer><p>Bye</p></footer>
    """

    def test_parents_precede_descendants(self):
        tree = _compile(self.HTML)
        position = {n.id: i for i, n in enumerate(tree.nodes)}
        for node in tree.nodes:
            for child_id in node.children:
                assert position[child_id] > position[node.id]

    def test_each_node_has_at_most_one_parent(self):
        tree = _compile(self.HTML)
        child_ids = [cid for n in tree.nodes for cid in n.children]
        assert len(child_ids) == len(set(child_ids))
        assert not set(child_ids) & set(tree.root_ids)

    def test_depth_first_preorder(self):
        tree = _compile(self.HTML)
        by_id = tree.by_id()
        preorder: list[str] = []

        def walk(node_id: str) -> None:
            preorder.append(node_id)
            for child_id in by_id[node_id].children:
                walk(child_id)

        for root_id in tree.root_ids:
            walk(root_id)
        assert preorder == [n.id for n in tree.nodes]


# ---------------------------------------------------------------------------
# Classes
# ---------------------------------------------------------------------------


class TestClassResolution:
    def test_classes_keep_order_and_drop_unknown(self):
        tree = _compile('<div class="a  ghost c">x</div>', {"a": "1", "c": "3"})
        assert tree.nodes[0].classes == ("1", "3")

    def test_unknown_classes_do_not_block_node(self):
        tree = _compile('<div class="ghost">x</div>')
        assert tree.nodes[0].classes == ()
        assert len(tree.nodes) == 2


# ---------------------------------------------------------------------------
# Document structure
# ---------------------------------------------------------------------------


class TestDocumentStructure:
    def test_body_children_become_roots(self):
        html = """<!DOCTYPE html>
        <html><head><title>T</title><style>.a{}</style></head>
        <body><header>H</header><script>var x = 1;</script><main>M</main></body></html>"""
        tree = _compile(html)
        roots = [tree.by_id()[r] for r in tree.root_ids]
        assert [r.tag for r in roots] == ["header", "main"]

    def test_fragment_without_body(self):
        tree = _compile("<style>.a{}</style><div>a</div><p>b</p>")
        roots = [tree.by_id()[r] for r in tree.root_ids]
        assert [r.tag for r in roots] == ["div", "p"]

    def test_head_is_searched_but_not_emitted(self):
        tree = _compile("<html><head><meta charset='utf-8'></head><div>x</div></html>")
        assert [tree.by_id()[r].tag for r in tree.root_ids] == ["div"]

    def test_empty_input(self):
        tree = _compile("")
        assert tree.nodes == ()
        assert tree.root_ids == ()


# ---------------------------------------------------------------------------
# Form context
# ---------------------------------------------------------------------------


class TestFormContext:
    def test_input_outside_form_is_block(self):
        tree = _compile('<input type="text">')
        assert tree.nodes[0].type is NodeType.BLOCK

    def test_input_inside_form_is_text_input(self):
        tree = _compile('<form><input type="text"></form>')
        form, field = tree.nodes
        assert form.type is NodeType.FORM_FORM
        assert field.type is NodeType.FORM_TEXT_INPUT

    def test_form_context_reaches_deep_descendants(self):
        tree = _compile('<form><div><div><label>Name</label><textarea></textarea></div></div></form>')
        types = [n.type for n in _elements(tree)]
        assert NodeType.FORM_BLOCK_LABEL in types
        assert NodeType.FORM_TEXTAREA in types

    def test_form_context_does_not_leak_to_siblings(self):
        tree = _compile("<form></form><select></select>")
        assert tree.nodes[1].type is NodeType.BLOCK


class TestCustomElements:
    def test_unknown_tag_preserves_tag_and_attributes(self):
        tree = _compile('<video class="v" id="clip" src="a.mp4" controls></video>')
        node = tree.nodes[0]
        assert node.type is NodeType.DOM
        assert node.tag == "video"
        wire = node.to_dict()
        assert wire["tag"] == "div"
        assert wire["data"] == {
            "editable": True,
            "tag": "video",
            "attributes": [
                {"name": "src", "value": "a.mp4"},
                {"name": "controls", "value": " "},
            ],
        }


class TestAutoStyles:
    def test_every_class_gets_an_id(self):
        tree = compile_tree_with_styles(
            '<div class="a b"><p class="b c">x</p></div>', new_id=sequential_ids("s")
        )
        assert list(tree.class_to_id) == ["a", "b", "c"]
        div, p = tree.nodes[0], tree.nodes[1]
        assert div.classes == (tree.class_to_id["a"], tree.class_to_id["b"])
        assert p.classes == (tree.class_to_id["b"], tree.class_to_id["c"])

    def test_style_ids_and_node_ids_are_distinct(self):
        tree = compile_tree_with_styles('<div class="a">x</div>', new_id=sequential_ids("s"))
        assert tree.class_to_id == {"a": "s-1"}
        assert [n.id for n in tree.nodes] == ["s-2", "s-3"]


class TestContract:
    def test_none_html_raises(self):
        with pytest.raises(ContractError):
            compile_tree(None, {})  # type: ignore[arg-type]

    def test_none_map_raises(self):
        with pytest.raises(ContractError):
            compile_tree("<div></div>", None)  # type: ignore[arg-type]

    def test_malformed_html_does_not_raise(self):
        tree = _compile("<div><p>unclosed <span>text</div></p>")
        assert tree.nodes[0].tag == "div"


# ---------------------------------------------------------------------------
# Deep nesting
# ---------------------------------------------------------------------------


class TestDeepNesting:
    DEPTH = 1200

    def test_deeply_nested_elements(self):
        tree = _compile("<div>" * self.DEPTH + "x" + "</div>" * self.DEPTH)
        assert len(tree.nodes) == self.DEPTH + 1
        assert [n.id for n in tree.nodes] == [f"n-{i}" for i in range(1, self.DEPTH + 2)]
        for parent, child in zip(tree.nodes, tree.nodes[1:]):
            assert parent.children == (child.id,)
        assert tree.nodes[-1].value == "x"
        assert tree.root_ids == ("n-1",)

    def test_sibling_after_deep_branch(self):
        depth = 1100
        html = "<section>" + "<div>" * depth + "</div>" * depth + "<p>y</p></section>"
        tree = _compile(html)
        section = tree.nodes[0]
        p_id = f"n-{depth + 2}"
        assert section.children == ("n-2", p_id)
        assert tree.by_id()[p_id].tag == "p"
        assert tree.nodes[-1].value == "y"

    def test_form_context_reaches_deep_fields(self):
        depth = 1100
        html = "<form>" + "<div>" * depth + "<select></select>" + "</div>" * depth + "</form>"
        tree = _compile(html)
        assert tree.nodes[-1].type is NodeType.FORM_SELECT
