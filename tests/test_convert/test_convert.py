"""End-to-end tests for the conversion pipeline."""

import pytest

from flowpaste import ConverterConfig, convert
from flowpaste.errors import ContractError
from flowpaste.ids import sequential_ids
from flowpaste.model.style import Breakpoint

HTML = (
    '<header class="top"><h1>Hi</h1></header>'
    '<section class="hero"><p>Text</p></section>'
    "<script>init();</script>"
)

CSS = (
    ".top { color: red; }\n"
    ".hero { padding: 10px; }\n"
    ".hero:hover { color: blue; }\n"
    "@media (max-width: 767px) { .hero { padding: 5px; } }\n"
)


def _convert(html: str = HTML, css: str = CSS, js: str = "", **config):
    return convert(html, css, js, config=ConverterConfig(**config), new_id=sequential_ids("n"))


# ---------------------------------------------------------------------------
# Pipeline
# ---------------------------------------------------------------------------


class TestPipeline:
    def test_styles_are_compiled_first(self):
        result = _convert()
        assert result.stylesheet.class_to_id == {"top": "n-1", "hero": "n-2"}
        assert [n.id for n in result.tree.nodes] == ["n-3", "n-4", "n-5", "n-6", "n-7", "n-8"]

    def test_nodes_reference_styles(self):
        result = _convert()
        by_id = result.tree.by_id()
        assert by_id["n-3"].classes == ("n-1",)
        assert by_id["n-6"].classes == ("n-2",)

    def test_responsive_variants(self):
        hero = _convert().stylesheet.style_for("hero")
        assert hero.style_less == "padding: 10px"
        assert hero.variants == {Breakpoint.SMALL: "padding: 5px"}

    def test_base_only(self):
        hero = _convert(responsive=False).stylesheet.style_for("hero")
        assert hero.variants == {}

    def test_classes_missing_from_css_are_dropped(self):
        result = _convert(html='<div class="unknown">x</div>', css="")
        assert result.tree.nodes[0].classes == ()
        assert result.stylesheet.styles == []

    def test_script_is_not_a_node(self):
        result = _convert()
        assert all(getattr(n, "tag", None) != "script" for n in result.tree.nodes)


# ---------------------------------------------------------------------------
# Custom code
# ---------------------------------------------------------------------------


class TestCustomCode:
    def test_js_from_html_and_argument(self):
        result = _convert(js="extra();")
        assert result.custom_js == "init();\n\nextra();"

    def test_custom_code_wraps_advanced_css_and_js(self):
        code = _convert().custom_code
        assert code.startswith("<style>\n.hero:hover {\n  color: blue;\n}")
        assert "@media (max-width: 767px)" in code
        assert code.endswith("<script>\ninit();\n</script>")
        assert _convert().needs_custom_code

    def test_custom_code_can_be_disabled(self):
        result = _convert(include_custom_code=False)
        assert result.custom_code == ""
        assert not result.needs_custom_code
        assert result.custom_js == "init();"

    def test_plain_page_needs_no_custom_code(self):
        result = _convert(html="<div>x</div>", css=".a { color: red; }")
        assert not result.needs_custom_code


# ---------------------------------------------------------------------------
# Envelopes
# ---------------------------------------------------------------------------


class TestEnvelopes:
    def test_single_envelope(self):
        data = _convert().envelope().to_dict()
        assert data["type"] == "@webflow/XscpData"
        assert len(data["payload"]["nodes"]) == 6
        assert len(data["payload"]["styles"]) == 2

    def test_chunk_envelopes_share_all_styles(self):
        result = _convert(max_nodes_per_chunk=3)
        assert [c.label for c in result.chunks] == ["Header", "Section"]
        envelopes = result.chunk_envelopes()
        assert [len(e.nodes) for e in envelopes] == [3, 3]
        assert all(len(e.styles) == 2 for e in envelopes)

    def test_default_chunk_size(self):
        assert [c.label for c in _convert().chunks] == ["Complete Page"]

    def test_default_ids_are_uuids(self):
        result = convert("<div>x</div>")
        assert all(len(n.id) == 36 for n in result.tree.nodes)


class TestContract:
    @pytest.mark.parametrize("argument", ["html_text", "css_text", "js_text"])
    def test_none_inputs(self, argument):
        kwargs = {"html_text": "<div></div>", "css_text": "", "js_text": ""}
        kwargs[argument] = None
        with pytest.raises(ContractError) as excinfo:
            convert(**kwargs)
        assert excinfo.value.argument == argument

    def test_bad_chunk_size(self):
        with pytest.raises(ContractError):
            _convert(max_nodes_per_chunk=0)
