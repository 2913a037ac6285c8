"""Tests for the BeautifulSoup document view."""

import pytest

from markmap_extractor import extract_from_html
from markmap_extractor.dom.soup import load_html_file, parse_html, parse_inline_style


def first_child(node):
    return node.children()[0]


class TestParseInlineStyle:

    def test_declarations_are_lowercased(self):
        assert parse_inline_style("Display: NONE ; color:red; bad") == {
            "display": "none",
            "color": "red",
        }

    def test_important_is_stripped(self):
        assert parse_inline_style("visibility: hidden !important") == {"visibility": "hidden"}

    @pytest.mark.parametrize("style", ["", ";", "display:", ": none"])
    def test_empty_or_broken(self, style):
        assert parse_inline_style(style) == {}


class TestSoupNode:

    def test_identity_properties(self):
        body = parse_html('<body><DIV id="main" class="a b">x</DIV></body>')
        div = first_child(body)
        assert div.tag_name == "div"
        assert div.element_id == "main"
        assert div.class_names == ["a", "b"]

    def test_missing_id_and_class(self):
        div = first_child(parse_html("<body><div>x</div></body>"))
        assert div.element_id is None
        assert div.class_names == []

    def test_direct_texts_skip_comments_and_children(self):
        p = first_child(parse_html("<body><p>a<!-- note -->b<b>c</b>d</p></body>"))
        assert p.direct_texts() == ["a", "b", "d"]

    def test_children_are_elements_only(self):
        body = parse_html("<body>text<p>1</p><!-- c --><p>2</p></body>")
        assert [child.tag_name for child in body.children()] == ["p", "p"]

    def test_default_visibility(self):
        p = first_child(parse_html("<body><p>x</p></body>"))
        assert p.computed_visibility() == {
            "display": "block",
            "visibility": "visible",
            "opacity": "1",
        }

    def test_hidden_attribute(self):
        p = first_child(parse_html("<body><p hidden>x</p></body>"))
        assert p.computed_visibility()["display"] == "none"

    def test_visibility_is_inherited(self):
        div = first_child(parse_html('<body><div style="visibility:hidden"><p>x</p></div></body>'))
        assert first_child(div).computed_visibility()["visibility"] == "hidden"

    def test_child_can_override_inherited_visibility(self):
        div = first_child(parse_html(
            '<body><div style="visibility:hidden"><p style="visibility: visible">x</p></div></body>'
        ))
        assert first_child(div).computed_visibility()["visibility"] == "visible"

    def test_display_is_not_inherited(self):
        div = first_child(parse_html('<body><div style="display:none"><p>x</p></div></body>'))
        assert first_child(div).computed_visibility()["display"] == "block"

    def test_contains(self):
        body = parse_html("<body><main><div><footer>f</footer></div></main><p>x</p></body>")
        main, p = body.children()
        footer = first_child(first_child(main))
        assert main.contains(footer)
        assert body.contains(footer)
        assert not p.contains(footer)
        assert not footer.contains(main)
        assert not main.contains(main)

    def test_wrappers_compare_by_element(self):
        body = parse_html("<body><p>x</p></body>")
        assert body.children()[0] == body.children()[0]


class TestLoading:

    def test_empty_markup(self):
        assert parse_html("") is None

    def test_implied_body_is_read_from_html(self):
        body = parse_html("<html><main><p>Hello</p></main></html>")
        assert body.tag_name == "html"
        assert [child.tag_name for child in body.children()] == ["main"]

    def test_document_without_html_or_body(self):
        markup = "<!DOCTYPE html><title>t</title><main><p>Hello</p></main>"

        assert parse_html(markup) is not None
        assert extract_from_html(markup) == "# Text extracted from the page: \n\nHello\n\n---"

    def test_load_html_file(self, tmp_path):
        path = tmp_path / "page.html"
        path.write_text(
            '<html><head><meta charset="utf-8"></head><body><p>Café</p></body></html>',
            encoding="utf-8",
        )
        body = load_html_file(path)
        assert first_child(body).direct_texts() == ["Café"]
