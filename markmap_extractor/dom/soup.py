"""
BeautifulSoup view of a static HTML document.

Visibility is resolved from inline ``style`` declarations and the ``hidden``
attribute only; stylesheets are not evaluated. ``visibility`` is inherited
from the nearest ancestor that declares it, as in CSS.
"""

from pathlib import Path
from typing import Optional, Union

from bs4 import BeautifulSoup
from bs4.element import NavigableString, PreformattedString, Tag

from markmap_extractor.dom.models import Visibility


def parse_inline_style(style: str) -> dict[str, str]:
    """
    Parse an inline ``style`` attribute into lowercase declarations.

    Args:
        style: Attribute value, e.g. "display: none; color: red"

    Returns:
        dict mapping property names to values
    """
    declarations = {}
    for declaration in style.split(";"):
        name, sep, value = declaration.partition(":")
        if not sep:
            continue
        value = value.replace("!important", "").strip().lower()
        if name.strip() and value:
            declarations[name.strip().lower()] = value
    return declarations


def _declared_style(tag: Tag) -> dict[str, str]:
    style = tag.get("style")
    if isinstance(style, list):
        style = " ".join(style)
    return parse_inline_style(style or "")


class SoupNode:
    """Wraps a bs4 ``Tag`` as a document node."""

    def __init__(self, tag: Tag) -> None:
        self.tag = tag

    @property
    def tag_name(self) -> str:
        return self.tag.name.lower()

    @property
    def element_id(self) -> Optional[str]:
        return self.tag.get("id") or None

    @property
    def class_names(self) -> list[str]:
        classes = self.tag.get("class") or []
        if isinstance(classes, str):
            classes = classes.split()
        return list(classes)

    def direct_texts(self) -> list[str]:
        # Comments, CDATA and doctypes are PreformattedString subclasses
        return [
            str(child) for child in self.tag.children
            if isinstance(child, NavigableString) and not isinstance(child, PreformattedString)
        ]

    def children(self) -> list["SoupNode"]:
        return [SoupNode(child) for child in self.tag.children if isinstance(child, Tag)]

    def computed_visibility(self) -> Visibility:
        declared = _declared_style(self.tag)

        display = declared.get("display", "block")
        if self.tag.has_attr("hidden"):
            display = "none"

        visibility = declared.get("visibility")
        if visibility is None or visibility == "inherit":
            visibility = "visible"
            for ancestor in self.tag.parents:
                if not isinstance(ancestor, Tag) or isinstance(ancestor, BeautifulSoup):
                    break
                inherited = _declared_style(ancestor).get("visibility")
                if inherited and inherited != "inherit":
                    visibility = inherited
                    break

        return {
            "display": display,
            "visibility": visibility,
            "opacity": declared.get("opacity", "1"),
        }

    def contains(self, other: "SoupNode") -> bool:
        return any(parent is self.tag for parent in other.tag.parents)

    def __eq__(self, other: object) -> bool:
        return isinstance(other, SoupNode) and other.tag is self.tag

    def __hash__(self) -> int:
        return id(self.tag)

    def __repr__(self) -> str:
        return f"SoupNode(<{self.tag_name}>)"


def parse_html(markup: Union[str, bytes]) -> Optional[SoupNode]:
    """
    Parse HTML markup and return its body.

    html.parser does not create implied elements, so a document that leaves
    out the optional <body> tag is read from <html>, or from the document
    root when that is missing too.

    Args:
        markup: HTML document

    Returns:
        SoupNode for the body, or None if the markup is empty
    """
    soup = BeautifulSoup(markup, "html.parser")
    body = soup.body or soup.html
    if body is None:
        if not soup.contents:
            return None
        body = soup
    return SoupNode(body)


def load_html_file(path: Union[str, Path]) -> Optional[SoupNode]:
    """Read an HTML file from disk and return its body."""
    with open(path, "rb") as f:
        return parse_html(f.read())
