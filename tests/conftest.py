"""
Shared fixtures for the markmap extractor tests.

Live browsers are never started: Selenium drivers are MagicMocks and pages
are either static HTML (BeautifulSoup) or hand-built DOM snapshots.
"""

from typing import Callable, Optional
from unittest.mock import MagicMock

import pytest

from markmap_extractor.dom.models import NodeSnapshot
from markmap_extractor.dom.soup import SoupNode, parse_html
from markmap_extractor.types import ExtractOptions


@pytest.fixture
def options() -> ExtractOptions:
    """Default extraction settings."""
    return ExtractOptions()


@pytest.fixture
def body() -> Callable[[str], Optional[SoupNode]]:
    """Parse markup and return its <body> node."""
    def _parse(markup: str) -> Optional[SoupNode]:
        return parse_html(markup)
    return _parse


@pytest.fixture
def make_element() -> Callable[..., NodeSnapshot]:
    """Factory for DOM snapshot dictionaries as the browser script returns them."""
    def _make(
        tag: str,
        *children: NodeSnapshot,
        texts: tuple = (),
        id: str = "",
        cls: str = "",
        display: str = "block",
        visibility: str = "visible",
        opacity: str = "1",
    ) -> NodeSnapshot:
        return {
            "tagName": tag,
            "id": id,
            "className": cls,
            "texts": list(texts),
            "visibility": {
                "display": display,
                "visibility": visibility,
                "opacity": opacity,
            },
            "children": list(children),
        }
    return _make


@pytest.fixture
def mock_driver() -> MagicMock:
    """A WebDriver stand-in."""
    return MagicMock(name="WebDriver")


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    """Keep MARKMAP_* settings from the developer's shell out of the tests."""
    for name in (
        "MARKMAP_INCLUDE_HIDDEN",
        "MARKMAP_MIN_TEXT_LENGTH",
        "MARKMAP_MAX_DEPTH",
        "MARKMAP_HEADLESS",
        "MARKMAP_PAGE_LOAD_DELAY",
        "MARKMAP_PAGE_LOAD_TIMEOUT",
    ):
        monkeypatch.delenv(name, raising=False)
