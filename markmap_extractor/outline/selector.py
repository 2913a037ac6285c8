"""Choose which parts of a page get linearized."""

import logging
from dataclasses import dataclass, field
from typing import Callable, Iterator

from markmap_extractor.dom.models import DocumentNode
from markmap_extractor.outline.visibility import is_visible
from markmap_extractor.types import ExtractOptions

logger = logging.getLogger(__name__)

MAIN_KEYWORD = "main"
FOOTER_TAG = "footer"


@dataclass
class RegionSelection:
    """Region roots to linearize, in output order."""
    main: list[DocumentNode] = field(default_factory=list)
    footers: list[DocumentNode] = field(default_factory=list)

    @property
    def roots(self) -> list[DocumentNode]:
        return self.main + self.footers


def iter_descendants(node: DocumentNode) -> Iterator[DocumentNode]:
    """Yield every element below ``node`` in document order."""
    for child in node.children():
        yield child
        yield from iter_descendants(child)


class RegionSelector:
    """Finds the main content containers and footers of a page."""

    def __init__(self, options: ExtractOptions) -> None:
        self.options = options
        self._main_tiers: list[tuple[str, Callable[[DocumentNode], bool]]] = [
            ("<main> tag", lambda n: n.tag_name.lower() == MAIN_KEYWORD),
            ("id='main'", lambda n: n.element_id == MAIN_KEYWORD),
            ("class='main'", lambda n: MAIN_KEYWORD in n.class_names),
        ]

    def select(self, body: DocumentNode) -> RegionSelection:
        """
        Select region roots below ``body``.

        Args:
            body: Document body

        Returns:
            RegionSelection: Main tier matches followed by footers outside them
        """
        descendants = list(iter_descendants(body))
        selection = RegionSelection()

        for label, matches in self._main_tiers:
            found = [node for node in descendants if matches(node)]
            if not found:
                continue

            logger.info(f"Found {len(found)} {label} element(s)")
            visible = [node for node in found if is_visible(node, self.options)]
            if visible:
                selection.main = visible
                break

        footers = [node for node in descendants if node.tag_name.lower() == FOOTER_TAG]
        if footers:
            logger.info(f"Found {len(footers)} <footer> element(s)")
        selection.footers = [
            footer for footer in footers
            if is_visible(footer, self.options)
            and not any(main.contains(footer) for main in selection.main)
        ]

        return selection
