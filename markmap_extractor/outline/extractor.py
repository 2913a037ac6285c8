import logging
from typing import Optional

from markmap_extractor.dom.models import DocumentNode
from markmap_extractor.outline.linearizer import TreeLinearizer
from markmap_extractor.outline.selector import RegionSelector
from markmap_extractor.types import ExtractOptions

logger = logging.getLogger(__name__)

NO_CONTENT = "No content found"
TITLE = "Text extracted from the page: "
SEPARATOR = "---"


class TextExtractor:
    """Turns a document body into markmap-ready indented text."""

    def __init__(self, options: Optional[ExtractOptions] = None) -> None:
        self.options = options or ExtractOptions()
        self.selector = RegionSelector(self.options)
        self.linearizer = TreeLinearizer(self.options)

    def extract_region_text(self, body: DocumentNode) -> str:
        """
        Linearize the selected regions of ``body``.

        Falls back to the whole body when the regions yield no text.

        Returns:
            str: Trimmed region text, empty if the page has no visible text
        """
        selection = self.selector.select(body)
        content = "".join(
            self.linearizer.linearize(root) + "\n" for root in selection.roots
        )

        if not content.strip():
            logger.info("No main content regions found, extracting the whole page")
            content = self.linearizer.linearize(body)

        return content.strip()

    def extract_indented_text(self, body: Optional[DocumentNode]) -> str:
        """
        Build the text delivered to the clipboard.

        Args:
            body: Document body, or None when the page has none

        Returns:
            str: Title line, indented content and separator, or the
            no-content sentinel
        """
        if body is None:
            return NO_CONTENT

        logger.info("Extracting page text...")
        content = self.extract_region_text(body)
        if not content:
            return NO_CONTENT

        return f"# {TITLE}\n\n{content}\n\n{SEPARATOR}"
