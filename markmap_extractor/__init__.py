import logging
import time
from typing import Any, Optional, Union

from selenium.webdriver.chrome.webdriver import WebDriver
from selenium.webdriver.support.ui import WebDriverWait

from markmap_extractor.clipboard import BrowserClipboard
from markmap_extractor.config import ExtractorConfig
from markmap_extractor.dom.builder import DOMTreeBuilder, SnapshotNode
from markmap_extractor.dom.soup import parse_html
from markmap_extractor.driver import new_webdriver
from markmap_extractor.messaging import EXTRACT_TEXT, MessageHandler
from markmap_extractor.outline.extractor import NO_CONTENT, TextExtractor
from markmap_extractor.types import (DeliveryResult, ExtractionResponse,
                                     ExtractOptions)

logger = logging.getLogger(__name__)

__all__ = [
    "DeliveryResult",
    "ExtractOptions",
    "ExtractorConfig",
    "MarkmapExtractor",
    "NO_CONTENT",
    "TextExtractor",
    "extract_from_html",
]


def extract_from_html(markup: Union[str, bytes], options: Optional[ExtractOptions] = None) -> str:
    """
    Extract indented text from static HTML markup.

    Args:
        markup: HTML document
        options: Extraction settings (defaults if omitted)

    Returns:
        str: Delivered output format, or the no-content sentinel
    """
    return TextExtractor(options).extract_indented_text(parse_html(markup))


class MarkmapExtractor:
    def __init__(
        self,
        config: Optional[ExtractorConfig] = None,
        driver: Optional[WebDriver] = None,
    ) -> None:
        """
        Initialize a browser session for text extraction.

        Args:
            config: Extraction and browser settings
            driver: Existing WebDriver to use instead of starting Chrome
        """
        self.config: ExtractorConfig = config or ExtractorConfig()
        self.options: ExtractOptions = self.config.to_options()
        self.driver: WebDriver = driver or new_webdriver(self.config.headless)
        self.clipboard = BrowserClipboard(self.driver)
        self.handler = MessageHandler(self.snapshot_body, self.clipboard, self.options)

    def __enter__(self):
        """Support for context manager protocol."""
        return self

    def __exit__(self, exc_type, exc_val, exc_tb) -> None:
        """Ensure browser is closed when exiting context."""
        self.close()

    def close(self) -> None:
        """Close the browser and clean up resources."""
        if self.driver:
            self.driver.quit()
            self.driver = None

    def navigate_to(self, url: str) -> bool:
        """
        Navigate to the specified URL.

        Args:
            url: The URL to navigate to

        Returns:
            bool: True if navigation was successful, False otherwise
        """
        try:
            self.driver.get(url)
            self._wait_for_page_load()
            return True
        except Exception as e:
            logger.error(f"Navigation failed: {str(e)}")
            return False

    def extract_text(self) -> str:
        """
        Extract indented text from the current page.

        Raises:
            WebDriverException: If the DOM snapshot fails
        """
        return TextExtractor(self.options).extract_indented_text(self.snapshot_body())

    def copy_to_clipboard(self, text: str) -> DeliveryResult:
        """Copy text to the clipboard from the current page."""
        return self.clipboard.write(text)

    def handle_message(self, request: dict[str, Any]) -> ExtractionResponse:
        """Answer a messaging request, e.g. ``{"action": "extractText"}``."""
        return self.handler.handle(request)

    def extract_and_copy(self) -> ExtractionResponse:
        """Extract the current page and copy the result to the clipboard."""
        return self.handle_message({"action": EXTRACT_TEXT})

    def snapshot_body(self) -> Optional[SnapshotNode]:
        """Snapshot the DOM of the current page."""
        builder = DOMTreeBuilder(self.driver)
        return builder.build_tree(self.options.skip_tags)

    def _wait_for_page_load(self):
        """Wait for the page to fully load."""
        if self.config.page_load_delay:
            logger.info(f"Waiting {self.config.page_load_delay}s for page to settle...")
            time.sleep(self.config.page_load_delay)
        WebDriverWait(self.driver, self.config.page_load_timeout).until(
            lambda d: d.execute_script("return document.readyState")
            == "complete"
        )
