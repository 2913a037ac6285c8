"""Request/response boundary between a host trigger and the extractor."""

import logging
from typing import Any, Callable, Optional

from markmap_extractor.clipboard import Deliver
from markmap_extractor.dom.models import DocumentNode
from markmap_extractor.outline.extractor import TextExtractor
from markmap_extractor.types import ExtractionResponse, ExtractOptions
from markmap_extractor.utils.decorators import failure_response

logger = logging.getLogger(__name__)

EXTRACT_TEXT = "extractText"
COPY_TO_CLIPBOARD = "copyToClipboard"


class MessageHandler:
    """
    Answers ``extractText`` and ``copyToClipboard`` requests.

    Args:
        load_body: Returns the current document body, or None
        deliver: Clipboard step run on every successful extraction
        options: Extraction settings
    """

    def __init__(
        self,
        load_body: Callable[[], Optional[DocumentNode]],
        deliver: Optional[Deliver] = None,
        options: Optional[ExtractOptions] = None,
    ) -> None:
        self.load_body = load_body
        self.deliver = deliver
        self.options = options or ExtractOptions()

    def handle(self, request: dict[str, Any]) -> ExtractionResponse:
        """Dispatch a request on its ``action`` field."""
        action = request.get("action")
        if action == EXTRACT_TEXT:
            return self.extract_text()
        if action == COPY_TO_CLIPBOARD:
            return self.copy_to_clipboard(request.get("text", ""))

        logger.error(f"Unknown action: {action}")
        return {"success": False, "error": f"Unknown action: {action}"}

    @failure_response
    def extract_text(self) -> ExtractionResponse:
        extractor = TextExtractor(self.options)
        text = extractor.extract_indented_text(self.load_body())
        logger.debug(f"Extracted text:\n{text}")

        if self.deliver is not None:
            result = self.deliver(text)
            if not result.success:
                logger.error(f"Copy via {result.method} failed: {result.error}")

        return {"success": True, "data": text}

    @failure_response
    def copy_to_clipboard(self, text: str) -> ExtractionResponse:
        if self.deliver is None:
            return {"success": False, "error": "No clipboard available"}

        result = self.deliver(text)
        if result.success:
            return {"success": True}
        return {"success": False, "error": result.error or "Unknown error"}
