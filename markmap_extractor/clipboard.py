"""Clipboard delivery for extracted text."""

import logging
from typing import Callable

from selenium.common.exceptions import WebDriverException
from selenium.webdriver.chrome.webdriver import WebDriver

from markmap_extractor.dom.js_scripts import (FALLBACK_COPY_SCRIPT,
                                              WRITE_CLIPBOARD_SCRIPT)
from markmap_extractor.types import DeliveryResult

logger = logging.getLogger(__name__)

Deliver = Callable[[str], DeliveryResult]


class BrowserClipboard:
    """Writes to the clipboard from inside the current page."""

    def __init__(self, driver: WebDriver, script_timeout: float = 5) -> None:
        self.driver = driver
        self.script_timeout = script_timeout

    def __call__(self, text: str) -> DeliveryResult:
        return self.write(text)

    def write(self, text: str) -> DeliveryResult:
        """
        Copy text using navigator.clipboard, falling back to execCommand.

        Args:
            text: Text to copy

        Returns:
            DeliveryResult of the last method attempted
        """
        result = self._write_async_clipboard(text)
        if result.success:
            logger.info("Copied text with navigator.clipboard")
            return result

        logger.warning(f"navigator.clipboard copy failed: {result.error}")
        fallback = self._write_exec_command(text)
        if fallback.success:
            logger.info("Copied text with document.execCommand")
        else:
            logger.error(f"Fallback copy failed: {fallback.error}")
        return fallback

    def _write_async_clipboard(self, text: str) -> DeliveryResult:
        try:
            self.driver.set_script_timeout(self.script_timeout)
            response = self.driver.execute_async_script(WRITE_CLIPBOARD_SCRIPT, text)
        except WebDriverException as e:
            return DeliveryResult(False, "navigator.clipboard", str(e))
        return self._to_result(response, "navigator.clipboard")

    def _write_exec_command(self, text: str) -> DeliveryResult:
        try:
            response = self.driver.execute_script(FALLBACK_COPY_SCRIPT, text)
        except WebDriverException as e:
            return DeliveryResult(False, "execCommand", str(e))
        return self._to_result(response, "execCommand")

    @staticmethod
    def _to_result(response: dict, method: str) -> DeliveryResult:
        if not response:
            return DeliveryResult(False, method, "No response from page")
        if response.get("success"):
            return DeliveryResult(True, method)
        return DeliveryResult(False, method, response.get("error") or "Unknown error")


class SystemClipboard:
    """Writes to the desktop clipboard through Tk."""

    def __call__(self, text: str) -> DeliveryResult:
        return self.write(text)

    def write(self, text: str) -> DeliveryResult:
        try:
            import tkinter as tk

            root = tk.Tk()
            root.withdraw()
            root.clipboard_clear()
            root.clipboard_append(text)
            root.update()
            root.destroy()
        except Exception as e:
            logger.error(f"Clipboard copy failed: {str(e)}")
            return DeliveryResult(False, "tkinter", str(e))

        logger.info("Copied text with tkinter")
        return DeliveryResult(True, "tkinter")
