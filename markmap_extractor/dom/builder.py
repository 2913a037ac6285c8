import logging
from typing import Iterable, Optional

from selenium.common.exceptions import WebDriverException
from selenium.webdriver.chrome.webdriver import WebDriver

from markmap_extractor.dom.js_scripts import SNAPSHOT_DOM_SCRIPT
from markmap_extractor.dom.models import NodeSnapshot, Visibility
from markmap_extractor.types import DEFAULT_SKIP_TAGS

logger = logging.getLogger(__name__)


class SnapshotNode:
    """An element captured from a live page, detached from the driver."""

    def __init__(self, data: NodeSnapshot, parent: Optional["SnapshotNode"] = None) -> None:
        self.parent = parent
        self._tag_name = str(data.get("tagName", "")).lower()
        self._element_id = data.get("id") or None
        self._class_names = str(data.get("className", "")).split()
        self._texts = [str(text) for text in data.get("texts", [])]

        # Missing style data is treated as hidden, the same as an unreadable element
        vis = data.get("visibility", {})
        self._visibility: Visibility = {
            "display": str(vis.get("display", "none")),
            "visibility": str(vis.get("visibility", "hidden")),
            "opacity": str(vis.get("opacity", "0")),
        }
        self._children = [SnapshotNode(child, self) for child in data.get("children", [])]

    @property
    def tag_name(self) -> str:
        return self._tag_name

    @property
    def element_id(self) -> Optional[str]:
        return self._element_id

    @property
    def class_names(self) -> list[str]:
        return list(self._class_names)

    def direct_texts(self) -> list[str]:
        return list(self._texts)

    def children(self) -> list["SnapshotNode"]:
        return list(self._children)

    def computed_visibility(self) -> Visibility:
        return dict(self._visibility)

    def contains(self, other: "SnapshotNode") -> bool:
        ancestor = getattr(other, "parent", None)
        while ancestor is not None:
            if ancestor is self:
                return True
            ancestor = ancestor.parent
        return False

    def __repr__(self) -> str:
        return f"SnapshotNode(<{self._tag_name}>, children={len(self._children)})"


class DOMTreeBuilder:
    """Captures the rendered DOM of the current page in one script call."""

    def __init__(self, driver: WebDriver) -> None:
        self.driver = driver

    def build_tree(self, skip_tags: Iterable[str] = DEFAULT_SKIP_TAGS) -> Optional[SnapshotNode]:
        """
        Snapshot the document body.

        Args:
            skip_tags: Tags whose contents are not serialized

        Returns:
            SnapshotNode for <body>, or None if the page has no body

        Raises:
            WebDriverException: If browser automation fails
        """
        try:
            data = self.driver.execute_script(SNAPSHOT_DOM_SCRIPT, sorted(skip_tags))
        except WebDriverException as e:
            raise WebDriverException(f"Failed to build DOM snapshot: {str(e)}")

        if not data:
            logger.info("Page has no <body> element")
            return None

        return SnapshotNode(data)
