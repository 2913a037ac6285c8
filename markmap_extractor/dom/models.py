from typing import Optional, Protocol, TypedDict


class Visibility(TypedDict):
    """Represents an element's visibility properties."""
    display: str
    opacity: str
    visibility: str


class NodeSnapshot(TypedDict):
    """A serialized element as returned by the DOM snapshot script."""
    children: list["NodeSnapshot"]
    className: str
    id: str
    tagName: str
    texts: list[str]
    visibility: Visibility


class DocumentNode(Protocol):
    """Read-only view of an element in a rendered document."""

    @property
    def tag_name(self) -> str:
        """Lowercase tag name."""
        ...

    @property
    def element_id(self) -> Optional[str]:
        ...

    @property
    def class_names(self) -> list[str]:
        ...

    def direct_texts(self) -> list[str]:
        """Raw content of the text nodes directly owned by this element."""
        ...

    def children(self) -> list["DocumentNode"]:
        """Element children in document order."""
        ...

    def computed_visibility(self) -> Visibility:
        ...

    def contains(self, other: "DocumentNode") -> bool:
        """Whether ``other`` is a descendant of this element."""
        ...
