from dataclasses import dataclass, field
from typing import Optional, TypedDict

DEFAULT_SKIP_TAGS = frozenset({"script", "style", "noscript", "meta", "link", "head"})


@dataclass(frozen=True)
class ExtractOptions:
    """Settings for a single extraction run."""

    include_hidden: bool = False
    min_text_length: int = 1
    max_depth: Optional[int] = 10
    skip_tags: frozenset[str] = field(default=DEFAULT_SKIP_TAGS)

    def __post_init__(self):
        if self.min_text_length < 0:
            raise ValueError("min_text_length must be >= 0")
        if self.max_depth is not None and self.max_depth < 0:
            raise ValueError("max_depth must be >= 0 or None")
        # Accept any iterable of tag names but store them normalized.
        object.__setattr__(
            self, "skip_tags", frozenset(tag.lower() for tag in self.skip_tags)
        )


@dataclass
class DeliveryResult:
    """Outcome of handing text to a clipboard."""

    success: bool
    method: str
    error: Optional[str] = None


class ExtractionResponse(TypedDict, total=False):
    """Response sent back across the messaging boundary."""
    data: str
    error: str
    success: bool
