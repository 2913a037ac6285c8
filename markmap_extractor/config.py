import os
from dataclasses import dataclass
from typing import Optional

from markmap_extractor.types import ExtractOptions

TRUE_VALUES = {"1", "true", "yes", "on"}


def _env_bool(name: str, default: bool) -> bool:
    value = os.environ.get(name)
    if value is None or not value.strip():
        return default
    return value.strip().lower() in TRUE_VALUES


def _env_int(name: str, default: int) -> int:
    value = os.environ.get(name)
    if value is None or not value.strip():
        return default
    try:
        return int(value)
    except ValueError:
        raise ValueError(f"{name} must be an integer, got {value!r}")


def _env_optional_int(name: str, default: Optional[int]) -> Optional[int]:
    value = os.environ.get(name)
    if value is None:
        return default
    if not value.strip() or value.strip().lower() == "none":
        return None
    try:
        return int(value)
    except ValueError:
        raise ValueError(f"{name} must be an integer, got {value!r}")


def _env_float(name: str, default: float) -> float:
    value = os.environ.get(name)
    if value is None or not value.strip():
        return default
    try:
        return float(value)
    except ValueError:
        raise ValueError(f"{name} must be a number, got {value!r}")


@dataclass
class ExtractorConfig:
    """Extraction and browser settings."""
    include_hidden: bool = False
    min_text_length: int = 1
    max_depth: Optional[int] = 10
    headless: bool = True
    page_load_delay: float = 0.0
    page_load_timeout: float = 10.0

    def __post_init__(self):
        if self.min_text_length < 0:
            raise ValueError("min_text_length must be >= 0")
        if self.max_depth is not None and self.max_depth < 0:
            raise ValueError("max_depth must be >= 0")
        if self.page_load_delay < 0 or self.page_load_timeout <= 0:
            raise ValueError("page load delay must be >= 0 and timeout > 0")

    @classmethod
    def from_env(cls) -> "ExtractorConfig":
        """Create configuration from environment variables."""
        return cls(
            include_hidden=_env_bool("MARKMAP_INCLUDE_HIDDEN", False),
            min_text_length=_env_int("MARKMAP_MIN_TEXT_LENGTH", 1),
            max_depth=_env_optional_int("MARKMAP_MAX_DEPTH", 10),
            headless=_env_bool("MARKMAP_HEADLESS", True),
            page_load_delay=_env_float("MARKMAP_PAGE_LOAD_DELAY", 0.0),
            page_load_timeout=_env_float("MARKMAP_PAGE_LOAD_TIMEOUT", 10.0),
        )

    def to_options(self) -> ExtractOptions:
        return ExtractOptions(
            include_hidden=self.include_hidden,
            min_text_length=self.min_text_length,
            max_depth=self.max_depth,
        )
