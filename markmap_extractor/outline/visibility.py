"""Per-node skip and visibility checks used while walking the document."""

from markmap_extractor.dom.models import DocumentNode, Visibility
from markmap_extractor.types import ExtractOptions


def parse_opacity(value: str) -> float:
    """
    Parse a CSS opacity value.

    Args:
        value: Opacity as reported by the style (e.g. "0", "0.5", "50%")

    Returns:
        float: Opacity value, or 1.0 when the value cannot be parsed
    """
    if not value:
        return 1.0

    value = value.strip()
    try:
        if value.endswith("%"):
            return float(value[:-1]) / 100
        return float(value)
    except (ValueError, TypeError):
        return 1.0


def is_hidden(visibility: Visibility) -> bool:
    """Check whether resolved style properties hide an element."""
    return (
        visibility.get("display") == "none" or
        visibility.get("visibility") == "hidden" or
        parse_opacity(visibility.get("opacity", "1")) == 0
    )


def is_visible(node: DocumentNode, options: ExtractOptions) -> bool:
    """Check if a node is visible, honouring ``include_hidden``."""
    if options.include_hidden:
        return True
    return not is_hidden(node.computed_visibility())


def should_skip(node: DocumentNode, options: ExtractOptions) -> bool:
    """
    Decide whether a node (and its whole subtree) is left out of the walk.

    Args:
        node: Node about to be visited
        options: Extraction settings

    Returns:
        bool: True if the node is a skipped tag or is not visible
    """
    return node.tag_name.lower() in options.skip_tags or not is_visible(node, options)
