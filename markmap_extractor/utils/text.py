"""
Text processing utilities for the outline walker.
"""


def normalize_text(text: str) -> str:
    """
    Normalize text by removing excess whitespace and line breaks.

    Args:
        text: Text to normalize

    Returns:
        Normalized single-line text string
    """
    if not text:
        return ""

    # A raw text node may span several source lines; keep it on one.
    text = text.replace("\t", " ")
    lines = [line.strip() for line in text.splitlines() if line.strip()]
    return " ".join(lines)


def join_direct_text(fragments: list[str], min_length: int) -> str:
    """
    Join the direct text fragments of a node into one string.

    Args:
        fragments: Raw text node contents, in document order
        min_length: Minimum length of a trimmed fragment to keep

    Returns:
        Space-joined fragments, or an empty string
    """
    kept = []
    for fragment in fragments:
        cleaned = normalize_text(fragment)
        if cleaned and len(cleaned) >= min_length:
            kept.append(cleaned)
    return " ".join(kept).strip()
