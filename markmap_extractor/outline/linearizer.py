"""Flatten a document subtree into space-indented outline text."""

from dataclasses import dataclass, field
from typing import Iterator, Optional, Union

from markmap_extractor.dom.models import DocumentNode
from markmap_extractor.outline.visibility import should_skip
from markmap_extractor.types import ExtractOptions
from markmap_extractor.utils.text import join_direct_text

INLINE_TAGS = frozenset({"span"})


@dataclass(frozen=True)
class Line:
    """Starts a new output line at ``depth``."""
    depth: int
    text: str


@dataclass(frozen=True)
class Inline:
    """Text that joins the line its nearest block ancestor opened."""
    text: str


@dataclass(frozen=True)
class Close:
    """Ends the line of a block element once its subtree is done."""


Token = Union[Line, Inline, Close]


@dataclass
class _OpenLine:
    depth: int
    parts: list[str] = field(default_factory=list)


class TreeLinearizer:
    """Walks a subtree depth-first and produces indented text."""

    def __init__(self, options: ExtractOptions) -> None:
        self.options = options

    def linearize(self, root: DocumentNode) -> str:
        """
        Linearize a region root.

        Args:
            root: Subtree root to read

        Returns:
            str: Trimmed outline text, empty if nothing was collected
        """
        return self.render(self.tokens(root))

    def tokens(self, root: DocumentNode) -> Iterator[Token]:
        """
        Yield the output tokens of a subtree in document order.

        The root and its direct children share depth 0; every non-inline
        element below them adds one level for its children. A block element
        is followed by a Close token once its subtree has been walked.
        """
        if should_skip(root, self.options):
            return

        yield self._emit(root, 0)
        for child in root.children():
            yield from self._walk(child, 0)
        yield Close()

    def _walk(self, node: DocumentNode, depth: int) -> Iterator[Token]:
        if self.options.max_depth is not None and depth > self.options.max_depth:
            return
        if should_skip(node, self.options):
            return

        yield self._emit(node, depth)

        inline = self._is_inline(node)
        child_depth = depth if inline else depth + 1
        for child in node.children():
            yield from self._walk(child, child_depth)
        if not inline:
            yield Close()

    def _emit(self, node: DocumentNode, depth: int) -> Token:
        text = join_direct_text(node.direct_texts(), self.options.min_text_length)
        if self._is_inline(node):
            return Inline(text)
        return Line(depth, text)

    @staticmethod
    def _is_inline(node: DocumentNode) -> bool:
        return node.tag_name.lower() in INLINE_TAGS

    @staticmethod
    def render(tokens: Iterator[Token]) -> str:
        """Assemble tokens into text, dropping lines that stayed empty."""
        lines: list[_OpenLine] = []
        current: Optional[_OpenLine] = None
        for token in tokens:
            if isinstance(token, Line):
                current = _OpenLine(token.depth, [token.text] if token.text else [])
                lines.append(current)
            elif isinstance(token, Close):
                current = None
            elif token.text:
                # inline text after a closed block starts an unindented line
                if current is None:
                    current = _OpenLine(0)
                    lines.append(current)
                current.parts.append(token.text)

        rendered = [
            " " * line.depth + " ".join(line.parts)
            for line in lines
            if line.parts
        ]
        return "\n".join(rendered).strip()
