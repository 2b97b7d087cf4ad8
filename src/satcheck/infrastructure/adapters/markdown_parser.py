"""markdown-it based document parser adapter.

Implements DocumentParserPort using markdown-it-py's CommonMark parser.
Converts the token stream (via SyntaxTreeNode) into DocumentNode trees.
markdown-it token maps are [start, end) line ranges; DocumentNode uses
inclusive end lines.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from markdown_it import MarkdownIt
from markdown_it.tree import SyntaxTreeNode

from satcheck.domain.model.document import DocumentNode, NodeKind, SourceLines
from satcheck.domain.ports.document_parser import DocumentParserPort

if TYPE_CHECKING:
    from collections.abc import Iterator

_BLOCK_KINDS: dict[str, NodeKind] = {
    "heading": NodeKind.HEADING,
    "fence": NodeKind.FENCED_CODE_BLOCK,
    "bullet_list": NodeKind.BULLET_LIST,
    "ordered_list": NodeKind.ORDERED_LIST,
    "list_item": NodeKind.LIST_ITEM,
    "paragraph": NodeKind.PARAGRAPH,
}

_LINE_BREAKS = frozenset({"softbreak", "hardbreak"})


class MarkdownItParser(DocumentParserPort):
    """Parser producing DocumentNode trees with 0-based line tracking.

    Stateless between parse() calls.
    """

    def __init__(self, preset: str = "commonmark") -> None:
        """Initialize parser.

        Args:
            preset: markdown-it preset name ("commonmark", "gfm-like", ...)
        """
        self._md = MarkdownIt(preset)

    def parse(self, text: str) -> DocumentNode:
        """Parse Markdown text into a DOCUMENT node."""
        lines = SourceLines.from_text(text)
        root = SyntaxTreeNode(self._md.parse(text))
        last_line = max(lines.last_index, 0)
        children = tuple(self._convert_blocks(root.children, 0))
        return DocumentNode(
            kind=NodeKind.DOCUMENT,
            start_line=0,
            end_line=last_line,
            children=children,
        )

    def _convert_blocks(
        self, nodes: list[SyntaxTreeNode], parent_start: int
    ) -> Iterator[DocumentNode]:
        """Convert block-level children, flattening inline content into images."""
        for node in nodes:
            if node.type == "inline":
                yield from _images(node, parent_start)
                continue
            yield self._convert_block(node, parent_start)

    def _convert_block(self, node: SyntaxTreeNode, parent_start: int) -> DocumentNode:
        start, end = _line_range(node, parent_start)
        kind = _BLOCK_KINDS.get(node.type, NodeKind.OTHER)

        if kind is NodeKind.FENCED_CODE_BLOCK:
            content = node.content if _is_closed_fence(node, start, end) else ""
            return DocumentNode(kind=kind, start_line=start, end_line=end, content=content)

        return DocumentNode(
            kind=kind,
            start_line=start,
            end_line=end,
            children=tuple(self._convert_blocks(node.children, start)),
        )


def _line_range(node: SyntaxTreeNode, fallback: int) -> tuple[int, int]:
    """Convert [start, end) token map to inclusive (start, end)."""
    if node.map is None:
        return fallback, fallback
    start, end_exclusive = node.map
    return start, max(start, end_exclusive - 1)


def _is_closed_fence(node: SyntaxTreeNode, start: int, end: int) -> bool:
    """True if the fence has a closing marker line.

    markdown-it's map covers the closing marker only when one was found,
    so a closed fence spans one line more than its opening line and body.
    Blockquote markers and list indentation are stripped from the body
    by the parser and do not affect the count.
    """
    return end - start > _count_lines(node.content)


def _count_lines(body: str) -> int:
    """Number of source lines in a fence body (last line may lack a newline)."""
    if not body:
        return 0
    return body.count("\n") + (0 if body.endswith("\n") else 1)


def _images(inline: SyntaxTreeNode, block_start: int) -> Iterator[DocumentNode]:
    """Yield IMAGE nodes of an inline run, with line from preceding breaks."""
    offset = 0
    for child in _walk_inline(inline):
        if child.type in _LINE_BREAKS:
            offset += 1
        elif child.type == "image":
            line = block_start + offset
            src = child.attrs.get("src", "")
            yield DocumentNode(
                kind=NodeKind.IMAGE,
                start_line=line,
                end_line=line,
                url=str(src),
            )


def _walk_inline(node: SyntaxTreeNode) -> Iterator[SyntaxTreeNode]:
    """Pre-order walk of inline children (links nest images)."""
    for child in node.children:
        yield child
        if child.type != "image":
            yield from _walk_inline(child)
