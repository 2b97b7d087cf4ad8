"""Parsed Markdown document tree and raw source lines.

The tree is a closed set of node variants (NodeKind) consumed by
exhaustive match dispatch. Line numbers are 0-based and refer to
SourceLines of the same document.
"""

from __future__ import annotations

from collections.abc import Iterator, Sequence
from dataclasses import dataclass
from enum import Enum, auto


class NodeKind(Enum):
    """Document node variant."""

    DOCUMENT = auto()
    HEADING = auto()
    FENCED_CODE_BLOCK = auto()
    BULLET_LIST = auto()
    ORDERED_LIST = auto()
    LIST_ITEM = auto()
    PARAGRAPH = auto()
    IMAGE = auto()
    OTHER = auto()  # anything the linter only recurses through

    @property
    def is_list(self) -> bool:
        """True for bullet and ordered lists."""
        return self in (NodeKind.BULLET_LIST, NodeKind.ORDERED_LIST)


@dataclass(frozen=True, slots=True)
class DocumentNode:
    """Node of a parsed Markdown document.

    Attributes:
        kind: Node variant
        start_line: First line (0-based)
        end_line: Last line (0-based, inclusive)
        children: Child nodes in document order
        content: Literal body (fenced code blocks), empty otherwise
        url: Image source (images only)
    """

    kind: NodeKind
    start_line: int
    end_line: int
    children: tuple[DocumentNode, ...] = ()
    content: str = ""
    url: str | None = None

    def __post_init__(self) -> None:
        """Validate invariants. FAIL-FIRST."""
        if self.start_line < 0:
            raise ValueError(f"start_line must be >= 0, got {self.start_line}")
        if self.end_line < self.start_line:
            raise ValueError(
                f"end_line ({self.end_line}) must be >= start_line ({self.start_line})"
            )
        if self.kind is NodeKind.IMAGE and self.url is None:
            raise ValueError("image node requires url")

    @property
    def last_child(self) -> DocumentNode | None:
        """Last child or None for leaf nodes."""
        return self.children[-1] if self.children else None


@dataclass(frozen=True, slots=True)
class SourceLines(Sequence[str]):
    """Original text as 0-based random-access lines.

    Attributes:
        lines: Raw lines without line terminators
    """

    lines: tuple[str, ...]

    @classmethod
    def from_text(cls, text: str) -> SourceLines:
        """Split text on newlines, ignoring a single trailing newline.

        \\r\\n and lone \\r are normalized first, so indices match
        what a CommonMark parser reports.
        """
        normalized = text.replace("\r\n", "\n").replace("\r", "\n")
        if not normalized:
            return cls(())
        if normalized.endswith("\n"):
            normalized = normalized[:-1]
        return cls(tuple(normalized.split("\n")))

    @property
    def last_index(self) -> int:
        """Index of the last line (-1 for empty text)."""
        return len(self.lines) - 1

    def is_blank(self, index: int) -> bool:
        """True if line is empty or whitespace only."""
        return not self.lines[index].strip()

    def __getitem__(self, index):  # type: ignore[override]
        return self.lines[index]

    def __len__(self) -> int:
        return len(self.lines)

    def __iter__(self) -> Iterator[str]:
        return iter(self.lines)
