"""Document parser port (interface)."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from satcheck.domain.model.document import DocumentNode


class DocumentParserPort(ABC):
    """Port for parsing Markdown into a DocumentNode tree.

    Infrastructure layer must provide implementation.
    Node lines must be 0-based and match SourceLines.from_text(text).
    """

    @abstractmethod
    def parse(self, text: str) -> DocumentNode:
        """Parse Markdown text.

        Args:
            text: Full document text

        Returns:
            Root node of kind DOCUMENT
        """
        ...
