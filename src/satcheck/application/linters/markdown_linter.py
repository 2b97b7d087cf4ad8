"""Markdown structure linter.

Walks a DocumentNode tree depth-first and reports missing blank-line
separators around headings, fenced code blocks and lists, and images
stored outside the doc/ folder.

Node lines are 0-based; emitted diagnostics are 1-based.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from satcheck.domain.model.diagnostic import Diagnostic
from satcheck.domain.model.document import NodeKind

if TYPE_CHECKING:
    from satcheck.domain.model.document import DocumentNode, SourceLines
    from satcheck.domain.ports.diagnostic_sink import DiagnosticSink

EMPTY_LINE_AFTER_HEADER_MSG = "Missing an empty line after the Markdown header ('#')."
HEADER_AT_END_OF_FILE_MSG = (
    "There is a header at the end of the Markdown file. Please consider adding some content below."
)
EMPTY_LINE_BEFORE_CODE_MSG = "The line before code formatting section must be empty."
EMPTY_LINE_AFTER_CODE_MSG = "The line after code formatting section must be empty."
EMPTY_CODE_BLOCK_MSG = "There is an empty or unclosed code formatting section. Please correct it."
EMPTY_LINE_BEFORE_LIST_MSG = "The line before a Markdown list must be empty."
EMPTY_LINE_AFTER_LIST_MSG = "The line after a Markdown list must be empty."
IMAGE_OUTSIDE_DOC_FOLDER_MSG = "Images must be located in the doc/ folder."

ALLOWED_IMAGE_PREFIXES = ("doc/", "http://", "https://")


class DocumentStructureLinter:
    """Blank-line and asset placement checks for one Markdown document.

    Stateless between lint() calls.
    """

    def __init__(self, sink: DiagnosticSink | None = None) -> None:
        """Initialize linter.

        Args:
            sink: Receives each diagnostic as it is emitted (optional).
        """
        self._sink = sink

    def lint(self, tree: DocumentNode, lines: SourceLines) -> tuple[Diagnostic, ...]:
        """Lint a parsed document.

        Args:
            tree: Root node from the document parser
            lines: Source text of the same document

        Returns:
            Diagnostics in emission order (1-based lines).
        """
        run = _LintRun(lines, self._sink)
        run.visit(tree, parent=None)
        return tuple(run.diagnostics)


class _LintRun:
    """State of a single lint() call."""

    def __init__(self, lines: SourceLines, sink: DiagnosticSink | None) -> None:
        self._lines = lines
        self._sink = sink
        self.diagnostics: list[Diagnostic] = []

    def _log(self, zero_based_line: int, message: str) -> None:
        diagnostic = Diagnostic(line=zero_based_line + 1, message=message)
        self.diagnostics.append(diagnostic)
        if self._sink is not None:
            self._sink.log(diagnostic.line, diagnostic.message)

    def _is_blank(self, index: int) -> bool:
        return self._lines.is_blank(index)

    def visit(self, node: DocumentNode, parent: DocumentNode | None) -> None:
        match node.kind:
            case NodeKind.HEADING:
                self._check_heading(node)
            case NodeKind.FENCED_CODE_BLOCK:
                self._check_code_block(node)
            case kind if kind.is_list:
                self._visit_children(node)
                self._check_list(node, parent)
            case NodeKind.IMAGE:
                self._check_image(node)
            case (
                NodeKind.DOCUMENT
                | NodeKind.LIST_ITEM
                | NodeKind.PARAGRAPH
                | NodeKind.OTHER
            ):
                self._visit_children(node)

    def _visit_children(self, node: DocumentNode) -> None:
        for child in node.children:
            self.visit(child, parent=node)

    def _check_heading(self, heading: DocumentNode) -> None:
        header_line = heading.end_line
        if header_line >= self._lines.last_index:
            self._log(header_line, HEADER_AT_END_OF_FILE_MSG)
        elif not self._is_blank(header_line + 1):
            self._log(header_line, EMPTY_LINE_AFTER_HEADER_MSG)

        # Headings may carry inline images
        self._visit_children(heading)

    def _check_code_block(self, block: DocumentNode) -> None:
        start, end = block.start_line, block.end_line

        # Reported once, instead of the before/after checks
        if not block.content.strip():
            self._log(start, EMPTY_CODE_BLOCK_MSG)
            return

        if start == 0 or not self._is_blank(start - 1):
            self._log(start, EMPTY_LINE_BEFORE_CODE_MSG)

        if end < self._lines.last_index and not self._is_blank(end + 1):
            self._log(end, EMPTY_LINE_AFTER_CODE_MSG)

    def _check_list(self, list_block: DocumentNode, parent: DocumentNode | None) -> None:
        first_line = list_block.start_line

        # Nested lists follow their item's text directly
        is_inner_list = parent is not None and parent.kind is NodeKind.LIST_ITEM
        if not is_inner_list and (first_line == 0 or not self._is_blank(first_line - 1)):
            self._log(first_line, EMPTY_LINE_BEFORE_LIST_MSG)

        self._check_line_after_list(list_block)

    def _check_line_after_list(self, list_block: DocumentNode) -> None:
        """Report lazy continuation text glued to the end of the list.

        Only a trailing paragraph of the last item is inspected. A
        continuation line that is not indented means the text after the
        list was not separated by a blank line.
        """
        last_item = list_block.last_child
        if last_item is None:
            return
        content = last_item.last_child
        if content is None or content.kind is not NodeKind.PARAGRAPH:
            return
        if content.end_line == content.start_line:
            return

        for index in range(content.start_line + 1, content.end_line + 1):
            if index > self._lines.last_index:
                break
            if not self._lines[index].startswith(" "):
                self._log(content.start_line, EMPTY_LINE_AFTER_LIST_MSG)
                break

    def _check_image(self, image: DocumentNode) -> None:
        url = image.url or ""
        if not url.startswith(ALLOWED_IMAGE_PREFIXES):
            self._log(image.start_line, IMAGE_OUTSIDE_DOC_FOLDER_MSG)
