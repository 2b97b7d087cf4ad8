"""Markdown documentation check.

Routes README.md through the structure linter and build.properties
through the packaging linter.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from satcheck.application.linters.build_properties import BuildPropertiesLinter
from satcheck.application.linters.markdown_linter import DocumentStructureLinter
from satcheck.domain.model.document import SourceLines
from satcheck.infrastructure.adapters.source_reader import read_source

if TYPE_CHECKING:
    from pathlib import Path

    from satcheck.domain.model.diagnostic import Diagnostic
    from satcheck.domain.model.violation import ViolationEvent
    from satcheck.domain.ports.diagnostic_sink import DiagnosticSink
    from satcheck.domain.ports.document_parser import DocumentParserPort

MARKDOWN_RULE_ID = "satcheck.markdown"
README_FILE_NAME = "README.md"
BUILD_PROPERTIES_FILE_NAME = "build.properties"


class MarkdownCheck:
    """Check for README.md structure and its packaging.

    Stateless between files.
    """

    def __init__(
        self,
        parser: DocumentParserPort,
        sink: DiagnosticSink | None = None,
    ) -> None:
        """Initialize check.

        Args:
            parser: Markdown document-tree provider
            sink: Receives README diagnostics as they are emitted (optional)

        Raises:
            TypeError: If parser is None
        """
        if parser is None:
            raise TypeError("parser must not be None")
        self._parser = parser
        self._structure_linter = DocumentStructureLinter(sink)
        self._build_properties_linter = BuildPropertiesLinter()

    @property
    def rule_id(self) -> str:
        """Rule id stamped on produced events."""
        return MARKDOWN_RULE_ID

    def check_file(self, path: Path) -> tuple[ViolationEvent, ...]:
        """Check README.md or build.properties.

        Raises:
            SourceReadError: If the file cannot be read
        """
        diagnostics: tuple[Diagnostic, ...]
        if path.name == README_FILE_NAME:
            diagnostics = self.check_readme(read_source(path))
        elif path.name == BUILD_PROPERTIES_FILE_NAME:
            diagnostics = self._build_properties_linter.lint(read_source(path))
        else:
            return ()
        return tuple(d.to_event(path, self.rule_id) for d in diagnostics)

    def check_readme(self, text: str) -> tuple[Diagnostic, ...]:
        """Lint README text without file identity."""
        tree = self._parser.parse(text)
        return self._structure_linter.lint(tree, SourceLines.from_text(text))
