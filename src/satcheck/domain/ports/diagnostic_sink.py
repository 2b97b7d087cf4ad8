"""Diagnostic sink protocol.

Linters log through this one-method capability instead of
depending on the check that hosts them.
"""

from typing import Protocol


class DiagnosticSink(Protocol):
    """Receives positional diagnostics as they are emitted."""

    def log(self, line: int, message: str) -> None:
        """Record one diagnostic.

        Args:
            line: Line number (1-based, 0 = whole file)
            message: Human-readable message
        """
        ...
