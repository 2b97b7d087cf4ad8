"""Positional diagnostic emitted by linters."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

from satcheck.domain.model.violation import ViolationEvent

if TYPE_CHECKING:
    from pathlib import Path


@dataclass(frozen=True, slots=True)
class Diagnostic:
    """Linter finding without file or rule identity.

    Attributes:
        line: Line number (1-based, 0 = whole file)
        message: Human-readable message
    """

    line: int
    message: str

    def __post_init__(self) -> None:
        """Validate invariants. FAIL-FIRST."""
        if self.line < 0:
            raise ValueError(f"line must be >= 0, got {self.line}")
        if not self.message:
            raise ValueError("message must not be empty")

    def to_event(self, source_file: Path, rule_id: str) -> ViolationEvent:
        """Attach file and rule identity."""
        return ViolationEvent(
            source_file=source_file,
            rule_id=rule_id,
            line=self.line,
            message=self.message,
        )
