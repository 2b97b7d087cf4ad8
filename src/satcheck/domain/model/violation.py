"""Violation event value object."""

from dataclasses import dataclass
from pathlib import Path


@dataclass(frozen=True, slots=True)
class ViolationEvent:
    """Single rule infraction reported by an upstream check.

    Produced once per detected issue, never mutated,
    consumed exactly once by the filter chain.

    Attributes:
        source_file: Path of the offending file (identity for per-file state)
        rule_id: Stable identifier of the offending rule
        line: Line number (1-based, 0 = whole file)
        message: Human-readable message
    """

    source_file: Path
    rule_id: str
    line: int
    message: str

    def __post_init__(self) -> None:
        """Validate invariants. FAIL-FIRST."""
        if self.source_file is None:
            raise TypeError("source_file must not be None")
        if not self.rule_id:
            raise ValueError("rule_id must not be empty")
        if self.line < 0:
            raise ValueError(f"line must be >= 0, got {self.line}")
        if not self.message:
            raise ValueError("message must not be empty")

    def __str__(self) -> str:
        """Format as file:line: message [rule]."""
        return f"{self.source_file}:{self.line}: {self.message} [{self.rule_id}]"
