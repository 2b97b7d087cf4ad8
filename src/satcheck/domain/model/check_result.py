"""Analysis run result aggregate."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from pathlib import Path

    from satcheck.domain.model.violation import ViolationEvent


@dataclass(frozen=True, slots=True)
class RunStats:
    """Statistics from one analysis run.

    Attributes:
        files_checked: Number of files handed to checks
        events_produced: Violations reported by checks
        events_accepted: Violations surfaced after filtering
        elapsed_ms: Total run time in milliseconds
    """

    files_checked: int
    events_produced: int
    events_accepted: int
    elapsed_ms: float

    def __post_init__(self) -> None:
        """Validate invariants. FAIL-FIRST."""
        if self.files_checked < 0:
            raise ValueError(f"files_checked must be >= 0, got {self.files_checked}")
        if self.events_produced < 0:
            raise ValueError(f"events_produced must be >= 0, got {self.events_produced}")
        if not 0 <= self.events_accepted <= self.events_produced:
            raise ValueError(
                f"events_accepted must be in [0, {self.events_produced}], "
                f"got {self.events_accepted}"
            )
        if self.elapsed_ms < 0:
            raise ValueError(f"elapsed_ms must be >= 0, got {self.elapsed_ms}")

    @property
    def events_suppressed(self) -> int:
        """Violations dropped by the filter chain."""
        return self.events_produced - self.events_accepted

    @classmethod
    def empty(cls) -> RunStats:
        """Create empty run stats."""
        return cls(files_checked=0, events_produced=0, events_accepted=0, elapsed_ms=0.0)


@dataclass(frozen=True, slots=True)
class CheckResult:
    """Result of an analysis run.

    Attributes:
        violations: Accepted violations in report order
        stats: Run statistics
    """

    violations: tuple[ViolationEvent, ...]
    stats: RunStats

    def __post_init__(self) -> None:
        """Validate invariants. FAIL-FIRST."""
        if len(self.violations) != self.stats.events_accepted:
            raise ValueError(
                f"violations ({len(self.violations)}) must match "
                f"events_accepted ({self.stats.events_accepted})"
            )

    @property
    def passed(self) -> bool:
        """Check if run passed (no accepted violations)."""
        return len(self.violations) == 0

    @property
    def violation_count(self) -> int:
        """Number of accepted violations."""
        return len(self.violations)

    def by_file(self) -> dict[Path, list[ViolationEvent]]:
        """Group violations by source file, preserving order."""
        grouped: dict[Path, list[ViolationEvent]] = {}
        for violation in self.violations:
            grouped.setdefault(violation.source_file, []).append(violation)
        return grouped

    @classmethod
    def empty(cls) -> CheckResult:
        """Create empty check result (passed, no violations)."""
        return cls(violations=(), stats=RunStats.empty())
