"""Check protocol: one file in, violation events out."""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol

if TYPE_CHECKING:
    from pathlib import Path

    from satcheck.domain.model.violation import ViolationEvent


class CheckPort(Protocol):
    """Contract for file checks run by AnalysisRun.

    Checks are stateless between files.
    """

    @property
    def rule_id(self) -> str:
        """Stable identifier stamped on every produced event."""
        ...

    def check_file(self, path: Path) -> tuple[ViolationEvent, ...]:
        """Check a single file.

        Args:
            path: File to check

        Returns:
            Violations in line order of detection. Empty if file is not handled.
        """
        ...
