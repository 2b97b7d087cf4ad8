"""Analysis run: checks -> filter chain -> result."""

from __future__ import annotations

import time
from typing import TYPE_CHECKING

from satcheck.domain.model.check_result import CheckResult, RunStats
from satcheck.infrastructure.logging import get_logger

if TYPE_CHECKING:
    from collections.abc import Iterable, Sequence
    from pathlib import Path

    from satcheck.application.filters.chain import ViolationFilterChain
    from satcheck.domain.model.violation import ViolationEvent
    from satcheck.domain.ports.check import CheckPort

logger = get_logger(__name__)


class AnalysisRun:
    """Runs checks file by file and filters their violations.

    Files are processed one at a time in the given order, so the event
    stream reaching the chain is grouped by file.
    """

    def __init__(self, checks: Sequence[CheckPort], chain: ViolationFilterChain) -> None:
        """Initialize run.

        Args:
            checks: Checks applied to every file, in order
            chain: Filter chain deciding which violations are reported

        Raises:
            TypeError: If chain is None
        """
        if chain is None:
            raise TypeError("chain must not be None")
        self._checks = tuple(checks)
        self._chain = chain

    def run(self, paths: Iterable[Path]) -> CheckResult:
        """Check all paths and collect accepted violations.

        Raises:
            SourceReadError: If a checked file cannot be read
        """
        start = time.perf_counter()
        accepted: list[ViolationEvent] = []
        files_checked = 0
        produced = 0

        for path in paths:
            files_checked += 1
            for check in self._checks:
                for event in check.check_file(path):
                    produced += 1
                    if self._chain.accept(event):
                        accepted.append(event)

        elapsed_ms = (time.perf_counter() - start) * 1000
        stats = RunStats(
            files_checked=files_checked,
            events_produced=produced,
            events_accepted=len(accepted),
            elapsed_ms=elapsed_ms,
        )
        logger.debug(
            "Checked {files} files: {accepted}/{produced} violations reported",
            files=files_checked,
            accepted=len(accepted),
            produced=produced,
        )
        return CheckResult(violations=tuple(accepted), stats=stats)
