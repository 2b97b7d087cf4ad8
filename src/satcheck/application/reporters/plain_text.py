"""Plain text reporter using print()."""

from __future__ import annotations

import sys
from typing import TYPE_CHECKING, TextIO

from satcheck.application.reporters._base import BaseReporter

if TYPE_CHECKING:
    from satcheck.domain.model.check_result import CheckResult


class PlainTextReporter(BaseReporter):
    """Plain text reporter, one line per violation grouped by file.

    Outputs to stdout by default, can be configured for any TextIO.
    """

    def __init__(self, output: TextIO | None = None) -> None:
        """Initialize reporter.

        Args:
            output: Output stream (default: sys.stdout)
        """
        self._output = output if output is not None else sys.stdout

    def report(self, result: CheckResult) -> None:
        """Report run results as plain text."""
        self._write("=" * 70)
        self._write("Static Analysis Results")
        self._write("=" * 70)

        self._report_summary(result)

        for source_file, violations in result.by_file().items():
            self._write()
            self._write(str(source_file))
            for violation in violations:
                self._write(f"  {violation.line}: {violation.message} [{violation.rule_id}]")

        self._write()
        self._write("=" * 70)
        self._write(f"Result: {'PASSED' if result.passed else 'FAILED'}")
        self._write("=" * 70)

    def _write(self, text: str = "") -> None:
        """Write line to output."""
        print(text, file=self._output)

    def _report_summary(self, result: CheckResult) -> None:
        stats = result.stats
        self._write()
        self._write("Summary:")
        self._write(f"  Files checked: {stats.files_checked}")
        self._write(f"  Violations: {result.violation_count}")
        self._write(f"  Suppressed: {stats.events_suppressed}")
