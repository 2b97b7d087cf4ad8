"""JSON reporter for machine-readable output."""

from __future__ import annotations

import json
import sys
from typing import TYPE_CHECKING, TextIO

from satcheck.application.reporters._base import BaseReporter

if TYPE_CHECKING:
    from satcheck.domain.model.check_result import CheckResult
    from satcheck.domain.model.violation import ViolationEvent


class JSONReporter(BaseReporter):
    """JSON reporter for CI integration and parsing by other tools."""

    def __init__(
        self,
        output: TextIO | None = None,
        *,
        indent: int | None = 2,
    ) -> None:
        """Initialize reporter.

        Args:
            output: Output stream (default: sys.stdout)
            indent: JSON indentation (default: 2, None for compact)
        """
        self._output = output if output is not None else sys.stdout
        self._indent = indent

    def report(self, result: CheckResult) -> None:
        """Report run results as JSON."""
        json.dump(self._result_to_dict(result), self._output, indent=self._indent)
        self._output.write("\n")

    def _result_to_dict(self, result: CheckResult) -> dict[str, object]:
        """Convert CheckResult to JSON-serializable dict."""
        return {
            "passed": result.passed,
            "summary": {
                "files_checked": result.stats.files_checked,
                "events_produced": result.stats.events_produced,
                "events_accepted": result.stats.events_accepted,
                "events_suppressed": result.stats.events_suppressed,
                "elapsed_ms": result.stats.elapsed_ms,
            },
            "violations": [_violation_to_dict(v) for v in result.violations],
        }


def _violation_to_dict(violation: ViolationEvent) -> dict[str, object]:
    """Convert ViolationEvent to dict."""
    return {
        "file": str(violation.source_file),
        "rule_id": violation.rule_id,
        "line": violation.line,
        "message": violation.message,
    }
