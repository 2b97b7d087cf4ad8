"""Reporter protocol for output formatting.

Users extend satcheck by implementing this Protocol.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol

if TYPE_CHECKING:
    from satcheck.domain.model.check_result import CheckResult


class ReporterProtocol(Protocol):
    """Contract for reporters.

    satcheck provides PlainTextReporter, JSONReporter and ConsoleReporter.
    """

    def report(self, result: CheckResult) -> None:
        """Report run results.

        Implementation decides output format and destination.

        Args:
            result: Complete run result with accepted violations and stats
        """
        ...
