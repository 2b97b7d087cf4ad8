"""Base reporter for analysis run output.

Concrete reporters subclass BaseReporter; anything with a matching
report() method also satisfies ReporterProtocol structurally.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from satcheck.domain.model.check_result import CheckResult


class BaseReporter(ABC):
    """Abstract reporter writing one CheckResult per call.

    Example:
        class CountReporter(BaseReporter):
            def report(self, result: CheckResult) -> None:
                print(f"{result.violation_count} violations, "
                      f"{result.stats.events_suppressed} suppressed")
    """

    @abstractmethod
    def report(self, result: CheckResult) -> None:
        """Write result to the reporter's destination.

        Args:
            result: Accepted violations and run statistics
        """
