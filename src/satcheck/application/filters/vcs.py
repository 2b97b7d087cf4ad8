"""Version control ignore filter."""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from satcheck.application.filters.types import Filter
    from satcheck.domain.model.violation import ViolationEvent
    from satcheck.domain.ports.ignore_oracle import IgnoreOraclePort


def exclude_ignored(oracle: IgnoreOraclePort) -> Filter:
    """Create filter that drops events for files ignored by version control.

    Args:
        oracle: Ignore-set lookup, shared read-only.

    Returns:
        Filter that returns False for events whose file is ignored.
    """

    def _filter(event: ViolationEvent) -> bool:
        return not oracle.is_ignored(event.source_file)

    return _filter
