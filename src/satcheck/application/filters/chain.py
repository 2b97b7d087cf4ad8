"""Ordered violation filter chain.

The single decision point an analysis run calls once per violation.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from satcheck.application.filters.rate_limit import PerFileRuleCounter
from satcheck.application.filters.vcs import exclude_ignored
from satcheck.infrastructure.vcs.git_ignore import VcsIgnoreOracle

if TYPE_CHECKING:
    from collections.abc import Iterable, Iterator

    from satcheck.application.filters.types import Filter
    from satcheck.domain.model.configuration import FilterConfig
    from satcheck.domain.model.violation import ViolationEvent
    from satcheck.domain.ports.ignore_oracle import IgnoreOraclePort


class ViolationFilterChain:
    """Ordered AND of filters with short-circuit.

    An event rejected by an earlier filter never reaches later ones,
    so ignored files do not consume rate-limit budget.
    No filters = accept everything.
    """

    def __init__(self, *filters: Filter) -> None:
        """Initialize chain.

        Args:
            *filters: Filters in evaluation order.
        """
        self._filters: tuple[Filter, ...] = filters

    @classmethod
    def from_config(
        cls,
        config: FilterConfig,
        oracle: IgnoreOraclePort | None = None,
    ) -> ViolationFilterChain:
        """Build the standard chain: ignore check first, rate limit second.

        Args:
            config: Validated filter configuration.
            oracle: Ignore-set lookup. None = discover from the enclosing
                git repository when config.ignore_vcs is set.

        Returns:
            Chain with the stages the configuration enables.
        """
        filters: list[Filter] = []

        if config.ignore_vcs:
            if oracle is None:
                oracle = VcsIgnoreOracle.discover()
            filters.append(exclude_ignored(oracle))

        if config.is_rate_limited:
            filters.append(PerFileRuleCounter.from_config(config))

        return cls(*filters)

    @property
    def filters(self) -> tuple[Filter, ...]:
        """Filters in evaluation order."""
        return self._filters

    def accept(self, event: ViolationEvent) -> bool:
        """True if every filter accepts event (stops at first rejection)."""
        return all(f(event) for f in self._filters)

    def filter(self, events: Iterable[ViolationEvent]) -> Iterator[ViolationEvent]:
        """Yield accepted events in input order."""
        for event in events:
            if self.accept(event):
                yield event

    def __call__(self, event: ViolationEvent) -> bool:
        return self.accept(event)

    def __len__(self) -> int:
        return len(self._filters)
