"""Per-file, per-rule report cap.

Checks run file by file, so the event stream is grouped by file.
Only the currently checked file is tracked; its counters are
replaced whole as soon as an event for another file arrives.
"""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass, field
from typing import TYPE_CHECKING

from satcheck.domain.exceptions.configuration import ConfigurationError
from satcheck.domain.model.configuration import validate_limit

if TYPE_CHECKING:
    from pathlib import Path

    from satcheck.domain.model.configuration import FilterConfig
    from satcheck.domain.model.violation import ViolationEvent


@dataclass(slots=True)
class _CurrentFile:
    """Counters of the file currently being checked."""

    source_file: Path
    counts: dict[str, int] = field(default_factory=dict)


class PerFileRuleCounter:
    """Stop reporting a tracked rule on a file after max_per_file hits.

    Stateful, single-threaded, single pass. Not safe to share between
    threads checking different files: give each thread its own instance.
    """

    def __init__(self, tracked_rules: Iterable[str], max_per_file: int | None = None) -> None:
        """Initialize counter.

        Args:
            tracked_rules: Rule ids subject to the cap. Others always pass.
            max_per_file: Reports allowed per tracked rule per file. None = unbounded.

        Raises:
            ConfigurationError: If max_per_file is not an int >= 0 or a rule id is empty.
        """
        tracked = frozenset(tracked_rules)
        if any(not rule_id for rule_id in tracked):
            raise ConfigurationError("tracked_rules", "rule id must not be empty")
        validate_limit(max_per_file)

        self._tracked = tracked
        self._max = max_per_file
        self._current: _CurrentFile | None = None

    @classmethod
    def from_config(cls, config: FilterConfig) -> PerFileRuleCounter:
        """Build counter from validated configuration."""
        return cls(config.tracked_rules, config.max_per_file)

    @property
    def tracked_rules(self) -> frozenset[str]:
        """Rule ids subject to the cap."""
        return self._tracked

    @property
    def max_per_file(self) -> int | None:
        """Per-file cap, None = unbounded."""
        return self._max

    def count(self, source_file: Path, rule_id: str) -> int:
        """Reports of rule_id seen so far for source_file (0 if not current)."""
        if self._current is None or self._current.source_file != source_file:
            return 0
        return self._current.counts.get(rule_id, 0)

    def accept(self, event: ViolationEvent) -> bool:
        """Decide whether event is reported.

        Returns:
            True for untracked rules, and for the first max_per_file
            events of each tracked rule within the current file.
        """
        if event.rule_id not in self._tracked:
            return True

        if self._current is None or self._current.source_file != event.source_file:
            self._current = _CurrentFile(
                source_file=event.source_file,
                counts=dict.fromkeys(self._tracked, 0),
            )

        counts = self._current.counts
        counts[event.rule_id] += 1

        if self._max is None:
            return True
        return counts[event.rule_id] <= self._max

    def __call__(self, event: ViolationEvent) -> bool:
        return self.accept(event)
