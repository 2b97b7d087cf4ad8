"""Rule id filters.

Filter events by rule id whitelist or blacklist.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from satcheck.application.filters.types import Filter
    from satcheck.domain.model.violation import ViolationEvent


def include_rules(*rule_ids: str) -> Filter:
    """Create filter that reports only the given rules.

    Args:
        *rule_ids: Rule ids to report.

    Returns:
        Filter that returns True for events of any listed rule.
    """
    rule_set = frozenset(rule_ids)

    def _filter(event: ViolationEvent) -> bool:
        return event.rule_id in rule_set

    return _filter


def exclude_rules(*rule_ids: str) -> Filter:
    """Create filter that drops the given rules.

    Args:
        *rule_ids: Rule ids to drop.

    Returns:
        Filter that returns True for events NOT of any listed rule.
    """
    rule_set = frozenset(rule_ids)

    def _filter(event: ViolationEvent) -> bool:
        return event.rule_id not in rule_set

    return _filter
