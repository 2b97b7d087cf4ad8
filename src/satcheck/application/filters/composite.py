"""Filter composition: AND, OR, NOT over violation filters."""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from satcheck.application.filters.types import Filter
    from satcheck.domain.model.violation import ViolationEvent


def all_of(*filters: Filter) -> Filter:
    """Report a violation only if every filter reports it.

    Filters run left to right and evaluation stops at the first
    rejection, so a PerFileRuleCounter placed after an ignore filter
    is never charged for ignored files.

    Args:
        *filters: Filters in evaluation order.

    Returns:
        Combined filter. No filters = report everything.
    """

    def _report_if_all(event: ViolationEvent) -> bool:
        return all(flt(event) for flt in filters)

    return _report_if_all


def any_of(*filters: Filter) -> Filter:
    """Report a violation if at least one filter reports it.

    Example:
        any_of(include_rules("satcheck.markdown"), exclude_paths("*/target/*"))

    Args:
        *filters: Alternatives, evaluated until one accepts.

    Returns:
        Combined filter. No filters = report nothing.
    """

    def _report_if_any(event: ViolationEvent) -> bool:
        return any(flt(event) for flt in filters)

    return _report_if_any


def negate(flt: Filter) -> Filter:
    """Invert a filter: report what it drops and drop what it reports."""

    def _report_if_rejected(event: ViolationEvent) -> bool:
        return not flt(event)

    return _report_if_rejected
