"""Violation filters.

Filters are callables: Filter = Callable[[ViolationEvent], bool]
True = report event, False = drop event.

Usage:
    from satcheck.application.filters import ViolationFilterChain, PerFileRuleCounter

    # Single filter
    counter = PerFileRuleCounter({"satcheck.markdown"}, max_per_file=3)
    reported = [e for e in events if counter(e)]

    # Ordered chain: ignore check first, rate limit second
    chain = ViolationFilterChain(exclude_ignored(oracle), counter)
"""

from satcheck.application.filters.chain import ViolationFilterChain
from satcheck.application.filters.composite import all_of, any_of, negate
from satcheck.application.filters.path import exclude_paths
from satcheck.application.filters.rate_limit import PerFileRuleCounter
from satcheck.application.filters.rules import exclude_rules, include_rules
from satcheck.application.filters.types import Filter
from satcheck.application.filters.vcs import exclude_ignored

__all__ = [
    "Filter",
    "PerFileRuleCounter",
    "ViolationFilterChain",
    "all_of",
    "any_of",
    "exclude_ignored",
    "exclude_paths",
    "exclude_rules",
    "include_rules",
    "negate",
]
