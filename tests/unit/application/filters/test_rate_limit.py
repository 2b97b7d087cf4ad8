"""Tests for PerFileRuleCounter.

Tests:
- cap applies per tracked rule within one file
- counters reset when the checked file changes
- untracked rules never touch counters
- construction rejects bad configuration
"""

from pathlib import Path

import pytest

from satcheck.application.filters.rate_limit import PerFileRuleCounter
from satcheck.domain.exceptions.configuration import ConfigurationError
from satcheck.domain.model.configuration import FilterConfig
from tests.factories import make_event

AUTHOR = "org.example.checks.AuthorTagCheck"
LICENSE = "org.example.checks.LicenseHeaderCheck"
OTHER = "org.example.checks.UnusedImportCheck"


class TestCap:
    """Tests for the per-file cap."""

    def test_cap_keeps_first_n(self) -> None:
        """Only the first max_per_file events of a tracked rule pass."""
        counter = PerFileRuleCounter({AUTHOR}, max_per_file=2)
        events = [make_event(file="/a.java", rule_id=AUTHOR, line=i) for i in range(1, 6)]

        decisions = [counter(e) for e in events]

        assert decisions == [True, True, False, False, False]

    def test_limit_is_inclusive(self) -> None:
        """The max_per_file-th event is still reported."""
        counter = PerFileRuleCounter({AUTHOR}, max_per_file=1)

        assert counter(make_event(rule_id=AUTHOR)) is True
        assert counter(make_event(rule_id=AUTHOR)) is False

    def test_zero_limit_drops_all_tracked(self) -> None:
        counter = PerFileRuleCounter({AUTHOR}, max_per_file=0)

        assert counter(make_event(rule_id=AUTHOR)) is False
        assert counter(make_event(rule_id=OTHER)) is True

    def test_rules_counted_independently(self) -> None:
        """Each tracked rule has its own budget within a file."""
        counter = PerFileRuleCounter({AUTHOR, LICENSE}, max_per_file=1)

        assert counter(make_event(rule_id=AUTHOR)) is True
        assert counter(make_event(rule_id=LICENSE)) is True
        assert counter(make_event(rule_id=AUTHOR)) is False
        assert counter(make_event(rule_id=LICENSE)) is False

    def test_none_limit_is_unbounded(self) -> None:
        counter = PerFileRuleCounter({AUTHOR}, max_per_file=None)

        assert all(counter(make_event(rule_id=AUTHOR, line=i)) for i in range(100))
        assert counter.count(Path("/project/bundle/src/Main.java"), AUTHOR) == 100

    def test_accept_equals_call(self) -> None:
        counter = PerFileRuleCounter({AUTHOR}, max_per_file=1)

        assert counter.accept(make_event(rule_id=AUTHOR)) is True
        assert counter(make_event(rule_id=AUTHOR)) is False


class TestFileChange:
    """Tests for counter reset between files."""

    def test_new_file_resets_budget(self) -> None:
        """Switching files gives every tracked rule a fresh budget."""
        counter = PerFileRuleCounter({AUTHOR}, max_per_file=1)

        assert counter(make_event(file="/a.java", rule_id=AUTHOR)) is True
        assert counter(make_event(file="/a.java", rule_id=AUTHOR)) is False
        assert counter(make_event(file="/b.java", rule_id=AUTHOR)) is True
        assert counter(make_event(file="/b.java", rule_id=AUTHOR)) is False

    def test_returning_to_file_starts_over(self) -> None:
        """Only the current file is remembered."""
        counter = PerFileRuleCounter({AUTHOR}, max_per_file=1)

        counter(make_event(file="/a.java", rule_id=AUTHOR))
        counter(make_event(file="/b.java", rule_id=AUTHOR))

        assert counter(make_event(file="/a.java", rule_id=AUTHOR)) is True

    def test_count_for_other_file_is_zero(self) -> None:
        counter = PerFileRuleCounter({AUTHOR}, max_per_file=5)
        counter(make_event(file="/a.java", rule_id=AUTHOR))
        counter(make_event(file="/a.java", rule_id=AUTHOR))

        assert counter.count(Path("/a.java"), AUTHOR) == 2
        assert counter.count(Path("/b.java"), AUTHOR) == 0


class TestUntracked:
    """Tests for rules outside the tracked set."""

    def test_untracked_always_pass(self) -> None:
        counter = PerFileRuleCounter({AUTHOR}, max_per_file=0)

        assert all(counter(make_event(rule_id=OTHER, line=i)) for i in range(10))

    def test_untracked_does_not_switch_file(self) -> None:
        """An untracked event for another file leaves current counters intact."""
        counter = PerFileRuleCounter({AUTHOR}, max_per_file=1)

        counter(make_event(file="/a.java", rule_id=AUTHOR))
        counter(make_event(file="/b.java", rule_id=OTHER))

        assert counter(make_event(file="/a.java", rule_id=AUTHOR)) is False
        assert counter.count(Path("/a.java"), AUTHOR) == 2

    def test_untracked_not_counted(self) -> None:
        counter = PerFileRuleCounter({AUTHOR}, max_per_file=1)
        counter(make_event(rule_id=OTHER))

        assert counter.count(Path("/project/bundle/src/Main.java"), OTHER) == 0


class TestConfiguration:
    """Tests for counter construction."""

    def test_from_config(self) -> None:
        config = FilterConfig(tracked_rules=frozenset({AUTHOR}), max_per_file=3)

        counter = PerFileRuleCounter.from_config(config)

        assert counter.tracked_rules == frozenset({AUTHOR})
        assert counter.max_per_file == 3

    def test_negative_limit_raises(self) -> None:
        with pytest.raises(ConfigurationError, match="max_per_file"):
            PerFileRuleCounter({AUTHOR}, max_per_file=-1)

    def test_string_limit_raises(self) -> None:
        with pytest.raises(ConfigurationError, match="must be an integer"):
            PerFileRuleCounter({AUTHOR}, max_per_file="3")  # type: ignore[arg-type]

    def test_empty_rule_id_raises(self) -> None:
        with pytest.raises(ConfigurationError, match="tracked_rules"):
            PerFileRuleCounter({""}, max_per_file=1)
