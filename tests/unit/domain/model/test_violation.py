"""Tests for domain/model/violation.py and domain/model/diagnostic.py."""

from pathlib import Path

import pytest

from satcheck.domain.model.diagnostic import Diagnostic
from satcheck.domain.model.violation import ViolationEvent
from tests.factories import make_event


class TestViolationEventCreation:
    """Tests for valid ViolationEvent creation."""

    def test_minimal_valid(self) -> None:
        event = make_event(file="/a/B.java", rule_id="rule.X", line=3, message="bad")
        assert event.source_file == Path("/a/B.java")
        assert event.rule_id == "rule.X"
        assert event.line == 3
        assert event.message == "bad"

    def test_line_zero_is_file_level(self) -> None:
        assert make_event(line=0).line == 0

    def test_is_frozen(self) -> None:
        event = make_event()
        with pytest.raises(AttributeError):
            event.line = 5  # type: ignore[misc]

    def test_equal_by_value(self) -> None:
        assert make_event(line=2) == make_event(line=2)

    def test_str_format(self) -> None:
        event = make_event(file="/a/B.java", rule_id="rule.X", line=3, message="bad")
        assert str(event) == f"{Path('/a/B.java')}:3: bad [rule.X]"


class TestViolationEventFailFirst:
    """Tests for FAIL-FIRST validation in ViolationEvent."""

    def test_none_file_raises(self) -> None:
        with pytest.raises(TypeError, match="source_file must not be None"):
            ViolationEvent(
                source_file=None,  # type: ignore[arg-type]
                rule_id="r",
                line=1,
                message="m",
            )

    def test_empty_rule_id_raises(self) -> None:
        with pytest.raises(ValueError, match="rule_id must not be empty"):
            make_event(rule_id="")

    def test_negative_line_raises(self) -> None:
        with pytest.raises(ValueError, match="line must be >= 0"):
            make_event(line=-1)

    def test_empty_message_raises(self) -> None:
        with pytest.raises(ValueError, match="message must not be empty"):
            make_event(message="")


class TestDiagnostic:
    """Tests for Diagnostic."""

    def test_to_event_attaches_identity(self) -> None:
        diagnostic = Diagnostic(line=4, message="missing blank line")

        event = diagnostic.to_event(Path("README.md"), "satcheck.markdown")

        assert event == ViolationEvent(
            source_file=Path("README.md"),
            rule_id="satcheck.markdown",
            line=4,
            message="missing blank line",
        )

    def test_negative_line_raises(self) -> None:
        with pytest.raises(ValueError, match="line must be >= 0"):
            Diagnostic(line=-1, message="m")

    def test_empty_message_raises(self) -> None:
        with pytest.raises(ValueError, match="message must not be empty"):
            Diagnostic(line=1, message="")
