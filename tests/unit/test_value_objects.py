"""Value object compliance tests.

- FAIL-FIRST: invalid values raise at construction
- Immutability: frozen dataclasses reject attribute assignment
"""

from __future__ import annotations

import dataclasses
from pathlib import Path

import pytest

from satcheck.domain.model import (
    CheckResult,
    Diagnostic,
    DocumentNode,
    FilterConfig,
    NodeKind,
    RunStats,
    SourceLines,
    ViolationEvent,
)

VALUE_OBJECTS = [
    ViolationEvent(source_file=Path("README.md"), rule_id="r", line=1, message="m"),
    Diagnostic(line=1, message="m"),
    DocumentNode(kind=NodeKind.PARAGRAPH, start_line=0, end_line=0),
    SourceLines(("a",)),
    FilterConfig(),
    RunStats.empty(),
    CheckResult.empty(),
]


class TestImmutability:
    """Domain values are frozen."""

    @pytest.mark.parametrize("value", VALUE_OBJECTS, ids=lambda v: type(v).__name__)
    def test_assignment_rejected(self, value: object) -> None:
        field_name = dataclasses.fields(value)[0].name  # type: ignore[arg-type]

        with pytest.raises(dataclasses.FrozenInstanceError):
            setattr(value, field_name, None)

    @pytest.mark.parametrize("value", VALUE_OBJECTS, ids=lambda v: type(v).__name__)
    def test_hashable(self, value: object) -> None:
        assert hash(value) == hash(value)


class TestFailFirstValidation:
    """Invalid values raise instead of being silently corrected."""

    def test_diagnostic_negative_line(self) -> None:
        with pytest.raises(ValueError, match="line"):
            Diagnostic(line=-5, message="m")

    def test_document_node_inverted_range(self) -> None:
        with pytest.raises(ValueError, match="end_line"):
            DocumentNode(kind=NodeKind.HEADING, start_line=2, end_line=1)

    def test_run_stats_negative_files(self) -> None:
        with pytest.raises(ValueError, match="files_checked"):
            RunStats(files_checked=-1, events_produced=0, events_accepted=0, elapsed_ms=0.0)
