"""Tests for read_source."""

from pathlib import Path

import pytest

from satcheck.domain.exceptions.source import SourceReadError
from satcheck.infrastructure.adapters.source_reader import read_source


class TestReadSource:
    """Tests for read_source."""

    def test_reads_utf8(self, tmp_path: Path) -> None:
        path = tmp_path / "README.md"
        path.write_text("# Überschrift\n", encoding="utf-8")

        assert read_source(path) == "# Überschrift\n"

    def test_missing_file(self, tmp_path: Path) -> None:
        path = tmp_path / "missing.md"

        with pytest.raises(SourceReadError) as exc_info:
            read_source(path)

        assert exc_info.value.path == path

    def test_invalid_encoding(self, tmp_path: Path) -> None:
        path = tmp_path / "README.md"
        path.write_bytes(b"\xff\xfe\xfa")

        with pytest.raises(SourceReadError, match="not valid utf-8"):
            read_source(path)
