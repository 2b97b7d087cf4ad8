"""Source file reader."""

from __future__ import annotations

from typing import TYPE_CHECKING

from satcheck.domain.exceptions.source import SourceReadError

if TYPE_CHECKING:
    from pathlib import Path


def read_source(path: Path, encoding: str = "utf-8") -> str:
    """Read a checked file as text.

    FAIL-FIRST: raises SourceReadError on I/O or decoding errors.

    Args:
        path: File to read
        encoding: Text encoding (default utf-8)

    Returns:
        File contents
    """
    try:
        return path.read_text(encoding=encoding)
    except UnicodeDecodeError as e:
        raise SourceReadError(path, f"not valid {encoding}: {e.reason}") from e
    except OSError as e:
        raise SourceReadError(path, e.strerror or str(e)) from e
