"""Source access exceptions."""

from __future__ import annotations

from typing import TYPE_CHECKING

from satcheck.domain.exceptions.base import SatCheckError

if TYPE_CHECKING:
    from pathlib import Path


class SourceReadError(SatCheckError):
    """Error reading a checked file.

    Attributes:
        path: File that could not be read
        reason: Why reading failed
    """

    def __init__(self, path: Path, reason: str) -> None:
        # FAIL-FIRST: validate required parameters
        if path is None:
            raise TypeError("path must not be None")
        if not reason:
            raise ValueError("reason must be non-empty string")

        self.path = path
        self.reason = reason
        super().__init__(f"Failed to read {path}: {reason}")
