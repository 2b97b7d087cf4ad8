"""Ignore oracle protocol."""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol

if TYPE_CHECKING:
    from os import PathLike


class IgnoreOraclePort(Protocol):
    """Answers whether a path is excluded from source control."""

    def is_ignored(self, path: str | PathLike[str]) -> bool:
        """True only for confirmed ignored paths."""
        ...
