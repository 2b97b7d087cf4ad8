"""Path filters.

Uses fnmatch for glob matching (* matches any character including /).
"""

from __future__ import annotations

import fnmatch
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from satcheck.application.filters.types import Filter
    from satcheck.domain.model.violation import ViolationEvent


def exclude_paths(*patterns: str) -> Filter:
    """Create filter that drops events for files matching any pattern.

    For directory matching, use patterns like "*/generated/*".

    Args:
        *patterns: Glob patterns to exclude (e.g., "*/target/*", "*.xml").

    Returns:
        Filter that returns False for events with file matching any pattern.
    """

    def _filter(event: ViolationEvent) -> bool:
        file_path = event.source_file.as_posix()
        return not any(fnmatch.fnmatch(file_path, p) for p in patterns)

    return _filter
