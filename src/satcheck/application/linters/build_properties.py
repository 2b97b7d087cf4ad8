"""build.properties packaging checks.

README.md and the doc folder are documentation only and must not be
packaged through the bin.includes entry.
"""

from __future__ import annotations

from satcheck.domain.model.diagnostic import Diagnostic

BIN_INCLUDES_PROPERTY = "bin.includes"
README_FILE_NAME = "README.md"
DOC_FOLDER_NAME = "doc"

README_IN_BIN_INCLUDES_MSG = "README.MD file must not be added to the bin.includes property"
DOC_FOLDER_IN_BIN_INCLUDES_MSG = "The doc folder must not be added to the bin.includes property"

_KEY_TERMINATORS = frozenset("=: \t\f")
_COMMENT_MARKERS = ("#", "!")


def _logical_lines(text: str) -> list[str]:
    """Join backslash-continued lines, dropping blanks and comments."""
    logical: list[str] = []
    pending: str | None = None

    # Only CR, LF and CRLF end a line; other Unicode breaks stay in the value
    normalized = text.replace("\r\n", "\n").replace("\r", "\n")
    for raw in normalized.split("\n"):
        line = raw.lstrip(" \t\f")
        if pending is None and (not line or line.startswith(_COMMENT_MARKERS)):
            continue

        # An odd number of trailing backslashes continues the line
        trailing = len(line) - len(line.rstrip("\\"))
        continued = trailing % 2 == 1
        if continued:
            line = line[:-1]

        pending = line if pending is None else pending + line
        if not continued:
            logical.append(pending)
            pending = None

    if pending is not None:
        logical.append(pending)
    return logical


def _split_entry(line: str) -> tuple[str, str]:
    """Split a logical line into key and value (Java properties rules)."""
    index = 0
    while index < len(line):
        char = line[index]
        if char == "\\":
            index += 2
            continue
        if char in _KEY_TERMINATORS:
            break
        index += 1

    key = line[:index]
    rest = line[index:].lstrip(" \t\f")
    if rest[:1] in ("=", ":"):
        rest = rest[1:].lstrip(" \t\f")
    return key.replace("\\", ""), rest


def parse_properties(text: str) -> dict[str, str]:
    """Parse Java .properties text.

    Supports '=', ':' and whitespace separators, '#'/'!' comments and
    backslash line continuation. Later keys override earlier ones.

    Args:
        text: File contents

    Returns:
        Mapping of keys to raw values
    """
    return dict(_split_entry(line) for line in _logical_lines(text))


class BuildPropertiesLinter:
    """Reports documentation files packaged through bin.includes."""

    def lint(self, text: str) -> tuple[Diagnostic, ...]:
        """Lint build.properties contents.

        Diagnostics are file-level (line 0).
        """
        includes = parse_properties(text).get(BIN_INCLUDES_PROPERTY)
        if includes is None:
            return ()

        entries = {entry.strip() for entry in includes.split(",") if entry.strip()}
        diagnostics: list[Diagnostic] = []

        if any(entry.lower() == README_FILE_NAME.lower() for entry in entries):
            diagnostics.append(Diagnostic(line=0, message=README_IN_BIN_INCLUDES_MSG))

        if any(entry.rstrip("/") == DOC_FOLDER_NAME for entry in entries):
            diagnostics.append(Diagnostic(line=0, message=DOC_FOLDER_IN_BIN_INCLUDES_MSG))

        return tuple(diagnostics)
