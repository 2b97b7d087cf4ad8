"""Filter configuration.

None = feature disabled, value = feature enabled with that config.
"""

from __future__ import annotations

from collections.abc import Iterable, Mapping
from dataclasses import dataclass, field

from satcheck.domain.exceptions.configuration import ConfigurationError


@dataclass(frozen=True, slots=True)
class FilterConfig:
    """Configuration for the violation filter chain.

    Immutable configuration object with FAIL-FIRST validation.
    Misconfiguration is rejected here, never at decision time.

    Attributes:
        tracked_rules: Rule ids subject to the per-file cap.
        max_per_file: Max reports per tracked rule per file. None = unbounded.
        ignore_vcs: Suppress violations in files ignored by version control.
    """

    tracked_rules: frozenset[str] = field(default_factory=frozenset)
    max_per_file: int | None = None
    ignore_vcs: bool = True

    def __post_init__(self) -> None:
        """Validate invariants. FAIL-FIRST."""
        for rule_id in self.tracked_rules:
            if not isinstance(rule_id, str) or not rule_id:
                raise ConfigurationError(
                    "tracked_rules", f"rule id must be non-empty string, got {rule_id!r}"
                )

        validate_limit(self.max_per_file)

    @property
    def is_rate_limited(self) -> bool:
        """True if a per-file cap applies to at least one rule."""
        return bool(self.tracked_rules) and self.max_per_file is not None

    @classmethod
    def from_mapping(
        cls,
        data: Mapping[str, object],
        known_rules: Iterable[str] | None = None,
    ) -> FilterConfig:
        """Build config from loosely typed data (TOML table, fixture dict).

        Args:
            data: Mapping with optional keys tracked_rules, max_per_file, ignore_vcs.
            known_rules: Resolvable rule ids. None = accept any id.

        Returns:
            Validated FilterConfig.

        Raises:
            ConfigurationError: On unknown keys, malformed limit or unresolvable rule id.
        """
        unknown_keys = set(data) - {"tracked_rules", "max_per_file", "ignore_vcs"}
        if unknown_keys:
            raise ConfigurationError(sorted(unknown_keys)[0], "unknown configuration key")

        raw_rules = data.get("tracked_rules", ())
        if isinstance(raw_rules, str) or not isinstance(raw_rules, Iterable):
            raise ConfigurationError("tracked_rules", "must be a list of rule ids")
        rule_ids = tuple(raw_rules)
        for rule_id in rule_ids:
            if not isinstance(rule_id, str):
                raise ConfigurationError(
                    "tracked_rules", f"rule id must be a string, got {rule_id!r}"
                )
        tracked = frozenset(rule_ids)

        if known_rules is not None:
            unresolved = tracked - frozenset(known_rules)
            if unresolved:
                raise ConfigurationError("tracked_rules", f"unknown rule ids: {sorted(unresolved)}")

        ignore_vcs = data.get("ignore_vcs", True)
        if not isinstance(ignore_vcs, bool):
            raise ConfigurationError("ignore_vcs", f"must be a boolean, got {ignore_vcs!r}")

        return cls(
            tracked_rules=tracked,
            max_per_file=parse_limit(data.get("max_per_file")),
            ignore_vcs=ignore_vcs,
        )


def parse_limit(value: object) -> int | None:
    """Parse a per-file limit from int, numeric string or None.

    Raises:
        ConfigurationError: If value is not a non-negative integer.
    """
    if value is None:
        return None
    if isinstance(value, str):
        text = value.strip()
        if not (text.isascii() and text.isdigit()):
            raise ConfigurationError("max_per_file", f"not a number: {value!r}")
        return int(text)
    validate_limit(value)
    return value  # type: ignore[return-value]


def validate_limit(value: object) -> None:
    """Check that value is None or an int >= 0 (bool rejected)."""
    if value is None:
        return
    if isinstance(value, bool) or not isinstance(value, int):
        raise ConfigurationError("max_per_file", f"must be an integer, got {value!r}")
    if value < 0:
        raise ConfigurationError("max_per_file", f"must be >= 0, got {value}")
