"""Configuration exceptions."""

from satcheck.domain.exceptions.base import SatCheckError


class ConfigurationError(SatCheckError):
    """Error in filter or check configuration.

    Raised at setup time, never at decision time.
    FAIL-FIRST: a misconfigured filter must not be constructed.

    Attributes:
        key: Configuration key that is invalid (must not be empty)
        reason: Why the value is invalid (must not be empty)
    """

    def __init__(self, key: str, reason: str) -> None:
        # FAIL-FIRST validation
        if not key:
            raise ValueError("key must not be empty")
        if not reason:
            raise ValueError("reason must not be empty")

        self.key = key
        self.reason = reason
        super().__init__(f"Invalid configuration '{key}': {reason}")
