"""Base exceptions for satcheck domain."""


class SatCheckError(Exception):
    """Root exception for all satcheck errors.

    All domain exceptions inherit from this.
    Allows catching all satcheck-specific errors.
    """
