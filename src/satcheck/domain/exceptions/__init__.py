"""Domain exceptions."""

from satcheck.domain.exceptions.base import SatCheckError
from satcheck.domain.exceptions.configuration import ConfigurationError
from satcheck.domain.exceptions.source import SourceReadError

__all__ = [
    "SatCheckError",
    "ConfigurationError",
    "SourceReadError",
]
