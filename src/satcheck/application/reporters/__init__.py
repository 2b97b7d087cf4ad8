"""Reporters for analysis run results.

PlainTextReporter and JSONReporter use stdlib only,
ConsoleReporter renders rich tables.
"""

from satcheck.application.reporters._base import BaseReporter
from satcheck.application.reporters.console import ConsoleReporter
from satcheck.application.reporters.json_reporter import JSONReporter
from satcheck.application.reporters.plain_text import PlainTextReporter

__all__ = [
    "BaseReporter",
    "ConsoleReporter",
    "JSONReporter",
    "PlainTextReporter",
]
