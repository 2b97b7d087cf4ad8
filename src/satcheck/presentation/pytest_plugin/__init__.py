"""pytest plugin for satcheck.

Provides fixtures for running documentation checks in tests:
    sat_config: Filter configuration (override in conftest.py)
    sat_ignore_oracle: Git ignore set of the project
    sat_filter_chain: Fresh filter chain per test
    sat_markdown_check: README.md / build.properties check
    sat_run: AnalysisRun wiring the check to the chain

Configuration (pytest.ini or pyproject.toml):
    satcheck_config: TOML file with [tool.satcheck] (default: nearest pyproject.toml)
"""

from __future__ import annotations

from typing import TYPE_CHECKING

# Register fixtures from fixtures module
from satcheck.presentation.pytest_plugin.fixtures import (
    sat_config,
    sat_filter_chain,
    sat_ignore_oracle,
    sat_markdown_check,
    sat_run,
)

if TYPE_CHECKING:
    import pytest

# Export fixtures for pytest discovery
__all__ = [
    "sat_config",
    "sat_filter_chain",
    "sat_ignore_oracle",
    "sat_markdown_check",
    "sat_run",
]


def pytest_addoption(parser: pytest.Parser) -> None:
    """Register ini options."""
    parser.addini(
        "satcheck_config",
        "TOML file holding [tool.satcheck] (default: nearest pyproject.toml)",
        default="",
    )


def pytest_configure(config: pytest.Config) -> None:
    """Configure pytest plugin with markers."""
    config.addinivalue_line(
        "markers",
        "satcheck: mark test as documentation/static-analysis check",
    )
