"""pytest fixtures for satcheck.

User overrides sat_config in their conftest.py.
"""

from __future__ import annotations

from pathlib import Path

import pytest

from satcheck.application.filters.chain import ViolationFilterChain
from satcheck.application.services.analysis_run import AnalysisRun
from satcheck.application.services.markdown_check import MARKDOWN_RULE_ID, MarkdownCheck
from satcheck.domain.model.configuration import FilterConfig
from satcheck.infrastructure.adapters.markdown_parser import MarkdownItParser
from satcheck.infrastructure.config.loader import find_config_file, load_config
from satcheck.infrastructure.vcs.git_ignore import VcsIgnoreOracle


def _root_dir(config: pytest.Config) -> Path:
    # rootdir exists on pytest.Config but type stubs may not include it
    return Path(str(getattr(config, "rootdir", ".")))


@pytest.fixture(scope="session")
def sat_config(request: pytest.FixtureRequest) -> FilterConfig:
    """Filter configuration.

    Reads satcheck_config ini option, falling back to the nearest
    pyproject.toml above rootdir.

    Returns:
        Validated FilterConfig
    """
    root_dir = _root_dir(request.config)
    configured = request.config.getini("satcheck_config")
    path = root_dir / str(configured) if configured else find_config_file(root_dir)
    return load_config(path, known_rules={MARKDOWN_RULE_ID}) if path else FilterConfig()


@pytest.fixture(scope="session")
def sat_ignore_oracle(request: pytest.FixtureRequest, sat_config: FilterConfig) -> VcsIgnoreOracle:
    """Git ignore set, loaded once per session. Empty if ignore_vcs is off."""
    if not sat_config.ignore_vcs:
        return VcsIgnoreOracle()
    return VcsIgnoreOracle.discover(_root_dir(request.config))


@pytest.fixture
def sat_filter_chain(
    sat_config: FilterConfig,
    sat_ignore_oracle: VcsIgnoreOracle,
) -> ViolationFilterChain:
    """Filter chain with fresh rate-limit state for each test."""
    return ViolationFilterChain.from_config(sat_config, sat_ignore_oracle)


@pytest.fixture(scope="session")
def sat_markdown_check() -> MarkdownCheck:
    """README.md / build.properties check backed by markdown-it."""
    return MarkdownCheck(MarkdownItParser())


@pytest.fixture
def sat_run(
    sat_markdown_check: MarkdownCheck,
    sat_filter_chain: ViolationFilterChain,
) -> AnalysisRun:
    """Analysis run over the markdown check and the configured chain."""
    return AnalysisRun([sat_markdown_check], sat_filter_chain)
