"""Configuration loader for satcheck.

Reads ``[tool.satcheck]`` from pyproject.toml, or a standalone TOML file
that is either flat or carries the same ``[tool.satcheck]`` table::

    [tool.satcheck]
    tracked_rules = ["satcheck.markdown"]
    max_per_file = 5
    ignore_vcs = true
"""

from __future__ import annotations

import tomllib
from collections.abc import Iterable, Mapping
from pathlib import Path

from satcheck.domain.exceptions.configuration import ConfigurationError
from satcheck.domain.model.configuration import FilterConfig
from satcheck.infrastructure.logging import get_logger

logger = get_logger(__name__)

PYPROJECT = "pyproject.toml"


def find_config_file(start: Path | None = None) -> Path | None:
    """Find the nearest pyproject.toml walking up from start.

    Args:
        start: Directory to search from. None = current working directory.

    Returns:
        Path to pyproject.toml or None if not found.
    """
    directory = (start if start is not None else Path.cwd()).resolve()
    for candidate_dir in (directory, *directory.parents):
        candidate = candidate_dir / PYPROJECT
        if candidate.is_file():
            return candidate
    return None


def load_config(
    path: Path | None = None,
    known_rules: Iterable[str] | None = None,
) -> FilterConfig:
    """Load filter configuration.

    Args:
        path: TOML file. None = discover pyproject.toml from cwd.
        known_rules: Resolvable rule ids for validation. None = accept any.

    Returns:
        Validated FilterConfig (defaults if no config found).

    Raises:
        ConfigurationError: If the file is unreadable, malformed or invalid.
    """
    config_path = path if path is not None else find_config_file()
    if config_path is None:
        logger.info("No configuration file found, using defaults")
        return FilterConfig()

    logger.info("Loading configuration from {path}", path=config_path)
    try:
        with config_path.open("rb") as f:
            data = tomllib.load(f)
    except tomllib.TOMLDecodeError as e:
        raise ConfigurationError(str(config_path), f"invalid TOML: {e}") from e
    except OSError as e:
        raise ConfigurationError(str(config_path), e.strerror or str(e)) from e

    section = _select_section(data, config_path)
    if section is None:
        logger.warning(
            "No [tool.satcheck] section found in {path}, using defaults", path=config_path
        )
        return FilterConfig()

    return FilterConfig.from_mapping(section, known_rules=known_rules)


def _select_section(data: Mapping[str, object], config_path: Path) -> Mapping[str, object] | None:
    """Pick the satcheck table from parsed TOML."""
    tool = data.get("tool")
    if isinstance(tool, Mapping) and "satcheck" in tool:
        section = tool["satcheck"]
        if not isinstance(section, Mapping):
            raise ConfigurationError("tool.satcheck", "must be a table")
        return section
    if config_path.name == PYPROJECT:
        return None
    # Standalone file without [tool.satcheck]: treat as flat
    return data
