"""Configuration file loading."""

from satcheck.infrastructure.config.loader import find_config_file, load_config

__all__ = ["find_config_file", "load_config"]
