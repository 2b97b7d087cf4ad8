"""Version control adapters."""

from satcheck.infrastructure.vcs.git_ignore import VcsIgnoreOracle

__all__ = ["VcsIgnoreOracle"]
