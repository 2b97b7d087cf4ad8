"""satcheck - violation filtering and Markdown structure checks for static analysis runs."""

__version__ = "0.1.0"

from satcheck.application.filters.chain import ViolationFilterChain
from satcheck.application.filters.rate_limit import PerFileRuleCounter
from satcheck.application.linters.markdown_linter import DocumentStructureLinter
from satcheck.infrastructure.vcs.git_ignore import VcsIgnoreOracle

__all__ = [
    "DocumentStructureLinter",
    "PerFileRuleCounter",
    "VcsIgnoreOracle",
    "ViolationFilterChain",
    "__version__",
]
