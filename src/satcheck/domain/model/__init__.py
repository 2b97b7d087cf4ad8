"""Domain model: violation events, diagnostics, document tree, configuration."""

from satcheck.domain.model.check_result import CheckResult, RunStats
from satcheck.domain.model.configuration import FilterConfig
from satcheck.domain.model.diagnostic import Diagnostic
from satcheck.domain.model.document import DocumentNode, NodeKind, SourceLines
from satcheck.domain.model.violation import ViolationEvent

__all__ = [
    "CheckResult",
    "Diagnostic",
    "DocumentNode",
    "FilterConfig",
    "NodeKind",
    "RunStats",
    "SourceLines",
    "ViolationEvent",
]
