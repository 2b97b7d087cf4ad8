"""Application services: checks and the analysis run."""

from satcheck.application.services.analysis_run import AnalysisRun
from satcheck.application.services.markdown_check import MARKDOWN_RULE_ID, MarkdownCheck

__all__ = [
    "MARKDOWN_RULE_ID",
    "AnalysisRun",
    "MarkdownCheck",
]
