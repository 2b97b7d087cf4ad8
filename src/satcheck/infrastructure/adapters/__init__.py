"""Adapters implementing domain ports."""

from satcheck.infrastructure.adapters.markdown_parser import MarkdownItParser
from satcheck.infrastructure.adapters.source_reader import read_source

__all__ = ["MarkdownItParser", "read_source"]
