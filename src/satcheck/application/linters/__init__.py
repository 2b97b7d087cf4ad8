"""Linters: document tree in, positional diagnostics out."""

from satcheck.application.linters.build_properties import BuildPropertiesLinter, parse_properties
from satcheck.application.linters.markdown_linter import DocumentStructureLinter

__all__ = [
    "BuildPropertiesLinter",
    "DocumentStructureLinter",
    "parse_properties",
]
