"""Ports: contracts between layers."""

from satcheck.domain.ports.check import CheckPort
from satcheck.domain.ports.diagnostic_sink import DiagnosticSink
from satcheck.domain.ports.document_parser import DocumentParserPort
from satcheck.domain.ports.ignore_oracle import IgnoreOraclePort
from satcheck.domain.ports.reporter import ReporterProtocol

__all__ = [
    "CheckPort",
    "DiagnosticSink",
    "DocumentParserPort",
    "IgnoreOraclePort",
    "ReporterProtocol",
]
