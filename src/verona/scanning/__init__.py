"""Candidate discovery and batch scanning."""

from verona.scanning.enumerator import ClassStream, iter_class_streams
from verona.scanning.scanner import scan_paths
from verona.scanning.schemas import (
    ClassSource,
    MatchResult,
    ScanFailure,
    ScanSummary,
)

__all__ = [
    "ClassSource",
    "ClassStream",
    "MatchResult",
    "ScanFailure",
    "ScanSummary",
    "iter_class_streams",
    "scan_paths",
]
