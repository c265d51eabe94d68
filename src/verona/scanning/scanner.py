"""Run the audit over a batch of input paths."""

from __future__ import annotations

import logging
import zipfile
import zlib
from collections.abc import Callable, Iterable
from typing import TypeAlias
from pathlib import Path

from verona.classfile import inspect_class
from verona.classfile.errors import ParseError, classify_error, is_reportable
from verona.config import Settings
from verona.scanning.enumerator import iter_class_streams
from verona.scanning.schemas import (
    ClassSource,
    MatchResult,
    ScanFailure,
    ScanSummary,
)

logger = logging.getLogger(__name__)

MatchCallback: TypeAlias = Callable[[MatchResult], None]

# Failures contained to a single candidate. zip entry streams raise
# BadZipFile on CRC mismatch, zlib.error / EOFError on corrupt data.
_CANDIDATE_ERRORS = (
    ParseError,
    OSError,
    EOFError,
    zipfile.BadZipFile,
    zlib.error,
)

# Raised by on_match while writing a report line.
_RENDER_ERRORS = (UnicodeError, OSError)


def scan_paths(
    paths: Iterable[str | Path],
    settings: Settings | None = None,
    on_match: MatchCallback | None = None,
) -> ScanSummary:
    """Inspect every class reachable from ``paths``.

    Candidates are processed one at a time, in discovery order. A
    candidate that fails to parse is recorded in the summary and the
    scan moves on; only DirectoryNotFoundError escapes.

    ``on_match`` is called as soon as each match is found.
    """
    if settings is None:
        settings = Settings()
    summary = ScanSummary()

    def record_failure(source: ClassSource, error: Exception) -> None:
        failure_class = classify_error(error)
        level = logging.WARNING if is_reportable(error) else logging.DEBUG
        logger.log(
            level,
            "Skipping %s in %s '%s' (%s): %s",
            source.entry_name,
            source.kind,
            source.location,
            failure_class.value,
            error,
        )
        summary.failures.append(
            ScanFailure(
                location=source.location,
                entry_name=source.entry_name,
                failure_class=failure_class,
                message=str(error),
            )
        )

    for path in paths:
        for candidate in iter_class_streams(
            Path(path), settings, on_error=record_failure
        ):
            summary.candidates += 1
            try:
                inspection = inspect_class(
                    candidate.stream,
                    settings.target_strings,
                    settings.max_major_version,
                )
            except _CANDIDATE_ERRORS as exc:
                record_failure(candidate.source, exc)
                continue

            if not inspection.found:
                continue
            result = MatchResult(
                location=candidate.source.location,
                kind=candidate.source.kind,
                class_name=inspection.class_name,
                found=inspection.found,
                entry_name=candidate.source.entry_name,
            )
            summary.results.append(result)
            if on_match is None:
                continue
            try:
                on_match(result)
            except _RENDER_ERRORS as exc:
                record_failure(candidate.source, exc)

    logger.info(
        "Scanned %d classes: %d matched, %d failed",
        summary.candidates,
        summary.matched,
        summary.failed,
    )
    return summary
