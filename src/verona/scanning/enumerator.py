"""Find class-file streams under directories and inside archives.

Each candidate is yielded as an open binary stream positioned at
offset 0, paired with where it came from. Streams are opened inside
``with`` blocks in the generator, so they are closed once the consumer
moves on, raises, or abandons the iteration.
"""

from __future__ import annotations

import logging
import zipfile
from collections.abc import Callable, Iterator
from dataclasses import dataclass
from pathlib import Path
from typing import BinaryIO, TypeAlias

from verona.classfile.errors import DirectoryNotFoundError
from verona.config import Settings
from verona.constants import SourceKind
from verona.scanning.schemas import ClassSource

logger = logging.getLogger(__name__)

ErrorCallback: TypeAlias = Callable[[ClassSource, Exception], None]

# Raised by ZipFile.open(): bad local header, unsupported compression,
# encrypted entry.
_ENTRY_OPEN_ERRORS = (
    OSError,
    zipfile.BadZipFile,
    NotImplementedError,
    RuntimeError,
)


@dataclass(frozen=True)
class ClassStream:
    """An open candidate stream and its origin."""

    source: ClassSource
    stream: BinaryIO


def _log_error(source: ClassSource, error: Exception) -> None:
    logger.warning(
        "Cannot open %s in %s '%s': %s",
        source.entry_name,
        source.kind,
        source.location,
        error,
    )


def iter_class_streams(
    path: Path,
    settings: Settings,
    on_error: ErrorCallback | None = None,
) -> Iterator[ClassStream]:
    """Yield every class stream reachable from one input path.

    * Directories are walked recursively.
    * A path with the class extension is a single loose class.
    * Anything else is read as an archive.

    Raises DirectoryNotFoundError if ``path`` does not exist.
    """
    report = on_error or _log_error
    if path.is_dir():
        yield from _walk_directory(path, settings, report, set())
    elif not path.exists():
        raise DirectoryNotFoundError(str(path.absolute()))
    elif settings.is_class(path.name):
        yield from _open_loose(path, report)
    else:
        yield from _walk_archive(path, settings, report)


def _walk_directory(
    directory: Path,
    settings: Settings,
    report: ErrorCallback,
    visited: set[Path],
) -> Iterator[ClassStream]:
    """Recursive walk; each resolved directory is entered once."""
    resolved = directory.resolve()
    if resolved in visited:
        logger.debug("Already visited %s, skipping", directory)
        return
    visited.add(resolved)

    try:
        children = sorted(directory.iterdir())
    except OSError as exc:
        report(
            ClassSource(
                location=str(directory.absolute()),
                kind=SourceKind.DIRECTORY,
                entry_name=directory.name,
            ),
            exc,
        )
        return

    for child in children:
        if child.is_dir():
            yield from _walk_directory(child, settings, report, visited)
        elif settings.is_archive(child.name):
            yield from _walk_archive(child, settings, report)
        elif settings.is_class(child.name):
            yield from _open_loose(child, report)


def _open_loose(path: Path, report: ErrorCallback) -> Iterator[ClassStream]:
    source = ClassSource(
        location=str(path.parent.absolute()),
        kind=SourceKind.DIRECTORY,
        entry_name=path.name,
    )
    try:
        stream = path.open("rb")
    except OSError as exc:
        report(source, exc)
        return
    with stream:
        yield ClassStream(source=source, stream=stream)


def _walk_archive(
    path: Path,
    settings: Settings,
    report: ErrorCallback,
) -> Iterator[ClassStream]:
    """Yield class entries of one archive in file order."""
    location = str(path.absolute())
    try:
        archive = zipfile.ZipFile(path)
    except (OSError, zipfile.BadZipFile) as exc:
        report(
            ClassSource(
                location=location,
                kind=SourceKind.ARCHIVE,
                entry_name=path.name,
            ),
            exc,
        )
        return

    with archive:
        for info in archive.infolist():
            if info.is_dir() or not settings.is_class(info.filename):
                continue
            source = ClassSource(
                location=location,
                kind=SourceKind.ARCHIVE,
                entry_name=info.filename,
            )
            try:
                stream = archive.open(info)
            except _ENTRY_OPEN_ERRORS as exc:
                report(source, exc)
                continue
            with stream:
                yield ClassStream(source=source, stream=stream)
