"""Class-file parse errors and failure classification.

Every per-candidate failure is a ParseError (or an I/O error raised by
the underlying stream). Classification decides how loudly a failure is
reported:
- NOT_APPLICABLE / UNSUPPORTED: expected, logged at debug
- CORRUPT / IO / UNKNOWN: logged as warnings
"""

from __future__ import annotations

import zipfile
import zlib
from enum import Enum


class VeronaError(Exception):
    """Base class for all verona errors."""


class ParseError(VeronaError):
    """A class-file stream could not be parsed."""


class NotAClassFileError(ParseError):
    def __init__(self, magic: int) -> None:
        super().__init__(f"Invalid magic 0x{magic:08X}")
        self.magic = magic


class UnsupportedVersionError(ParseError):
    def __init__(self, major: int, ceiling: int) -> None:
        super().__init__(
            f"Unsupported class file version {major} (max {ceiling})"
        )
        self.major = major
        self.ceiling = ceiling


class TruncatedError(ParseError):
    def __init__(self, offset: int, wanted: int, got: int) -> None:
        super().__init__(
            f"Unexpected end of stream at offset {offset}: "
            f"wanted {wanted} bytes, got {got}"
        )
        self.offset = offset
        self.wanted = wanted
        self.got = got


class UnknownConstantTagError(ParseError):
    def __init__(self, tag: int, index: int) -> None:
        super().__init__(
            f"Unknown constant pool tag {tag} at index {index}"
        )
        self.tag = tag
        self.index = index


class MalformedPoolError(ParseError):
    def __init__(self, index: int, reason: str) -> None:
        super().__init__(f"Malformed constant pool at index {index}: {reason}")
        self.index = index
        self.reason = reason


class DirectoryNotFoundError(VeronaError):
    """An input path does not exist. Aborts the whole invocation."""

    def __init__(self, path: str) -> None:
        super().__init__(f"Directory '{path}' does not exist")
        self.path = path


class FailureClass(Enum):
    NOT_APPLICABLE = "not_applicable"  # not a class file at all
    UNSUPPORTED = "unsupported"  # newer than the version ceiling
    CORRUPT = "corrupt"  # truncated, unknown tag, bad index, bad zip data
    IO = "io"  # the stream itself failed
    UNKNOWN = "unknown"


def classify_error(error: Exception) -> FailureClass:
    """Classify a per-candidate failure to pick its log level."""
    if isinstance(error, NotAClassFileError):
        return FailureClass.NOT_APPLICABLE
    if isinstance(error, UnsupportedVersionError):
        return FailureClass.UNSUPPORTED
    if isinstance(
        error,
        (ParseError, zipfile.BadZipFile, zlib.error, EOFError),
    ):
        return FailureClass.CORRUPT
    if isinstance(error, OSError):
        return FailureClass.IO
    return FailureClass.UNKNOWN


_EXPECTED = frozenset({
    FailureClass.NOT_APPLICABLE,
    FailureClass.UNSUPPORTED,
})


def is_reportable(error: Exception) -> bool:
    """Return True if the failure deserves a warning, not just a debug line."""
    return classify_error(error) not in _EXPECTED
