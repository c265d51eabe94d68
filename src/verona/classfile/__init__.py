"""Class-file inspection: constant pool parsing, class naming and string matching."""

from collections.abc import Iterable
from dataclasses import dataclass
from typing import BinaryIO

from verona.classfile.constant_pool import ConstantPool, parse_constant_pool
from verona.classfile.errors import (
    MalformedPoolError,
    NotAClassFileError,
    ParseError,
    TruncatedError,
    UnknownConstantTagError,
    UnsupportedVersionError,
)
from verona.classfile.identity import resolve_class_name
from verona.classfile.matcher import find_matches
from verona.classfile.reader import ClassFileReader
from verona.constants import JAVA_8_MAJOR_VERSION

__all__ = [
    "ClassFileReader",
    "ClassInspection",
    "ConstantPool",
    "MalformedPoolError",
    "NotAClassFileError",
    "ParseError",
    "TruncatedError",
    "UnknownConstantTagError",
    "UnsupportedVersionError",
    "find_matches",
    "inspect_class",
    "parse_constant_pool",
    "resolve_class_name",
]


@dataclass(frozen=True)
class ClassInspection:
    """Name and matched strings of one parsed class."""

    class_name: str
    found: frozenset[str]


def inspect_class(
    stream: BinaryIO,
    targets: Iterable[str],
    max_major_version: int = JAVA_8_MAJOR_VERSION,
) -> ClassInspection:
    """Parse one class-file stream and match its strings against ``targets``.

    The pool is discarded when this returns. Raises ParseError.
    """
    reader = ClassFileReader(stream)
    pool = parse_constant_pool(reader, max_major_version)
    class_name = resolve_class_name(pool, reader)
    return ClassInspection(
        class_name=class_name,
        found=find_matches(pool, targets),
    )
