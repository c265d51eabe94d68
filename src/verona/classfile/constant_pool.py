"""Constant pool parser.

Walks the header and constant pool of a class file without modelling
the rest of the format. Only Utf8 and Class entries keep their values;
every other recognised kind is consumed and recorded as skipped so the
cursor stays aligned. Long and Double take two slots, the second left
empty.

Reads stop right after the access-flags field, where the this-class
index begins (see :mod:`verona.classfile.identity`).
"""

from __future__ import annotations

import logging
from collections.abc import Iterator

from verona.classfile.errors import (
    MalformedPoolError,
    NotAClassFileError,
    UnknownConstantTagError,
    UnsupportedVersionError,
)
from verona.classfile.reader import ClassFileReader, decode_utf8
from verona.classfile.schemas import (
    ClassRefEntry,
    PoolEntry,
    SkippedEntry,
    Utf8Entry,
)
from verona.constants import (
    CLASS_FILE_MAGIC,
    JAVA_8_MAJOR_VERSION,
    SKIPPED_PAYLOAD_SIZES,
    WIDE_TAGS,
    ConstantTag,
)

logger = logging.getLogger(__name__)


class ConstantPool:
    """1-indexed table of ``count`` slots; slot 0 is never used."""

    def __init__(self, count: int) -> None:
        self._slots: list[PoolEntry | None] = [None] * count

    @property
    def count(self) -> int:
        """Header-declared slot count (valid indices are 1..count-1)."""
        return len(self._slots)

    def __setitem__(self, index: int, entry: PoolEntry) -> None:
        self._slots[index] = entry

    def get(self, index: int) -> PoolEntry | None:
        """Entry at ``index``, or None for empty or out-of-range slots."""
        if 0 < index < len(self._slots):
            return self._slots[index]
        return None

    def class_ref(self, index: int) -> ClassRefEntry:
        entry = self._lookup(index)
        if not isinstance(entry, ClassRefEntry):
            raise MalformedPoolError(
                index, f"expected Class entry, found {_describe(entry)}"
            )
        return entry

    def utf8(self, index: int) -> Utf8Entry:
        entry = self._lookup(index)
        if not isinstance(entry, Utf8Entry):
            raise MalformedPoolError(
                index, f"expected Utf8 entry, found {_describe(entry)}"
            )
        return entry

    def _lookup(self, index: int) -> PoolEntry | None:
        if not 0 < index < len(self._slots):
            raise MalformedPoolError(
                index, f"index out of range 1..{len(self._slots) - 1}"
            )
        return self._slots[index]

    def occupied(self) -> Iterator[tuple[int, PoolEntry]]:
        """Yield ``(index, entry)`` for every filled slot, in index order."""
        for index, entry in enumerate(self._slots):
            if entry is not None:
                yield index, entry

    def utf8_values(self) -> Iterator[str]:
        for _, entry in self.occupied():
            if isinstance(entry, Utf8Entry):
                yield entry.value


def _describe(entry: PoolEntry | None) -> str:
    if entry is None:
        return "empty slot"
    if isinstance(entry, SkippedEntry):
        return entry.tag.name
    return entry.kind


def parse_constant_pool(
    reader: ClassFileReader,
    max_major_version: int = JAVA_8_MAJOR_VERSION,
) -> ConstantPool:
    """Parse header, constant pool and access flags from ``reader``.

    Raises:
        NotAClassFileError: magic is not 0xCAFEBABE.
        UnsupportedVersionError: major version above ``max_major_version``.
        UnknownConstantTagError: a tag outside the recognised set.
        TruncatedError: the stream ended early.
    """
    magic = reader.u4()
    if magic != CLASS_FILE_MAGIC:
        raise NotAClassFileError(magic)
    reader.u2()  # minor version, not validated
    major = reader.u2()
    if major > max_major_version:
        raise UnsupportedVersionError(major, max_major_version)

    pool = ConstantPool(reader.u2())
    i = 1
    while i < pool.count:
        raw_tag = reader.u1()
        try:
            tag = ConstantTag(raw_tag)
        except ValueError:
            raise UnknownConstantTagError(raw_tag, i) from None

        if tag is ConstantTag.UTF8:
            pool[i] = Utf8Entry(
                value=decode_utf8(reader.read_exactly(reader.u2()))
            )
        elif tag is ConstantTag.CLASS:
            pool[i] = ClassRefEntry(name_index=reader.u2())
        else:
            reader.skip(SKIPPED_PAYLOAD_SIZES[tag])
            pool[i] = SkippedEntry(tag=tag)
            if tag in WIDE_TAGS:
                i += 1  # second half stays empty
        i += 1

    reader.u2()  # access flags
    logger.debug(
        "Parsed constant pool: version %d, %d slots, offset %d",
        major,
        pool.count,
        reader.offset,
    )
    return pool
