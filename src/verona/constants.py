"""Shared constants — class-file format values and scan defaults.

All magic numbers of the class-file format that appear in 2+ modules
belong here. StrEnum members are str-compatible, so report and log
formatting works unchanged.
"""

from __future__ import annotations

from enum import IntEnum, StrEnum

# ── Class-file format ────────────────────────────────────

CLASS_FILE_MAGIC = 0xCAFEBABE

# Major version of the last pre-module class-file layout (Java 8).
JAVA_8_MAJOR_VERSION = 52

# Major version of the first class-file format (JDK 1.0.2 / 1.1).
MIN_MAJOR_VERSION = 45


class ConstantTag(IntEnum):
    """Constant pool entry tags understood by the parser."""

    UTF8 = 1
    INTEGER = 3
    FLOAT = 4
    LONG = 5
    DOUBLE = 6
    CLASS = 7
    STRING = 8
    FIELDREF = 9
    METHODREF = 10
    INTERFACE_METHODREF = 11
    NAME_AND_TYPE = 12
    METHOD_HANDLE = 15
    METHOD_TYPE = 16
    INVOKE_DYNAMIC = 18


# Payload size in bytes of every kind whose value is never retained.
SKIPPED_PAYLOAD_SIZES: dict[ConstantTag, int] = {
    ConstantTag.INTEGER: 4,
    ConstantTag.FLOAT: 4,
    ConstantTag.LONG: 8,
    ConstantTag.DOUBLE: 8,
    ConstantTag.STRING: 2,
    ConstantTag.FIELDREF: 4,
    ConstantTag.METHODREF: 4,
    ConstantTag.INTERFACE_METHODREF: 4,
    ConstantTag.NAME_AND_TYPE: 4,
    ConstantTag.METHOD_HANDLE: 3,
    ConstantTag.METHOD_TYPE: 2,
    ConstantTag.INVOKE_DYNAMIC: 4,
}

# Kinds that occupy two consecutive pool slots.
WIDE_TAGS = frozenset({ConstantTag.LONG, ConstantTag.DOUBLE})

# ── Scan defaults ────────────────────────────────────────

# System properties whose value format changed with JEP 223.
VERSION_PROPERTIES: tuple[str, ...] = (
    "java.version",
    "java.runtime.version",
    "java.vm.version",
    "java.specification.version",
    "java.vm.specification.version",
)

ARCHIVE_EXTENSIONS: tuple[str, ...] = (".jar",)
CLASS_EXTENSION = ".class"


class SourceKind(StrEnum):
    """Where a class came from."""

    DIRECTORY = "directory"  # loose (exploded) class file
    ARCHIVE = "archive"

    @property
    def label(self) -> str:
        """Capitalised word used in report lines."""
        return self.value.capitalize()
