"""Shared test helpers — synthetic class files, jars and short-read streams."""

from __future__ import annotations

import io
import struct
import zipfile
from pathlib import Path
from typing import Any

import pytest

from verona.config import Settings

# (tag, struct format of the payload) for every fixed-size kind
_FIXED: dict[str, tuple[int, str]] = {
    "class": (7, ">H"),
    "integer": (3, ">i"),
    "float": (4, ">f"),
    "long": (5, ">q"),
    "double": (6, ">d"),
    "string": (8, ">H"),
    "fieldref": (9, ">HH"),
    "methodref": (10, ">HH"),
    "interface_methodref": (11, ">HH"),
    "name_and_type": (12, ">HH"),
    "method_handle": (15, ">BH"),
    "method_type": (16, ">H"),
    "invoke_dynamic": (18, ">HH"),
}

WIDE = {"long", "double"}

Entry = tuple[Any, ...]


def pool_count(entries: list[Entry]) -> int:
    """Header count for ``entries``: one plus the slots they occupy."""
    return 1 + sum(2 if e[0] in WIDE else 1 for e in entries)


def encode_entries(entries: list[Entry]) -> bytes:
    out = bytearray()
    for kind, *payload in entries:
        if kind == "utf8":
            data = payload[0]
            if isinstance(data, str):
                data = data.encode("utf-8")
            out += struct.pack(">BH", 1, len(data)) + data
        elif kind == "raw":
            out += payload[0]
        else:
            tag, fmt = _FIXED[kind]
            out += struct.pack(">B", tag) + struct.pack(fmt, *payload)
    return bytes(out)


def build_class_file(
    entries: list[Entry],
    this_class: int,
    *,
    magic: int = 0xCAFEBABE,
    minor: int = 0,
    major: int = 52,
    access_flags: int = 0x0021,
    count: int | None = None,
) -> bytes:
    """Assemble a class file up to (and past) the this-class index.

    ``entries`` are ``(kind, *payload)`` tuples, e.g. ``("utf8", "Foo")``,
    ``("class", 1)``, ``("long", 7)`` or ``("raw", b"...")``.
    """
    header = struct.pack(
        ">IHHH",
        magic,
        minor,
        major,
        pool_count(entries) if count is None else count,
    )
    tail = struct.pack(">HHHH", access_flags, this_class, 0, 0)
    return header + encode_entries(entries) + tail


def simple_class(
    name: str = "com/acme/Widget",
    strings: list[str] | None = None,
    *,
    major: int = 52,
) -> bytes:
    """Class ``name`` (Utf8 at 1, Class at 2) followed by ``strings``."""
    entries: list[Entry] = [("utf8", name), ("class", 1)]
    entries += [("utf8", s) for s in strings or []]
    return build_class_file(entries, this_class=2, major=major)


def header_size(entries: list[Entry]) -> int:
    """Offset right after the access-flags field."""
    return 10 + len(encode_entries(entries)) + 2


def write_jar(path: Path, members: dict[str, bytes]) -> Path:
    with zipfile.ZipFile(path, "w") as jar:
        for name, data in members.items():
            if name.endswith("/"):
                jar.writestr(zipfile.ZipInfo(name), b"")
            else:
                jar.writestr(name, data)
    return path


class ShortReadStream(io.RawIOBase):
    """Binary stream that never returns more than ``chunk`` bytes per read."""

    def __init__(self, data: bytes, chunk: int = 1) -> None:
        self._buf = io.BytesIO(data)
        self._chunk = chunk

    def readable(self) -> bool:
        return True

    def read(self, size: int = -1) -> bytes:
        if size < 0:
            size = self._chunk
        return self._buf.read(min(size, self._chunk))


@pytest.fixture
def settings() -> Settings:
    return Settings(_env_file=None)  # type: ignore[call-arg]
