"""Exact-match constant pool strings against the target set."""

from __future__ import annotations

from collections.abc import Iterable

from verona.classfile.constant_pool import ConstantPool


def find_matches(pool: ConstantPool, targets: Iterable[str]) -> frozenset[str]:
    """Return every distinct Utf8 value that equals one of ``targets``."""
    wanted = frozenset(targets)
    return frozenset(v for v in pool.utf8_values() if v in wanted)
