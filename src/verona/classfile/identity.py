"""Resolve the declared class name from a parsed constant pool."""

from __future__ import annotations

from verona.classfile.constant_pool import ConstantPool
from verona.classfile.reader import ClassFileReader


def resolve_class_name(pool: ConstantPool, reader: ClassFileReader) -> str:
    """Read the this-class index and follow it to the class name.

    Two bounds- and kind-checked lookups: this-class index → Class
    entry → Utf8 entry. The name is returned in internal form
    (``java/lang/Object``), exactly as stored in the pool.

    Raises MalformedPoolError if either lookup misses.
    """
    class_ref = pool.class_ref(reader.u2())
    return pool.utf8(class_ref.name_index).value
