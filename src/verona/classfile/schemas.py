"""Pydantic models for constant pool entries."""

from typing import Literal, TypeAlias

from pydantic import BaseModel

from verona.constants import ConstantTag


class Utf8Entry(BaseModel, frozen=True):
    """CONSTANT_Utf8, the only kind whose value is kept."""

    kind: Literal["utf8"] = "utf8"
    value: str


class ClassRefEntry(BaseModel, frozen=True):
    """CONSTANT_Class: unresolved index of the class name Utf8 entry."""

    kind: Literal["class"] = "class"
    name_index: int


class SkippedEntry(BaseModel, frozen=True):
    """Any other kind: payload consumed, value discarded."""

    kind: Literal["skipped"] = "skipped"
    tag: ConstantTag


PoolEntry: TypeAlias = Utf8Entry | ClassRefEntry | SkippedEntry
