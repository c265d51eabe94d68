"""Pydantic models for the scan data flow."""

from pydantic import BaseModel, Field

from verona.classfile.errors import FailureClass
from verona.constants import SourceKind


class ClassSource(BaseModel, frozen=True):
    """Where a candidate class stream came from."""

    location: str  # containing directory or archive, absolute
    kind: SourceKind
    entry_name: str  # file name, or entry path inside the archive


class MatchResult(BaseModel, frozen=True):
    """A class whose constant pool holds at least one target string."""

    location: str
    kind: SourceKind
    class_name: str
    found: frozenset[str]
    entry_name: str | None = None

    @property
    def exploded(self) -> bool:
        """True for loose class files found under a directory."""
        return self.kind is SourceKind.DIRECTORY


class ScanFailure(BaseModel, frozen=True):
    """A candidate that could not be parsed."""

    location: str
    entry_name: str
    failure_class: FailureClass
    message: str


class ScanSummary(BaseModel):
    """Output of scan_paths: everything one invocation found."""

    results: list[MatchResult] = Field(
        default_factory=lambda: list[MatchResult]()
    )
    failures: list[ScanFailure] = Field(
        default_factory=lambda: list[ScanFailure]()
    )
    candidates: int = 0

    @property
    def matched(self) -> int:
        return len(self.results)

    @property
    def failed(self) -> int:
        return len(self.failures)
