"""Text report — one line per matching class."""

from __future__ import annotations

import sys
from typing import TextIO

from verona.scanning.schemas import MatchResult


def format_match(result: MatchResult) -> str:
    """Render one match, e.g.

    ``Archive '/libs/a.jar', class 'com/acme/Foo', contains string [java.version]``
    """
    noun = "strings" if len(result.found) > 1 else "string"
    found = ", ".join(sorted(result.found))
    return (
        f"{result.kind.label} '{result.location}', "
        f"class '{result.class_name}', "
        f"contains {noun} [{found}]"
    )


class ReportSink:
    """Writes match lines to a text stream (stdout by default)."""

    def __init__(self, out: TextIO | None = None) -> None:
        self._out = out

    def emit(self, result: MatchResult) -> None:
        out = self._out or sys.stdout
        print(format_match(result), file=out, flush=True)
