"""Environment-based configuration for a scan.

Defaults reproduce the fixed audit: the five JEP 223 version
properties, ``.jar`` archives, ``.class`` files and the Java 8
class-file ceiling. Settings are frozen and constructed once per
invocation, then passed explicitly to the scanner.
"""

from __future__ import annotations

import logging
from typing import Annotated, Any

from pydantic import field_validator
from pydantic_settings import BaseSettings, NoDecode

from verona.constants import (
    ARCHIVE_EXTENSIONS,
    CLASS_EXTENSION,
    JAVA_8_MAJOR_VERSION,
    MIN_MAJOR_VERSION,
    VERSION_PROPERTIES,
)

logger = logging.getLogger(__name__)


def _split_csv(v: Any) -> Any:
    if isinstance(v, str):
        return tuple(s.strip() for s in v.split(",") if s.strip())
    return v


class Settings(BaseSettings):
    """Reads VERONA_* environment variables and an optional .env file."""

    # Matching
    target_strings: Annotated[tuple[str, ...], NoDecode] = VERSION_PROPERTIES

    # Candidate selection
    archive_extensions: Annotated[tuple[str, ...], NoDecode] = (
        ARCHIVE_EXTENSIONS
    )
    class_extension: str = CLASS_EXTENSION

    # Class-file format ceiling (52 = Java 8)
    max_major_version: int = JAVA_8_MAJOR_VERSION

    # Logging
    log_level: str = "WARNING"

    @field_validator("target_strings", "archive_extensions", mode="before")
    @classmethod
    def _parse_csv(cls, v: Any) -> Any:
        """Accept comma-separated string or JSON array."""
        return _split_csv(v)

    @field_validator("target_strings")
    @classmethod
    def _validate_targets(cls, v: tuple[str, ...]) -> tuple[str, ...]:
        if not v:
            raise ValueError(
                "target_strings must contain at least one string"
            )
        seen: set[str] = set()
        dupes: list[str] = []
        for s in v:
            if s in seen:
                dupes.append(s)
            seen.add(s)
        if dupes:
            logger.warning(
                "Duplicate strings in VERONA_TARGET_STRINGS: %s",
                ", ".join(dupes),
            )
        return v

    @field_validator("archive_extensions")
    @classmethod
    def _validate_archive_extensions(
        cls, v: tuple[str, ...]
    ) -> tuple[str, ...]:
        for ext in v:
            _check_extension(ext)
        return v

    @field_validator("class_extension")
    @classmethod
    def _validate_class_extension(cls, v: str) -> str:
        return _check_extension(v)

    @field_validator("max_major_version")
    @classmethod
    def _validate_ceiling(cls, v: int) -> int:
        if v < MIN_MAJOR_VERSION:
            raise ValueError(
                f"max_major_version must be at least {MIN_MAJOR_VERSION}"
            )
        return v

    @field_validator("log_level")
    @classmethod
    def _validate_log_level(cls, v: str) -> str:
        level = v.upper()
        if level not in logging.getLevelNamesMapping():
            raise ValueError(f"unknown log level '{v}'")
        return level

    def is_archive(self, name: str) -> bool:
        """True if ``name`` ends with one of the archive extensions."""
        return name.endswith(self.archive_extensions)

    def is_class(self, name: str) -> bool:
        return name.endswith(self.class_extension)

    model_config = {
        "env_file": ".env",
        "env_file_encoding": "utf-8",
        "env_prefix": "VERONA_",
        "extra": "ignore",
        "frozen": True,
    }


def _check_extension(ext: str) -> str:
    if not ext.startswith(".") or len(ext) < 2:
        raise ValueError(
            f"extension '{ext}' must start with '.'"
        )
    return ext
