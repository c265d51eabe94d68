"""Tests for singleton logging configuration."""

from __future__ import annotations

import logging
from unittest.mock import patch

import pytest

from verona.logging_config import LOG_DATEFMT, LOG_FORMAT, setup_logging


@pytest.fixture(autouse=True)
def _reset_flag() -> None:
    """Reset singleton flag before each test."""
    import verona.logging_config as mod

    mod._configured = False


def test_setup_logging_is_idempotent() -> None:
    with patch("verona.logging_config.logging.basicConfig") as mock_bc:
        setup_logging()
        setup_logging("DEBUG")  # second call is no-op
        mock_bc.assert_called_once()


def test_level_and_format_passed_to_basic_config() -> None:
    with patch("verona.logging_config.logging.basicConfig") as mock_bc:
        setup_logging("debug")
    mock_bc.assert_called_once_with(
        level=logging.DEBUG,
        format=LOG_FORMAT,
        datefmt=LOG_DATEFMT,
    )


def test_default_level_is_warning() -> None:
    with patch("verona.logging_config.logging.basicConfig") as mock_bc:
        setup_logging()
    assert mock_bc.call_args.kwargs["level"] == logging.WARNING
