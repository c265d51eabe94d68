"""Tests for CLI argument parsing, usage text and exit behaviour."""

from __future__ import annotations

from collections.abc import Iterator
from pathlib import Path
from unittest.mock import patch

import pytest

from tests.conftest import simple_class, write_jar
from verona import __version__
from verona.cli import USAGE_LINES, _build_parser, main


@pytest.fixture(autouse=True)
def _no_logging_setup() -> Iterator[None]:
    """Keep CLI runs from reconfiguring the root logger."""
    with patch("verona.cli.setup_logging"):
        yield


class TestArgParser:
    def test_defaults(self) -> None:
        args = _build_parser().parse_args([])
        assert args.paths == []
        assert args.verbose is False
        assert args.version is False

    def test_paths_and_verbose(self) -> None:
        args = _build_parser().parse_args(["a.jar", "classes", "-v"])
        assert args.paths == ["a.jar", "classes"]
        assert args.verbose is True


class TestMain:
    def test_no_paths_prints_usage(
        self, capsys: pytest.CaptureFixture[str]
    ) -> None:
        main([])
        out = capsys.readouterr().out
        assert out.splitlines() == list(USAGE_LINES)

    def test_version(self, capsys: pytest.CaptureFixture[str]) -> None:
        main(["--version"])
        assert capsys.readouterr().out.strip() == f"verona {__version__}"

    def test_reports_matches_only(
        self, tmp_path: Path, capsys: pytest.CaptureFixture[str]
    ) -> None:
        sub = tmp_path / "pkg"
        sub.mkdir()
        (sub / "Probe.class").write_bytes(
            simple_class("pkg/Probe", ["java.version"])
        )
        write_jar(
            tmp_path / "quiet.jar",
            {"q/Quiet.class": simple_class("q/Quiet", ["nothing"])},
        )

        main([str(tmp_path)])

        lines = capsys.readouterr().out.splitlines()
        assert lines == [
            f"Directory '{sub.absolute()}', class 'pkg/Probe', "
            "contains string [java.version]"
        ]

    def test_unparseable_class_is_silent_on_stdout(
        self, tmp_path: Path, capsys: pytest.CaptureFixture[str]
    ) -> None:
        (tmp_path / "Bad.class").write_bytes(b"\xca\xfe\xba\xbe\x00")
        main([str(tmp_path)])
        assert capsys.readouterr().out == ""

    def test_missing_path_exits_1(
        self, tmp_path: Path, capsys: pytest.CaptureFixture[str]
    ) -> None:
        with pytest.raises(SystemExit) as exc_info:
            main([str(tmp_path / "gone")])
        assert exc_info.value.code == 1
        assert "does not exist" in capsys.readouterr().err

    def test_invalid_configuration_exits_1(
        self,
        tmp_path: Path,
        monkeypatch: pytest.MonkeyPatch,
        capsys: pytest.CaptureFixture[str],
    ) -> None:
        monkeypatch.setenv("VERONA_MAX_MAJOR_VERSION", "10")
        with pytest.raises(SystemExit) as exc_info:
            main([str(tmp_path)])
        assert exc_info.value.code == 1
        assert "invalid configuration" in capsys.readouterr().err

    def test_verbose_forces_debug(self, tmp_path: Path) -> None:
        with patch("verona.cli.setup_logging") as mock_setup:
            main([str(tmp_path), "--verbose"])
        mock_setup.assert_called_once_with("DEBUG")
