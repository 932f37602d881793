"""Tests for the command-line metadata validation entrypoint."""

from __future__ import annotations

import json
from pathlib import Path

import pytest

import pairing.main
from pairing.domain import domain_app_metadata_stub, domain_app_metadata_to_json
from pairing.main import main


@pytest.fixture(autouse=True)
def _isolated_environment(monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> None:
    """Run each test without an inherited logging level or a stray `.env` file."""

    monkeypatch.chdir(tmp_path)
    monkeypatch.delenv("LOG_LEVEL", raising=False)


def test_main_validate_prints_normalized_record(tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
    """Print normalized wire form and exit with zero for valid files.

    Returns:
        None: Assertions validate output and exit code.

    Raises:
        AssertionError: Raised when output or exit code is incorrect.
    """

    metadata_path = tmp_path / "metadata.json"
    metadata_path.write_text(domain_app_metadata_to_json(domain_app_metadata_stub()), encoding="utf-8")

    exit_code = main(["validate", str(metadata_path), "--include-none"])

    assert exit_code == 0
    assert json.loads(capsys.readouterr().out) == domain_app_metadata_stub().encode(include_none=True)


def test_main_validate_reports_link_mode_violation(tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
    """Exit with one and name the error kind for link mode violations."""

    metadata_path = tmp_path / "metadata.json"
    metadata_path.write_text(
        '{"name":"A","description":"","url":"https://a.example","icons":[],"redirect":{"native":"app://","linkMode":true}}',
        encoding="utf-8",
    )

    exit_code = main(["validate", str(metadata_path)])

    assert exit_code == 1
    assert "InvalidLinkModeUniversalLinkError" in capsys.readouterr().err


def test_main_validate_reports_malformed_record(tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
    """Exit with one and name the error kind for malformed files."""

    metadata_path = tmp_path / "metadata.json"
    metadata_path.write_text('{"name":"A"}', encoding="utf-8")

    exit_code = main(["validate", str(metadata_path)])

    assert exit_code == 1
    assert "MalformedRecordError" in capsys.readouterr().err


def test_main_validate_reports_unreadable_file(tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
    """Exit with one when the metadata file cannot be read."""

    exit_code = main(["validate", str(tmp_path / "missing.json")])

    assert exit_code == 1
    assert "Cannot read" in capsys.readouterr().err


def test_main_validate_requires_path() -> None:
    """Reject `validate` without a file path."""

    with pytest.raises(SystemExit) as exit_info:
        main(["validate"])

    assert exit_info.value.code == 2


@pytest.mark.parametrize(
    ("log_level", "arguments", "expected_level"),
    [
        ("error", [], "ERROR"),
        ("error", ["--verbose"], "DEBUG"),
    ],
)
def test_main_validate_uses_configured_log_level(
    monkeypatch: pytest.MonkeyPatch,
    tmp_path: Path,
    log_level: str,
    arguments: list[str],
    expected_level: str,
) -> None:
    """Configure logging from `LOG_LEVEL` unless verbose output is requested.

    Returns:
        None: Assertions validate logging level routing.

    Raises:
        AssertionError: Raised when the configured level is ignored.
    """

    configured_levels: list[str] = []
    monkeypatch.setattr(pairing.main, "bootstrap_configure_logging", configured_levels.append)
    monkeypatch.setenv("LOG_LEVEL", log_level)
    metadata_path = tmp_path / "metadata.json"
    metadata_path.write_text(domain_app_metadata_to_json(domain_app_metadata_stub()), encoding="utf-8")

    exit_code = main(["validate", str(metadata_path), *arguments])

    assert exit_code == 0
    assert configured_levels == [expected_level]


def test_main_validate_reports_invalid_log_level(
    monkeypatch: pytest.MonkeyPatch,
    tmp_path: Path,
    capsys: pytest.CaptureFixture[str],
) -> None:
    """Exit with one when `LOG_LEVEL` is not a standard level name."""

    monkeypatch.setenv("LOG_LEVEL", "chatty")
    metadata_path = tmp_path / "metadata.json"
    metadata_path.write_text(domain_app_metadata_to_json(domain_app_metadata_stub()), encoding="utf-8")

    exit_code = main(["validate", str(metadata_path)])

    assert exit_code == 1
    assert "Logging configuration validation failed" in capsys.readouterr().err
