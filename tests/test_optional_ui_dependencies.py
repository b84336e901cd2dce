"""Regression tests for optional CLI UI dependencies (rich/questionary).

Bootstrap commands must keep working when the UI packages are missing,
and a session must fail cleanly only when a prompt actually needs them.
"""

from __future__ import annotations

import sys
from pathlib import Path

import pytest

from internity.cli.app import main
from internity.exceptions import EnvironmentError


def _hide_rich(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setitem(sys.modules, "rich", None)
    monkeypatch.setitem(sys.modules, "rich.console", None)
    monkeypatch.setitem(sys.modules, "rich.logging", None)
    monkeypatch.setitem(sys.modules, "rich.markup", None)
    monkeypatch.setitem(sys.modules, "rich.table", None)


def _hide_questionary(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setitem(sys.modules, "questionary", None)


def test_help_works_without_rich_or_questionary(monkeypatch: pytest.MonkeyPatch) -> None:
    _hide_rich(monkeypatch)
    _hide_questionary(monkeypatch)

    with pytest.raises(SystemExit) as exc_info:
        main(["--help"])
    assert exc_info.value.code == 0


def test_version_works_without_rich_or_questionary(monkeypatch: pytest.MonkeyPatch) -> None:
    _hide_rich(monkeypatch)
    _hide_questionary(monkeypatch)

    with pytest.raises(SystemExit) as exc_info:
        main(["--version"])
    assert exc_info.value.code == 0


def test_session_errors_cleanly_when_questionary_missing(
    monkeypatch: pytest.MonkeyPatch, tmp_path: Path,
) -> None:
    _hide_rich(monkeypatch)
    _hide_questionary(monkeypatch)

    with pytest.raises(EnvironmentError, match="questionary is not installed"):
        main(["--data-file", str(tmp_path / "internships.txt")])


def test_session_runs_without_rich(
    monkeypatch: pytest.MonkeyPatch,
    tmp_path: Path,
    capsys: pytest.CaptureFixture[str],
) -> None:
    _hide_rich(monkeypatch)
    data_file = tmp_path / "internships.txt"
    data_file.write_text("username | Walt\n", encoding="utf-8")
    lines = iter(["add company/Google role/SWE deadline/01-12-2025 pay/8000", "list", "exit"])
    monkeypatch.setattr("builtins.input", lambda _prompt="": next(lines))

    assert main(["--data-file", str(data_file)]) == 0

    out = capsys.readouterr().out
    assert "Walt" in out
    assert "Google" in out
    assert "Google | SWE | 01-12-2025 | 8000 | Pending" in data_file.read_text(encoding="utf-8")
