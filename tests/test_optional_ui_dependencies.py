"""Regression tests for the optional Rich dependency.

Help, version, and error reporting must keep working when Rich is
missing; output falls back to plain ``print``.
"""

from __future__ import annotations

import sys

import pytest

from forestopt.cli import exit_codes
from forestopt.cli.app import main
from forestopt.cli.console import escape, get_rich_console
from forestopt.exceptions import EnvironmentError


def _hide_rich(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setitem(sys.modules, "rich", None)
    monkeypatch.setitem(sys.modules, "rich.console", None)
    monkeypatch.setitem(sys.modules, "rich.markup", None)
    monkeypatch.setitem(sys.modules, "rich.table", None)


def test_help_works_without_rich(
    monkeypatch: pytest.MonkeyPatch, capsys: pytest.CaptureFixture[str],
) -> None:
    _hide_rich(monkeypatch)
    assert main(["--help"]) == exit_codes.SUCCESS
    out, _ = capsys.readouterr()
    assert "--file FILE" in out


def test_version_works_without_rich(
    monkeypatch: pytest.MonkeyPatch, capsys: pytest.CaptureFixture[str],
) -> None:
    _hide_rich(monkeypatch)
    assert main(["--version"]) == exit_codes.SUCCESS
    out, _ = capsys.readouterr()
    assert "forestopt version:" in out


def test_errors_reported_without_rich(
    monkeypatch: pytest.MonkeyPatch, capsys: pytest.CaptureFixture[str],
) -> None:
    _hide_rich(monkeypatch)
    assert main(["--seed", "-3"]) == exit_codes.GENERAL_ERROR
    _, err = capsys.readouterr()
    assert "non-negative integer" in err


def test_verbose_works_without_rich(
    monkeypatch: pytest.MonkeyPatch, capsys: pytest.CaptureFixture[str],
) -> None:
    _hide_rich(monkeypatch)
    code = main(["--file", "d", "--depvarname", "y", "--verbose"])
    assert code == exit_codes.SUCCESS
    _, err = capsys.readouterr()
    assert "forestopt configuration" in err


def test_rich_console_raises_environment_error(monkeypatch: pytest.MonkeyPatch) -> None:
    _hide_rich(monkeypatch)
    with pytest.raises(EnvironmentError, match="rich is not installed"):
        get_rich_console()


def test_escape_is_identity_without_rich(monkeypatch: pytest.MonkeyPatch) -> None:
    _hide_rich(monkeypatch)
    assert escape("[bold]x") == "[bold]x"
