"""Tests for the ``--verbose`` configuration summary (cli/summary.py)."""

from __future__ import annotations

import sys

import pytest

from forestopt.cli.summary import _format_value, render_summary, summary_rows
from forestopt.core.models import Configuration, TreeType


def _config(**overrides: object) -> Configuration:
    defaults: dict[str, object] = {"file": "data.dat", "depvarname": "y", "nthreads": 2}
    defaults.update(overrides)
    return Configuration(**defaults)  # type: ignore[arg-type]


class TestFormatValue:
    def test_unset_string(self) -> None:
        assert _format_value(None) == "-"

    def test_enum(self) -> None:
        assert _format_value(TreeType.INSTRUMENTAL) == "instrumental (15)"

    def test_tuple(self) -> None:
        assert _format_value((0.1, 0.9)) == "0.1,0.9"
        assert _format_value(()) == "-"

    def test_scalar(self) -> None:
        assert _format_value(500) == "500"
        assert _format_value(True) == "True"


class TestSummaryRows:
    def test_declaration_order(self) -> None:
        rows = summary_rows(_config())
        assert rows[0] == ("file", "data.dat")
        assert rows[-1] == ("verbose", "False")

    def test_contains_every_field(self) -> None:
        names = [name for name, _ in summary_rows(_config())]
        assert "quantiles" in names
        assert "nthreads" in names
        assert len(names) == len(set(names))


class TestRenderSummary:
    def test_rich_table(self, capsys: pytest.CaptureFixture[str]) -> None:
        render_summary(_config(ntree=42))
        _, err = capsys.readouterr()
        assert "forestopt configuration" in err
        assert "42" in err

    def test_plain_fallback(
        self,
        monkeypatch: pytest.MonkeyPatch,
        capsys: pytest.CaptureFixture[str],
    ) -> None:
        monkeypatch.setitem(sys.modules, "rich", None)
        monkeypatch.setitem(sys.modules, "rich.table", None)
        render_summary(_config(ntree=42))
        _, err = capsys.readouterr()
        assert "forestopt configuration" in err
        assert "ntree" in err
        assert "42" in err
