"""Tests for cross-field validation (core/validator.py).

Each rule is exercised alone and in combination to prove the check
order: only the first violation is ever reported.
"""

from __future__ import annotations

import pytest

from forestopt.core.models import Configuration, Rule, TreeType
from forestopt.core.validator import validate_configuration
from forestopt.exceptions import ConfigurationError


def _config(**overrides: object) -> Configuration:
    """Factory for a configuration that passes every rule."""
    defaults: dict[str, object] = {
        "file": "data.dat",
        "depvarname": "y",
        "nthreads": 1,
    }
    defaults.update(overrides)
    return Configuration(**defaults)  # type: ignore[arg-type]


def _rule_of(config: Configuration) -> Rule:
    with pytest.raises(ConfigurationError) as exc_info:
        validate_configuration(config)
    return exc_info.value.rule


class TestInputFile:
    @pytest.mark.parametrize("value", [None, ""])
    def test_required(self, value: str | None) -> None:
        assert _rule_of(_config(file=value)) is Rule.INPUT_FILE_REQUIRED

    def test_checked_first(self) -> None:
        config = _config(
            file=None,
            depvarname=None,
            treetype=TreeType.INSTRUMENTAL,
            alwayssplitvars=("a",),
            splitweights="w.txt",
        )
        assert _rule_of(config) is Rule.INPUT_FILE_REQUIRED

    def test_message_names_flag(self) -> None:
        with pytest.raises(ConfigurationError, match="--file"):
            validate_configuration(_config(file=None))


class TestDependentVariable:
    @pytest.mark.parametrize("value", [None, ""])
    def test_required_when_training(self, value: str | None) -> None:
        assert _rule_of(_config(depvarname=value)) is Rule.DEPVAR_REQUIRED

    def test_not_required_when_predicting(self) -> None:
        config = _config(depvarname=None, predict="forest.out")
        assert validate_configuration(config) is config

    def test_empty_predict_path_is_not_predicting(self) -> None:
        assert _rule_of(_config(depvarname=None, predict="")) is Rule.DEPVAR_REQUIRED


class TestInstrumental:
    def test_instrument_required(self) -> None:
        config = _config(treetype=TreeType.INSTRUMENTAL, statusvarname="w")
        assert _rule_of(config) is Rule.INSTRUMENT_REQUIRED

    def test_status_required(self) -> None:
        config = _config(treetype=TreeType.INSTRUMENTAL, instrumentvarname="z")
        assert _rule_of(config) is Rule.STATUS_REQUIRED

    def test_instrument_checked_before_status(self) -> None:
        assert _rule_of(_config(treetype=TreeType.INSTRUMENTAL)) is Rule.INSTRUMENT_REQUIRED

    def test_passes_with_both(self) -> None:
        config = _config(
            treetype=TreeType.INSTRUMENTAL,
            instrumentvarname="z",
            statusvarname="w",
        )
        assert validate_configuration(config) is config

    def test_quantile_needs_neither(self) -> None:
        config = _config(treetype=TreeType.QUANTILE)
        assert validate_configuration(config) is config

    def test_message_suggests_flag(self) -> None:
        with pytest.raises(ConfigurationError, match="--statusvarname"):
            validate_configuration(
                _config(treetype=TreeType.INSTRUMENTAL, instrumentvarname="z"),
            )


class TestSplitOptions:
    def test_mutually_exclusive(self) -> None:
        config = _config(alwayssplitvars=("a", "b"), splitweights="w.txt")
        assert _rule_of(config) is Rule.SPLIT_OPTIONS_EXCLUSIVE

    def test_either_alone_is_fine(self) -> None:
        assert validate_configuration(_config(alwayssplitvars=("a",)))
        assert validate_configuration(_config(splitweights="w.txt"))

    def test_empty_values_do_not_conflict(self) -> None:
        config = _config(alwayssplitvars=(), splitweights="")
        assert validate_configuration(config) is config

    def test_hint_points_to_help(self) -> None:
        with pytest.raises(ConfigurationError) as exc_info:
            validate_configuration(_config(alwayssplitvars=("a",), splitweights="w"))
        assert exc_info.value.hint is not None
        assert "--help" in exc_info.value.hint
