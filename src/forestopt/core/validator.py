"""Cross-field validation of an aggregated configuration.

Runs once, after every option has been coerced.  Rules are checked in
:class:`~forestopt.core.models.Rule` order and the first violation is
raised; only one error is ever reported.
"""

from __future__ import annotations

from forestopt.core.models import Configuration, Rule, TreeType
from forestopt.exceptions import ConfigurationError


def _blank(value: str | None) -> bool:
    return not value


def validate_configuration(config: Configuration) -> Configuration:
    """Return *config* unchanged if every rule holds.

    Raises
    ------
    ConfigurationError
        On the first violated rule, carrying that :class:`Rule`.
    """
    if _blank(config.file):
        raise ConfigurationError(
            Rule.INPUT_FILE_REQUIRED,
            "Please specify an input filename with '--file'.",
        )

    if not config.predicting and _blank(config.depvarname):
        raise ConfigurationError(
            Rule.DEPVAR_REQUIRED,
            "Please specify a dependent variable name with '--depvarname'.",
        )

    if config.treetype is TreeType.INSTRUMENTAL:
        if _blank(config.instrumentvarname):
            raise ConfigurationError(
                Rule.INSTRUMENT_REQUIRED,
                "When using instrumental trees, the instrument variable must "
                "be specified through '--instrumentvarname'.",
            )
        if _blank(config.statusvarname):
            raise ConfigurationError(
                Rule.STATUS_REQUIRED,
                "When using instrumental trees, the treatment variable must "
                "be specified through '--statusvarname'.",
            )

    if config.alwayssplitvars and not _blank(config.splitweights):
        raise ConfigurationError(
            Rule.SPLIT_OPTIONS_EXCLUSIVE,
            "Please use only one of '--splitweights' and '--alwayssplitvars'.",
        )

    return config
