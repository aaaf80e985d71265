"""Static option grammar.

Pure data: every recognised flag maps to one :class:`OptionSpec`
naming its arity, the :class:`~forestopt.core.models.Configuration`
field it feeds, the coercer that converts its value, and what happens
when the flag is repeated.  The ``metavar``/``help`` strings are only
read by the usage renderer.
"""

from __future__ import annotations

import enum
from dataclasses import dataclass

from forestopt.core.models import InfoKind


class Arity(enum.Enum):
    """Whether a flag consumes a value token."""

    FLAG = "flag"
    VALUE = "value"


class ValueKind(enum.Enum):
    """Name of the coercer applied to an option's raw value."""

    STRING = "string"
    POSITIVE_INT = "positive-int"
    NON_NEGATIVE_INT = "non-negative-int"
    FRACTION = "fraction"
    QUANTILES = "quantiles"
    NAME_LIST = "name-list"
    TREE_TYPE = "tree-type"
    FLAG = "flag"
    INFO = "info"


class RepeatPolicy(enum.Enum):
    """What a repeated occurrence does to the field."""

    OVERWRITE = "overwrite"
    """Scalar fields: the last occurrence wins."""

    REPLACE = "replace"
    """List fields: each occurrence supplies a whole new list."""


@dataclass(frozen=True, slots=True)
class OptionSpec:
    """One row of the grammar table."""

    long: str
    short: str | None
    arity: Arity
    kind: ValueKind
    field: str | None = None
    repeat: RepeatPolicy = RepeatPolicy.OVERWRITE
    flag_value: bool = True
    info: InfoKind | None = None
    metavar: str = ""
    help: str = ""

    @property
    def takes_value(self) -> bool:
        return self.arity is Arity.VALUE


def _value(
    long: str,
    short: str | None,
    kind: ValueKind,
    metavar: str,
    help: str,
    *,
    field: str | None = None,
) -> OptionSpec:
    repeat = (
        RepeatPolicy.REPLACE
        if kind in (ValueKind.QUANTILES, ValueKind.NAME_LIST)
        else RepeatPolicy.OVERWRITE
    )
    return OptionSpec(
        long=long,
        short=short,
        arity=Arity.VALUE,
        kind=kind,
        field=field or long,
        repeat=repeat,
        metavar=metavar,
        help=help,
    )


def _flag(
    long: str,
    short: str,
    help: str,
    *,
    field: str | None = None,
    flag_value: bool = True,
) -> OptionSpec:
    return OptionSpec(
        long=long,
        short=short,
        arity=Arity.FLAG,
        kind=ValueKind.FLAG,
        field=field or long,
        flag_value=flag_value,
        help=help,
    )


def _info(long: str, short: str, kind: InfoKind, help: str) -> OptionSpec:
    return OptionSpec(
        long=long,
        short=short,
        arity=Arity.FLAG,
        kind=ValueKind.INFO,
        info=kind,
        help=help,
    )


# ---------------------------------------------------------------------------
# The table
# ---------------------------------------------------------------------------

OPTIONS: tuple[OptionSpec, ...] = (
    _info("help", "h", InfoKind.HELP, "Print this help."),
    _info("version", "Z", InfoKind.VERSION, "Print version and citation information."),
    _flag("verbose", "v", "Turn on verbose mode."),
    _value(
        "file", "f", ValueKind.STRING, "FILE",
        "Filename of input data. Only numerical values are supported.",
    ),
    _value(
        "treetype", "y", ValueKind.TREE_TYPE, "TYPE",
        "Set tree type to 11 (quantile) or 15 (instrumental). (Default: 11)",
    ),
    _value(
        "quantiles", None, ValueKind.QUANTILES, "Q1,Q2,..",
        "Quantiles to predict with a quantile forest. Each must lie in (0, 1).",
    ),
    _value(
        "depvarname", "D", ValueKind.STRING, "NAME",
        "Name of the dependent variable.",
    ),
    _value(
        "statusvarname", "s", ValueKind.STRING, "NAME",
        "Name of the status (treatment) variable, required for instrumental trees.",
    ),
    _value(
        "instrumentvarname", "i", ValueKind.STRING, "NAME",
        "Name of the instrument variable, required for instrumental trees.",
    ),
    _value(
        "ntree", "t", ValueKind.POSITIVE_INT, "N",
        "Set number of trees to N. (Default: 500)",
    ),
    _value(
        "mtry", "m", ValueKind.POSITIVE_INT, "N",
        "Number of variables to possibly split at in each node. (Default: engine choice)",
    ),
    _value(
        "targetpartitionsize", "l", ValueKind.POSITIVE_INT, "N",
        "Set minimal node size to N. (Default: engine choice)",
    ),
    _value(
        "catvars", "c", ValueKind.NAME_LIST, "V1,V2,..",
        "Comma separated list of names of (unordered) categorical variables.",
    ),
    _flag("write", "w", "Save forest to file."),
    _value(
        "predict", "P", ValueKind.STRING, "FILE",
        "Load forest from FILE and predict with new data.",
    ),
    _flag(
        "predall", "X",
        "Return individual predictions for each tree instead of aggregated ones.",
    ),
    _flag(
        "noreplace", "u", "Sample without replacement.",
        field="replace", flag_value=False,
    ),
    _value(
        "fraction", "F", ValueKind.FRACTION, "X",
        "Fraction of observations to sample, in (0, 1]. (Default: 1)",
    ),
    _value(
        "caseweights", "C", ValueKind.STRING, "FILE",
        "Filename of case weights file.",
    ),
    _value(
        "splitweights", "S", ValueKind.STRING, "FILE",
        "Filename of split select weights file.",
    ),
    _value(
        "alwayssplitvars", "A", ValueKind.NAME_LIST, "V1,V2,..",
        "Comma separated list of variable names to be always considered for splitting.",
    ),
    _value(
        "nthreads", "U", ValueKind.POSITIVE_INT, "N",
        "Set number of parallel threads to N. (Default: number of CPUs available)",
    ),
    _value(
        "seed", "z", ValueKind.NON_NEGATIVE_INT, "SEED",
        "Set random seed to SEED. (Default: no seed)",
    ),
    _flag("savemem", "N", "Use memory saving (but slower) splitting mode."),
)


def _index(options: tuple[OptionSpec, ...]) -> tuple[dict[str, OptionSpec], dict[str, OptionSpec]]:
    """Build the long/short lookup tables, rejecting any ambiguity."""
    by_long: dict[str, OptionSpec] = {}
    by_short: dict[str, OptionSpec] = {}
    for spec in options:
        if spec.long in by_long:
            raise ValueError(f"Duplicate option name: --{spec.long}")
        by_long[spec.long] = spec
        if spec.short is None:
            continue
        if len(spec.short) != 1:
            raise ValueError(f"Alias for --{spec.long} must be one character")
        if spec.short in by_short:
            raise ValueError(
                f"Alias -{spec.short} shared by --{by_short[spec.short].long} "
                f"and --{spec.long}"
            )
        by_short[spec.short] = spec
    return by_long, by_short


_BY_LONG, _BY_SHORT = _index(OPTIONS)


def find_long(name: str) -> OptionSpec | None:
    """Return the option registered under the long *name*, if any."""
    return _BY_LONG.get(name)


def find_short(alias: str) -> OptionSpec | None:
    """Return the option registered under the one-letter *alias*, if any."""
    return _BY_SHORT.get(alias)
