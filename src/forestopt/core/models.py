"""Domain models for forestopt.

All records are **frozen** dataclasses — immutable value objects with no
behaviour beyond data access.  The :class:`Configuration` is the only
output of a successful parse; the three ``*Result`` records form the
tagged union returned by :func:`~forestopt.core.parser.parse_arguments`.
"""

from __future__ import annotations

import enum
import os
from dataclasses import dataclass, field

from forestopt.exceptions import ArgumentError, ConfigurationError

DEFAULT_NUM_TREES: int = 500
"""Number of trees grown when ``--ntree`` is not given."""


def default_thread_count() -> int:
    """Return the platform concurrency hint, never less than one."""
    return os.cpu_count() or 1


# ---------------------------------------------------------------------------
# Enumerations
# ---------------------------------------------------------------------------

class TreeType(enum.Enum):
    """Forest mode.  Values are the numeric codes used on the command line.

    Only :attr:`QUANTILE` and :attr:`INSTRUMENTAL` can be selected with
    ``--treetype``; the others are reserved for the learning engine.
    """

    CLASSIFICATION = 1
    REGRESSION = 3
    SURVIVAL = 5
    QUANTILE = 11
    INSTRUMENTAL = 15


class InfoKind(enum.Enum):
    """Informational request that bypasses configuration building."""

    HELP = "help"
    VERSION = "version"


class Rule(enum.Enum):
    """Cross-option rules, in the order they are checked."""

    INPUT_FILE_REQUIRED = "input-file-required"
    DEPVAR_REQUIRED = "depvar-required"
    INSTRUMENT_REQUIRED = "instrument-required"
    STATUS_REQUIRED = "status-required"
    SPLIT_OPTIONS_EXCLUSIVE = "split-options-exclusive"


# ---------------------------------------------------------------------------
# Configuration
# ---------------------------------------------------------------------------

@dataclass(frozen=True, slots=True)
class Configuration:
    """Fully-typed training/prediction configuration.

    String options are ``None`` when never supplied, which keeps an
    explicit empty string (``--caseweights ""``) distinguishable.
    """

    # I/O selection
    file: str | None = None
    """Input data file."""

    predict: str | None = None
    """Saved forest to load for prediction."""

    write: bool = False
    """Persist the trained forest."""

    # Variable roles
    depvarname: str | None = None
    statusvarname: str | None = None
    instrumentvarname: str | None = None
    caseweights: str | None = None
    splitweights: str | None = None
    alwayssplitvars: tuple[str, ...] = ()
    catvars: tuple[str, ...] = ()

    # Learning hyperparameters
    ntree: int = DEFAULT_NUM_TREES
    mtry: int = 0
    """Candidate variables per split; ``0`` lets the engine decide."""

    targetpartitionsize: int = 0
    """Minimal node size; ``0`` lets the engine decide."""

    fraction: float = 1.0
    replace: bool = True
    seed: int = 0
    """Random seed; ``0`` means unseeded."""

    savemem: bool = False

    # Mode selectors
    treetype: TreeType = TreeType.QUANTILE
    quantiles: tuple[float, ...] = ()
    predall: bool = False

    # Execution
    nthreads: int = field(default_factory=default_thread_count)
    verbose: bool = False

    @property
    def predicting(self) -> bool:
        """Whether a saved forest was named for prediction."""
        return bool(self.predict)


# ---------------------------------------------------------------------------
# Parse results
# ---------------------------------------------------------------------------

@dataclass(frozen=True, slots=True)
class ParsedArguments:
    """A validated configuration plus tokens that were not processed."""

    configuration: Configuration
    leftovers: tuple[str, ...] = ()
    unknown_options: tuple[str, ...] = ()
    """Option-shaped arguments that matched no known option."""


@dataclass(frozen=True, slots=True)
class InformationalExit:
    """``--help`` or ``--version`` was requested; nothing was built."""

    kind: InfoKind


@dataclass(frozen=True, slots=True)
class ParseFailure:
    """The parse was rejected.  ``error`` carries the diagnostic."""

    error: ArgumentError | ConfigurationError

    @property
    def message(self) -> str:
        return str(self.error)


ParseResult = ParsedArguments | InformationalExit | ParseFailure
