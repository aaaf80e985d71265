"""Custom exception hierarchy for forestopt.

All exceptions that cross layer boundaries must inherit from
:class:`ForestOptError`.  The core raises these internally; the public
parse pipeline folds the argument errors into a
:class:`~forestopt.core.models.ParseFailure` so callers can dispatch on
the result instead of catching.

Hierarchy
---------
ForestOptError
├── ArgumentError
│   ├── MissingValueError
│   └── InvalidValueError
├── ConfigurationError
└── EnvironmentError
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from forestopt.core.models import Rule

HELP_HINT: str = "See '--help' for details."


class ForestOptError(Exception):
    """Base exception for all forestopt errors.

    Every user-visible error condition must map to a subclass of this
    exception so that the CLI error boundary can render a clean message
    without leaking internal stack traces.
    """

    def __init__(self, message: str, *, hint: str | None = None) -> None:
        super().__init__(message)
        self.hint: str | None = hint
        """Optional actionable guidance shown below the error message."""


# --- Single-option failures ------------------------------------------------

class ArgumentError(ForestOptError):
    """Raised when one command-line option cannot be accepted."""

    def __init__(
        self, option: str, message: str, *, hint: str | None = HELP_HINT,
    ) -> None:
        super().__init__(message, hint=hint)
        self.option: str = option
        """Long name of the offending option, without dashes."""


class MissingValueError(ArgumentError):
    """Raised when a value-taking option is the last token."""

    def __init__(self, option: str) -> None:
        super().__init__(
            option,
            f"Option '--{option}' requires a value.",
        )


class InvalidValueError(ArgumentError):
    """Raised when an option's value fails coercion or a bounds check."""

    def __init__(self, option: str, raw: str, reason: str) -> None:
        super().__init__(
            option,
            f"Illegal argument '{raw}' for option '{option}'. {reason}",
        )
        self.raw: str = raw
        self.reason: str = reason


# --- Cross-option failures -------------------------------------------------

class ConfigurationError(ForestOptError):
    """Raised when a rule spanning several options is violated."""

    def __init__(self, rule: Rule, detail: str) -> None:
        super().__init__(detail, hint=HELP_HINT)
        self.rule: Rule = rule
        self.detail: str = detail


# --- Environment / tooling -------------------------------------------------

class EnvironmentError(ForestOptError):
    """Raised when a required runtime dependency is not available."""
