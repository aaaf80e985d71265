"""Core layer — pure option parsing and validation.

Rules
-----
* No ``print()`` calls.
* No filesystem or network I/O.
* No imports from ``cli``.
* All functions must be fully typed and deterministic.
"""

from forestopt.core.models import (
    Configuration,
    InfoKind,
    InformationalExit,
    ParsedArguments,
    ParseFailure,
    ParseResult,
    Rule,
    TreeType,
)
from forestopt.core.parser import parse_arguments

__all__: list[str] = [
    "Configuration",
    "InfoKind",
    "InformationalExit",
    "ParseFailure",
    "ParseResult",
    "ParsedArguments",
    "Rule",
    "TreeType",
    "parse_arguments",
]
