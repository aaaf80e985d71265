"""Help and version text.

Both collaborators return plain strings; :mod:`forestopt.cli.app`
decides where to print them.  The help text is rendered from the option
grammar so every flag is documented exactly once.
"""

from __future__ import annotations

import textwrap

from forestopt.core.grammar import OPTIONS, OptionSpec
from forestopt.version import __version__

_INDENT: str = "    "
_COLUMN: int = 34
_WIDTH: int = 100

CITATION: str = """\
Please cite:
Athey, S., Tibshirani, J. & Wager, S. (2019). Generalized random forests.
The Annals of Statistics 47(2), 1148-1178.

Wright, M. N. & Ziegler, A. (2017). ranger: A fast implementation of random
forests for high dimensional data in C++ and R. Journal of Statistical
Software 77(1), 1-17."""


def _signature(spec: OptionSpec) -> str:
    names = f"--{spec.long}"
    if spec.short is not None:
        names = f"-{spec.short}, {names}"
    if spec.takes_value:
        names = f"{names} {spec.metavar}"
    return names


def _describe_option(spec: OptionSpec) -> list[str]:
    signature = _signature(spec)
    body = textwrap.wrap(spec.help, width=_WIDTH - _COLUMN) or [""]
    lines: list[str] = []
    if len(signature) + 2 > _COLUMN - len(_INDENT):
        lines.append(f"{_INDENT}{signature}")
    else:
        first = body.pop(0)
        lines.append(f"{_INDENT}{signature:<{_COLUMN - len(_INDENT)}}{first}")
    lines.extend(f"{'':<{_COLUMN}}{line}" for line in body)
    return lines


def describe_usage(prog: str = "forestopt") -> str:
    """Return the full ``--help`` text."""
    lines = [
        "Usage:",
        f"{_INDENT}{prog} <options>",
        "",
        "Options:",
    ]
    for spec in OPTIONS:
        lines.extend(_describe_option(spec))
    lines.extend(["", "See README file for details and examples."])
    return "\n".join(lines)


def describe_version() -> str:
    """Return the ``--version`` banner with citation information."""
    return f"forestopt version: {__version__}\n\n{CITATION}"
