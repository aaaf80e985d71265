"""Tokenizer/dispatcher — match raw arguments against the grammar.

:func:`iter_tokens` is a generator: it yields one token per recognised
option and one per leftover argument, and performs no coercion.  The
consumer decides when to stop (an informational flag ends the parse),
so nothing after that point is ever scanned.

Accepted forms
--------------
* ``--name``, ``--name=value``, ``--name value``
* ``-x``, ``-x value``, ``-xVALUE`` (the last for value options only).
  Short names do not split on ``=``: ``-f=a`` gives the value ``=a``.
* ``--`` ends option scanning; everything after it is a leftover.
"""

from __future__ import annotations

from collections.abc import Iterator, Sequence
from dataclasses import dataclass

from forestopt.core.grammar import OptionSpec, find_long, find_short
from forestopt.exceptions import InvalidValueError, MissingValueError

END_OF_OPTIONS: str = "--"


@dataclass(frozen=True, slots=True)
class OptionToken:
    """A recognised option with its raw value (``None`` for flags)."""

    spec: OptionSpec
    raw: str | None


@dataclass(frozen=True, slots=True)
class Leftover:
    """An argument that was not processed as an option."""

    text: str
    unknown_option: bool = False
    """``True`` when the argument looked like an option but matched none."""


Token = OptionToken | Leftover


def _is_option_shaped(arg: str) -> bool:
    return len(arg) > 1 and arg.startswith("-")


def _resolve(arg: str) -> tuple[OptionSpec | None, str | None]:
    """Return the matching spec and any value attached to *arg*."""
    if arg.startswith("--"):
        name, sep, attached = arg[2:].partition("=")
        return find_long(name), (attached if sep else None)

    spec = find_short(arg[1])
    if spec is None:
        return None, None
    rest = arg[2:]
    if not rest:
        return spec, None
    if spec.takes_value:
        return spec, rest
    # ``-wv`` style clusters are not part of the grammar.
    return None, None


def iter_tokens(argv: Sequence[str]) -> Iterator[Token]:
    """Yield the tokens of *argv* in order.

    Raises
    ------
    MissingValueError
        A value option is the last argument.
    InvalidValueError
        A flag option was given a value with ``--name=value``.
    """
    index = 0
    count = len(argv)
    while index < count:
        arg = argv[index]
        index += 1

        if arg == END_OF_OPTIONS:
            for rest in argv[index:]:
                yield Leftover(rest)
            return

        if not _is_option_shaped(arg):
            yield Leftover(arg)
            continue

        spec, attached = _resolve(arg)
        if spec is None:
            yield Leftover(arg, unknown_option=True)
            continue

        if not spec.takes_value:
            if attached is not None:
                raise InvalidValueError(
                    spec.long, attached, "This option does not take a value.",
                )
            yield OptionToken(spec=spec, raw=None)
            continue

        if attached is None:
            if index >= count:
                raise MissingValueError(spec.long)
            attached = argv[index]
            index += 1
        yield OptionToken(spec=spec, raw=attached)
