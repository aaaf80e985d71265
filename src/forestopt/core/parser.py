"""Parse pipeline — argument vector in, :data:`ParseResult` out.

Flow for each argument, in order:

1. **Dispatch** — :func:`~forestopt.core.tokenizer.iter_tokens` matches it
   against the grammar.
2. **Coerce** — the option's coercer converts the raw value.
3. **Aggregate** — the builder stores it.

An informational flag stops the scan on the spot.  After the last
argument the configuration is frozen and cross-validated.  Every
failure is returned as a :class:`ParseFailure`; nothing is raised to
the caller and no partial configuration ever escapes.
"""

from __future__ import annotations

from collections.abc import Sequence

from forestopt.core.aggregator import ConfigurationBuilder
from forestopt.core.coercers import coerce
from forestopt.core.grammar import ValueKind
from forestopt.core.models import (
    InformationalExit,
    ParsedArguments,
    ParseFailure,
    ParseResult,
)
from forestopt.core.tokenizer import Leftover, iter_tokens
from forestopt.core.validator import validate_configuration
from forestopt.exceptions import ArgumentError, ConfigurationError


def parse_arguments(argv: Sequence[str]) -> ParseResult:
    """Build and validate a configuration from *argv*.

    Parameters
    ----------
    argv:
        The arguments without the program name.  The sequence is
        copied and never mutated.

    Returns
    -------
    ParseResult
        :class:`ParsedArguments` on success, :class:`InformationalExit`
        when help or version was requested, :class:`ParseFailure`
        otherwise.
    """
    try:
        return _parse(tuple(argv))
    except (ArgumentError, ConfigurationError) as exc:
        return ParseFailure(error=exc)


def _parse(argv: tuple[str, ...]) -> ParseResult:
    builder = ConfigurationBuilder()
    leftovers: list[str] = []
    unknown: list[str] = []

    for token in iter_tokens(argv):
        if isinstance(token, Leftover):
            (unknown if token.unknown_option else leftovers).append(token.text)
            continue
        spec = token.spec
        if spec.kind is ValueKind.INFO and spec.info is not None:
            return InformationalExit(kind=spec.info)
        builder.apply(spec, coerce(spec, token.raw))

    configuration = validate_configuration(builder.build())
    return ParsedArguments(
        configuration=configuration,
        leftovers=tuple(leftovers),
        unknown_options=tuple(unknown),
    )
