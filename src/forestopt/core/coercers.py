"""Field coercers — raw option strings to typed, range-checked values.

Every function here is pure.  Each takes the option's long name (for
diagnostics) and the raw string, and either returns the typed value or
raises :class:`~forestopt.exceptions.InvalidValueError`.  Values are
never clamped or replaced by a default.
"""

from __future__ import annotations

import math
import re
from collections.abc import Callable
from types import MappingProxyType
from typing import Any

from forestopt.core.grammar import OptionSpec, ValueKind
from forestopt.core.models import TreeType
from forestopt.exceptions import InvalidValueError
from forestopt.utils.strings import split_string

TREE_TYPE_CODES: MappingProxyType[int, TreeType] = MappingProxyType({
    TreeType.QUANTILE.value: TreeType.QUANTILE,
    TreeType.INSTRUMENTAL.value: TreeType.INSTRUMENTAL,
})
"""Codes accepted by ``--treetype``.  Anything not listed is rejected."""

INT_MAX: int = 2**31 - 1
INT_MIN: int = -(2**31)
"""Integer options hold a 32-bit signed value."""

_INTEGER = re.compile(r"[+-]?[0-9]+", re.ASCII)


# ---------------------------------------------------------------------------
# Numbers
# ---------------------------------------------------------------------------

def _parse_int(option: str, raw: str, reason: str) -> int:
    """Plain ASCII decimal within the 32-bit range; no spaces or underscores."""
    if _INTEGER.fullmatch(raw) is None:
        raise InvalidValueError(option, raw, reason)
    value = int(raw)
    if not INT_MIN <= value <= INT_MAX:
        raise InvalidValueError(option, raw, reason)
    return value


def _parse_float(option: str, raw: str, reason: str) -> float:
    try:
        value = float(raw)
    except ValueError:
        raise InvalidValueError(option, raw, reason) from None
    if math.isnan(value):
        raise InvalidValueError(option, raw, reason)
    return value


def positive_int(option: str, raw: str) -> int:
    """Integer ``>= 1`` (tree count, mtry, partition size, threads)."""
    reason = "Please give a positive integer."
    value = _parse_int(option, raw, reason)
    if value < 1:
        raise InvalidValueError(option, raw, reason)
    return value


def non_negative_int(option: str, raw: str) -> int:
    """Integer ``>= 0``; used by ``--seed`` where 0 means unseeded."""
    reason = "Please give a non-negative integer."
    value = _parse_int(option, raw, reason)
    if value < 0:
        raise InvalidValueError(option, raw, reason)
    return value


def fraction(option: str, raw: str) -> float:
    """Real number in the half-open interval (0, 1]."""
    reason = "Please give a value in (0,1]."
    value = _parse_float(option, raw, reason)
    if not 0 < value <= 1:
        raise InvalidValueError(option, raw, reason)
    return value


def quantiles(option: str, raw: str) -> tuple[float, ...]:
    """Comma separated reals, each strictly inside (0, 1).

    One bad entry rejects the whole list.
    """
    reason = "All quantiles must lie in the range (0, 1)."
    result: list[float] = []
    for part in split_string(raw):
        try:
            value = float(part)
        except ValueError:
            raise InvalidValueError(option, raw, reason) from None
        if not 0 < value < 1:
            raise InvalidValueError(option, raw, reason)
        result.append(value)
    return tuple(result)


# ---------------------------------------------------------------------------
# Names and modes
# ---------------------------------------------------------------------------

def name_list(option: str, raw: str) -> tuple[str, ...]:
    """Comma separated names, kept exactly as given."""
    return tuple(split_string(raw))


def tree_type(option: str, raw: str) -> TreeType:
    """Map a numeric ``--treetype`` code to :class:`TreeType`."""
    accepted = ", ".join(str(code) for code in TREE_TYPE_CODES)
    reason = f"Please give one of: {accepted}."
    code = _parse_int(option, raw, reason)
    try:
        return TREE_TYPE_CODES[code]
    except KeyError:
        raise InvalidValueError(option, raw, reason) from None


def string(option: str, raw: str) -> str:
    """Accept the value verbatim."""
    return raw


# ---------------------------------------------------------------------------
# Dispatch
# ---------------------------------------------------------------------------

COERCERS: MappingProxyType[ValueKind, Callable[[str, str], Any]] = MappingProxyType({
    ValueKind.STRING: string,
    ValueKind.POSITIVE_INT: positive_int,
    ValueKind.NON_NEGATIVE_INT: non_negative_int,
    ValueKind.FRACTION: fraction,
    ValueKind.QUANTILES: quantiles,
    ValueKind.NAME_LIST: name_list,
    ValueKind.TREE_TYPE: tree_type,
})


def coerce(spec: OptionSpec, raw: str | None) -> Any:
    """Convert *raw* for *spec*; flags yield their ``flag_value``."""
    if spec.kind is ValueKind.FLAG:
        return spec.flag_value
    if raw is None:
        raise ValueError(f"--{spec.long} needs a raw value to coerce")
    try:
        coercer = COERCERS[spec.kind]
    except KeyError:
        raise ValueError(f"--{spec.long} has no coercer for {spec.kind}") from None
    return coercer(spec.long, raw)
