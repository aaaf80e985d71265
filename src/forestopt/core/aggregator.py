"""Configuration aggregator — the only mutable stage of a parse.

:class:`ConfigurationBuilder` starts from the documented defaults,
accepts coerced values one at a time, and freezes them into a
:class:`~forestopt.core.models.Configuration`.  It performs no
cross-field reasoning; see :mod:`forestopt.core.validator`.
"""

from __future__ import annotations

import dataclasses
from typing import Any

from forestopt.core.grammar import OptionSpec, RepeatPolicy
from forestopt.core.models import Configuration

_FIELD_NAMES: frozenset[str] = frozenset(
    f.name for f in dataclasses.fields(Configuration)
)


class ConfigurationBuilder:
    """Accumulate option values, last occurrence winning."""

    def __init__(self) -> None:
        self._values: dict[str, Any] = {}

    def apply(self, spec: OptionSpec, value: Any) -> None:
        """Store *value* in the field fed by *spec*.

        Scalars are overwritten.  List fields are replaced by a fresh
        tuple so a repeated flag never extends the earlier list.
        """
        if spec.field is None or spec.field not in _FIELD_NAMES:
            raise ValueError(f"--{spec.long} does not feed a configuration field")
        if spec.repeat is RepeatPolicy.REPLACE:
            value = tuple(value)
        self._values[spec.field] = value

    def build(self) -> Configuration:
        """Freeze the accumulated values over the defaults."""
        return Configuration(**self._values)
