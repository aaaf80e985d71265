"""Permissive string helpers shared by the list-valued options."""

from __future__ import annotations


def split_string(value: str, separator: str = ",") -> list[str]:
    """Split *value* on *separator*, keeping every segment as given.

    No trimming and no filtering: ``"a,,b"`` yields ``["a", "", "b"]``.
    The empty string yields an empty list rather than ``[""]``.
    """
    if not value:
        return []
    return value.split(separator)
