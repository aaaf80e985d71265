"""Shared pytest fixtures and configuration for the forestopt test suite.

Guidelines
----------
* Core tests must be pure — no side effects, no console output.
* CLI tests call ``main(argv)`` and inspect ``capsys``.
* Tests must not depend on OS state (the thread default is patched
  where it matters).
"""

from __future__ import annotations

import pytest

REQUIRED: list[str] = ["--file", "data.dat", "--depvarname", "y"]
"""Smallest argument list that passes cross-field validation."""


@pytest.fixture
def required_args() -> list[str]:
    return list(REQUIRED)
