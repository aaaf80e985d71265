"""Allow ``python -m forestopt`` invocation.

This module simply delegates to the CLI error-boundary entry point so
that ``python -m forestopt`` behaves identically to the ``forestopt``
console script.
"""

from __future__ import annotations

from forestopt.cli.app import cli

if __name__ == "__main__":
    cli()
