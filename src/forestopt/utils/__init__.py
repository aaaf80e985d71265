"""Shared utilities — constants, typing helpers, and cross-cutting concerns.

Rules
-----
* No business logic.
* No I/O.
* Importable by any layer.
"""

from forestopt.utils.strings import split_string

__all__: list[str] = ["split_string"]
