"""forestopt — command-line configuration builder for forest training.

Turns a flat argument vector into a frozen, validated configuration for
quantile and instrumental forests, or a precise diagnostic.
"""

from forestopt.version import __version__

__all__: list[str] = ["__version__"]
