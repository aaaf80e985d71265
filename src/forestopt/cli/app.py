"""CLI application entry point for forestopt.

This module is the **sole error boundary** for the entire application.
It turns the :data:`~forestopt.core.models.ParseResult` of the pure core
into console output and a process exit code, and catches
``KeyboardInterrupt`` and any unexpected ``Exception`` so the process
never exits with a raw stack trace.

Architecture notes
------------------
* No parsing logic lives here — all work is delegated to the core layer.
* ``print()`` is forbidden outside the CLI layer; the console proxies
  are used exclusively.
* This module is the only place that translates between the domain world
  and the OS process exit code.
"""

from __future__ import annotations

import sys

from forestopt.cli import exit_codes
from forestopt.cli.console import console, escape, stdout
from forestopt.cli.summary import render_summary
from forestopt.cli.usage import describe_usage, describe_version
from forestopt.core.models import (
    InfoKind,
    InformationalExit,
    ParsedArguments,
    ParseFailure,
)
from forestopt.core.parser import parse_arguments
from forestopt.exceptions import ForestOptError

PROG: str = "forestopt"


# ---------------------------------------------------------------------------
# Outcome handlers
# ---------------------------------------------------------------------------

def _report_error(exc: ForestOptError) -> None:
    """Render *exc* and its hint on stderr."""
    console.print(f"[bold red]Error:[/bold red] {escape(str(exc))}")
    if exc.hint:
        console.print(f"[yellow]Hint:[/yellow] {escape(exc.hint)}")


def _handle_informational(outcome: InformationalExit) -> int:
    """Print usage or version text to stdout."""
    if outcome.kind is InfoKind.HELP:
        stdout.print(describe_usage(PROG), markup=False)
    else:
        stdout.print(describe_version(), markup=False)
    return exit_codes.SUCCESS


def _handle_failure(outcome: ParseFailure) -> int:
    _report_error(outcome.error)
    return exit_codes.GENERAL_ERROR


def _handle_parsed(outcome: ParsedArguments) -> int:
    """Report ignored arguments, then the accepted configuration."""
    for token in outcome.unknown_options:
        console.print(
            f"[yellow]Unrecognized option, ignored:[/yellow] {escape(token)}"
        )
    for token in outcome.leftovers:
        console.print(
            f"[yellow]Other parameter, not processed:[/yellow] {escape(token)}"
        )

    config = outcome.configuration
    if config.verbose:
        render_summary(config)

    mode = "prediction" if config.predicting else "training"
    console.print(
        f"[bold green]Configuration valid.[/bold green]  "
        f"mode={mode} treetype={config.treetype.name.lower()}"
    )
    return exit_codes.SUCCESS


# ---------------------------------------------------------------------------
# Main entry point
# ---------------------------------------------------------------------------

def main(argv: list[str] | None = None) -> int:
    """Run the forestopt CLI.

    Parameters
    ----------
    argv:
        Explicit argument list.  When ``None`` (default), ``sys.argv[1:]``
        is used.  Accepting *argv* enables deterministic testing without
        monkeypatching.

    Returns
    -------
    int
        OS process exit code.
    """
    outcome = parse_arguments(sys.argv[1:] if argv is None else argv)

    if isinstance(outcome, InformationalExit):
        return _handle_informational(outcome)
    if isinstance(outcome, ParseFailure):
        return _handle_failure(outcome)
    return _handle_parsed(outcome)


# ---------------------------------------------------------------------------
# Script-level error boundary
# ---------------------------------------------------------------------------

def cli() -> None:
    """Top-level error boundary invoked by the console-script entry point.

    This function wraps :func:`main` and guarantees the process never
    exits with a raw stack trace during normal usage.
    """
    try:
        code = main()
        sys.exit(code)
    except ForestOptError as exc:
        _report_error(exc)
        sys.exit(exit_codes.GENERAL_ERROR)
    except KeyboardInterrupt:
        console.print("\n[yellow]Aborted by user.[/yellow]")
        sys.exit(exit_codes.KEYBOARD_INTERRUPT)
    except Exception as exc:  # noqa: BLE001
        console.print(
            "[bold red]Unexpected error.[/bold red] "
            "Please report this issue.\n"
            f"  {type(exc).__name__}: {escape(str(exc))}"
        )
        sys.exit(exit_codes.UNEXPECTED_ERROR)
