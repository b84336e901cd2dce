"""CLI application entry point for Internity.

This module is the **outer error boundary** for the application.  The
interactive session already absorbs per-line
:class:`~internity.exceptions.InternityError`; what reaches :func:`cli`
is a startup failure, Ctrl+C, or a genuine bug, each mapped to a
well-defined exit code.
"""

from __future__ import annotations

import argparse
import logging
import sys

from internity.cli import exit_codes
from internity.cli.console import console
from internity.exceptions import InternityError
from internity.utils.config import DATA_FILE_ENV, Settings, load_settings
from internity.version import __version__


# ---------------------------------------------------------------------------
# Argument parser
# ---------------------------------------------------------------------------

def _build_parser() -> argparse.ArgumentParser:
    """Construct the top-level argument parser.

    * ``internity``                    — start an interactive session
    * ``internity --data-file PATH``   — use another data file
    * ``internity --verbose``          — log parsing and storage to stderr
    * ``internity --version``
    """
    parser = argparse.ArgumentParser(
        prog="internity",
        description="Command-line internship application tracker.",
    )
    parser.add_argument(
        "-V",
        "--version",
        action="version",
        version=f"%(prog)s {__version__}",
    )
    parser.add_argument(
        "-f",
        "--data-file",
        default=None,
        help=f"Data file to load and save (default: ${DATA_FILE_ENV} or "
        "data/internships.txt).",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        default=None,
        help="Log parsing and storage activity to stderr.",
    )
    return parser


# ---------------------------------------------------------------------------
# Logging
# ---------------------------------------------------------------------------

def _configure_logging(verbose: bool) -> None:
    """Route ``internity`` loggers to stderr.

    Uses Rich's handler when Rich is installed.  Without ``--verbose``
    only warnings are shown.
    """
    level = logging.INFO if verbose else logging.WARNING
    try:
        from rich.console import Console
        from rich.logging import RichHandler
    except ModuleNotFoundError:
        handler: logging.Handler = logging.StreamHandler(sys.stderr)
        handler.setFormatter(logging.Formatter("%(levelname)s %(name)s: %(message)s"))
    else:
        handler = RichHandler(console=Console(stderr=True), show_path=False)

    package_logger = logging.getLogger("internity")
    package_logger.handlers.clear()
    package_logger.addHandler(handler)
    package_logger.setLevel(level)
    package_logger.propagate = False


# ---------------------------------------------------------------------------
# Command dispatch
# ---------------------------------------------------------------------------

def _handle_session(settings: Settings) -> int:
    """Run the interactive session against the configured data file."""
    from internity.cli.session import InteractiveSession
    from internity.infra.file_storage import FlatFileStorage

    session = InteractiveSession(FlatFileStorage(settings.data_file))
    session.run()
    return exit_codes.SUCCESS


# ---------------------------------------------------------------------------
# Main entry point
# ---------------------------------------------------------------------------

def main(argv: list[str] | None = None) -> int:
    """Run the Internity CLI.

    Parameters
    ----------
    argv:
        Explicit argument list.  When ``None`` (default), ``sys.argv[1:]``
        is used.

    Returns
    -------
    int
        OS process exit code.
    """
    parser = _build_parser()
    args = parser.parse_args(argv)

    settings = load_settings(data_file=args.data_file, verbose=args.verbose)
    _configure_logging(settings.verbose)

    return _handle_session(settings)


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
    except InternityError as exc:
        console.print(f"[bold red]Error:[/bold red] {exc}")
        if exc.hint:
            console.print(f"[yellow]Hint:[/yellow] {exc.hint}")
        sys.exit(exit_codes.GENERAL_ERROR)
    except KeyboardInterrupt:
        console.print("\n[yellow]Aborted by user.[/yellow]")
        sys.exit(exit_codes.KEYBOARD_INTERRUPT)
    except Exception as exc:  # noqa: BLE001
        console.print(
            "[bold red]Unexpected error.[/bold red] "
            "Please report this issue.\n"
            f"  {type(exc).__name__}: {exc}"
        )
        sys.exit(exit_codes.UNEXPECTED_ERROR)
