"""CLI application entry point and wiring for tempstack.

This module is the **sole error boundary** for the entire application.
It catches :class:`~tempstack.exceptions.TempStackError`,
``KeyboardInterrupt``, and any unexpected ``Exception``, rendering
messages on stderr and returning well-defined exit codes.

Architecture notes
------------------
* No business logic lives here: options are turned into a
  :class:`~tempstack.core.models.RunOptions` and handed to
  :class:`~tempstack.core.application.StackApplication`.
* Concrete infrastructure (local disk, std streams) is chosen here and
  injected into the core.
* This module is the only place that translates between the domain world
  and the OS process exit code.
"""

from __future__ import annotations

import argparse
import logging
import os
import sys
from pathlib import Path

from tempstack.cli import exit_codes
from tempstack.cli.console import console, escape
from tempstack.core.application import StackApplication
from tempstack.core.models import MaintenanceAction, RunOptions, SlotSelector
from tempstack.core.registry import PathRegistry
from tempstack.exceptions import OutputClosedError, TempStackError
from tempstack.infra import paths
from tempstack.infra.local_store import LocalFileStore
from tempstack.infra.streams import StdinSource, StdoutSink
from tempstack.logging_config import resolve_level, setup_logging
from tempstack.version import __version__

logger = logging.getLogger(__name__)


# ---------------------------------------------------------------------------
# Argument parser
# ---------------------------------------------------------------------------

def _build_parser() -> argparse.ArgumentParser:
    """Construct the top-level argument parser.

    Typical use:
    * ``cmd | tempstack``           — capture into a new slot and echo it
    * ``tempstack``                 — print the newest slot
    * ``tempstack -o 2``            — print slot 2
    * ``cmd | tempstack -i 2 -s``   — overwrite slot 2 quietly
    """
    parser = argparse.ArgumentParser(
        prog="tempstack",
        description="Buffer piped text through a persistent stack of temp files.",
    )
    parser.add_argument(
        "-V",
        "--version",
        action="version",
        version=f"%(prog)s {__version__}",
    )
    parser.add_argument(
        "file",
        nargs="?",
        default=None,
        metavar="FILE",
        help="Input file, read when stdin is a terminal.",
    )
    parser.add_argument(
        "-i",
        "--input",
        metavar="N",
        default=None,
        help="Overwrite slot N with the new input instead of adding a slot.",
    )
    parser.add_argument(
        "-o",
        "--output",
        metavar="N",
        default=None,
        help="Print slot N instead of the input buffer.",
    )
    parser.add_argument(
        "-s",
        "--silent",
        action="store_true",
        help="Do not print the input buffer.",
    )
    parser.add_argument(
        "-l",
        "--list-files",
        action="store_true",
        help="List slot indices and paths, then exit.",
    )
    parser.add_argument(
        "-L",
        "--list-contents",
        action="store_true",
        help="List slot indices, paths and contents, then exit.",
    )
    parser.add_argument(
        "-c",
        "--clear",
        action="store_true",
        help="Delete every slot and the registry, then exit.",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Log debug details to stderr.",
    )
    return parser


def _options_from_args(args: argparse.Namespace) -> RunOptions:
    """Translate parsed arguments into core :class:`RunOptions`."""
    action: MaintenanceAction | None = None
    if args.list_files:
        action = MaintenanceAction.LIST_FILES
    elif args.list_contents:
        action = MaintenanceAction.LIST_CONTENTS
    elif args.clear:
        action = MaintenanceAction.CLEAR

    return RunOptions(
        arg_file=Path(args.file) if args.file is not None else None,
        input_slot=SlotSelector.parse(args.input) if args.input is not None else None,
        output_slot=SlotSelector.parse(args.output) if args.output is not None else None,
        silent=args.silent,
        action=action,
    )


def _build_application(state_dir: Path) -> StackApplication:
    """Wire the core application to the local disk and std streams."""
    store = LocalFileStore()
    registry = PathRegistry(store, paths.registry_file(state_dir))
    return StackApplication(
        registry=registry,
        store=store,
        stdin=StdinSource(),
        stdout=StdoutSink(),
        new_slot_path=paths.new_slot_path(state_dir),
    )


# ---------------------------------------------------------------------------
# Main entry point
# ---------------------------------------------------------------------------

def main(argv: list[str] | None = None) -> int:
    """Run the tempstack CLI.

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

    Raises
    ------
    TempStackError
        Propagated to :func:`cli`, which renders it.
    """
    parser = _build_parser()
    args = parser.parse_args(argv)
    setup_logging(resolve_level(verbose=args.verbose))

    options = _options_from_args(args)
    state_dir = paths.state_dir()
    logger.debug("state dir %s", state_dir)

    _build_application(state_dir).run(options)
    return exit_codes.SUCCESS


# ---------------------------------------------------------------------------
# Script-level error boundary
# ---------------------------------------------------------------------------

def _silence_stdout() -> None:
    """Point the stdout descriptor at devnull so the exit-time flush cannot fail."""
    try:
        fd = sys.stdout.fileno()
        devnull = os.open(os.devnull, os.O_WRONLY)
    except (AttributeError, OSError, ValueError):
        return
    try:
        os.dup2(devnull, fd)
    except OSError:
        logger.debug("could not redirect stdout to devnull", exc_info=True)
    finally:
        os.close(devnull)


def cli() -> None:
    """Top-level error boundary invoked by the console-script entry point.

    This function wraps :func:`main` and guarantees the process never
    exits with a raw stack trace during normal usage.
    """
    try:
        code = main()
        sys.exit(code)
    except OutputClosedError:
        _silence_stdout()
        sys.exit(exit_codes.BROKEN_PIPE)
    except TempStackError as exc:
        console.print(f"[bold red]Error:[/bold red] {escape(str(exc))}")
        if exc.hint:
            console.print(f"[yellow]Hint:[/yellow] {escape(exc.hint)}")
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
