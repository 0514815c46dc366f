"""CLI application entry point and command routing for notekeeper.

This module is the **sole error boundary** for the entire application.
It catches :class:`~notekeeper.exceptions.NotekeeperError`,
``KeyboardInterrupt``, and any unexpected ``Exception``, rendering
user-friendly messages on stderr and returning well-defined exit codes.

Architecture notes
------------------
* No business logic lives here — all work is delegated to the core
  service and the infrastructure store.
* The action and its values are validated before the notes file is
  touched, so a usage error never creates or initialises a file.
* This module is the only place that translates between the domain world
  and the OS process exit code.
"""

from __future__ import annotations

import argparse
import logging
import random
import sys
from dataclasses import dataclass
from pathlib import Path

from notekeeper.cli import exit_codes
from notekeeper.cli.console import console, emit
from notekeeper.core.actions import ACTION_NAMES, parse_action
from notekeeper.core.models import Action
from notekeeper.exceptions import NotekeeperError, UsageError
from notekeeper.logging_setup import configure_logging
from notekeeper.version import __version__

logger = logging.getLogger(__name__)


# ---------------------------------------------------------------------------
# Argument parser
# ---------------------------------------------------------------------------

@dataclass(frozen=True, slots=True)
class Invocation:
    """A validated command line: which file, which action."""

    path: Path
    action: Action
    verbose: bool = False


def _build_parser() -> argparse.ArgumentParser:
    """Construct the top-level argument parser.

    The CLI takes a file, an action name and the action's values:
    * ``notekeeper <file> list``
    * ``notekeeper <file> get <id>``
    * ``notekeeper <file> add <content>``
    * ``notekeeper <file> patch <id> <content>``
    * ``notekeeper <file> delete <id>``

    The action's values never pass through argparse; see
    :func:`_split_argv`.

    Presence of each value is checked by
    :func:`~notekeeper.core.actions.parse_action`, not by argparse, so
    every usage problem surfaces as a :class:`UsageError`.
    """
    parser = argparse.ArgumentParser(
        prog="notekeeper",
        description="Keep short text notes in a single JSON file.",
        epilog=(
            "Options go before the file. Put '--' before a file name that "
            "starts with '-'. Everything after the action is taken verbatim."
        ),
    )
    parser.add_argument(
        "-V",
        "--version",
        action="version",
        version=f"%(prog)s {__version__}",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Log diagnostics to stderr.",
    )
    parser.add_argument(
        "file",
        nargs="?",
        default=None,
        help="Path of the JSON notes file. Created when missing.",
    )
    parser.add_argument(
        "action",
        nargs="?",
        default=None,
        help=f"One of: {', '.join(ACTION_NAMES)}.",
    )
    return parser


def _split_argv(argv: list[str]) -> tuple[list[str], list[str], list[str]]:
    """Split *argv* into ``(options, [file, action], values)``.

    Leading tokens that start with ``-`` are options, up to an optional
    ``--`` which is dropped.  The next two tokens are the file and the
    action.  Everything after the action is returned untouched, ``--``
    included.
    """
    index = 0
    options: list[str] = []
    while index < len(argv) and argv[index].startswith("-"):
        if argv[index] == "--":
            index += 1
            break
        options.append(argv[index])
        index += 1

    positionals = argv[index:index + 2]
    return options, positionals, argv[index + 2:]


def parse_invocation(argv: list[str] | None = None) -> Invocation:
    """Parse *argv* into an :class:`Invocation`.

    Raises
    ------
    UsageError
        When the file path or action is missing, the action is unknown,
        or the action lacks a required value.
    """
    if argv is None:
        argv = sys.argv[1:]
    options, positionals, values = _split_argv(argv)
    args = _build_parser().parse_args([*options, "--", *positionals])

    if args.file is None:
        raise UsageError(
            "file path must be provided",
            hint="Run 'notekeeper --help' for usage.",
        )

    action = parse_action(args.action, values)
    return Invocation(path=Path(args.file), action=action, verbose=args.verbose)


# ---------------------------------------------------------------------------
# Command dispatch
# ---------------------------------------------------------------------------

def _run(invocation: Invocation) -> int:
    """Open the notes file, execute the action and print its output."""
    from notekeeper.core.note_service import NoteService
    from notekeeper.infra.json_store import JsonNoteStore

    with JsonNoteStore.open(invocation.path) as store:
        service = NoteService(store, random.Random())
        lines = service.execute(invocation.action)

    emit(lines)
    return exit_codes.SUCCESS


# ---------------------------------------------------------------------------
# Main entry point
# ---------------------------------------------------------------------------

def main(argv: list[str] | None = None) -> int:
    """Run the notekeeper CLI.

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
    invocation = parse_invocation(argv)
    configure_logging(invocation.verbose)
    logger.debug("Invocation: %s", invocation)
    return _run(invocation)


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
    except NotekeeperError as exc:
        console.error(str(exc), exc.hint)
        sys.exit(exit_codes.GENERAL_ERROR)
    except KeyboardInterrupt:
        console.report("Aborted:", "interrupted by user.", style="yellow")
        sys.exit(exit_codes.KEYBOARD_INTERRUPT)
    except Exception as exc:  # noqa: BLE001
        console.error(
            "Unexpected error. Please report this issue.",
            f"{type(exc).__name__}: {exc}",
        )
        sys.exit(exit_codes.UNEXPECTED_ERROR)
