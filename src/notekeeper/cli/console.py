"""CLI console helpers with optional Rich support.

This module intentionally avoids module-level imports of Rich so
bootstrap paths (``--help``, ``--version``) and plain note output keep
working even when Rich is not installed.

Note lines go to stdout verbatim through :func:`emit`.  Rich is only used
for diagnostics on stderr, where styling is wanted.
"""

from __future__ import annotations

import sys
from typing import Any


def get_rich_console() -> Any:
    """Create a Rich console instance targeting stderr.

    Raises ``ModuleNotFoundError`` when Rich is not installed.
    """
    from rich.console import Console

    return Console(stderr=True)


class _ConsoleProxy:
    """Stderr reporter that styles with Rich when it is importable.

    Every argument is plain text.  Under Rich it is escaped before being
    combined with the markup for the label, so brackets in paths or note
    content are shown literally.
    """

    def report(self, label: str, message: str, *, style: str) -> None:
        """Print ``"<label> <message>"`` to stderr, styling the label."""
        try:
            rich_console = get_rich_console()
        except ModuleNotFoundError:
            print(f"{label} {message}", file=sys.stderr)
            return

        from rich.markup import escape

        rich_console.print(
            f"[{style}]{escape(label)}[/{style}] {escape(message)}",
            soft_wrap=True,
        )

    def error(self, message: str, hint: str | None = None) -> None:
        """Report a user-facing error and its optional hint."""
        self.report("Error:", message, style="bold red")
        if hint:
            self.report("Hint:", hint, style="yellow")


console = _ConsoleProxy()


def emit(lines: list[str]) -> None:
    """Write note output *lines* to stdout, one per line, without markup."""
    for line in lines:
        print(line)
