"""Allow ``python -m notekeeper`` invocation.

This module simply delegates to the CLI error-boundary entry point so
that ``python -m notekeeper`` behaves identically to the ``notekeeper``
console script.
"""

from __future__ import annotations

from notekeeper.cli.app import cli

if __name__ == "__main__":
    cli()
