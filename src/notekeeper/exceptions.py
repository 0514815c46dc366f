"""Custom exception hierarchy for notekeeper.

All exceptions that cross layer boundaries must inherit from
:class:`NotekeeperError`.  Raw ``OSError`` and decoding exceptions must
NEVER propagate beyond the infrastructure layer — they must be caught
and re-raised as a typed subclass defined here.

Hierarchy
---------
NotekeeperError
├── UsageError
├── NoteNotFoundError
└── StorageError
    ├── StorageIOError
    └── StorageFormatError
"""

from __future__ import annotations


class NotekeeperError(Exception):
    """Base exception for all notekeeper errors.

    Every user-visible error condition must map to a subclass of this
    exception so that the CLI error boundary can render a clean message
    without leaking internal stack traces.
    """

    def __init__(self, message: str, *, hint: str | None = None) -> None:
        super().__init__(message)
        self.hint: str | None = hint
        """Optional actionable guidance shown below the error message."""


# --- Invocation ------------------------------------------------------------

class UsageError(NotekeeperError):
    """Raised when the command line is missing a value or names no known action."""


# --- Lookup ----------------------------------------------------------------

class NoteNotFoundError(NotekeeperError):
    """Raised when no stored note carries the requested id."""

    def __init__(self, note_id: str, *, hint: str | None = None) -> None:
        super().__init__(f"note not found: {note_id}", hint=hint)
        self.note_id: str = note_id


# --- Storage ---------------------------------------------------------------

class StorageError(NotekeeperError):
    """Raised when the notes file cannot be used."""


class StorageIOError(StorageError):
    """Raised when opening, reading or writing the notes file fails."""


class StorageFormatError(StorageError):
    """Raised when the notes file is not a JSON array of notes."""
