"""Infrastructure layer — external system integration.

This layer wraps all interaction with the filesystem.  Every raw
``OSError`` or decoding failure must be caught here and re-raised as a
:class:`~notekeeper.exceptions.NotekeeperError` subclass.

Rules
-----
* No imports from ``cli``.
* No user-facing output (no ``print()``, no Rich rendering).
* Must expose clean, typed interfaces consumed by the core layer.
"""

from notekeeper.infra.json_store import JsonNoteStore, open_note_file

__all__: list[str] = [
    "JsonNoteStore",
    "open_note_file",
]
