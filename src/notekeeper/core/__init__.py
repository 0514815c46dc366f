"""Core / service layer — pure business logic and data transformations.

Rules
-----
* No ``print()`` calls.
* No filesystem or network I/O.
* No imports from ``cli`` or ``infra``.
* All functions must be fully typed and deterministic given their inputs.
"""

from notekeeper.core.actions import ACTION_NAMES, parse_action
from notekeeper.core.id_generator import generate_id
from notekeeper.core.models import (
    Action,
    AddAction,
    DeleteAction,
    GetAction,
    ListAction,
    Note,
    PatchAction,
)
from notekeeper.core.note_service import NoteService, format_note
from notekeeper.core.protocols import NoteStore, RandomSource

__all__: list[str] = [
    "ACTION_NAMES",
    "Action",
    "AddAction",
    "DeleteAction",
    "GetAction",
    "ListAction",
    "Note",
    "NoteService",
    "NoteStore",
    "PatchAction",
    "RandomSource",
    "format_note",
    "generate_id",
    "parse_action",
]
