"""Core note service — runs one action against the stored collection.

This service works on a :class:`~notekeeper.core.protocols.NoteStore`
injected at construction time.  Every action reads the whole
collection; write actions mutate it in memory and hand the complete
result back to the store.

Guarantees
----------
* No ``print()`` — :meth:`NoteService.execute` returns the lines the
  caller should show.
* A failed lookup never reaches :meth:`NoteStore.write_notes`.
* :meth:`get_note` and :meth:`patch_note` act on the first matching id,
  :meth:`delete_note` removes every matching id.
"""

from __future__ import annotations

import dataclasses
import logging

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
from notekeeper.core.protocols import NoteStore, RandomSource
from notekeeper.exceptions import NoteNotFoundError
from notekeeper.utils.constants import NO_NOTES_MESSAGE, NOTE_SEPARATOR

logger = logging.getLogger(__name__)


def format_note(note: Note) -> str:
    """Render *note* as ``"{id} -> {content}"``."""
    return f"{note.id}{NOTE_SEPARATOR}{note.content}"


class NoteService:
    """Stateless service that executes note actions.

    Parameters
    ----------
    store:
        Any object satisfying the :class:`NoteStore` protocol.
    rng:
        Source of random bytes for new note ids.
    """

    def __init__(self, store: NoteStore, rng: RandomSource) -> None:
        self._store: NoteStore = store
        self._rng: RandomSource = rng

    # ------------------------------------------------------------------
    # Operations
    # ------------------------------------------------------------------

    def list_notes(self) -> list[Note]:
        """Return every stored note in insertion order."""
        return self._store.read_notes()

    def get_note(self, note_id: str) -> Note:
        """Return the first note with *note_id*.

        Raises
        ------
        NoteNotFoundError
            When no note carries *note_id*.
        """
        notes = self._store.read_notes()
        for note in notes:
            if note.id == note_id:
                return note
        raise NoteNotFoundError(note_id)

    def add_note(self, content: str) -> Note:
        """Append a note holding *content* under a fresh id and persist."""
        notes = self._store.read_notes()
        note = Note(content=content, id=generate_id(self._rng))
        notes.append(note)
        self._store.write_notes(notes)
        logger.debug("Added note %s (%d notes stored)", note.id, len(notes))
        return note

    def patch_note(self, note_id: str, content: str) -> Note:
        """Replace the content of the first note with *note_id* and persist.

        Raises
        ------
        NoteNotFoundError
            When no note carries *note_id*.  Nothing is written.
        """
        notes = self._store.read_notes()
        for index, note in enumerate(notes):
            if note.id == note_id:
                updated = dataclasses.replace(note, content=content)
                notes[index] = updated
                self._store.write_notes(notes)
                logger.debug("Patched note %s at position %d", note_id, index)
                return updated
        raise NoteNotFoundError(note_id)

    def delete_note(self, note_id: str) -> int:
        """Remove every note with *note_id*, persist, and return how many went.

        Raises
        ------
        NoteNotFoundError
            When no note carries *note_id*.  Nothing is written.
        """
        notes = self._store.read_notes()
        remaining = [note for note in notes if note.id != note_id]
        removed = len(notes) - len(remaining)
        if removed == 0:
            raise NoteNotFoundError(note_id)
        if removed > 1:
            logger.warning("Id %s was shared by %d notes; all removed", note_id, removed)
        self._store.write_notes(remaining)
        logger.debug("Deleted %d note(s) with id %s", removed, note_id)
        return removed

    # ------------------------------------------------------------------
    # Dispatch
    # ------------------------------------------------------------------

    def execute(self, action: Action) -> list[str]:
        """Run *action* and return the output lines it produces.

        ``delete`` produces no output.  ``list`` on an empty collection
        produces the single line :data:`NO_NOTES_MESSAGE`.
        """
        logger.debug("Executing %r", action)

        if isinstance(action, ListAction):
            notes = self.list_notes()
            if not notes:
                return [NO_NOTES_MESSAGE]
            return [format_note(note) for note in notes]
        if isinstance(action, GetAction):
            return [format_note(self.get_note(action.id))]
        if isinstance(action, AddAction):
            return [format_note(self.add_note(action.content))]
        if isinstance(action, PatchAction):
            return [format_note(self.patch_note(action.id, action.content))]
        if isinstance(action, DeleteAction):
            self.delete_note(action.id)
            return []

        raise TypeError(f"Unsupported action: {action!r}")
