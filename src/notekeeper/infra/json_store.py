"""JSON-file backed implementation of :class:`~notekeeper.core.protocols.NoteStore`.

This module is the **only** place in the codebase that touches the
notes file.  ``OSError`` and pydantic ``ValidationError`` are caught
here and re-raised as typed
:class:`~notekeeper.exceptions.StorageError` subclasses — nothing raw
escapes the infrastructure boundary.

File layout
-----------
A single compact JSON array of ``{"content": ..., "id": ...}`` objects.
A zero-length file is seeded with ``[]`` when opened.

Limitations
-----------
* Every write rewrites the whole file in place (seek, truncate, write).
  A crash mid-write leaves a truncated file behind.
* No locking.  Two processes running against the same file can each
  read the old collection and the later write silently drops the
  earlier change.
"""

from __future__ import annotations

import logging
import os
from pathlib import Path
from types import TracebackType
from typing import BinaryIO

from pydantic import TypeAdapter, ValidationError

from notekeeper.core.models import Note
from notekeeper.exceptions import StorageFormatError, StorageIOError
from notekeeper.utils.constants import EMPTY_COLLECTION

logger = logging.getLogger(__name__)

_NOTES_ADAPTER: TypeAdapter[list[Note]] = TypeAdapter(list[Note])


def open_note_file(path: Path) -> BinaryIO:
    """Open *path* for reading and writing, creating it if needed.

    A zero-length file is initialised with an empty JSON array and the
    returned handle is positioned at the start.

    Raises
    ------
    StorageIOError
        When the file cannot be created, opened or initialised.
    """
    try:
        fd = os.open(path, os.O_RDWR | os.O_CREAT, 0o644)
        handle = os.fdopen(fd, "r+b")
    except OSError as exc:
        raise StorageIOError(
            f"Cannot open notes file {path}: {exc.strerror or exc}",
        ) from exc

    try:
        if os.fstat(handle.fileno()).st_size == 0:
            handle.write(EMPTY_COLLECTION)
            handle.flush()
            handle.seek(0)
            logger.info("Initialised empty notes file %s", path)
    except OSError as exc:
        handle.close()
        raise StorageIOError(
            f"Cannot initialise notes file {path}: {exc.strerror or exc}",
        ) from exc

    return handle


class JsonNoteStore:
    """Concrete :class:`NoteStore` over an open read/write binary handle.

    Usage::

        with JsonNoteStore.open(Path("notes.json")) as store:
            notes = store.read_notes()

    This class satisfies the :class:`~notekeeper.core.protocols.NoteStore`
    protocol structurally — no explicit inheritance required.
    """

    def __init__(self, handle: BinaryIO, *, name: str = "<notes>") -> None:
        self._handle: BinaryIO = handle
        self._name: str = name

    @classmethod
    def open(cls, path: Path) -> JsonNoteStore:
        """Open (or create) the notes file at *path*.  See :func:`open_note_file`."""
        return cls(open_note_file(path), name=str(path))

    # ------------------------------------------------------------------
    # Protocol methods
    # ------------------------------------------------------------------

    def read_notes(self) -> list[Note]:
        """Decode the collection from the handle's current position.

        Raises
        ------
        StorageIOError
            When the handle cannot be read.
        StorageFormatError
            When the content is not a JSON array of note objects.
        """
        try:
            raw = self._handle.read()
        except OSError as exc:
            raise StorageIOError(
                f"Cannot read notes file {self._name}: {exc.strerror or exc}",
            ) from exc

        try:
            notes = _NOTES_ADAPTER.validate_json(raw)
        except ValidationError as exc:
            first = exc.errors()[0]
            location = ".".join(str(part) for part in first["loc"]) or "<root>"
            raise StorageFormatError(
                f"{self._name} is not a JSON array of notes",
                hint=f"{location}: {first['msg']}",
            ) from exc

        logger.debug("Read %d note(s) from %s", len(notes), self._name)
        return notes

    def write_notes(self, notes: list[Note]) -> None:
        """Overwrite the whole file with *notes* as compact JSON.

        Raises
        ------
        StorageIOError
            When seeking, truncating or writing fails.
        """
        payload = _NOTES_ADAPTER.dump_json(notes)
        try:
            self._handle.seek(0)
            self._handle.truncate(0)
            self._handle.write(payload)
            self._handle.flush()
        except OSError as exc:
            raise StorageIOError(
                f"Cannot write notes file {self._name}: {exc.strerror or exc}",
            ) from exc

        logger.debug("Wrote %d note(s) to %s", len(notes), self._name)

    # ------------------------------------------------------------------
    # Lifecycle
    # ------------------------------------------------------------------

    def close(self) -> None:
        self._handle.close()

    def __enter__(self) -> JsonNoteStore:
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        self.close()
