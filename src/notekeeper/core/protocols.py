"""Protocols (interfaces) consumed by the core layer.

These define the contracts that infrastructure adapters must satisfy.
Core code depends ONLY on these protocols — never on concrete
implementations — preserving the dependency inversion principle.
"""

from __future__ import annotations

from typing import Protocol

from notekeeper.core.models import Note


class NoteStore(Protocol):
    """Contract for whole-collection note storage.

    Any object that implements :meth:`read_notes` and :meth:`write_notes`
    satisfies this protocol structurally (no explicit inheritance
    required).
    """

    def read_notes(self) -> list[Note]:
        """Return the full stored collection in insertion order.

        Raises
        ------
        StorageIOError
            When the backing storage cannot be read.
        StorageFormatError
            When the stored data is not a collection of notes.
        """
        ...  # pragma: no cover

    def write_notes(self, notes: list[Note]) -> None:
        """Replace the stored collection with *notes*.

        Raises
        ------
        StorageIOError
            When the backing storage cannot be written.
        """
        ...  # pragma: no cover


class RandomSource(Protocol):
    """Anything that can hand out random bytes.

    :class:`random.Random` satisfies this protocol, so a seeded instance
    is a convenient deterministic substitute in tests.
    """

    def randbytes(self, n: int) -> bytes:
        """Return *n* random bytes."""
        ...  # pragma: no cover
