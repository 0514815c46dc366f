"""Domain models for notekeeper.

All models are **frozen** dataclasses — immutable value objects with no
behaviour beyond data access.  They carry zero I/O and no knowledge of
how they are stored.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Union


# ---------------------------------------------------------------------------
# Note
# ---------------------------------------------------------------------------

@dataclass(frozen=True, slots=True)
class Note:
    """A single stored note.

    Field order follows the key order of the objects in the notes file.
    """

    content: str
    """Arbitrary text supplied by the caller."""

    id: str
    """Eight-character alphanumeric identifier.  Not guaranteed unique."""


# ---------------------------------------------------------------------------
# Action descriptors
# ---------------------------------------------------------------------------

@dataclass(frozen=True, slots=True)
class ListAction:
    """Print every stored note in insertion order."""


@dataclass(frozen=True, slots=True)
class GetAction:
    """Print the first note whose id matches."""

    id: str


@dataclass(frozen=True, slots=True)
class AddAction:
    """Append a new note with a freshly generated id."""

    content: str


@dataclass(frozen=True, slots=True)
class PatchAction:
    """Replace the content of the first note whose id matches."""

    id: str
    content: str


@dataclass(frozen=True, slots=True)
class DeleteAction:
    """Remove every note whose id matches."""

    id: str


Action = Union[ListAction, GetAction, AddAction, PatchAction, DeleteAction]
