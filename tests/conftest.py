"""Shared pytest fixtures and configuration for the notekeeper test suite.

Guidelines
----------
* Core tests run against an in-memory store — no filesystem.
* Store and CLI tests use real files under ``tmp_path`` only.
* Id generation is driven by a fixed byte source wherever the id matters.
"""

from __future__ import annotations

from collections.abc import Callable
from pathlib import Path

import pytest

from notekeeper.core.models import Note
from notekeeper.core.note_service import NoteService


class FixedBytes:
    """Deterministic :class:`RandomSource` that replays *data* on every call."""

    def __init__(self, data: bytes) -> None:
        self.data = data
        self.calls: list[int] = []

    def randbytes(self, n: int) -> bytes:
        self.calls.append(n)
        return (self.data * (n // len(self.data) + 1))[:n]


class InMemoryStore:
    """:class:`NoteStore` double that records every write."""

    def __init__(self, notes: list[Note] | None = None) -> None:
        self.notes: list[Note] = list(notes or [])
        self.writes: list[list[Note]] = []

    def read_notes(self) -> list[Note]:
        return list(self.notes)

    def write_notes(self, notes: list[Note]) -> None:
        self.writes.append(list(notes))
        self.notes = list(notes)


@pytest.fixture()
def fixed_rng() -> FixedBytes:
    """Byte source whose ids always come out as ``01234567``."""
    return FixedBytes(bytes(range(8)))


@pytest.fixture()
def notes_path(tmp_path: Path) -> Path:
    """Path of a notes file that does not exist yet."""
    return tmp_path / "notes.json"


@pytest.fixture()
def byte_source() -> Callable[[bytes], FixedBytes]:
    """Factory for fixed byte sources: ``byte_source(b"...")``."""
    return FixedBytes


@pytest.fixture()
def make_service(
    fixed_rng: FixedBytes,
) -> Callable[..., tuple[NoteService, InMemoryStore]]:
    """Factory building a :class:`NoteService` over an in-memory store.

    ``make_service(notes)`` returns ``(service, store)``; new ids come out
    as ``01234567``.
    """

    def _make(notes: list[Note] | None = None) -> tuple[NoteService, InMemoryStore]:
        store = InMemoryStore(notes)
        return NoteService(store, fixed_rng), store

    return _make
