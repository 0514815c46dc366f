"""Constants shared across layers."""

from __future__ import annotations

ID_LENGTH: int = 8
"""Number of characters in a generated note id."""

ID_ALPHABET: str = "0123456789abcdefghijklmnopqrstuvwxyzABCDEFGHIJKLMNOPQRSTUVWXYZ"
"""The 62 characters a note id is drawn from."""

EMPTY_COLLECTION: bytes = b"[]"
"""Content written into a zero-length notes file before first use."""

NO_NOTES_MESSAGE: str = "No notes found"
"""Printed by ``list`` when the collection is empty."""

NOTE_SEPARATOR: str = " -> "
"""Joins id and content in every rendered note line."""
