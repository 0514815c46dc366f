"""Note id generation.

Ids are short and readable rather than collision-proof: each character
is picked independently, so two notes can end up with the same id.
Duplicates are not detected.
"""

from __future__ import annotations

from notekeeper.core.protocols import RandomSource
from notekeeper.utils.constants import ID_ALPHABET, ID_LENGTH


def generate_id(rng: RandomSource, length: int = ID_LENGTH) -> str:
    """Return a new id of *length* characters drawn from :data:`ID_ALPHABET`.

    Each random byte is reduced modulo the alphabet size, which slightly
    favours the first characters of the alphabet.
    """
    return "".join(
        ID_ALPHABET[byte % len(ID_ALPHABET)] for byte in rng.randbytes(length)
    )
