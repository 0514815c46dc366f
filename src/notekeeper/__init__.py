"""notekeeper — keep short text notes in a single JSON file.

A small list/get/add/patch/delete tool with a strict layered architecture.
"""

from notekeeper.version import __version__

__all__: list[str] = ["__version__"]
