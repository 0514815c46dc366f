"""Turn an action name plus positional values into an action descriptor.

Pure validation — no I/O.  Every failure is a
:class:`~notekeeper.exceptions.UsageError` naming the missing value.
"""

from __future__ import annotations

from collections.abc import Sequence

from notekeeper.core.models import (
    Action,
    AddAction,
    DeleteAction,
    GetAction,
    ListAction,
    PatchAction,
)
from notekeeper.exceptions import UsageError

ACTION_NAMES: tuple[str, ...] = ("list", "get", "add", "patch", "delete")

_USAGE_HINT = "Usage: notekeeper <file> {list | get <id> | add <content> | patch <id> <content> | delete <id>}"


def _require(values: Sequence[str], index: int, field: str) -> str:
    try:
        return values[index]
    except IndexError:
        raise UsageError(f"{field} must be provided", hint=_USAGE_HINT) from None


def parse_action(name: str | None, values: Sequence[str] = ()) -> Action:
    """Build the :data:`Action` for *name* from its positional *values*.

    Parameters
    ----------
    name:
        One of :data:`ACTION_NAMES`, or ``None`` when the user gave none.
    values:
        The positional arguments following the action name.  Values past
        the ones the action needs are ignored.

    Raises
    ------
    UsageError
        When *name* is missing or unknown, or a required value is absent.
    """
    if name is None:
        raise UsageError("action must be provided", hint=_USAGE_HINT)

    if name == "list":
        return ListAction()
    if name == "get":
        return GetAction(id=_require(values, 0, "id"))
    if name == "add":
        return AddAction(content=_require(values, 0, "content"))
    if name == "patch":
        return PatchAction(
            id=_require(values, 0, "id"),
            content=_require(values, 1, "content"),
        )
    if name == "delete":
        return DeleteAction(id=_require(values, 0, "id"))

    raise UsageError(
        f"unknown action: {name}",
        hint=f"Choose one of: {', '.join(ACTION_NAMES)}.",
    )
