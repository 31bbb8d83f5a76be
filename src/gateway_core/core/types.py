"""Gateway core shared types.

Key design decisions:
* ``JsonValue`` is a recursive type alias; the redactor dispatches on the
  runtime type of each node rather than on a wrapper class.
* ``ProcessHandle`` is a runtime-checkable ``Protocol`` so any object with a
  ``status`` attribute (a sandbox process record, a test double, ...) can be
  polled without inheriting from anything in this package.
"""
from __future__ import annotations

from typing import Protocol, TypeAlias, runtime_checkable

JsonScalar: TypeAlias = None | bool | int | float | str
JsonValue: TypeAlias = (
    JsonScalar | list["JsonValue"] | tuple["JsonValue", ...] | dict[str, "JsonValue"]
)

RUNNING_STATUS = "running"
"""The only non-terminal process status."""


@runtime_checkable
class ProcessHandle(Protocol):
    """An externally owned process record with a live ``status`` field.

    Any value other than :data:`RUNNING_STATUS` is terminal.  The waiter
    only reads ``status``; it never writes to the handle.
    """

    status: str


def is_terminal(status: str) -> bool:
    """Return ``True`` when *status* is anything other than ``"running"``."""
    return status != RUNNING_STATUS
