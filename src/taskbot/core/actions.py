# src/taskbot/core/actions.py

from __future__ import annotations

from enum import StrEnum


class Action(StrEnum):
    """Closed set of actions a command line can name (first token, case-insensitive)."""

    BYE = "BYE"
    LIST = "LIST"
    MARK = "MARK"
    UNMARK = "UNMARK"
    TODO = "TODO"
    DEADLINE = "DEADLINE"
    EVENT = "EVENT"
    DELETE = "DELETE"
    FIND = "FIND"
    ARCHIVE = "ARCHIVE"
    INVALID = "INVALID"

    @property
    def needs_body(self) -> bool:
        return self not in (Action.LIST, Action.BYE, Action.INVALID)
