# src/taskbot/tasks/task_models.py

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime
from enum import StrEnum
from typing import Literal, Union

from ..core.result import Ok, Result, datetime_format

# Shared by command text and stored records.
RECORD_DATETIME_FORMAT = "%Y-%m-%d %H%M"
DISPLAY_DATETIME_FORMAT = "%b %d %Y %H:%M"


class TaskKind(StrEnum):
    """Variant discriminant; the value doubles as the record type tag."""

    TODO = "T"
    DEADLINE = "D"
    EVENT = "E"


@dataclass(slots=True)
class ToDo:
    description: str
    is_done: bool = False
    kind: Literal[TaskKind.TODO] = field(default=TaskKind.TODO, init=False)


@dataclass(slots=True)
class Deadline:
    description: str
    due_by: datetime
    is_done: bool = False
    kind: Literal[TaskKind.DEADLINE] = field(default=TaskKind.DEADLINE, init=False)


@dataclass(slots=True)
class Event:
    description: str
    start_at: datetime
    end_at: datetime
    is_done: bool = False
    kind: Literal[TaskKind.EVENT] = field(default=TaskKind.EVENT, init=False)


Task = Union[ToDo, Deadline, Event]


def parse_datetime(text: str) -> Result[datetime]:
    try:
        return Ok(datetime.strptime(text, RECORD_DATETIME_FORMAT))
    except ValueError:
        return datetime_format()


def format_record_datetime(value: datetime) -> str:
    # strftime("%Y") does not zero-pad years below 1000 on every platform.
    return f"{value.year:04d}-{value:%m-%d %H%M}"


def format_display_datetime(value: datetime) -> str:
    return value.strftime(DISPLAY_DATETIME_FORMAT)


def status_icon(task: Task) -> str:
    return "X" if task.is_done else " "


def set_done(task: Task, is_done: bool) -> None:
    task.is_done = is_done


def display(task: Task) -> str:
    """
    User-facing one-line rendering:
      [X] description
      [ ] description (by: Dec 01 2024 18:00)
      [ ] description (from: ... to: ...)
    """
    base = f"[{status_icon(task)}] {task.description}"
    match task:
        case ToDo():
            return base
        case Deadline(due_by=due_by):
            return f"{base} (by: {format_display_datetime(due_by)})"
        case Event(start_at=start_at, end_at=end_at):
            return (
                f"{base} (from: {format_display_datetime(start_at)}"
                f" to: {format_display_datetime(end_at)})"
            )
    raise TypeError(f"Unknown task variant: {task!r}")


def matches_keywords(task: Task, keywords: list[str]) -> bool:
    """True when every keyword occurs in the description (case-sensitive, any order)."""
    return all(word in task.description for word in keywords)
