# src/taskbot/tasks/task_builders.py

"""
Build tasks from the body text of todo/deadline/event commands.

  todo <description>
  deadline <description> /by <date time>
  event <description> /from <date time> /to <date time>
"""

from __future__ import annotations

import re

from ..core.result import Err, Ok, Result, invalid_format
from .task_models import Deadline, Event, ToDo, parse_datetime

DUE_TAG = " /by "
START_TAG = " /from "
END_TAG = " /to "

_EVENT_SPLIT_RE = re.compile(f"{re.escape(START_TAG)}|{re.escape(END_TAG)}")


def create_todo(body: str) -> ToDo:
    return ToDo(body)


def create_deadline(body: str) -> Result[Deadline]:
    if DUE_TAG not in body:
        return invalid_format()

    description, due_text = body.split(DUE_TAG, 1)
    due_by = parse_datetime(due_text)
    if isinstance(due_by, Err):
        return due_by
    return Ok(Deadline(description, due_by.value))


def create_event(body: str) -> Result[Event]:
    if START_TAG not in body or END_TAG not in body:
        return invalid_format()

    # Either tag is a delimiter; the tail segment keeps any extra tags verbatim.
    parts = _EVENT_SPLIT_RE.split(body, maxsplit=2)
    if len(parts) < 3:
        # e.g. "x /from /to y": the shared space leaves only one delimiter.
        return invalid_format()
    description, start_text, end_text = parts

    start = parse_datetime(start_text)
    if isinstance(start, Err):
        return start
    end = parse_datetime(end_text)
    if isinstance(end, Err):
        return end
    return Ok(Event(description, start.value, end.value))
