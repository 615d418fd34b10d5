# src/taskbot/tasks/record_codec.py

"""
Flat record dialect for persisted tasks.

  T,<done>,<description>
  D,<done>,<description>,<due>
  E,<done>,<description>,<start>,<end>

<done> is "1" or "0"; dates use RECORD_DATETIME_FORMAT.

Commas inside a description are NOT escaped. Such a record is written as-is
and will not decode (wrong field count); changing this would change the on-disk format.

Trailing empty fields are dropped before the field count is checked, so
"T,0," is rejected and "T,0,a," reads back as "a".
"""

from __future__ import annotations

from ..core.result import Err, Ok, Result, invalid_parse
from .task_models import (
    Deadline,
    Event,
    Task,
    TaskKind,
    ToDo,
    format_record_datetime,
    parse_datetime,
    set_done,
)

SEPARATOR = ","
DONE_FLAG = "1"
NOT_DONE_FLAG = "0"

RECORD_ARITY: dict[TaskKind, int] = {
    TaskKind.TODO: 3,
    TaskKind.DEADLINE: 4,
    TaskKind.EVENT: 5,
}


def encode_task(task: Task) -> str:
    fields = [task.kind.value, DONE_FLAG if task.is_done else NOT_DONE_FLAG, task.description]
    match task:
        case ToDo():
            pass
        case Deadline(due_by=due_by):
            fields.append(format_record_datetime(due_by))
        case Event(start_at=start_at, end_at=end_at):
            fields.append(format_record_datetime(start_at))
            fields.append(format_record_datetime(end_at))
    return SEPARATOR.join(fields)


def decode_record(record: str) -> Result[Task]:
    try:
        record.encode("utf-8")
    except UnicodeEncodeError:
        # Undecodable bytes from the store (surrogate-escaped).
        return invalid_parse(record.encode("utf-8", "replace").decode("utf-8"))

    data = record.split(SEPARATOR)
    while len(data) > 1 and data[-1] == "":
        data.pop()

    try:
        kind = TaskKind(data[0])
    except ValueError:
        return invalid_parse(record)

    if len(data) != RECORD_ARITY[kind]:
        return invalid_parse(record)

    task: Task
    match kind:
        case TaskKind.TODO:
            task = ToDo(data[2])
        case TaskKind.DEADLINE:
            due_by = parse_datetime(data[3])
            if isinstance(due_by, Err):
                return due_by
            task = Deadline(data[2], due_by.value)
        case TaskKind.EVENT:
            start = parse_datetime(data[3])
            if isinstance(start, Err):
                return start
            end = parse_datetime(data[4])
            if isinstance(end, Err):
                return end
            task = Event(data[2], start.value, end.value)

    set_done(task, data[1] == DONE_FLAG)
    return Ok(task)
