# src/taskbot/core/result.py

"""
Result values returned by fallible core operations.

Operations never raise for user mistakes. They return Ok(value) or Err(error),
and the caller matches on the result to build the reply text.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import StrEnum
from typing import Generic, TypeVar, Union

T = TypeVar("T")

DATETIME_HINT = "yyyy-MM-dd HHmm (e.g. 2024-12-01 1800)"


class ErrorKind(StrEnum):
    EMPTY_DESCRIPTION = "empty_description"
    INVALID_FORMAT = "invalid_format"
    DATETIME_FORMAT = "datetime_format"
    INVALID_INDEX = "invalid_index"
    INVALID_PARSE = "invalid_parse"
    STORAGE_UNAVAILABLE = "storage_unavailable"


@dataclass(frozen=True, slots=True)
class TaskError:
    kind: ErrorKind
    message: str

    def __str__(self) -> str:
        return self.message


@dataclass(frozen=True, slots=True)
class Ok(Generic[T]):
    value: T


@dataclass(frozen=True, slots=True)
class Err:
    error: TaskError


Result = Union[Ok[T], Err]


# ---- error constructors (one fixed message per kind) ----


def empty_description() -> Err:
    return Err(
        TaskError(
            ErrorKind.EMPTY_DESCRIPTION,
            "OOPS!!! The description of this command cannot be empty.",
        )
    )


def invalid_format() -> Err:
    return Err(
        TaskError(
            ErrorKind.INVALID_FORMAT,
            "OOPS!!! The format is invalid. Use: "
            "deadline <description> /by <date time> or "
            "event <description> /from <date time> /to <date time>",
        )
    )


def datetime_format() -> Err:
    return Err(
        TaskError(
            ErrorKind.DATETIME_FORMAT,
            f"OOPS!!! Date & time must be in the format {DATETIME_HINT}.",
        )
    )


def invalid_index(body: str) -> Err:
    return Err(TaskError(ErrorKind.INVALID_INDEX, f"OOPS!!! '{body}' is not a valid task number."))


def invalid_parse(record: str, category: str = "Task") -> Err:
    return Err(
        TaskError(ErrorKind.INVALID_PARSE, f"Unable to parse record '{record}' into a {category}.")
    )


def storage_unavailable(message: str = "Could not access the task storage.") -> Err:
    return Err(TaskError(ErrorKind.STORAGE_UNAVAILABLE, message))
