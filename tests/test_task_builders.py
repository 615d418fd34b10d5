# tests/test_task_builders.py

from __future__ import annotations

from datetime import datetime

from taskbot.core.result import Err, ErrorKind, Ok
from taskbot.tasks.record_codec import decode_record, encode_task
from taskbot.tasks.task_builders import create_deadline, create_event, create_todo
from taskbot.tasks.task_models import Deadline, Event, ToDo


def test_create_todo_keeps_body_verbatim() -> None:
    assert create_todo("buy milk /by never") == ToDo("buy milk /by never")


def test_create_deadline_splits_on_first_tag() -> None:
    result = create_deadline("submit report /by 2024-12-01 1800")
    assert result == Ok(Deadline("submit report", datetime(2024, 12, 1, 18, 0)))


def test_create_deadline_second_tag_stays_in_due_text() -> None:
    result = create_deadline("a /by 2024-12-01 1800 /by 2024-12-02 1800")
    assert isinstance(result, Err)
    assert result.error.kind is ErrorKind.DATETIME_FORMAT


def test_create_deadline_without_tag_is_invalid_format() -> None:
    for body in ("submit report", "submit /by", "submit /by2024-12-01 1800"):
        result = create_deadline(body)
        assert isinstance(result, Err)
        assert result.error.kind is ErrorKind.INVALID_FORMAT


def test_create_deadline_bad_date() -> None:
    result = create_deadline("submit /by next friday")
    assert isinstance(result, Err)
    assert result.error.kind is ErrorKind.DATETIME_FORMAT


def test_create_event_three_parts() -> None:
    result = create_event("camp /from 2024-12-01 1800 /to 2024-12-02 0900")
    assert result == Ok(
        Event("camp", datetime(2024, 12, 1, 18, 0), datetime(2024, 12, 2, 9, 0))
    )


def test_create_event_either_tag_is_a_delimiter() -> None:
    # Tags are positional delimiters, not named fields.
    result = create_event("camp /to 2024-12-01 1800 /from 2024-12-02 0900")
    assert result == Ok(
        Event("camp", datetime(2024, 12, 1, 18, 0), datetime(2024, 12, 2, 9, 0))
    )


def test_create_event_missing_either_tag() -> None:
    for body in (
        "camp /from 2024-12-01 1800",
        "camp /to 2024-12-02 0900",
        "camp",
        "camp /from /to 2024-12-02 0900",
    ):
        result = create_event(body)
        assert isinstance(result, Err), body
        assert result.error.kind is ErrorKind.INVALID_FORMAT


def test_create_event_bad_date() -> None:
    for body in (
        "camp /from soon /to 2024-12-02 0900",
        "camp /from 2024-12-01 1800 /to later",
    ):
        result = create_event(body)
        assert isinstance(result, Err)
        assert result.error.kind is ErrorKind.DATETIME_FORMAT


def test_deadline_with_early_year_survives_storage() -> None:
    result = create_deadline("x /by 0005-01-01 1800")
    assert isinstance(result, Ok)
    assert decode_record(encode_task(result.value)) == result
