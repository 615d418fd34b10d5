# tests/test_task_store.py

from __future__ import annotations

from pathlib import Path

import pytest

from taskbot.tasks.task_store import FileRecordStore


def test_missing_file_reads_empty(tmp_path: Path) -> None:
    store = FileRecordStore(tmp_path / "nested" / "tasks.csv")
    assert store.retrieve_records() == []
    assert store.archive_path == tmp_path / "nested" / "archive.csv"


def test_save_overwrites_and_skips_blank_lines(tmp_path: Path) -> None:
    path = tmp_path / "tasks.csv"
    store = FileRecordStore(path, tmp_path / "archive.csv")

    store.save_records(["T,0,a", "T,1,b"])
    store.save_records(["T,0,c"])
    assert path.read_text("utf-8") == "T,0,c\n"

    path.write_text("T,0,a\n\n   \nT,0,b\n", "utf-8")
    assert store.retrieve_records() == ["T,0,a", "T,0,b"]
    assert not path.with_suffix(".csv.tmp").exists()


def test_archive_appends(tmp_path: Path) -> None:
    store = FileRecordStore(tmp_path / "tasks.csv", tmp_path / "logs" / "archive.csv")

    store.archive_records(["T,0,a"])
    store.archive_records(["T,0,b", "T,0,c"])
    store.archive_records([])

    assert store.archive_path.read_text("utf-8") == "T,0,a\nT,0,b\nT,0,c\n"


def test_unreadable_store_raises_oserror(tmp_path: Path) -> None:
    path = tmp_path / "tasks.csv"
    path.mkdir()
    store = FileRecordStore(path, tmp_path / "archive.csv")
    with pytest.raises(OSError):
        store.retrieve_records()


def test_only_newline_ends_a_record(tmp_path: Path) -> None:
    store = FileRecordStore(tmp_path / "tasks.csv", tmp_path / "archive.csv")
    records = ["T,0,a\x0cb", "T,0,c d", "T,0,e\x85f\x1eg"]

    store.save_records(records)
    assert store.retrieve_records() == records


def test_crlf_line_endings(tmp_path: Path) -> None:
    path = tmp_path / "tasks.csv"
    path.write_bytes(b"T,0,a\r\nT,1,b\r\n")
    store = FileRecordStore(path, tmp_path / "archive.csv")
    assert store.retrieve_records() == ["T,0,a", "T,1,b"]


def test_invalid_utf8_line_does_not_stop_reading(tmp_path: Path) -> None:
    path = tmp_path / "tasks.csv"
    path.write_bytes(b"T,0,good\nT,0,bad\xff\nT,0,also good\n")
    store = FileRecordStore(path, tmp_path / "archive.csv")

    records = store.retrieve_records()
    assert records[0] == "T,0,good"
    assert records[2] == "T,0,also good"
    assert len(records) == 3
