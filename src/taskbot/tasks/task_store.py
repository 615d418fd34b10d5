# src/taskbot/tasks/task_store.py

from __future__ import annotations

import logging
import os
from collections.abc import Sequence
from pathlib import Path

logger = logging.getLogger(__name__)


class FileRecordStore:
    """
    Plain-text record store: one record per line, UTF-8.

    - tasks file: fully rewritten on every save (tmp file + os.replace)
    - archive file: append-only, created on first archive
    - missing tasks file reads as an empty store
    - only "\n" (optionally "\r\n") ends a record; other line breaks stay in the text

    Errors are not caught here; callers get the OSError.
    """

    def __init__(
        self,
        tasks_path: str | Path = "tasks.csv",
        archive_path: str | Path | None = None,
    ) -> None:
        self._tasks_path = Path(tasks_path)
        self._archive_path = (
            Path(archive_path)
            if archive_path is not None
            else self._tasks_path.with_name("archive.csv")
        )
        self._tasks_path.parent.mkdir(parents=True, exist_ok=True)
        self._archive_path.parent.mkdir(parents=True, exist_ok=True)
        logger.info(
            "FileRecordStore ready tasks=%s archive=%s", self._tasks_path, self._archive_path
        )

    @property
    def tasks_path(self) -> Path:
        return self._tasks_path

    @property
    def archive_path(self) -> Path:
        return self._archive_path

    def retrieve_records(self) -> list[str]:
        if not self._tasks_path.exists():
            logger.debug("No tasks file at %s yet.", self._tasks_path)
            return []
        records: list[str] = []
        for raw in self._tasks_path.read_bytes().split(b"\n"):
            raw = raw.rstrip(b"\r")
            if not raw.strip():
                continue
            try:
                records.append(raw.decode("utf-8"))
            except UnicodeDecodeError:
                # Kept so the codec reports it as an unparsable record.
                logger.warning("Record is not valid UTF-8: %r", raw)
                records.append(raw.decode("utf-8", "surrogateescape"))
        logger.debug("Read %d records from %s", len(records), self._tasks_path)
        return records

    def save_records(self, records: Sequence[str]) -> None:
        tmp = self._tasks_path.with_suffix(self._tasks_path.suffix + ".tmp")
        tmp.write_text("".join(f"{r}\n" for r in records), "utf-8")
        os.replace(tmp, self._tasks_path)
        logger.debug("Saved %d records to %s", len(records), self._tasks_path)

    def archive_records(self, records: Sequence[str]) -> None:
        with self._archive_path.open("a", encoding="utf-8") as f:
            for r in records:
                f.write(f"{r}\n")
        logger.debug("Archived %d records to %s", len(records), self._archive_path)
