# tests/fakes.py

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass, field


@dataclass(slots=True)
class FakeRecordStore:
    """
    In-memory RecordStore used by manager tests.

    - `records` is what retrieve_records returns (and what save_records overwrites)
    - `archived` collects every archive_records call in order
    - `fail_*` flags make the matching call raise OSError
    """

    records: list[str] = field(default_factory=list)
    archived: list[str] = field(default_factory=list)
    save_calls: int = 0
    archive_calls: int = 0
    fail_retrieve: bool = False
    fail_save: bool = False
    fail_archive: bool = False

    def retrieve_records(self) -> list[str]:
        if self.fail_retrieve:
            raise OSError("store unavailable")
        return list(self.records)

    def save_records(self, records: Sequence[str]) -> None:
        self.save_calls += 1
        if self.fail_save:
            raise OSError("disk full")
        self.records = list(records)

    def archive_records(self, records: Sequence[str]) -> None:
        self.archive_calls += 1
        if self.fail_archive:
            raise OSError("archive unavailable")
        self.archived.extend(records)
