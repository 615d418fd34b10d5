# src/taskbot/core/ports.py

from __future__ import annotations

"""
Ports (interfaces) used by the core.

The task manager depends on a Protocol instead of a concrete file store,
so tests can swap in an in-memory fake.
"""

from typing import Protocol, Sequence


class RecordStore(Protocol):
    """
    Durable keeper of flat task records plus an append-only archive log.

    Implementations raise OSError when the backing medium is unavailable.
    """

    def retrieve_records(self) -> list[str]: ...

    def save_records(self, records: Sequence[str]) -> None: ...

    def archive_records(self, records: Sequence[str]) -> None: ...
