# tests/conftest.py

from __future__ import annotations

from pathlib import Path
from types import SimpleNamespace

import pytest

from taskbot.core.state import AppState
from taskbot.tasks.task_manager import TaskManager

from .fakes import FakeRecordStore


@pytest.fixture()
def settings(tmp_path: Path) -> SimpleNamespace:
    """
    Minimal settings object compatible with AppState and bootstrap.

    We intentionally use a SimpleNamespace rather than importing real config,
    to keep unit tests isolated and deterministic.
    """
    return SimpleNamespace(
        app_name="taskbot",
        log_level="INFO",
        log_to_file=False,
        data_dir=tmp_path / "data",
        tasks_path=tmp_path / "data" / "tasks.csv",
        archive_path=tmp_path / "data" / "archive.csv",
    )


@pytest.fixture()
def store() -> FakeRecordStore:
    return FakeRecordStore()


@pytest.fixture()
def manager(store: FakeRecordStore) -> TaskManager:
    return TaskManager(store)


@pytest.fixture()
def state(settings: SimpleNamespace, manager: TaskManager) -> AppState:
    """AppState wired with the in-memory record store."""
    return AppState(settings=settings, manager=manager)
