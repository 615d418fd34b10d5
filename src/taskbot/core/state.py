# src/taskbot/core/state.py

from __future__ import annotations

from dataclasses import dataclass
from enum import StrEnum

from ..tasks.task_manager import TaskManager


class SessionStatus(StrEnum):
    RUNNING = "running"
    TERMINATED = "terminated"


@dataclass
class AppState:
    # Settings object (config.Settings or a test stand-in).
    settings: object

    manager: TaskManager
    status: SessionStatus = SessionStatus.RUNNING

    @property
    def running(self) -> bool:
        return self.status is SessionStatus.RUNNING

    def terminate(self) -> None:
        self.status = SessionStatus.TERMINATED
