# src/taskbot/tasks/task_manager.py

from __future__ import annotations

import logging
import re
from collections.abc import Callable

from ..core.actions import Action
from ..core.ports import RecordStore
from ..core.result import (
    Err,
    Ok,
    Result,
    TaskError,
    invalid_index,
    storage_unavailable,
)
from .record_codec import decode_record, encode_task
from .task_builders import create_deadline, create_event, create_todo
from .task_models import Task, display, matches_keywords, set_done

logger = logging.getLogger(__name__)

EXIT_RESPONSE = "Bye. Hope to see you again soon!"
INVALID_RESPONSE = "I'm sorry, but I'm not programmed to do this :/"
LIST_HEADER_RESPONSE = "Here are the tasks in your list:"
MARK_HEADER_RESPONSE = "Nice! I've marked this task as done:"
UNMARK_HEADER_RESPONSE = "OK, I've marked this task as not done yet:"
ADD_HEADER_RESPONSE = "Got it. I've added this task:"
DELETE_HEADER_RESPONSE = "Noted. I've removed this task:"
FIND_HEADER_RESPONSE = "Here are the matching tasks in your list:"
NO_MATCH_RESPONSE = "No match was found."
ARCHIVE_HEADER_RESPONSE = "The following task(s) were archived:"
LOAD_FAILED_RESPONSE = "Could not retrieve tasks from storage."

ARCHIVE_ALL = "all"

_INDEX_RE = re.compile(r"[+-]?[0-9]+")


class TaskManager:
    """
    Owns the ordered task list and executes actions against it.

    - user-facing indices are 1-based and validated before lookup/removal
    - after every successful mutation the whole list is re-encoded and saved
    - every user mistake comes back as a reply string, never as an exception
    """

    def __init__(self, store: RecordStore, *, load: bool = True) -> None:
        self._store = store
        self._tasks: list[Task] = []
        self.load_errors: list[TaskError] = []
        if load:
            self.load_errors = self.load()

    # ---- loading / persistence ----

    def load(self) -> list[TaskError]:
        """
        Replace the in-memory list with the store's records (best-effort).

        Returns the per-record errors; bad records are skipped, not fatal.
        """
        try:
            records = self._store.retrieve_records()
        except OSError:
            logger.exception("Failed to retrieve task records.")
            self._tasks = []
            return [storage_unavailable(LOAD_FAILED_RESPONSE).error]

        tasks: list[Task] = []
        errors: list[TaskError] = []
        for record in records:
            match decode_record(record):
                case Ok(value=task):
                    tasks.append(task)
                case Err(error=error):
                    logger.warning("Skipping stored record %r: %s", record, error.message)
                    errors.append(error)

        self._tasks = tasks
        logger.info("Loaded %d tasks (%d skipped).", len(tasks), len(errors))
        return errors

    def _save(self) -> TaskError | None:
        try:
            self._store.save_records([encode_task(t) for t in self._tasks])
        except OSError:
            logger.exception("Failed to save task records.")
            return storage_unavailable().error
        return None

    def _with_save(self, response: str) -> str:
        error = self._save()
        if error is None:
            return response
        return f"{response}\n{error.message}"

    # ---- helpers ----

    @property
    def tasks(self) -> tuple[Task, ...]:
        return tuple(self._tasks)

    def __len__(self) -> int:
        return len(self._tasks)

    def resolve_index(self, body: str) -> Result[int]:
        """Map a 1-based index text to a 0-based list position."""
        if not _INDEX_RE.fullmatch(body):
            return invalid_index(body)
        index = int(body)
        if 0 < index <= len(self._tasks):
            return Ok(index - 1)
        return invalid_index(body)

    def numbered_list(self, predicate: Callable[[Task], bool] = lambda _: True) -> str:
        """Newline-prefixed "N.<task>" lines; N is the task's position in the full list."""
        return "".join(
            f"\n{i}.{display(task)}"
            for i, task in enumerate(self._tasks, start=1)
            if predicate(task)
        )

    # ---- operations ----

    def list_tasks(self) -> str:
        return LIST_HEADER_RESPONSE + self.numbered_list()

    def change_task_status(self, body: str, is_done: bool, header: str) -> str:
        index = self.resolve_index(body)
        if isinstance(index, Err):
            return index.error.message

        task = self._tasks[index.value]
        set_done(task, is_done)
        logger.debug("Task %d marked done=%s", index.value + 1, is_done)
        return self._with_save(f"{header}\n{display(task)}")

    def add_task(self, task: Task) -> str:
        self._tasks.append(task)
        logger.debug("Task added kind=%s total=%d", task.kind.value, len(self._tasks))
        return self._with_save(
            f"{ADD_HEADER_RESPONSE}\n{display(task)}\n"
            f"Now you have {len(self._tasks)} tasks in the list."
        )

    def delete_task(self, body: str) -> str:
        index = self.resolve_index(body)
        if isinstance(index, Err):
            return index.error.message

        task = self._tasks.pop(index.value)
        logger.debug("Task %d removed total=%d", index.value + 1, len(self._tasks))
        return self._with_save(
            f"{DELETE_HEADER_RESPONSE}\n{display(task)}\n"
            f"Now you have {len(self._tasks)} tasks in the list."
        )

    def find_tasks(self, body: str) -> str:
        keywords = body.split()
        found = self.numbered_list(lambda task: matches_keywords(task, keywords))
        if not found:
            return NO_MATCH_RESPONSE
        return FIND_HEADER_RESPONSE + found

    def archive_tasks(self, body: str) -> str:
        """
        archive all -> move every task into the archive log
        archive <n> -> move only task n

        The archive log is written before the list changes, so a storage
        failure leaves the list as it was.
        """
        if body == ARCHIVE_ALL:
            records = [encode_task(t) for t in self._tasks]
            shown = self.numbered_list()
            if not self._archive(records):
                return storage_unavailable().error.message
            self._tasks.clear()
            logger.debug("Archived all %d tasks", len(records))
            return self._with_save(ARCHIVE_HEADER_RESPONSE + shown)

        index = self.resolve_index(body)
        if isinstance(index, Err):
            return index.error.message

        task = self._tasks[index.value]
        if not self._archive([encode_task(task)]):
            return storage_unavailable().error.message
        del self._tasks[index.value]
        logger.debug("Archived task %d", index.value + 1)
        return self._with_save(f"{ARCHIVE_HEADER_RESPONSE}\n{display(task)}")

    def _archive(self, records: list[str]) -> bool:
        try:
            self._store.archive_records(records)
        except OSError:
            logger.exception("Failed to archive %d task records.", len(records))
            return False
        return True

    def _add_built(self, built: Result[Task]) -> str:
        if isinstance(built, Err):
            return built.error.message
        return self.add_task(built.value)

    # ---- dispatch ----

    def execute(self, action: Action, body: str = "") -> str:
        """Run one action and return the reply text."""
        match action:
            case Action.BYE:
                return EXIT_RESPONSE
            case Action.LIST:
                return self.list_tasks()
            case Action.MARK:
                return self.change_task_status(body, True, MARK_HEADER_RESPONSE)
            case Action.UNMARK:
                return self.change_task_status(body, False, UNMARK_HEADER_RESPONSE)
            case Action.TODO:
                return self.add_task(create_todo(body))
            case Action.DEADLINE:
                return self._add_built(create_deadline(body))
            case Action.EVENT:
                return self._add_built(create_event(body))
            case Action.DELETE:
                return self.delete_task(body)
            case Action.FIND:
                return self.find_tasks(body)
            case Action.ARCHIVE:
                return self.archive_tasks(body)
            case Action.INVALID:
                return INVALID_RESPONSE
        raise AssertionError(f"Unhandled action: {action!r}")
