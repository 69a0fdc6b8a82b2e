"""The process-wide owner of the task lists."""

from __future__ import annotations

import logging
from datetime import date
from pathlib import Path

from todo_mcp.config import get_settings
from todo_mcp.enums import TaskStatus
from todo_mcp.lists import TodoLists
from todo_mcp.models.task import TaskModel, utc_today
from todo_mcp.utils.storage import load_all, persist_all

logger = logging.getLogger(__name__)


class TodoSession:
    """
    Holds the two lists and their file paths.

    Lists are loaded once on construction. Each mutation saves both files
    before returning; a failed save is reported but the in-memory change
    is kept.
    """

    def __init__(self, pending_path: str | Path, done_path: str | Path) -> None:
        self.pending_path = Path(pending_path)
        self.done_path = Path(done_path)
        pending, done = load_all(self.pending_path, self.done_path)
        self.lists = TodoLists(pending, done)

    def persist(self) -> tuple[bool, str]:
        return persist_all(self.lists.pending, self.lists.done, self.pending_path, self.done_path)

    def add(self, text: str, today: date | str | None = None) -> tuple[TaskModel, bool, str]:
        task = self.lists.add(text, today or utc_today())
        logger.info("Added task %r (%s)", task.text, self.lists.counts())
        success, output = self.persist()
        return task, success, output

    def toggle(self, status: TaskStatus, number: int, today: date | str | None = None) -> tuple[TaskModel, bool, str]:
        """
        Move task `number` of `status` to the other list and save.

        Raises:
            TaskNotFoundError: No task at that position
        """
        task = self.lists.toggle_at(status, number, today or utc_today())
        logger.info("Moved task %r to %s (%s)", task.text, task.status.value, self.lists.counts())
        success, output = self.persist()
        return task, success, output


_session: TodoSession | None = None


def get_session() -> TodoSession:
    """Return the shared session, loading the lists on first use."""
    global _session
    if _session is None:
        settings = get_settings()
        _session = TodoSession(settings.pending_file, settings.done_file)
    return _session


def reset_session() -> None:
    """Drop the shared session so the next call reloads from disk."""
    global _session
    _session = None
