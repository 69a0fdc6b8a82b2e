"""Core task model for the to-do lists."""

from __future__ import annotations

from datetime import date, datetime, timezone

from pydantic import BaseModel, ConfigDict

from todo_mcp.enums import TaskStatus


def utc_today() -> str:
    """Return the current UTC calendar date as YYYY-MM-DD."""
    return datetime.now(timezone.utc).date().isoformat()


def _as_date_str(value: date | str) -> str:
    if isinstance(value, date):
        return value.isoformat()
    return value


class TaskModel(BaseModel):
    """
    A single to-do entry.

    Membership in the pending or done list is the source of truth for
    completion; `completed` and `date_completed` mirror it.
    """

    model_config = ConfigDict(validate_assignment=True)

    text: str = ""
    date_added: str = ""
    completed: bool = False
    date_completed: str = ""

    @property
    def status(self) -> TaskStatus:
        return TaskStatus.DONE if self.completed else TaskStatus.PENDING

    def mark_completed(self, today: date | str) -> None:
        """Flag the task as done on `today`."""
        self.completed = True
        self.date_completed = _as_date_str(today)

    def mark_pending(self, today: date | str | None = None) -> None:
        """Flag the task as not done and drop its completion date."""
        self.completed = False
        self.date_completed = ""

    def reset(self) -> None:
        """Clear every field (used for scratch input buffers only)."""
        self.text = ""
        self.date_added = ""
        self.completed = False
        self.date_completed = ""
