"""In-memory pending/done lists and the rules for moving tasks between them."""

from __future__ import annotations

from datetime import date

from todo_mcp.enums import TaskStatus
from todo_mcp.exceptions import TaskNotFoundError
from todo_mcp.models.task import TaskModel, _as_date_str


def add_task(text: str, today: date | str) -> TaskModel:
    """Build a new pending task from user input; the caller inserts it."""
    return TaskModel(text=text.strip(), date_added=_as_date_str(today))


def _index_of(tasks: list[TaskModel], task: TaskModel) -> int:
    # Identity, not equality: two tasks may share text and dates.
    for i, candidate in enumerate(tasks):
        if candidate is task:
            return i
    return -1


class TodoLists:
    """
    The two ordered task collections.

    Every task lives in exactly one of `pending` or `done`, newest first.
    All moves go through this object so a task is never in both lists.
    """

    def __init__(
        self,
        pending: list[TaskModel] | None = None,
        done: list[TaskModel] | None = None,
    ) -> None:
        self.pending: list[TaskModel] = pending if pending is not None else []
        self.done: list[TaskModel] = done if done is not None else []

    def _list_for(self, status: TaskStatus) -> list[TaskModel]:
        return self.done if status == TaskStatus.DONE else self.pending

    def add(self, text: str, today: date | str) -> TaskModel:
        task = add_task(text, today)
        self.pending.insert(0, task)
        return task

    def get(self, status: TaskStatus, number: int) -> TaskModel:
        """
        Look up a task by its 1-based position in one list.

        Raises:
            TaskNotFoundError: No task at that position
        """
        tasks = self._list_for(status)
        if number < 1 or number > len(tasks):
            raise TaskNotFoundError(f"No task #{number} in {status.value} ({len(tasks)} task(s))")
        return tasks[number - 1]

    def toggle_done(self, task: TaskModel, new_state: bool, today: date | str) -> bool:
        """
        Move a task to the done list (new_state=True) or back to pending.

        The task is removed from its current list, its completion fields are
        updated, and it is inserted at the top of the other list.

        Returns:
            True if the task moved, False if it was already in the target list

        Raises:
            TaskNotFoundError: The task is in neither list
        """
        source, target = (self.pending, self.done) if new_state else (self.done, self.pending)

        index = _index_of(source, task)
        if index < 0:
            if _index_of(target, task) >= 0:
                return False
            raise TaskNotFoundError(f"Task {task.text!r} is not in either list")

        source.pop(index)
        if new_state:
            task.mark_completed(today)
        else:
            task.mark_pending(today)
        target.insert(0, task)
        return True

    def toggle_at(self, status: TaskStatus, number: int, today: date | str) -> TaskModel:
        """Move the task at `number` in `status` to the other list."""
        task = self.get(status, number)
        self.toggle_done(task, status == TaskStatus.PENDING, today)
        return task

    def counts(self) -> dict[str, int]:
        return {TaskStatus.PENDING.value: len(self.pending), TaskStatus.DONE.value: len(self.done)}
