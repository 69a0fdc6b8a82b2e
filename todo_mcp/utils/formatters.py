"""Formatting utilities for list files and tool output."""

from todo_mcp.models.task import TaskModel
from todo_mcp.utils.parsers import DONE_HEADER, PENDING_HEADER

# ============================================================================
# File lines
# ============================================================================


def _format_pending_line(task: TaskModel) -> str:
    """Output: "- (2025-01-01) buy milk" """
    return f"- ({task.date_added}) {task.text}"


def _format_done_line(task: TaskModel) -> str:
    """Output: "- DONE (Completed 2025-05-10, Added 2025-05-09) buy milk" """
    return f"- DONE (Completed {task.date_completed}, Added {task.date_added}) {task.text}"


def _render_pending_file(tasks: list[TaskModel]) -> str:
    """Render the full pending file: header plus one newline-terminated line per task."""
    lines = [PENDING_HEADER]
    lines.extend(_format_pending_line(t) for t in tasks)
    return "\n".join(lines) + "\n"


def _render_done_file(tasks: list[TaskModel]) -> str:
    """Render the full done file: header plus one newline-terminated line per task."""
    lines = [DONE_HEADER]
    lines.extend(_format_done_line(t) for t in tasks)
    return "\n".join(lines) + "\n"


# ============================================================================
# Tool output
# ============================================================================


def _format_task_concise(task: TaskModel, number: int) -> str:
    """
    Format a single task in one line.

    Output: "#2: buy milk (added 2025-01-01)"
    """
    text = task.text[:60] if task.text else "No text"
    if task.completed:
        return f"#{number}: {text} (done {task.date_completed}, added {task.date_added})"
    return f"#{number}: {text} (added {task.date_added})"


def _format_tasks_concise(tasks: list[TaskModel], title: str | None = None) -> str:
    """
    Format a list of tasks in concise format.

    Output:
    2 task(s) | pending
    #1: Task one (added 2025-01-02)
    #2: Task two (added 2025-01-01)
    """
    if not tasks:
        return f"0 tasks | {title}" if title else "0 tasks"

    header = f"{len(tasks)} task(s)"
    if title:
        header = f"{len(tasks)} task(s) | {title}"

    lines = [header]
    for number, task in enumerate(tasks, start=1):
        lines.append(_format_task_concise(task, number))

    return "\n".join(lines)


def _format_task_markdown(task: TaskModel, number: int) -> str:
    """Format a single task as markdown."""
    icon = "[x]" if task.completed else "[ ]"
    lines = [f"### {icon} #{number} {task.text or 'No text'}"]

    details = [f"**Added**: {task.date_added or '?'}"]
    if task.completed:
        details.append(f"**Completed**: {task.date_completed or '?'}")
    lines.append(" | ".join(details))

    return "\n".join(lines)


def _format_tasks_markdown(tasks: list[TaskModel], title: str = "Tasks") -> str:
    """Format a list of tasks as markdown."""
    if not tasks:
        return f"# {title}\n\nNo tasks found."

    lines = [f"# {title}", f"*{len(tasks)} task(s)*", ""]

    for number, task in enumerate(tasks, start=1):
        lines.append(_format_task_markdown(task, number))
        lines.append("")

    return "\n".join(lines)
