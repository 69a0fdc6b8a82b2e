"""Core MCP tool definitions for the to-do lists."""

import json

from mcp.types import ToolAnnotations

from todo_mcp.enums import ListScope, ResponseFormat, TaskStatus
from todo_mcp.exceptions import TaskNotFoundError
from todo_mcp.models.inputs import AddTodoInput, GetTodoInput, ListTodosInput, ToggleTodoInput
from todo_mcp.server import mcp
from todo_mcp.session import get_session
from todo_mcp.utils.formatters import (
    _format_task_concise,
    _format_task_markdown,
    _format_tasks_concise,
    _format_tasks_markdown,
)

_TITLES = {TaskStatus.PENDING: "Pending Tasks", TaskStatus.DONE: "Done Tasks"}


@mcp.tool(
    name="todo_add",
    annotations=ToolAnnotations(
        title="Add Task",
        readOnlyHint=False,
        destructiveHint=False,
        idempotentHint=False,
        openWorldHint=False,
    ),
)
async def todo_add(params: AddTodoInput) -> str:
    """
    Add a new task to the top of the pending list.

    The task is dated with today's UTC date and both list files are saved
    immediately.

    Args:
        params: AddTodoInput containing the task text

    Returns:
        Confirmation message with the task's position

    Examples:
        - Simple task: params with text="Buy groceries"
    """
    session = get_session()
    task, success, output = session.add(params.text)

    if success:
        return f"Task added as pending #1: {task.text} (added {task.date_added})"
    return f"Task added as pending #1: {task.text}, but it was not saved.\n{output}"


@mcp.tool(
    name="todo_toggle",
    annotations=ToolAnnotations(
        title="Mark Task Done / Not Done",
        readOnlyHint=False,
        destructiveHint=False,
        idempotentHint=False,
        openWorldHint=False,
    ),
)
async def todo_toggle(params: ToggleTodoInput) -> str:
    """
    Move a task between the pending and done lists.

    USE THIS WHEN:
    - A pending task is finished → done=True, number = its pending position
    - A done task needs reopening → done=False, number = its done position

    Positions are the ones shown by todo_list. A moved task goes to the top
    of the other list, so positions change after every call.

    Args:
        params: ToggleTodoInput containing number and done

    Returns:
        Confirmation message

    Examples:
        - Complete pending task #2: params with number=2, done=True
        - Reopen done task #1: params with number=1, done=False
    """
    source = TaskStatus.PENDING if params.done else TaskStatus.DONE
    session = get_session()

    try:
        task, success, output = session.toggle(source, params.number)
    except TaskNotFoundError as e:
        return f"Error: {e}"

    if params.done:
        message = f"Task marked as done: {task.text} (completed {task.date_completed})"
    else:
        message = f"Task moved back to pending: {task.text}"

    if success:
        return message
    return f"{message}, but it was not saved.\n{output}"


@mcp.tool(
    name="todo_list",
    annotations=ToolAnnotations(
        title="List Tasks",
        readOnlyHint=True,
        destructiveHint=False,
        idempotentHint=True,
        openWorldHint=False,
    ),
)
async def todo_list(params: ListTodosInput) -> str:
    """
    Show the pending list, the done list, or both, newest first.

    Args:
        params: ListTodosInput containing status and response_format

    Returns:
        Formatted task lists (markdown, concise, or JSON)
    """
    lists = get_session().lists
    if params.status == ListScope.ALL:
        statuses = [TaskStatus.PENDING, TaskStatus.DONE]
    else:
        statuses = [TaskStatus(params.status.value)]

    sections = {status: lists.done if status == TaskStatus.DONE else lists.pending for status in statuses}

    if params.response_format == ResponseFormat.JSON:
        return json.dumps(
            {status.value: [t.model_dump() for t in tasks] for status, tasks in sections.items()},
            indent=2,
        )

    if params.response_format == ResponseFormat.CONCISE:
        return "\n\n".join(_format_tasks_concise(tasks, status.value) for status, tasks in sections.items())

    return "\n\n".join(_format_tasks_markdown(tasks, _TITLES[status]) for status, tasks in sections.items())


@mcp.tool(
    name="todo_get",
    annotations=ToolAnnotations(
        title="Get Task",
        readOnlyHint=True,
        destructiveHint=False,
        idempotentHint=True,
        openWorldHint=False,
    ),
)
async def todo_get(params: GetTodoInput) -> str:
    """
    Get a single task by list and position.

    Args:
        params: GetTodoInput containing status, number and response_format

    Returns:
        The task (markdown, concise, or JSON)
    """
    try:
        task = get_session().lists.get(params.status, params.number)
    except TaskNotFoundError as e:
        return f"Error: {e}"

    if params.response_format == ResponseFormat.JSON:
        return json.dumps(task.model_dump(), indent=2)
    if params.response_format == ResponseFormat.CONCISE:
        return _format_task_concise(task, params.number)
    return _format_task_markdown(task, params.number)
