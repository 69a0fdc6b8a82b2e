"""
MCP Server for a markdown to-do list.

Tasks live in two human-editable text files, one for pending tasks and one
for done tasks. This server exposes tools to add tasks, move them between
the two lists, and show them.
"""

# Re-export enums
from todo_mcp.enums import ListScope, ResponseFormat, TaskStatus
from todo_mcp.exceptions import TaskNotFoundError

# Re-export list rules
from todo_mcp.lists import TodoLists, add_task

# Re-export models
from todo_mcp.models import (
    AddTodoInput,
    GetTodoInput,
    ListTodosInput,
    TaskModel,
    ToggleTodoInput,
    utc_today,
)

# Re-export MCP server instance
from todo_mcp.server import mcp
from todo_mcp.session import TodoSession, get_session, reset_session

# Re-export tools
from todo_mcp.tools import todo_add, todo_get, todo_list, todo_toggle

# Re-export utilities (including private functions used by tests)
from todo_mcp.utils import (
    _format_task_concise,
    _format_task_markdown,
    _format_tasks_concise,
    _format_tasks_markdown,
    _parse_done_line,
    _parse_pending_line,
    load_all,
    load_done,
    load_pending,
    persist_all,
    save,
)

__all__ = [
    # Enums
    "ResponseFormat",
    "TaskStatus",
    "ListScope",
    # Errors
    "TaskNotFoundError",
    # Models
    "TaskModel",
    "utc_today",
    "AddTodoInput",
    "ToggleTodoInput",
    "ListTodosInput",
    "GetTodoInput",
    # List rules
    "add_task",
    "TodoLists",
    # Persistence
    "load_pending",
    "load_done",
    "save",
    "load_all",
    "persist_all",
    # Session
    "TodoSession",
    "get_session",
    "reset_session",
    # Utility functions
    "_parse_pending_line",
    "_parse_done_line",
    "_format_task_concise",
    "_format_task_markdown",
    "_format_tasks_concise",
    "_format_tasks_markdown",
    # Tools
    "todo_add",
    "todo_toggle",
    "todo_list",
    "todo_get",
    # MCP server instance
    "mcp",
]
