"""Utility functions for the to-do MCP server."""

from todo_mcp.utils.formatters import (
    _format_task_concise,
    _format_task_markdown,
    _format_tasks_concise,
    _format_tasks_markdown,
)
from todo_mcp.utils.parsers import _parse_done_line, _parse_pending_line
from todo_mcp.utils.storage import load_all, load_done, load_pending, persist_all, save

__all__ = [
    "load_pending",
    "load_done",
    "save",
    "load_all",
    "persist_all",
    "_parse_pending_line",
    "_parse_done_line",
    "_format_task_concise",
    "_format_task_markdown",
    "_format_tasks_concise",
    "_format_tasks_markdown",
]
