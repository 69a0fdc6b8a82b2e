"""Pydantic models for the to-do MCP server."""

from todo_mcp.models.inputs import AddTodoInput, GetTodoInput, ListTodosInput, ToggleTodoInput
from todo_mcp.models.task import TaskModel, utc_today

__all__ = [
    # Task model
    "TaskModel",
    "utc_today",
    # Tool input models
    "AddTodoInput",
    "ToggleTodoInput",
    "ListTodosInput",
    "GetTodoInput",
]
