"""Enums for the to-do MCP server."""

from enum import Enum


class ResponseFormat(str, Enum):
    """Output format for tool responses."""

    CONCISE = "concise"  # One line per task
    MARKDOWN = "markdown"  # Human-readable (default)
    JSON = "json"  # Machine-readable with all fields


class TaskStatus(str, Enum):
    """Which collection a task lives in."""

    PENDING = "pending"
    DONE = "done"


class ListScope(str, Enum):
    """Collection filter for listing."""

    PENDING = "pending"
    DONE = "done"
    ALL = "all"
