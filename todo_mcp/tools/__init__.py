"""MCP tool definitions for the to-do lists."""

# Import all tools to register them with the MCP server
from todo_mcp.tools.core import todo_add, todo_get, todo_list, todo_toggle

__all__ = [
    "todo_add",
    "todo_toggle",
    "todo_list",
    "todo_get",
]
