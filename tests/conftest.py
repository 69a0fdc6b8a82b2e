"""Pytest configuration and fixtures for todo-mcp tests."""

import pytest

from todo_mcp.config import get_settings
from todo_mcp.models.task import TaskModel
from todo_mcp.session import reset_session


@pytest.fixture
def pending_tasks():
    """Two pending tasks, newest first."""
    return [
        TaskModel(text="Task two", date_added="2025-01-02"),
        TaskModel(text="Task one", date_added="2025-01-01"),
    ]


@pytest.fixture
def done_tasks():
    """One done task."""
    return [
        TaskModel(text="Old task", date_added="2024-12-30", completed=True, date_completed="2024-12-31"),
    ]


@pytest.fixture
def list_paths(tmp_path):
    """Pending and done file paths inside a temporary directory."""
    return tmp_path / "todos.md", tmp_path / "done_todos.md"


@pytest.fixture
def session_env(monkeypatch, list_paths):
    """Point the shared session at temporary files and reload it around the test."""
    pending_path, done_path = list_paths
    monkeypatch.setenv("TODO_MCP_PENDING_FILE", str(pending_path))
    monkeypatch.setenv("TODO_MCP_DONE_FILE", str(done_path))
    get_settings.cache_clear()
    reset_session()
    yield pending_path, done_path
    reset_session()
    get_settings.cache_clear()
