"""File persistence for the pending and done lists."""

import logging
from collections.abc import Callable, Iterable
from pathlib import Path

from todo_mcp.models.task import TaskModel
from todo_mcp.utils.formatters import _render_done_file, _render_pending_file
from todo_mcp.utils.parsers import _parse_done_lines, _parse_pending_lines

logger = logging.getLogger(__name__)

PathLike = str | Path


def _read_tasks(path: PathLike, parse: Callable[[Iterable[str]], list[TaskModel]]) -> list[TaskModel]:
    try:
        with open(path, encoding="utf-8") as f:
            return parse(f)
    except FileNotFoundError:
        return []
    except UnicodeDecodeError as e:
        raise OSError(f"{path} is not valid UTF-8: {e}") from e


def load_pending(path: PathLike) -> list[TaskModel]:
    """
    Load pending tasks from a file.

    Args:
        path: Location of the pending file

    Returns:
        Tasks in file order; an empty list if the file does not exist

    Raises:
        OSError: The file exists but could not be read
    """
    return _read_tasks(path, _parse_pending_lines)


def load_done(path: PathLike) -> list[TaskModel]:
    """
    Load done tasks from a file.

    Args:
        path: Location of the done file

    Returns:
        Tasks in file order; an empty list if the file does not exist

    Raises:
        OSError: The file exists but could not be read
    """
    return _read_tasks(path, _parse_done_lines)


def save(
    pending: list[TaskModel],
    done: list[TaskModel],
    pending_path: PathLike,
    done_path: PathLike,
) -> None:
    """
    Overwrite both list files with the given tasks.

    Both writes are attempted even if the first one fails; the first
    error is raised once both have been tried.

    Raises:
        OSError: Either file could not be created or written
    """
    first_error: OSError | None = None

    for path, content in (
        (pending_path, _render_pending_file(pending)),
        (done_path, _render_done_file(done)),
    ):
        try:
            with open(path, "w", encoding="utf-8") as f:
                f.write(content)
        except OSError as e:
            logger.debug("Write to %s failed: %s", path, e)
            if first_error is None:
                first_error = e

    if first_error is not None:
        raise first_error


def load_all(pending_path: PathLike, done_path: PathLike) -> tuple[list[TaskModel], list[TaskModel]]:
    """
    Hydrate both lists at startup.

    A file that cannot be read is logged and treated as empty so startup
    always completes.

    Returns:
        Tuple of (pending tasks, done tasks)
    """
    try:
        pending = load_pending(pending_path)
    except OSError as e:
        logger.error("Error loading pending list %s: %s; starting empty", pending_path, e)
        pending = []

    try:
        done = load_done(done_path)
    except OSError as e:
        logger.error("Error loading done list %s: %s; starting empty", done_path, e)
        done = []

    logger.info("Loaded %d pending and %d done task(s)", len(pending), len(done))
    return pending, done


def persist_all(
    pending: list[TaskModel],
    done: list[TaskModel],
    pending_path: PathLike,
    done_path: PathLike,
) -> tuple[bool, str]:
    """
    Save both lists after a mutation.

    Returns:
        Tuple of (success: bool, output: str)
    """
    try:
        save(pending, done, pending_path, done_path)
    except OSError as e:
        logger.error("Error saving task lists: %s", e)
        return False, f"Error: Failed to save task lists - {e}"

    return True, f"Saved {len(pending)} pending and {len(done)} done task(s)."
