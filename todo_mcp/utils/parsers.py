"""Parser helpers for the pending and done list files."""

from collections.abc import Iterable

from todo_mcp.models.task import TaskModel

PENDING_HEADER = "# TODOs"
DONE_HEADER = "# DONEs"
# Header written by earlier versions of the done file
LEGACY_DONE_HEADER = "# Done TODOs"

PENDING_PREFIX = "- ("
DONE_PREFIX = "- DONE (Completed "
ADDED_MARKER = ", Added "
TEXT_SEPARATOR = ") "


def _parse_pending_line(line: str) -> TaskModel | None:
    """
    Parse one pending line of the form "- (2025-01-01) buy milk".

    Args:
        line: Raw line from the pending file

    Returns:
        TaskModel, or None if the line does not match the grammar
    """
    line = line.strip()
    if not line.startswith(PENDING_PREFIX) or TEXT_SEPARATOR not in line:
        return None

    close = line.find(")")
    if close <= 2:
        return None

    text = line[close + 2 :].strip()
    if not text:
        return None

    return TaskModel(text=text, date_added=line[3:close].strip())


def _parse_done_line(line: str) -> TaskModel | None:
    """
    Parse one done line.

    Expected shape:
        "- DONE (Completed 2025-05-10, Added 2025-05-09) my task"

    Args:
        line: Raw line from the done file

    Returns:
        TaskModel with completed=True, or None if the line does not match
    """
    line = line.strip()
    if not line.startswith(DONE_PREFIX) or ADDED_MARKER not in line:
        return None

    metadata, sep, rest = line.partition(TEXT_SEPARATOR)
    if not sep:
        return None
    if not metadata.startswith(DONE_PREFIX) or ADDED_MARKER not in metadata:
        return None

    comma = metadata.find(",", len(DONE_PREFIX))
    if comma < 0:
        return None
    date_completed = metadata[len(DONE_PREFIX) : comma].strip()

    # The partition usually consumes the closing paren; any ")" left in the
    # segment ends the added date.
    added_start = metadata.find(ADDED_MARKER) + len(ADDED_MARKER)
    added_end = metadata.rfind(")")
    if added_end < added_start:
        added_end = len(metadata)
    if added_start >= added_end:
        return None
    date_added = metadata[added_start:added_end].strip()

    text = rest.strip()
    if not text:
        return None

    return TaskModel(
        text=text,
        date_added=date_added,
        completed=True,
        date_completed=date_completed,
    )


def _parse_pending_lines(lines: Iterable[str]) -> list[TaskModel]:
    """
    Parse the lines of a pending file into tasks, in file order.

    Lines before the "# TODOs" header and lines that do not match the
    pending grammar are skipped.
    """
    tasks: list[TaskModel] = []
    reading = False

    for line in lines:
        if line.strip() == PENDING_HEADER:
            reading = True
            continue
        if not reading:
            continue
        if task := _parse_pending_line(line):
            tasks.append(task)

    return tasks


def _parse_done_lines(lines: Iterable[str]) -> list[TaskModel]:
    """
    Parse the lines of a done file into tasks, in file order.

    Both the current "# DONEs" header and the legacy "# Done TODOs" header
    open the record section.
    """
    tasks: list[TaskModel] = []
    reading = False

    for line in lines:
        if line.strip() in (DONE_HEADER, LEGACY_DONE_HEADER):
            reading = True
            continue
        if not reading:
            continue
        if task := _parse_done_line(line):
            tasks.append(task)

    return tasks
