class TaskNotFoundError(LookupError):
    """Raised when a task reference does not resolve to a list member."""
