"""Domain errors."""


class InvalidStateError(RuntimeError):
    """An operation was invoked before its prerequisite state was reached."""
