"""Task domain exceptions.

Each exception carries the HTTP status code the API answers with, so the
route layer can build the response envelope without a lookup table.
"""

from typing import Optional


class TaskError(Exception):
    """Base class for task errors."""

    status_code = 500
    default_message = "Task operation failed"

    def __init__(self, message: Optional[str] = None):
        self.message = message or self.default_message
        super().__init__(self.message)


class ValidationError(TaskError):
    """Required input is missing or malformed."""

    status_code = 400
    default_message = "Invalid task data"


class InvalidTransitionError(ValidationError):
    """Requested status change is not allowed."""

    default_message = (
        "Cannot move task from to-do directly to done. Must go through in-progress first."
    )


class TaskNotFoundError(TaskError):
    """No task exists for the given id."""

    status_code = 404
    default_message = "Task not found"


class StoreError(TaskError):
    """Underlying storage failure."""

    status_code = 500
    default_message = "Task store failure"
