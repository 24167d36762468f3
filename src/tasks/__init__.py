"""Task tracking domain shared by the API server and the terminal client."""

from .errors import (
    InvalidTransitionError,
    StoreError,
    TaskError,
    TaskNotFoundError,
    ValidationError,
)
from .models import Task, TaskStatus
from .repository import TaskRepository
from .service import TaskService
from .transitions import ALLOWED_TRANSITIONS, can_transition, next_status

__all__ = [
    "Task",
    "TaskStatus",
    "TaskRepository",
    "TaskService",
    "TaskError",
    "ValidationError",
    "InvalidTransitionError",
    "TaskNotFoundError",
    "StoreError",
    "ALLOWED_TRANSITIONS",
    "can_transition",
    "next_status",
]
