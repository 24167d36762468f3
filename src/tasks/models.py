from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class TaskStatus(str, Enum):
    """Workflow status of a task."""

    TODO = "to-do"
    IN_PROGRESS = "in-progress"
    DONE = "done"


@dataclass(slots=True)
class Task:
    """Persisted task record."""

    id: str
    title: str
    status: TaskStatus
    created_at: str
    updated_at: str
