"""Task service: input validation and status-transition enforcement.

Related classes:
  - repository.TaskRepository: persistence used by this service
  - server.routes.tasks: maps results and TaskError subclasses to HTTP envelopes
"""

from __future__ import annotations

import logging
from typing import List, Optional

from .errors import TaskNotFoundError, ValidationError
from .models import Task, TaskStatus
from .repository import TaskRepository
from .transitions import ensure_transition

logger = logging.getLogger(__name__)


def _clean_title(title: Optional[str]) -> Optional[str]:
    if title is None:
        return None
    stripped = title.strip()
    return stripped or None


class TaskService:
    """CRUD operations over tasks with the status state machine applied on update."""

    def __init__(self, repository: TaskRepository):
        self.repository = repository

    def list_tasks(self) -> List[Task]:
        """Return every task, newest first."""
        return self.repository.list()

    def get_task(self, task_id: str) -> Task:
        task = self.repository.get(task_id)
        if task is None:
            raise TaskNotFoundError()
        return task

    def create_task(self, title: Optional[str], status: Optional[TaskStatus] = None) -> Task:
        """Create a task.

        Args:
            title: Task title. Required; surrounding whitespace is dropped.
            status: Initial status. Defaults to ``to-do``.

        Raises:
            ValidationError: title is missing or empty
        """
        clean_title = _clean_title(title)
        if clean_title is None:
            raise ValidationError("Title is required")

        task = self.repository.create(clean_title, status or TaskStatus.TODO)
        logger.info("Created task %s (%s)", task.id, task.status.value)
        return task

    def update_task(
        self,
        task_id: str,
        title: Optional[str] = None,
        status: Optional[TaskStatus] = None,
    ) -> Task:
        """Update title and/or status.

        An empty title is ignored. A status equal to the current one is a no-op
        and never counts as a forbidden transition.

        Raises:
            TaskNotFoundError: no task with this id
            InvalidTransitionError: the status change is not allowed
        """
        current = self.get_task(task_id)

        if status is not None and status != current.status:
            ensure_transition(current.status, status)

        updated = self.repository.update(task_id, title=_clean_title(title), status=status)
        if updated is None:
            # Deleted between the read and the write.
            raise TaskNotFoundError()
        if updated.status != current.status:
            logger.info(
                "Task %s moved %s -> %s", task_id, current.status.value, updated.status.value
            )
        return updated

    def delete_task(self, task_id: str) -> Task:
        """Delete a task and return its last stored state.

        Raises:
            TaskNotFoundError: no task with this id
        """
        deleted = self.repository.delete(task_id)
        if deleted is None:
            raise TaskNotFoundError()
        logger.info("Deleted task %s", task_id)
        return deleted
