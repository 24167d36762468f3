"""Client-side task list state.

The board keeps the last fetched snapshot and never edits it locally: every
mutation goes through the API and is followed by a full refetch.
"""

from __future__ import annotations

from typing import List, Optional

from .client import TaskApiClient, TaskApiError
from .models import Task, TaskStatus
from .transitions import next_status

STATUS_LABELS = {
    TaskStatus.TODO: "To-do",
    TaskStatus.IN_PROGRESS: "In-progress",
    TaskStatus.DONE: "Done",
}

ACTION_LABELS = {
    TaskStatus.TODO: "Start",
    TaskStatus.IN_PROGRESS: "Done",
    TaskStatus.DONE: "✓",
}


def status_label(status: TaskStatus) -> str:
    return STATUS_LABELS[status]


def action_label(status: TaskStatus) -> str:
    return ACTION_LABELS[status]


class TaskBoard:
    """Snapshot of the task list plus the actions the UI offers."""

    def __init__(self, client: TaskApiClient):
        self.client = client
        self.tasks: List[Task] = []

    def refresh(self) -> List[Task]:
        self.tasks = self.client.list_tasks()
        return self.tasks

    def find(self, task_id: str) -> Optional[Task]:
        for task in self.tasks:
            if task.id == task_id:
                return task
        return None

    def add(self, title: str) -> Task:
        created = self.client.create_task(title.strip())
        self.refresh()
        return created

    def advance(self, task_id: str) -> Optional[Task]:
        """Move a task one step forward (to-do -> in-progress -> done).

        Returns the updated task, or None when the task is already done.
        """
        task = self.find(task_id)
        if task is None:
            self.refresh()
            task = self.find(task_id)
        if task is None:
            raise TaskApiError("Task not found", status_code=404)

        target = next_status(task.status)
        if target is None:
            return None
        updated = self.client.update_task(task_id, status=target)
        self.refresh()
        return updated

    def remove(self, task_id: str) -> Task:
        deleted = self.client.delete_task(task_id)
        self.refresh()
        return deleted
