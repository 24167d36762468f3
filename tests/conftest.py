"""Shared fixtures for the task client tests."""

from dataclasses import replace

import pytest

from src.tasks.client import TaskApiError
from src.tasks.models import Task, TaskStatus


class FakeClient:
    """Stands in for TaskApiClient and records calls."""

    def __init__(self):
        self.tasks: list[Task] = []
        self.calls: list[tuple] = []
        self._next_id = 1

    def list_tasks(self):
        self.calls.append(("list",))
        return list(self.tasks)

    def create_task(self, title, status=None):
        self.calls.append(("create", title))
        task = Task(
            id=str(self._next_id),
            title=title,
            status=status or TaskStatus.TODO,
            created_at="t",
            updated_at="t",
        )
        self._next_id += 1
        self.tasks.insert(0, task)
        return task

    def update_task(self, task_id, title=None, status=None):
        self.calls.append(("update", task_id, status))
        for index, task in enumerate(self.tasks):
            if task.id == task_id:
                self.tasks[index] = replace(task, status=status or task.status)
                return self.tasks[index]
        raise TaskApiError("Task not found", status_code=404)

    def delete_task(self, task_id):
        self.calls.append(("delete", task_id))
        for task in self.tasks:
            if task.id == task_id:
                self.tasks.remove(task)
                return task
        raise TaskApiError("Task not found", status_code=404)


@pytest.fixture
def fake_client():
    return FakeClient()
