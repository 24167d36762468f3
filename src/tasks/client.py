"""HTTP client for the task API."""

from __future__ import annotations

import logging
from typing import Any, Dict, List, Optional

import requests

from .models import Task, TaskStatus

logger = logging.getLogger(__name__)


class TaskApiError(Exception):
    """Raised when an API call fails for any reason."""

    def __init__(self, message: str, status_code: Optional[int] = None):
        super().__init__(message)
        self.message = message
        self.status_code = status_code


def task_from_json(data: Dict[str, Any]) -> Task:
    """Build a Task from the API representation."""
    return Task(
        id=data["id"],
        title=data["title"],
        status=TaskStatus(data["status"]),
        created_at=data.get("createdAt", ""),
        updated_at=data.get("updatedAt", ""),
    )


class TaskApiClient:
    """
    Thin wrapper around the /api/tasks endpoints.

    Every method either returns the ``data`` of a successful envelope or
    raises TaskApiError with the server's message (or ``fallback_message``).
    """

    def __init__(self, api_url: str = "http://localhost:8000/api/tasks", timeout: float = 10.0):
        """
        Args:
            api_url: Base URL of the tasks collection
            timeout: Per-request timeout in seconds
        """
        self.api_url = api_url.rstrip("/")
        self.timeout = timeout

    def _request(
        self,
        method: str,
        url: str,
        fallback_message: str,
        payload: Optional[Dict[str, Any]] = None,
    ) -> Any:
        try:
            response = requests.request(method, url, json=payload, timeout=self.timeout)
        except requests.exceptions.RequestException as e:
            logger.debug(f"{method} {url} failed: {e}")
            raise TaskApiError(fallback_message) from e

        try:
            body = response.json()
        except ValueError:
            body = {}

        if not response.ok:
            message = body.get("message") if isinstance(body, dict) else None
            logger.debug(f"{method} {url} returned {response.status_code}: {message}")
            raise TaskApiError(message or fallback_message, status_code=response.status_code)

        return body.get("data") if isinstance(body, dict) else None

    def list_tasks(self) -> List[Task]:
        data = self._request("GET", self.api_url, "Failed to fetch tasks")
        return [task_from_json(item) for item in data or []]

    def create_task(self, title: str, status: Optional[TaskStatus] = None) -> Task:
        payload: Dict[str, Any] = {"title": title}
        if status is not None:
            payload["status"] = status.value
        data = self._request("POST", self.api_url, "Failed to add task", payload)
        return task_from_json(data)

    def update_task(
        self,
        task_id: str,
        title: Optional[str] = None,
        status: Optional[TaskStatus] = None,
    ) -> Task:
        payload: Dict[str, Any] = {}
        if title is not None:
            payload["title"] = title
        if status is not None:
            payload["status"] = status.value
        data = self._request("PUT", f"{self.api_url}/{task_id}", "Failed to update task", payload)
        return task_from_json(data)

    def delete_task(self, task_id: str) -> Task:
        data = self._request("DELETE", f"{self.api_url}/{task_id}", "Failed to delete task")
        return task_from_json(data)
