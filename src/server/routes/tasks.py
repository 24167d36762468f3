"""Task endpoints.

Every response is an envelope ``{success, message?, data?, error?}``.
"""

from __future__ import annotations

import asyncio
import logging
from typing import Any, Optional

from fastapi import FastAPI
from fastapi.responses import JSONResponse

from src.tasks import TaskError

from ..dependencies import get_task_service, serialize_task
from ..schemas import Envelope, TaskCreateRequest, TaskUpdateRequest

logger = logging.getLogger(__name__)


def envelope_response(
    status_code: int,
    *,
    success: bool,
    message: Optional[str] = None,
    data: Any = None,
    error: Optional[str] = None,
) -> JSONResponse:
    """Build a JSONResponse carrying an envelope; unset keys are omitted."""
    envelope = Envelope(success=success, message=message, data=data, error=error)
    return JSONResponse(status_code=status_code, content=envelope.model_dump(exclude_none=True))


def error_response(exc: Exception, message: str) -> JSONResponse:
    """Translate an exception raised by the service into a failure envelope.

    Must be called from inside an ``except`` block so the traceback is logged.
    """
    if isinstance(exc, TaskError) and exc.status_code < 500:
        return envelope_response(exc.status_code, success=False, message=exc.message)
    logger.exception("%s: %s", message, exc)
    return envelope_response(500, success=False, message=message, error=str(exc))


def register_task_routes(app: FastAPI) -> None:
    """Register task CRUD endpoints."""

    @app.get("/api/tasks")
    async def list_tasks() -> JSONResponse:
        """List tasks, newest first."""
        service = get_task_service()
        try:
            tasks = await asyncio.to_thread(service.list_tasks)
        except Exception as exc:
            return error_response(exc, "Error fetching tasks")
        return envelope_response(
            200, success=True, data=[serialize_task(task) for task in tasks]
        )

    @app.post("/api/tasks", status_code=201)
    async def create_task(request: TaskCreateRequest) -> JSONResponse:
        """Create a new task."""
        service = get_task_service()
        try:
            task = await asyncio.to_thread(service.create_task, request.title, request.status)
        except Exception as exc:
            return error_response(exc, "Error creating task")
        return envelope_response(
            201, success=True, message="Task created successfully", data=serialize_task(task)
        )

    @app.put("/api/tasks/{task_id}")
    async def update_task(task_id: str, request: TaskUpdateRequest) -> JSONResponse:
        """Update title and/or status of an existing task."""
        service = get_task_service()
        try:
            task = await asyncio.to_thread(
                service.update_task,
                task_id,
                title=request.title,
                status=request.status,
            )
        except Exception as exc:
            return error_response(exc, "Error updating task")
        return envelope_response(
            200, success=True, message="Task updated successfully", data=serialize_task(task)
        )

    @app.delete("/api/tasks/{task_id}")
    async def delete_task(task_id: str) -> JSONResponse:
        """Delete a task and return its last state."""
        service = get_task_service()
        try:
            task = await asyncio.to_thread(service.delete_task, task_id)
        except Exception as exc:
            return error_response(exc, "Error deleting task")
        return envelope_response(
            200, success=True, message="Task deleted successfully", data=serialize_task(task)
        )
