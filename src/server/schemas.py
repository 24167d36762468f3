"""Pydantic schemas for the FastAPI server."""

from __future__ import annotations

from typing import Any, Optional

from pydantic import BaseModel, ConfigDict, Field

from src.tasks import TaskStatus


class HealthResponse(BaseModel):
    """Response for health check endpoint."""

    status: str


class TaskResponse(BaseModel):
    """Serialized task."""

    model_config = ConfigDict(populate_by_name=True, use_enum_values=True)

    id: str
    title: str
    status: TaskStatus
    created_at: str = Field(..., alias="createdAt")
    updated_at: str = Field(..., alias="updatedAt")


class TaskCreateRequest(BaseModel):
    """Request body for creating a task.

    ``title`` is optional here so that a missing title reaches the service and
    is reported as "Title is required" instead of a generic body error.
    """

    title: Optional[str] = Field(default=None)
    status: Optional[TaskStatus] = Field(default=None)


class TaskUpdateRequest(BaseModel):
    """Request body for updating a task."""

    title: Optional[str] = Field(default=None)
    status: Optional[TaskStatus] = Field(default=None)


class Envelope(BaseModel):
    """Uniform response wrapper for every task endpoint."""

    success: bool
    message: Optional[str] = None
    data: Optional[Any] = None
    error: Optional[str] = None
