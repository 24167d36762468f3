"""Dependency helpers shared across FastAPI routes."""

from __future__ import annotations

from functools import lru_cache
from typing import Any, Dict

from src.task_tracker import Config, setup_logger
from src.tasks import Task, TaskRepository, TaskService

from .schemas import TaskResponse

config = Config.load()
setup_logger(log_level=config.log_level, log_file=config.log_file)


@lru_cache(maxsize=1)
def get_task_repository() -> TaskRepository:
    """Singleton TaskRepository."""
    return TaskRepository(db_path=config.database.resolve_path())


@lru_cache(maxsize=1)
def get_task_service() -> TaskService:
    """Singleton TaskService bound to the shared repository."""
    return TaskService(get_task_repository())


def serialize_task(task: Task) -> Dict[str, Any]:
    """Convert a domain Task to its JSON representation."""
    return TaskResponse(
        id=task.id,
        title=task.title,
        status=task.status,
        created_at=task.created_at,
        updated_at=task.updated_at,
    ).model_dump(by_alias=True)
