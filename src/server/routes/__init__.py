"""Route registration helpers."""

from .health import register_health_routes
from .tasks import register_task_routes

__all__ = [
    "register_health_routes",
    "register_task_routes",
]
