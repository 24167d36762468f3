"""Application-wide settings and logging for the task tracker."""

from .config import Config
from .logger import setup_logger

__all__ = ["Config", "setup_logger"]
