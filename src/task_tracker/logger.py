"""
Logging setup.

Called once per process by the server bootstrap and the CLI.
"""

import logging
from pathlib import Path

from .config import PROJECT_ROOT


def setup_logger(log_level: str = "INFO", log_file: str = "logs/task_tracker.log") -> Path:
    """
    Configure the root logger.

    Args:
        log_level: Log level name (DEBUG, INFO, WARNING, ERROR, CRITICAL)
        log_file: Log file path; relative paths are resolved from the project root

    Returns:
        Path: the log file actually used
    """
    log_path = Path(log_file)
    if not log_path.is_absolute():
        log_path = PROJECT_ROOT / log_path
    log_path.parent.mkdir(parents=True, exist_ok=True)

    logging.basicConfig(
        level=getattr(logging, log_level.upper()),
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        handlers=[
            logging.FileHandler(log_path, encoding="utf-8"),
            logging.StreamHandler(),
        ],
    )
    return log_path
