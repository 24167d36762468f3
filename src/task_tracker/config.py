"""
Configuration management.

Related classes:
  - server.dependencies: builds the task store and logging from this config
  - tasks.cli: reads the API URL and timeout for the terminal client
"""

import os
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Dict, Optional

import yaml

PROJECT_ROOT = Path(__file__).resolve().parent.parent.parent


@dataclass
class ServerConfig:
    """HTTP server settings"""

    host: str = "0.0.0.0"
    port: int = 8000
    reload: bool = False


@dataclass
class DatabaseConfig:
    """Task store settings"""

    path: str = "data/task_tracker.db"

    def resolve_path(self) -> Path:
        """Return the database path, honouring TASK_TRACKER_DB_PATH."""
        env_path = os.getenv("TASK_TRACKER_DB_PATH")
        path = Path(env_path) if env_path else Path(self.path)
        if not path.is_absolute():
            path = PROJECT_ROOT / path
        return path


@dataclass
class ClientConfig:
    """Terminal client settings"""

    api_url: str = "http://localhost:8000/api/tasks"
    timeout_seconds: float = 10.0


@dataclass
class Config:
    """Application settings"""

    server: ServerConfig = None  # type: ignore
    database: DatabaseConfig = None  # type: ignore
    client: ClientConfig = None  # type: ignore

    log_level: str = "INFO"
    log_file: str = "logs/task_tracker.log"

    def __post_init__(self):
        if self.server is None:
            self.server = ServerConfig()
        if self.database is None:
            self.database = DatabaseConfig()
        if self.client is None:
            self.client = ClientConfig()

    @classmethod
    def from_yaml(cls, config_path: Optional[Path] = None) -> "Config":
        """Load settings from a YAML file.

        Args:
            config_path: Settings file (defaults to config/app_config.yaml)

        Returns:
            Config: loaded settings; missing keys fall back to defaults
        """
        if config_path is None:
            config_path = PROJECT_ROOT / "config" / "app_config.yaml"

        with open(config_path, "r", encoding="utf-8") as f:
            yaml_data: Dict[str, Any] = yaml.safe_load(f) or {}

        server_data = yaml_data.get("server", {})
        database_data = yaml_data.get("database", {})
        client_data = yaml_data.get("client", {})
        log_data = yaml_data.get("log", {})

        return cls(
            server=ServerConfig(
                host=server_data.get("host", "0.0.0.0"),
                port=int(server_data.get("port", 8000)),
                reload=bool(server_data.get("reload", False)),
            ),
            database=DatabaseConfig(
                path=database_data.get("path", "data/task_tracker.db"),
            ),
            client=ClientConfig(
                api_url=client_data.get("api_url", "http://localhost:8000/api/tasks"),
                timeout_seconds=float(client_data.get("timeout_seconds", 10.0)),
            ),
            log_level=log_data.get("level", "INFO"),
            log_file=log_data.get("file", "logs/task_tracker.log"),
        )

    @classmethod
    def load(cls, config_path: Optional[Path] = None) -> "Config":
        """Load settings from YAML, or from the environment when the file is absent."""
        path = config_path or PROJECT_ROOT / "config" / "app_config.yaml"
        if Path(path).exists():
            return cls.from_yaml(Path(path))
        return cls.from_env()

    @classmethod
    def from_env(cls) -> "Config":
        """Load settings from TASK_TRACKER_* environment variables."""
        return cls(
            server=ServerConfig(
                host=os.getenv("TASK_TRACKER_HOST", "0.0.0.0"),
                port=int(os.getenv("TASK_TRACKER_PORT", "8000")),
                reload=os.getenv("TASK_TRACKER_RELOAD", "false").lower() in ("1", "true", "yes"),
            ),
            database=DatabaseConfig(
                path=os.getenv("TASK_TRACKER_DB_PATH", "data/task_tracker.db"),
            ),
            client=ClientConfig(
                api_url=os.getenv("TASK_TRACKER_API_URL", "http://localhost:8000/api/tasks"),
                timeout_seconds=float(os.getenv("TASK_TRACKER_TIMEOUT", "10")),
            ),
            log_level=os.getenv("LOG_LEVEL", "INFO"),
            log_file=os.getenv("LOG_FILE", "logs/task_tracker.log"),
        )
