from __future__ import annotations

import logging
import sqlite3
import uuid
from datetime import datetime, timezone
from pathlib import Path
from typing import Optional

from .errors import StoreError
from .models import Task, TaskStatus

logger = logging.getLogger(__name__)


class TaskRepository:
    """SQLite-backed task store. Ids are assigned here, never by callers."""

    def __init__(self, db_path: Optional[Path] = None):
        if db_path:
            self.db_path = Path(db_path)
        else:
            self.db_path = Path(__file__).resolve().parents[2] / "data" / "task_tracker.db"
        self.db_path.parent.mkdir(parents=True, exist_ok=True)
        self._initialize()

    def _connect(self) -> sqlite3.Connection:
        conn = sqlite3.connect(self.db_path)
        conn.row_factory = sqlite3.Row
        return conn

    def _initialize(self) -> None:
        try:
            with self._connect() as conn:
                conn.execute(
                    """
                    CREATE TABLE IF NOT EXISTS tasks (
                        id TEXT PRIMARY KEY,
                        title TEXT NOT NULL CHECK (length(title) > 0),
                        status TEXT NOT NULL CHECK (status IN ('to-do','in-progress','done')),
                        created_at TEXT NOT NULL,
                        updated_at TEXT NOT NULL
                    )
                    """
                )
                conn.execute(
                    "CREATE INDEX IF NOT EXISTS idx_tasks_created ON tasks(created_at DESC)"
                )
                conn.commit()
        except sqlite3.Error as exc:
            raise StoreError(str(exc)) from exc
        logger.debug("Task store ready at %s", self.db_path)

    @staticmethod
    def _now() -> str:
        return datetime.now(timezone.utc).isoformat()

    @staticmethod
    def _row_to_task(row: sqlite3.Row) -> Task:
        return Task(
            id=row["id"],
            title=row["title"],
            status=TaskStatus(row["status"]),
            created_at=row["created_at"],
            updated_at=row["updated_at"],
        )

    def list(self) -> list[Task]:
        """Return all tasks, newest first."""
        try:
            with self._connect() as conn:
                rows = conn.execute(
                    "SELECT * FROM tasks ORDER BY created_at DESC, rowid DESC"
                ).fetchall()
        except sqlite3.Error as exc:
            raise StoreError(str(exc)) from exc
        return [self._row_to_task(row) for row in rows]

    def get(self, task_id: str) -> Optional[Task]:
        try:
            with self._connect() as conn:
                row = conn.execute("SELECT * FROM tasks WHERE id = ?", (task_id,)).fetchone()
        except sqlite3.Error as exc:
            raise StoreError(str(exc)) from exc
        return self._row_to_task(row) if row else None

    def create(self, title: str, status: TaskStatus = TaskStatus.TODO) -> Task:
        task_id = uuid.uuid4().hex
        now = self._now()
        try:
            with self._connect() as conn:
                conn.execute(
                    """
                    INSERT INTO tasks (id, title, status, created_at, updated_at)
                    VALUES (?, ?, ?, ?, ?)
                    """,
                    (task_id, title, status.value, now, now),
                )
                conn.commit()
                row = conn.execute("SELECT * FROM tasks WHERE id = ?", (task_id,)).fetchone()
        except sqlite3.Error as exc:
            raise StoreError(str(exc)) from exc
        return self._row_to_task(row)

    def update(
        self,
        task_id: str,
        *,
        title: Optional[str] = None,
        status: Optional[TaskStatus] = None,
    ) -> Optional[Task]:
        """Write the given fields. Returns None when the task does not exist."""
        fields: list[str] = []
        params: list[object] = []

        if title is not None:
            fields.append("title = ?")
            params.append(title)
        if status is not None:
            fields.append("status = ?")
            params.append(status.value)

        if not fields:
            return self.get(task_id)

        fields.append("updated_at = ?")
        params.append(self._now())
        params.append(task_id)

        try:
            with self._connect() as conn:
                conn.execute(f"UPDATE tasks SET {', '.join(fields)} WHERE id = ?", params)
                conn.commit()
                row = conn.execute("SELECT * FROM tasks WHERE id = ?", (task_id,)).fetchone()
        except sqlite3.Error as exc:
            raise StoreError(str(exc)) from exc
        return self._row_to_task(row) if row else None

    def delete(self, task_id: str) -> Optional[Task]:
        """Remove a task and return the row as it was before deletion."""
        try:
            with self._connect() as conn:
                row = conn.execute("SELECT * FROM tasks WHERE id = ?", (task_id,)).fetchone()
                if row is None:
                    return None
                conn.execute("DELETE FROM tasks WHERE id = ?", (task_id,))
                conn.commit()
        except sqlite3.Error as exc:
            raise StoreError(str(exc)) from exc
        return self._row_to_task(row)
