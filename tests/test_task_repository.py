import sqlite3

import pytest

from src.tasks.errors import StoreError
from src.tasks.repository import TaskRepository, TaskStatus


def test_task_repository_crud_cycle(tmp_path):
    repo = TaskRepository(db_path=tmp_path / "tasks.db")

    created = repo.create(title="Write report")
    assert created.title == "Write report"
    assert created.status is TaskStatus.TODO
    assert created.id
    assert created.created_at == created.updated_at

    assert repo.get(created.id) == created
    assert repo.list() == [created]

    updated = repo.update(created.id, status=TaskStatus.IN_PROGRESS)
    assert updated is not None
    assert updated.status is TaskStatus.IN_PROGRESS
    assert updated.title == "Write report"
    assert updated.created_at == created.created_at

    deleted = repo.delete(created.id)
    assert deleted == updated
    assert repo.list() == []
    assert repo.get(created.id) is None


def test_list_is_newest_first(tmp_path):
    repo = TaskRepository(db_path=tmp_path / "tasks.db")
    first = repo.create(title="first")
    second = repo.create(title="second")
    third = repo.create(title="third")

    assert [task.id for task in repo.list()] == [third.id, second.id, first.id]


def test_ids_are_unique(tmp_path):
    repo = TaskRepository(db_path=tmp_path / "tasks.db")
    ids = {repo.create(title=f"task {i}").id for i in range(5)}
    assert len(ids) == 5


def test_update_and_delete_missing_return_none(tmp_path):
    repo = TaskRepository(db_path=tmp_path / "tasks.db")
    assert repo.update("missing", title="x") is None
    assert repo.update("missing") is None
    assert repo.delete("missing") is None


def test_data_persists_across_instances(tmp_path):
    db_path = tmp_path / "tasks.db"
    created = TaskRepository(db_path=db_path).create(title="durable", status=TaskStatus.DONE)

    reopened = TaskRepository(db_path=db_path)
    assert reopened.get(created.id) == created


def test_store_rejects_unknown_status(tmp_path):
    db_path = tmp_path / "tasks.db"
    TaskRepository(db_path=db_path)
    with sqlite3.connect(db_path) as conn:
        with pytest.raises(sqlite3.IntegrityError):
            conn.execute(
                "INSERT INTO tasks (id, title, status, created_at, updated_at) VALUES (?, ?, ?, ?, ?)",
                ("x", "bad", "archived", "now", "now"),
            )


def test_sqlite_failure_becomes_store_error(tmp_path):
    db_path = tmp_path / "tasks.db"
    repo = TaskRepository(db_path=db_path)
    with sqlite3.connect(db_path) as conn:
        conn.execute("DROP TABLE tasks")

    with pytest.raises(StoreError) as excinfo:
        repo.list()
    assert "no such table" in excinfo.value.message
