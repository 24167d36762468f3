"""TaskService unit tests"""

from unittest.mock import Mock

import pytest

from src.tasks import (
    InvalidTransitionError,
    StoreError,
    TaskNotFoundError,
    TaskRepository,
    TaskService,
    TaskStatus,
    ValidationError,
)


@pytest.fixture
def repo(tmp_path):
    return TaskRepository(db_path=tmp_path / "service.db")


@pytest.fixture
def service(repo):
    return TaskService(repo)


def test_create_defaults_to_todo(service):
    task = service.create_task("Buy milk")

    assert task.title == "Buy milk"
    assert task.status is TaskStatus.TODO
    assert task.id
    assert service.list_tasks() == [task]


def test_create_with_explicit_status(service):
    task = service.create_task("Already started", TaskStatus.IN_PROGRESS)
    assert task.status is TaskStatus.IN_PROGRESS


def test_create_strips_title(service):
    assert service.create_task("  padded  ").title == "padded"


@pytest.mark.parametrize("title", [None, "", "   "])
def test_create_without_title_is_rejected(service, title):
    with pytest.raises(ValidationError) as excinfo:
        service.create_task(title)

    assert excinfo.value.message == "Title is required"
    assert excinfo.value.status_code == 400
    assert service.list_tasks() == []


def test_list_returns_newest_first(service):
    t1 = service.create_task("T1")
    t2 = service.create_task("T2")

    assert [task.id for task in service.list_tasks()] == [t2.id, t1.id]


def test_list_empty_is_success(service):
    assert service.list_tasks() == []


def test_todo_to_done_is_rejected_and_not_written(service):
    task = service.create_task("Skip ahead")

    with pytest.raises(InvalidTransitionError):
        service.update_task(task.id, status=TaskStatus.DONE)

    assert service.get_task(task.id).status is TaskStatus.TODO


def test_rejected_transition_does_not_write_title(service):
    task = service.create_task("Original")

    with pytest.raises(InvalidTransitionError):
        service.update_task(task.id, title="Renamed", status=TaskStatus.DONE)

    assert service.get_task(task.id).title == "Original"


def test_forward_path_succeeds(service):
    task = service.create_task("Walk the path")

    started = service.update_task(task.id, status=TaskStatus.IN_PROGRESS)
    assert started.status is TaskStatus.IN_PROGRESS

    finished = service.update_task(task.id, status=TaskStatus.DONE)
    assert finished.status is TaskStatus.DONE
    assert service.get_task(task.id).status is TaskStatus.DONE


def test_same_status_is_a_noop(service):
    task = service.create_task("Stay put")

    updated = service.update_task(task.id, status=TaskStatus.TODO)

    assert updated.status is TaskStatus.TODO
    assert updated.title == task.title


@pytest.mark.parametrize("target", [TaskStatus.TODO, TaskStatus.IN_PROGRESS])
def test_done_can_be_reverted(service, target):
    task = service.create_task("Reopen me", TaskStatus.DONE)

    assert service.update_task(task.id, status=target).status is target


def test_update_title_only(service):
    task = service.create_task("Old")

    updated = service.update_task(task.id, title="New")

    assert updated.title == "New"
    assert updated.status is TaskStatus.TODO


@pytest.mark.parametrize("title", ["", "   ", None])
def test_empty_title_on_update_is_ignored(service, title):
    task = service.create_task("Keep me")

    updated = service.update_task(task.id, title=title, status=TaskStatus.IN_PROGRESS)

    assert updated.title == "Keep me"
    assert updated.status is TaskStatus.IN_PROGRESS


def test_update_missing_task(service):
    with pytest.raises(TaskNotFoundError) as excinfo:
        service.update_task("does-not-exist", status=TaskStatus.IN_PROGRESS)
    assert excinfo.value.status_code == 404


def test_delete_returns_snapshot_and_removes(service):
    keep = service.create_task("Keep")
    drop = service.create_task("Drop")

    deleted = service.delete_task(drop.id)

    assert deleted == drop
    assert service.list_tasks() == [keep]


def test_delete_missing_task(service):
    with pytest.raises(TaskNotFoundError):
        service.delete_task("does-not-exist")


def test_store_errors_propagate():
    repo = Mock(spec=TaskRepository)
    repo.list.side_effect = StoreError("disk I/O error")
    service = TaskService(repo)

    with pytest.raises(StoreError) as excinfo:
        service.list_tasks()
    assert excinfo.value.message == "disk I/O error"
