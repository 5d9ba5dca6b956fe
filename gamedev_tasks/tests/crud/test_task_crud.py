import pytest
from sqlalchemy.orm import Session
from sqlalchemy.exc import SQLAlchemyError
from unittest.mock import patch
from datetime import datetime

from gamedev_tasks.crud.task import (
    create_task,
    get_task,
    get_all_tasks,
    get_tasks_by_project,
    update_task,
    complete_task,
    delete_task,
)
from gamedev_tasks.crud.project import create_project
from gamedev_tasks.crud.subtask import create_subtask
from gamedev_tasks.crud.statistics import compute_statistics
from gamedev_tasks.crud.activity_log import get_activity_log
from gamedev_tasks.crud.sync_log import list_unsynced
from gamedev_tasks.core.exceptions import StorageError
from gamedev_tasks.models.project import Project as ProjectModel
from gamedev_tasks.models.task import Task as TaskModel
from gamedev_tasks.models.subtask import Subtask as SubtaskModel
from gamedev_tasks.models.activity_log import ActivityLog
from gamedev_tasks.models.sync_log import SyncLogEntry


def test_create_task_defaults(db: Session):
    task = create_task(db, {"title": "Write design doc"})

    assert task.id is not None
    assert task.status == "not-started"
    assert task.priority == "medium"
    assert task.category == "other"
    assert task.order == 0
    assert task.completed_at is None
    assert task.project_id is None

def test_create_task_never_sets_completed_at(db: Session):
    task = create_task(db, {"title": "Sneaky", "completed_at": datetime(2020, 1, 1)})
    assert task.completed_at is None

def test_complete_task_sets_status_and_timestamp(db: Session, task: TaskModel):
    assert task.completed_at is None

    completed = complete_task(db, task.id)

    assert completed.status == "completed"
    assert completed.completed_at is not None
    assert completed.completed_at >= completed.created_at

def test_complete_task_not_found(db: Session):
    assert complete_task(db, 999) is None

def test_example_scenario(db: Session):
    project = create_project(db, {"name": "Demo"})
    t1 = create_task(db, {"project_id": project.id, "title": "A", "priority": "high"})

    complete_task(db, t1.id)

    tasks = get_all_tasks(db)
    assert len(tasks) == 1
    assert tasks[0].status == "completed"
    assert tasks[0].completed_at is not None
    assert compute_statistics(db)["completed_tasks"] == 1

def test_update_task_partial(db: Session, task: TaskModel):
    updated = update_task(db, task.id, {"priority": "high", "status": "in-progress"})

    assert updated.priority == "high"
    assert updated.status == "in-progress"
    assert updated.title == "Implement player controller"
    assert updated.completed_at is None

def test_update_task_to_completed_keeps_invariant(db: Session, task: TaskModel):
    updated = update_task(db, task.id, {"status": "completed"})
    assert updated.completed_at is not None
    assert get_activity_log(db, task_id=task.id)[0].action == "complete"

    reopened = update_task(db, task.id, {"status": "in-progress"})
    assert reopened.completed_at is None

def test_update_completed_task_keeps_original_completed_at(db: Session, task: TaskModel):
    completed_at = complete_task(db, task.id).completed_at
    updated = update_task(db, task.id, {"description": "Polish"})
    assert updated.completed_at == completed_at

def test_update_task_not_found(db: Session):
    assert update_task(db, 999, {"title": "Ghost"}) is None

def test_get_all_tasks_filters(db: Session, project: ProjectModel):
    create_task(db, {"title": "Shader", "project_id": project.id, "category": "programming", "priority": "high"})
    create_task(db, {"title": "Music loop", "project_id": project.id, "category": "audio"})
    create_task(db, {"title": "Trailer", "category": "marketing", "assigned_to": "jane"})

    assert len(get_all_tasks(db)) == 3
    assert [t.title for t in get_tasks_by_project(db, project.id)] == ["Shader", "Music loop"]
    assert [t.title for t in get_all_tasks(db, {"category": "audio"})] == ["Music loop"]
    assert [t.title for t in get_all_tasks(db, {"priority": "high"})] == ["Shader"]
    assert [t.title for t in get_all_tasks(db, {"assigned_to": "jane"})] == ["Trailer"]
    assert [t.title for t in get_all_tasks(db, {"search": "loop"})] == ["Music loop"]

def test_get_all_tasks_sorted_by_order(db: Session):
    create_task(db, {"title": "Second", "order": 2})
    create_task(db, {"title": "First", "order": 1})
    assert [t.title for t in get_all_tasks(db)] == ["First", "Second"]

def test_delete_task_cascades_to_subtasks(db: Session, task: TaskModel):
    create_subtask(db, {"task_id": task.id, "title": "Walk"})
    create_subtask(db, {"task_id": task.id, "title": "Run"})

    assert delete_task(db, task.id) is True

    assert get_task(db, task.id) is None
    assert db.query(SubtaskModel).count() == 0

def test_delete_task_not_found(db: Session):
    assert delete_task(db, 999) is False

def test_mutations_write_activity_and_sync_rows(db: Session, project: ProjectModel):
    task = create_task(db, {"title": "Logged", "project_id": project.id})
    update_task(db, task.id, {"priority": "low"})

    actions = [e.action for e in get_activity_log(db, task_id=task.id)]
    assert actions == ["update", "create"]
    entries = [e for e in list_unsynced(db) if e.entity_type == "task"]
    assert [e.action for e in entries] == ["create", "update"]
    assert entries[-1].data["priority"] == "low"
    assert entries[-1].entity_id == str(task.id)

def test_sync_write_failure_rolls_back_task(db: Session):
    with patch("gamedev_tasks.crud.task.enqueue_change", side_effect=SQLAlchemyError("disk full")):
        with pytest.raises(StorageError):
            create_task(db, {"title": "Never stored"})

    assert db.query(TaskModel).count() == 0
    assert db.query(ActivityLog).count() == 0
    assert db.query(SyncLogEntry).count() == 0

def test_activity_write_failure_rolls_back_update(db: Session, task: TaskModel):
    with patch("gamedev_tasks.crud.task.record_activity", side_effect=RuntimeError("boom")):
        with pytest.raises(RuntimeError):
            update_task(db, task.id, {"title": "Renamed"})

    db.expire_all()
    assert get_task(db, task.id).title == "Implement player controller"
    assert [e.action for e in db.query(SyncLogEntry).all()] == ["create", "create"]
