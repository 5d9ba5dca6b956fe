import json
from datetime import datetime
import pytest
from sqlalchemy import create_engine
from sqlalchemy.orm import Session, sessionmaker
from sqlalchemy.pool import StaticPool

from gamedev_tasks.crud.backup import get_backup_data, restore_from_backup
from gamedev_tasks.crud.project import create_project, get_all_projects
from gamedev_tasks.crud.task import create_task, complete_task, get_all_tasks
from gamedev_tasks.crud.subtask import create_subtask, get_subtasks_by_task
from gamedev_tasks.crud.comment import add_comment
from gamedev_tasks.crud.block import create_block
from gamedev_tasks.crud.time_log import start_time_tracking, stop_time_tracking, get_time_log
from gamedev_tasks.crud.settings import get_settings, save_settings
from gamedev_tasks.crud.sync_log import get_all_sync_entries
from gamedev_tasks.crud.user import add_user, get_all_users
from gamedev_tasks.crud.activity_log import get_activity_log
from gamedev_tasks.crud.notification import create_notification, get_notifications
from gamedev_tasks.core.exceptions import BackupValidationError
from gamedev_tasks.models.base import Base
from gamedev_tasks.schemas.project import ProjectRead
from gamedev_tasks.schemas.task import TaskRead


@pytest.fixture
def empty_db():
    engine = create_engine("sqlite:///:memory:", connect_args={"check_same_thread": False}, poolclass=StaticPool)
    Base.metadata.create_all(bind=engine)
    session = sessionmaker(autocommit=False, autoflush=False, bind=engine, expire_on_commit=False)()
    yield session
    session.close()
    engine.dispose()

@pytest.fixture
def populated(db: Session):
    project = create_project(db, {"name": "Backup me", "development_tools": ["blender"], "game_engine": "unity"})
    create_block(db, {"id": "doing", "title": "Doing", "project_id": project.id})
    first = create_task(db, {"title": "First", "project_id": project.id, "block_id": "doing"})
    second = create_task(db, {"title": "Second", "project_id": project.id, "priority": "high"})
    complete_task(db, second.id)
    create_subtask(db, {"task_id": first.id, "title": "Step"})
    add_comment(db, {"task_id": first.id, "content": "Remember the save system"})
    time_log = start_time_tracking(db, first.id)
    stop_time_tracking(db, time_log.id)
    add_user(db, {"id": "jane", "name": "Jane", "email": "jane@studio.dev"})
    save_settings(db, {"theme": "dark", "reminder_time": 6})
    return db


def _rows(schema, objects):
    return sorted((schema.model_validate(o).model_dump() for o in objects), key=lambda row: row["id"])


def test_backup_document_shape(populated: Session):
    data = get_backup_data(populated)

    assert set(data) == {
        "projects", "tasks", "subtasks", "blocks", "comments", "timeLogs",
        "activityLog", "notifications", "users", "settings", "date",
    }
    assert len(data["projects"]) == 1
    assert len(data["tasks"]) == 2
    assert len(data["timeLogs"]) == 1
    assert data["settings"]["theme"] == "dark"
    assert "id" not in data["settings"]
    assert isinstance(data["tasks"][0]["created_at"], str)
    json.dumps(data)

def test_round_trip_into_empty_store(populated: Session, empty_db: Session):
    data = json.loads(json.dumps(get_backup_data(populated)))

    assert restore_from_backup(empty_db, data) is True

    assert _rows(ProjectRead, get_all_projects(empty_db)) == _rows(ProjectRead, get_all_projects(populated))
    assert _rows(TaskRead, get_all_tasks(empty_db)) == _rows(TaskRead, get_all_tasks(populated))
    restored_first = [t for t in get_all_tasks(empty_db) if t.title == "First"][0]
    assert [s.title for s in get_subtasks_by_task(empty_db, restored_first.id)] == ["Step"]
    assert restored_first.block_id == "doing"
    assert get_settings(empty_db).reminder_time == 6
    assert [u.id for u in get_all_users(empty_db)] == ["jane"]

def test_restore_replaces_existing_rows(populated: Session):
    data = get_backup_data(populated)
    create_project(populated, {"name": "Created after export"})

    restore_from_backup(populated, data)

    assert [p.name for p in get_all_projects(populated)] == ["Backup me"]

def test_restore_keeps_sync_log_and_logs_restore(populated: Session):
    data = get_backup_data(populated)
    sync_before = len(get_all_sync_entries(populated))

    restore_from_backup(populated, data)

    assert len(get_all_sync_entries(populated)) == sync_before
    assert get_activity_log(populated)[0].action == "restore"

def test_restore_without_optional_tables_keeps_them(populated: Session):
    data = get_backup_data(populated)
    for key in ("users", "activityLog", "notifications", "settings"):
        data.pop(key)

    restore_from_backup(populated, data)

    assert [u.id for u in get_all_users(populated)] == ["jane"]
    assert get_settings(populated).theme == "dark"

def test_invalid_backup_changes_nothing(populated: Session):
    data = get_backup_data(populated)
    data["tasks"][0]["created_at"] = "not a date"

    with pytest.raises(BackupValidationError):
        restore_from_backup(populated, data)

    assert len(get_all_tasks(populated)) == 2

@pytest.mark.parametrize("payload", [[], "backup", {"tasks": [], "date": "2024-01-01"}])
def test_malformed_documents_are_rejected(db: Session, payload):
    with pytest.raises(BackupValidationError):
        restore_from_backup(db, payload)

def test_restore_detaches_kept_history_from_replaced_tasks(db: Session, empty_db: Session):
    old = create_task(db, {"title": "Old secret task"})
    create_notification(db, {"title": "Due soon", "message": "Ship it", "type": "deadline", "task_id": old.id})
    create_task(empty_db, {"title": "New"})
    data = get_backup_data(empty_db)
    for key in ("activityLog", "notifications"):
        data.pop(key)

    restore_from_backup(db, data)

    restored = get_all_tasks(db)[0]
    assert restored.id == old.id
    assert get_activity_log(db, task_id=restored.id) == []
    assert [e.task_id for e in get_activity_log(db) if e.action == "create"] == [None]
    assert [n.task_id for n in get_notifications(db)] == [None]

def test_restore_converts_offsets_to_utc(populated: Session):
    data = get_backup_data(populated)
    data["timeLogs"][0]["start_time"] = "2026-01-01T10:00:00+03:00"
    data["timeLogs"][0]["end_time"] = "2026-01-01T11:30:00+03:00"
    log_id = data["timeLogs"][0]["id"]

    restore_from_backup(populated, data)
    populated.expire_all()

    restored = get_time_log(populated, log_id)
    assert restored.start_time == datetime(2026, 1, 1, 7, 0)
    assert restored.end_time == datetime(2026, 1, 1, 8, 30)
