from sqlalchemy.orm import Session
from unittest.mock import patch
from datetime import datetime, timedelta

from gamedev_tasks.crud.statistics import compute_statistics
from gamedev_tasks.crud.project import create_project
from gamedev_tasks.crud.task import create_task, complete_task
from gamedev_tasks.crud.subtask import create_subtask, update_subtask
from gamedev_tasks.crud.time_log import start_time_tracking, stop_time_tracking
from gamedev_tasks.models.base import utcnow
from gamedev_tasks.models.task import Task as TaskModel


def test_empty_store(db: Session):
    stats = compute_statistics(db, window_days=7)

    assert stats["total_projects"] == 0
    assert stats["completed_tasks"] == 0
    assert stats["tasks_by_category"] == {}
    assert len(stats["tasks_by_day"]) == 7
    assert set(stats["tasks_by_day"].values()) == {0}
    assert stats["total_tracked_seconds"] == 0
    assert stats["avg_completion_time_hours"] == 0
    assert stats["subtask_stats"] == {"total": 0, "completed": 0}

def test_status_and_category_counts(db: Session):
    project = create_project(db, {"name": "Stats"})
    create_task(db, {"title": "A", "project_id": project.id, "category": "design"})
    create_task(db, {"title": "B", "project_id": project.id, "category": "design", "status": "in-progress"})
    done = create_task(db, {"title": "C", "project_id": project.id, "category": "audio"})
    complete_task(db, done.id)

    stats = compute_statistics(db)

    assert stats["total_projects"] == 1
    assert stats["completed_tasks"] == 1
    assert stats["in_progress_tasks"] == 1
    assert stats["not_started_tasks"] == 1
    assert stats["tasks_by_category"] == {"design": 2, "audio": 1}

def test_tasks_by_day_window(db: Session):
    now = datetime(2024, 6, 15, 18, 0)
    recent = create_task(db, {"title": "Recent"})
    old = create_task(db, {"title": "Old"})
    for task, completed_at in ((recent, now - timedelta(days=1)), (old, now - timedelta(days=40))):
        task.status = "completed"
        task.created_at = completed_at - timedelta(hours=3)
        task.completed_at = completed_at
    db.commit()

    stats = compute_statistics(db, window_days=7, now=now)

    assert list(stats["tasks_by_day"]) == [f"2024-06-{day:02d}" for day in range(9, 16)]
    assert stats["tasks_by_day"]["2024-06-14"] == 1
    assert sum(stats["tasks_by_day"].values()) == 1

def test_avg_completion_time(db: Session):
    base = datetime(2024, 1, 1, 8, 0)
    for hours in (2, 5):
        task = create_task(db, {"title": f"{hours}h"})
        task.status = "completed"
        task.created_at = base
        task.completed_at = base + timedelta(hours=hours)
    db.commit()

    assert compute_statistics(db)["avg_completion_time_hours"] == 3.5

def test_tracked_seconds_excludes_open_logs(db: Session, task: TaskModel):
    other = create_task(db, {"title": "Other"})
    start = utcnow()
    with patch("gamedev_tasks.crud.time_log.utcnow", return_value=start):
        closed = start_time_tracking(db, task.id)
        start_time_tracking(db, other.id)
    with patch("gamedev_tasks.crud.time_log.utcnow", return_value=start + timedelta(seconds=42)):
        stop_time_tracking(db, closed.id)

    assert compute_statistics(db)["total_tracked_seconds"] == 42

def test_subtask_stats(db: Session, task: TaskModel):
    first = create_subtask(db, {"task_id": task.id, "title": "One"})
    create_subtask(db, {"task_id": task.id, "title": "Two"})
    update_subtask(db, first.id, {"is_completed": True})

    assert compute_statistics(db)["subtask_stats"] == {"total": 2, "completed": 1}
