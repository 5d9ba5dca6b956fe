# gamedev_tasks/crud/statistics.py
from sqlalchemy.orm import Session
from datetime import datetime, timedelta
from typing import Optional, Dict, Any
import logging

from gamedev_tasks.models.base import utcnow
from gamedev_tasks.models.project import Project
from gamedev_tasks.models.task import Task
from gamedev_tasks.models.subtask import Subtask
from gamedev_tasks.models.time_log import TimeLog
from gamedev_tasks.core.settings import settings

logger = logging.getLogger("GameDevTasks.Statistics")

def compute_statistics(
    db: Session,
    window_days: Optional[int] = None,
    now: Optional[datetime] = None,
) -> Dict[str, Any]:
    """
    Пересчитывает статистику полным сканом projects / tasks / subtasks / time_logs.

    tasks_by_day содержит каждый день окна (последние window_days дней, включая
    сегодня), дни без завершений — с нулём. Незакрытые интервалы учёта времени
    в total_tracked_seconds не входят.
    """
    window_days = window_days or settings.STATS_WINDOW_DAYS
    now = now or utcnow()

    projects = db.query(Project).all()
    tasks = db.query(Task).all()
    subtasks = db.query(Subtask).all()
    time_logs = db.query(TimeLog).all()

    by_status = {"completed": 0, "in-progress": 0, "not-started": 0}
    tasks_by_category: Dict[str, int] = {}
    for task in tasks:
        by_status[task.status] = by_status.get(task.status, 0) + 1
        tasks_by_category[task.category] = tasks_by_category.get(task.category, 0) + 1

    today = now.date()
    tasks_by_day = {
        (today - timedelta(days=offset)).isoformat(): 0
        for offset in range(window_days - 1, -1, -1)
    }
    completion_hours = []
    for task in tasks:
        if task.status != "completed" or task.completed_at is None:
            continue
        day = task.completed_at.date().isoformat()
        if day in tasks_by_day:
            tasks_by_day[day] += 1
        completion_hours.append((task.completed_at - task.created_at).total_seconds() / 3600)

    total_tracked_seconds = sum(log.duration for log in time_logs if log.end_time is not None)
    avg_completion = round(sum(completion_hours) / len(completion_hours), 2) if completion_hours else 0

    stats = {
        "total_projects": len(projects),
        "completed_tasks": by_status["completed"],
        "in_progress_tasks": by_status["in-progress"],
        "not_started_tasks": by_status["not-started"],
        "tasks_by_category": tasks_by_category,
        "tasks_by_day": tasks_by_day,
        "total_tracked_seconds": total_tracked_seconds,
        "avg_completion_time_hours": avg_completion,
        "subtask_stats": {
            "total": len(subtasks),
            "completed": sum(1 for s in subtasks if s.is_completed),
        },
    }
    logger.debug(f"Computed statistics over {len(tasks)} tasks, window={window_days}d")
    return stats
