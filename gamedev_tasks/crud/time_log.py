# gamedev_tasks/crud/time_log.py
from sqlalchemy.orm import Session
from typing import Optional, List
import logging

from gamedev_tasks.database import atomic
from gamedev_tasks.models.base import utcnow
from gamedev_tasks.models.time_log import TimeLog
from gamedev_tasks.models.task import Task
from gamedev_tasks.schemas.time_log import TimeLogRead
from gamedev_tasks.core.exceptions import TimeTrackingError
from gamedev_tasks.crud.activity_log import record_activity
from gamedev_tasks.crud.sync_log import enqueue_change, snapshot

logger = logging.getLogger("GameDevTasks.TimeTracking")

def format_duration(seconds: int) -> str:
    """
    3725 -> '1h 2m 5s'
    """
    hours, rest = divmod(int(seconds), 3600)
    minutes, secs = divmod(rest, 60)
    return f"{hours}h {minutes}m {secs}s"

def get_time_log(db: Session, time_log_id: int) -> Optional[TimeLog]:
    return db.get(TimeLog, time_log_id)

def get_time_logs_by_task(db: Session, task_id: int) -> List[TimeLog]:
    return (
        db.query(TimeLog)
        .filter(TimeLog.task_id == task_id)
        .order_by(TimeLog.start_time.asc(), TimeLog.id.asc())
        .all()
    )

def get_active_time_log(db: Session, task_id: int) -> Optional[TimeLog]:
    """
    Открытый (не остановленный) интервал по задаче, если есть.
    """
    return (
        db.query(TimeLog)
        .filter(TimeLog.task_id == task_id, TimeLog.end_time.is_(None))
        .first()
    )

def start_time_tracking(
    db: Session, task_id: int, description: Optional[str] = "", user_id: Optional[str] = None
) -> Optional[TimeLog]:
    """
    Запускает учёт времени по задаче: start_time=now, end_time=None, duration=0.

    У задачи может быть только один открытый интервал: повторный старт
    даёт TimeTrackingError. None, если задачи нет.
    """
    task = db.get(Task, task_id)
    if not task:
        return None
    running = get_active_time_log(db, task_id)
    if running:
        raise TimeTrackingError(f"Time tracking already running for task {task_id} (log {running.id}).")
    time_log = TimeLog(task_id=task_id, start_time=utcnow(), end_time=None, duration=0, description=description or "")
    with atomic(db, "Database error while starting time tracking."):
        db.add(time_log)
        db.flush()
        record_activity(
            db, "time-start", f'Started time tracking for "{task.title}"',
            task_id=task_id, project_id=task.project_id, user_id=user_id,
        )
        enqueue_change(db, "timeLog", time_log.id, "create", snapshot(TimeLogRead, time_log))
    logger.info(f"Started time log {time_log.id} for task {task_id}")
    return time_log

def stop_time_tracking(db: Session, time_log_id: int, user_id: Optional[str] = None) -> Optional[TimeLog]:
    """
    Останавливает интервал: end_time=now, duration = целые секунды (end - start), не меньше 0.
    None, если записи нет; TimeTrackingError, если она уже остановлена.
    """
    time_log = get_time_log(db, time_log_id)
    if not time_log:
        return None
    if time_log.end_time is not None:
        raise TimeTrackingError(f"Time log {time_log_id} is already stopped.")
    end_time = utcnow()
    duration = max(0, int((end_time - time_log.start_time).total_seconds()))
    task = db.get(Task, time_log.task_id)
    with atomic(db, "Database error while stopping time tracking."):
        time_log.end_time = end_time
        time_log.duration = duration
        db.flush()
        record_activity(
            db, "time-stop",
            f'Stopped time tracking for "{task.title if task else time_log.task_id}" ({format_duration(duration)})',
            task_id=time_log.task_id, project_id=task.project_id if task else None, user_id=user_id,
        )
        enqueue_change(db, "timeLog", time_log.id, "update", snapshot(TimeLogRead, time_log))
    logger.info(f"Stopped time log {time_log.id} after {format_duration(duration)}")
    return time_log
