# gamedev_tasks/crud/comment.py
from sqlalchemy.orm import Session
from typing import Optional, List
import logging

from gamedev_tasks.database import atomic
from gamedev_tasks.models.comment import Comment
from gamedev_tasks.models.task import Task
from gamedev_tasks.schemas.comment import CommentRead
from gamedev_tasks.core.settings import settings
from gamedev_tasks.crud.activity_log import record_activity
from gamedev_tasks.crud.sync_log import enqueue_change, snapshot

logger = logging.getLogger("GameDevTasks.Comments")

def get_comments_by_task(db: Session, task_id: int) -> List[Comment]:
    return (
        db.query(Comment)
        .filter(Comment.task_id == task_id)
        .order_by(Comment.created_at.asc(), Comment.id.asc())
        .all()
    )

def get_comment(db: Session, comment_id: int) -> Optional[Comment]:
    return db.get(Comment, comment_id)

def add_comment(db: Session, data: dict) -> Optional[Comment]:
    """
    Добавляет комментарий к задаче; в журнал пишется action=comment от имени автора.
    None, если задачи нет.
    """
    task = db.get(Task, data["task_id"])
    if not task:
        return None
    author = data.get("created_by") or settings.DEFAULT_USER_ID
    comment = Comment(task_id=task.id, content=data["content"], created_by=author)
    with atomic(db, "Database error while adding comment."):
        db.add(comment)
        db.flush()
        record_activity(
            db, "comment", f'Added comment to "{task.title}"',
            task_id=task.id, project_id=task.project_id, user_id=author,
        )
        enqueue_change(db, "comment", comment.id, "create", snapshot(CommentRead, comment))
    logger.info(f"Added comment {comment.id} to task {task.id} by '{author}'")
    return comment

def delete_comment(db: Session, comment_id: int, user_id: Optional[str] = None) -> bool:
    comment = get_comment(db, comment_id)
    if not comment:
        return False
    task = db.get(Task, comment.task_id)
    with atomic(db, "Database error while deleting comment."):
        db.delete(comment)
        db.flush()
        record_activity(
            db, "delete", f'Deleted comment from "{task.title if task else comment.task_id}"',
            task_id=comment.task_id, project_id=task.project_id if task else None, user_id=user_id,
        )
        enqueue_change(db, "comment", comment_id, "delete", None)
    logger.info(f"Deleted comment {comment_id}")
    return True
