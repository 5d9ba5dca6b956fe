# gamedev_tasks/crud/block.py
from sqlalchemy.orm import Session
from typing import Optional, List
import logging
import uuid

from gamedev_tasks.database import atomic
from gamedev_tasks.models.block import Block
from gamedev_tasks.models.task import Task
from gamedev_tasks.schemas.block import BlockRead
from gamedev_tasks.schemas.task import TaskRead
from gamedev_tasks.core.exceptions import BlockAlreadyExists
from gamedev_tasks.core.constants import DEFAULT_COLOR
from gamedev_tasks.crud.activity_log import record_activity
from gamedev_tasks.crud.sync_log import enqueue_change, snapshot

logger = logging.getLogger("GameDevTasks.Blocks")

def get_blocks_by_project(db: Session, project_id: int) -> List[Block]:
    return (
        db.query(Block)
        .filter(Block.project_id == project_id)
        .order_by(Block.order.asc())
        .all()
    )

def get_block(db: Session, block_id: str) -> Optional[Block]:
    return db.get(Block, block_id)

def create_block(db: Session, data: dict, user_id: Optional[str] = None) -> Block:
    """
    Создаёт kanban-колонку; если id не передан — генерируется.
    Занятый id: BlockAlreadyExists.
    """
    if data.get("id") and get_block(db, data["id"]):
        raise BlockAlreadyExists(f"Block '{data['id']}' already exists.")
    block = Block(
        id=data.get("id") or uuid.uuid4().hex,
        title=data["title"],
        order=data.get("order", 0),
        color=data.get("color") or DEFAULT_COLOR,
        project_id=data.get("project_id"),
    )
    with atomic(db, "Database error while creating block."):
        db.add(block)
        db.flush()
        record_activity(db, "create", f"Created block: {block.title}", project_id=block.project_id, user_id=user_id)
        enqueue_change(db, "block", block.id, "create", snapshot(BlockRead, block))
    logger.info(f"Created block '{block.id}' for project {block.project_id}")
    return block

def update_block(db: Session, block_id: str, data: dict, user_id: Optional[str] = None) -> Optional[Block]:
    block = get_block(db, block_id)
    if not block:
        return None
    with atomic(db, "Database error while updating block."):
        for field in ("title", "order", "color", "project_id"):
            if field in data and (data[field] is not None or field == "project_id"):
                setattr(block, field, data[field])
        db.flush()
        record_activity(db, "update", f"Updated block: {block.title}", project_id=block.project_id, user_id=user_id)
        enqueue_change(db, "block", block.id, "update", snapshot(BlockRead, block))
    logger.info(f"Updated block '{block.id}'")
    return block

def delete_block(db: Session, block_id: str, user_id: Optional[str] = None) -> bool:
    """
    Удаляет колонку; задачи из неё остаются, но теряют block_id
    (каждая такая задача уходит в sync-очередь как update).
    """
    block = get_block(db, block_id)
    if not block:
        return False
    title, project_id = block.title, block.project_id
    with atomic(db, "Database error while deleting block."):
        for task in db.query(Task).filter(Task.block_id == block_id).all():
            task.block_id = None
            db.flush()
            enqueue_change(db, "task", task.id, "update", snapshot(TaskRead, task))
        db.delete(block)
        db.flush()
        record_activity(db, "delete", f"Deleted block: {title}", project_id=project_id, user_id=user_id)
        enqueue_change(db, "block", block_id, "delete", None)
    logger.info(f"Deleted block '{block_id}'")
    return True
