# gamedev_tasks/crud/sync_log.py
from sqlalchemy.orm import Session
from pydantic import BaseModel
from typing import Optional, List, Any, Callable, Type, Union
import logging

from gamedev_tasks.database import atomic
from gamedev_tasks.models.sync_log import SyncLogEntry
from gamedev_tasks.core.settings import settings

logger = logging.getLogger("GameDevTasks.SyncLog")

def snapshot(schema: Type[BaseModel], obj: Any) -> dict:
    """
    JSON-снимок ORM-объекта через его Read-схему (для поля data в очереди).
    """
    return schema.model_validate(obj).model_dump(mode="json")

def enqueue_change(
    db: Session,
    entity_type: str,
    entity_id: Union[int, str],
    action: str,
    data: Optional[dict],
) -> SyncLogEntry:
    """
    Ставит несинхронизированную запись в offline-очередь.
    Только flush: коммитится вместе с мутацией, которая её породила.
    """
    entry = SyncLogEntry(
        entity_type=entity_type,
        entity_id=str(entity_id),
        action=action,
        synced=False,
        data=data,
    )
    db.add(entry)
    db.flush()
    return entry

def list_unsynced(db: Session) -> List[SyncLogEntry]:
    """
    Все несинхронизированные изменения в порядке вставки.
    """
    return (
        db.query(SyncLogEntry)
        .filter(SyncLogEntry.synced == False)
        .order_by(SyncLogEntry.id.asc())
        .all()
    )

def get_all_sync_entries(db: Session) -> List[SyncLogEntry]:
    return db.query(SyncLogEntry).order_by(SyncLogEntry.id.asc()).all()

def prune_synced(db: Session, keep: Optional[int] = None) -> int:
    """
    Удаляет самые старые синхронизированные записи сверх лимита хранения.
    Несинхронизированные записи не удаляются никогда.
    """
    keep = settings.SYNC_LOG_RETENTION if keep is None else keep
    stale_ids = [
        row.id for row in
        db.query(SyncLogEntry.id)
        .filter(SyncLogEntry.synced == True)
        .order_by(SyncLogEntry.id.desc())
        .offset(keep)
        .all()
    ]
    if not stale_ids:
        return 0
    with atomic(db, "Database error while pruning sync log."):
        db.query(SyncLogEntry).filter(SyncLogEntry.id.in_(stale_ids)).delete(synchronize_session=False)
    logger.info(f"Pruned {len(stale_ids)} synced sync-log entries (keep={keep})")
    return len(stale_ids)

def mark_synced(db: Session, entry_id: int) -> bool:
    """
    Помечает запись синхронизированной. False, если записи нет.
    """
    entry = db.get(SyncLogEntry, entry_id)
    if not entry:
        return False
    with atomic(db, "Database error while marking sync entry."):
        entry.synced = True
    logger.info(f"Marked sync entry {entry_id} ({entry.entity_type}#{entry.entity_id}) as synced")
    prune_synced(db)
    return True

def drain_unsynced(db: Session, push: Callable[[SyncLogEntry], None]) -> int:
    """
    Контракт потребителя очереди: push вызывается для каждой несинхронизированной
    записи по порядку; после успешного push запись помечается synced.
    Первое исключение из push пробрасывается, уже отправленные записи остаются synced.
    """
    pushed = 0
    for entry in list_unsynced(db):
        push(entry)
        mark_synced(db, entry.id)
        pushed += 1
    logger.info(f"Drained {pushed} sync-log entries")
    return pushed
