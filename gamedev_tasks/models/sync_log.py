# gamedev_tasks/models/sync_log.py
from datetime import datetime
from sqlalchemy import Column, Integer, String, DateTime, Boolean, JSON
from gamedev_tasks.models.base import Base, utcnow

class SyncLogEntry(Base):
    """
    SyncLogEntry — локальная мутация, ожидающая выгрузки на сервер (offline-очередь).
    data — полный снимок сущности после мутации, None для delete.
    """
    __tablename__ = "sync_log"

    id: int = Column(Integer, primary_key=True, autoincrement=True)
    entity_type: str = Column(String(16), nullable=False)
    entity_id: str = Column(String(64), nullable=False)
    action: str = Column(String(16), nullable=False)
    timestamp: datetime = Column(DateTime, nullable=False, default=utcnow)
    synced: bool = Column(Boolean, nullable=False, default=False, index=True)
    data: dict = Column(JSON, nullable=True)

    def __repr__(self):
        return (
            f"<SyncLogEntry(id={self.id}, {self.entity_type}#{self.entity_id} "
            f"{self.action}, synced={self.synced})>"
        )
