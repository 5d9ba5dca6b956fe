# gamedev_tasks/models/block.py
from sqlalchemy import Column, Integer, String, ForeignKey
from gamedev_tasks.models.base import Base

class Block(Base):
    """
    Block — kanban-колонка проекта. Ключ строковый (задаётся клиентом или генерируется).
    """
    __tablename__ = "blocks"

    id: str = Column(String(64), primary_key=True)
    title: str = Column(String(128), nullable=False)
    order: int = Column(Integer, nullable=False, default=0)
    color: str = Column(String(16), nullable=False, default="#6200EA")
    project_id: int = Column(Integer, ForeignKey("projects.id", ondelete="CASCADE"), nullable=True, index=True)

    def __repr__(self):
        return f"<Block(id='{self.id}', title='{self.title}', project_id={self.project_id})>"
