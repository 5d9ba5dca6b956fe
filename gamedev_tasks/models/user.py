# gamedev_tasks/models/user.py
from sqlalchemy import Column, String
from gamedev_tasks.models.base import Base

class User(Base):
    """
    User — участник команды. id — внешний строковый идентификатор.
    """
    __tablename__ = "users"

    id: str = Column(String(64), primary_key=True)
    name: str = Column(String(128), nullable=False)
    email: str = Column(String(255), nullable=True)
    avatar: str = Column(String(512), nullable=True)

    def __repr__(self):
        return f"<User(id='{self.id}', name='{self.name}')>"
