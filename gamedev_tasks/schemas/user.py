# gamedev_tasks/schemas/user.py
from pydantic import BaseModel, Field, EmailStr
from typing import Optional

class UserBase(BaseModel):
    """
    UserBase — участник команды (для назначения задач).
    """
    name: str = Field(..., min_length=1, examples=["Jane Doe"], description="Имя")
    email: Optional[EmailStr] = Field(None, examples=["jane@studio.dev"], description="Email")
    avatar: Optional[str] = Field(None, description="URL аватара")

class UserCreate(UserBase):
    """
    UserCreate — id задаётся клиентом (внешняя идентичность).
    """
    id: str = Field(..., min_length=1, max_length=64, examples=["jane"])

class UserRead(UserCreate):
    class Config:
        from_attributes = True
