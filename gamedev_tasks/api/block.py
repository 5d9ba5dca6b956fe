# gamedev_tasks/api/block.py
from fastapi import APIRouter, Depends, HTTPException, status
from sqlalchemy.orm import Session
import logging

from gamedev_tasks.schemas.block import BlockCreate, BlockUpdate, BlockRead
from gamedev_tasks.schemas.response import SuccessResponse
from gamedev_tasks.crud.block import create_block, get_block, update_block, delete_block
from gamedev_tasks.crud.project import get_project
from gamedev_tasks.core.exceptions import ProjectNotFound
from gamedev_tasks.dependencies import get_db, get_current_user_id

router = APIRouter(prefix="/blocks", tags=["Blocks"])
logger = logging.getLogger("GameDevTasks.BlocksAPI")

@router.post("/", response_model=BlockRead)
def create_new_block(
    data: BlockCreate,
    db: Session = Depends(get_db),
    user_id: str = Depends(get_current_user_id),
):
    """
    Создать kanban-колонку. Повторный id — 409.
    """
    if data.project_id is not None and not get_project(db, data.project_id):
        raise ProjectNotFound(f"Project with id {data.project_id} not found.")
    return create_block(db, data.model_dump(), user_id=user_id)

@router.get("/{block_id}", response_model=BlockRead)
def get_one_block(block_id: str, db: Session = Depends(get_db)):
    block = get_block(db, block_id)
    if not block:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Block not found")
    return block

@router.patch("/{block_id}", response_model=BlockRead)
def update_one_block(
    block_id: str,
    data: BlockUpdate,
    db: Session = Depends(get_db),
    user_id: str = Depends(get_current_user_id),
):
    block = update_block(db, block_id, data.model_dump(exclude_unset=True), user_id=user_id)
    if not block:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Block not found")
    return block

@router.delete("/{block_id}", response_model=SuccessResponse)
def delete_one_block(
    block_id: str,
    db: Session = Depends(get_db),
    user_id: str = Depends(get_current_user_id),
):
    """
    Удалить колонку; её задачи остаются без block_id.
    """
    if not delete_block(db, block_id, user_id=user_id):
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Block not found")
    return SuccessResponse(result=block_id, detail="Block deleted")
