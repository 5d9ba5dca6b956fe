# gamedev_tasks/api/comment.py
from fastapi import APIRouter, Depends, HTTPException, status
from sqlalchemy.orm import Session

from gamedev_tasks.schemas.comment import CommentCreate, CommentRead
from gamedev_tasks.schemas.response import SuccessResponse
from gamedev_tasks.crud.comment import add_comment, get_comment, delete_comment
from gamedev_tasks.dependencies import get_db, get_current_user_id

router = APIRouter(prefix="/comments", tags=["Comments"])

@router.post("/", response_model=CommentRead)
def create_new_comment(
    data: CommentCreate,
    db: Session = Depends(get_db),
    user_id: str = Depends(get_current_user_id),
):
    """
    Добавить комментарий к задаче. Автор по умолчанию — текущий пользователь (X-User-Id).
    """
    comment_data = data.model_dump()
    comment_data["created_by"] = comment_data.get("created_by") or user_id
    comment = add_comment(db, comment_data)
    if not comment:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=f"Task with id {data.task_id} not found.")
    return comment

@router.get("/{comment_id}", response_model=CommentRead)
def get_one_comment(comment_id: int, db: Session = Depends(get_db)):
    comment = get_comment(db, comment_id)
    if not comment:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Comment not found")
    return comment

@router.delete("/{comment_id}", response_model=SuccessResponse)
def delete_one_comment(
    comment_id: int,
    db: Session = Depends(get_db),
    user_id: str = Depends(get_current_user_id),
):
    if not delete_comment(db, comment_id, user_id=user_id):
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Comment not found")
    return SuccessResponse(result=comment_id, detail="Comment deleted")
