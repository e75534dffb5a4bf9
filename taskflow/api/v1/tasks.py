"""Task endpoints"""
from fastapi import APIRouter, Depends, Response, status
from sqlalchemy.orm import Session

from taskflow.database import get_db
from taskflow.dependencies import get_current_user_id
from taskflow.errors import DeniedError, NotFoundOrUnownedError
from taskflow.schemas import TaskCreate, TaskMove, TaskResponse, TaskUpdate
from taskflow.services import tasks

router = APIRouter()


@router.post("", response_model=TaskResponse)
def create_task(
    task_in: TaskCreate,
    db: Session = Depends(get_db),
    current_user_id: int = Depends(get_current_user_id),
):
    """Append a task to a column the caller owns."""
    task = tasks.create_task(db, task_in.title, task_in.description, task_in.column_id, current_user_id)
    if task is None:
        raise DeniedError("Column", task_in.column_id)
    return task


@router.put("/{task_id}", response_model=TaskResponse)
def update_task(
    task_id: int,
    task_in: TaskUpdate,
    db: Session = Depends(get_db),
    current_user_id: int = Depends(get_current_user_id),
):
    task = tasks.update_task(db, task_id, task_in.title, task_in.description, current_user_id)
    if task is None:
        raise NotFoundOrUnownedError("Task", task_id)
    return task


@router.patch("/{task_id}/move", status_code=status.HTTP_204_NO_CONTENT)
def move_task(
    task_id: int,
    move_in: TaskMove,
    db: Session = Depends(get_db),
    current_user_id: int = Depends(get_current_user_id),
):
    """Move a task to the end of another column."""
    if not tasks.move_task_to_column(db, task_id, move_in.new_column_id, current_user_id):
        raise NotFoundOrUnownedError("Task", task_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)


@router.delete("/{task_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_task(
    task_id: int,
    db: Session = Depends(get_db),
    current_user_id: int = Depends(get_current_user_id),
):
    if not tasks.delete_task(db, task_id, current_user_id):
        raise NotFoundOrUnownedError("Task", task_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
