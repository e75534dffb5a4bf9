"""Column endpoints, including task reordering within a column"""
from typing import List

from fastapi import APIRouter, Depends, Response, status
from sqlalchemy.orm import Session

from taskflow.database import get_db
from taskflow.dependencies import get_current_user_id
from taskflow.errors import DeniedError, NotFoundOrUnownedError
from taskflow.schemas import ColumnCreate, ColumnResponse, ColumnUpdate, TaskReorder
from taskflow.services import columns, tasks

router = APIRouter()


@router.post("", response_model=ColumnResponse)
def create_column(
    column_in: ColumnCreate,
    db: Session = Depends(get_db),
    current_user_id: int = Depends(get_current_user_id),
):
    """Add a column to a board the caller owns."""
    column = columns.create_column(db, column_in.name, column_in.board_id, current_user_id)
    if column is None:
        raise DeniedError("Board", column_in.board_id)
    return column


@router.put("/{column_id}", response_model=ColumnResponse)
def update_column(
    column_id: int,
    column_in: ColumnUpdate,
    db: Session = Depends(get_db),
    current_user_id: int = Depends(get_current_user_id),
):
    column = columns.rename_column(db, column_id, column_in.name, current_user_id)
    if column is None:
        raise NotFoundOrUnownedError("Column", column_id)
    return column


@router.delete("/{column_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_column(
    column_id: int,
    db: Session = Depends(get_db),
    current_user_id: int = Depends(get_current_user_id),
):
    """Delete a column and all of its tasks."""
    if not columns.delete_column(db, column_id, current_user_id):
        raise NotFoundOrUnownedError("Column", column_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)


@router.patch("/{column_id}/reorder", status_code=status.HTTP_204_NO_CONTENT)
def reorder_tasks(
    column_id: int,
    reorder_in: List[TaskReorder],
    db: Session = Depends(get_db),
    current_user_id: int = Depends(get_current_user_id),
):
    """Assign new positions to tasks of the column, all or nothing."""
    pairs = [(item.task_id, item.new_position) for item in reorder_in]
    if not tasks.reorder_tasks(db, column_id, pairs, current_user_id):
        raise NotFoundOrUnownedError("Column", column_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
