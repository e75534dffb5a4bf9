"""Ownership resolution along the Task -> Column -> Board -> owner chain.

Each lookup walks the chain with explicit queries and compares the board's
``user_id`` with the acting user. A missing entity and an entity owned by
someone else give the same answer, so callers cannot probe which ids exist.
"""
from typing import Optional

from sqlalchemy.orm import Session

from taskflow.models import Board, BoardColumn, Task


def get_owned_board(db: Session, user_id: int, board_id: int) -> Optional[Board]:
    board = db.get(Board, board_id)
    if board is None or board.user_id != user_id:
        return None
    return board


def get_owned_column(db: Session, user_id: int, column_id: int) -> Optional[BoardColumn]:
    column = db.get(BoardColumn, column_id)
    if column is None:
        return None
    if get_owned_board(db, user_id, column.board_id) is None:
        return None
    return column


def get_owned_task(db: Session, user_id: int, task_id: int) -> Optional[Task]:
    task = db.get(Task, task_id)
    if task is None:
        return None
    if get_owned_column(db, user_id, task.column_id) is None:
        return None
    return task


def owns_board(db: Session, user_id: int, board_id: int) -> bool:
    return get_owned_board(db, user_id, board_id) is not None


def owns_column(db: Session, user_id: int, column_id: int) -> bool:
    return get_owned_column(db, user_id, column_id) is not None


def owns_task(db: Session, user_id: int, task_id: int) -> bool:
    return get_owned_task(db, user_id, task_id) is not None
