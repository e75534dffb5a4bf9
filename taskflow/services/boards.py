"""Board lifecycle: listing, loading, creation with default columns, rename, delete."""
import logging
from typing import List, Optional

from sqlalchemy.orm import Session, selectinload

from taskflow.models import Board, BoardColumn, Task, DEFAULT_COLUMN_NAMES
from taskflow.services.ownership import get_owned_board

logger = logging.getLogger(__name__)


def list_boards(db: Session, user_id: int) -> List[Board]:
    """Return the user's boards, newest first."""
    return (
        db.query(Board)
        .filter(Board.user_id == user_id)
        .order_by(Board.id.desc())
        .all()
    )


def get_board(db: Session, board_id: int, user_id: int) -> Optional[Board]:
    """Return the board with its columns and their position-ordered tasks."""
    return (
        db.query(Board)
        .options(selectinload(Board.columns).selectinload(BoardColumn.tasks))
        .filter(Board.id == board_id, Board.user_id == user_id)
        .first()
    )


def create_board(db: Session, name: str, user_id: int) -> Board:
    board = Board(name=name, user_id=user_id)
    # Column ids are assigned in list order, which fixes the display order.
    board.columns = [BoardColumn(name=column_name) for column_name in DEFAULT_COLUMN_NAMES]
    db.add(board)
    db.commit()
    db.refresh(board)

    logger.info("Board created", extra={"board_id": board.id, "user_id": user_id})
    return board


def rename_board(db: Session, board_id: int, new_name: str, user_id: int) -> Optional[Board]:
    board = get_owned_board(db, user_id, board_id)
    if board is None:
        return None

    board.name = new_name
    db.commit()
    db.refresh(board)
    return board


def delete_board(db: Session, board_id: int, user_id: int) -> bool:
    """Delete the board, its columns and their tasks in one commit."""
    board = get_owned_board(db, user_id, board_id)
    if board is None:
        return False

    columns = db.query(BoardColumn).filter(BoardColumn.board_id == board.id).all()
    column_ids = [column.id for column in columns]
    tasks = db.query(Task).filter(Task.column_id.in_(column_ids)).all() if column_ids else []

    for task in tasks:
        db.delete(task)
    for column in columns:
        db.delete(column)
    db.delete(board)
    db.commit()

    logger.info(
        f"Board deleted with {len(columns)} column(s) and {len(tasks)} task(s)",
        extra={"board_id": board_id, "user_id": user_id},
    )
    return True
