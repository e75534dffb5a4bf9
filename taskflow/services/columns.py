"""Column lifecycle inside an owned board."""
import logging
from typing import Optional

from sqlalchemy.orm import Session

from taskflow.models import BoardColumn, Task
from taskflow.services.ownership import get_owned_board, get_owned_column

logger = logging.getLogger(__name__)


def create_column(db: Session, name: str, board_id: int, user_id: int) -> Optional[BoardColumn]:
    """Add an empty column to the board. ``None`` means the board is not the caller's."""
    if get_owned_board(db, user_id, board_id) is None:
        logger.info("Column create denied", extra={"board_id": board_id, "user_id": user_id})
        return None

    column = BoardColumn(name=name, board_id=board_id)
    db.add(column)
    db.commit()
    db.refresh(column)
    return column


def rename_column(db: Session, column_id: int, new_name: str, user_id: int) -> Optional[BoardColumn]:
    column = get_owned_column(db, user_id, column_id)
    if column is None:
        return None

    column.name = new_name
    db.commit()
    db.refresh(column)
    return column


def delete_column(db: Session, column_id: int, user_id: int) -> bool:
    """Delete the column and every task in it."""
    column = get_owned_column(db, user_id, column_id)
    if column is None:
        return False

    tasks = db.query(Task).filter(Task.column_id == column.id).all()
    for task in tasks:
        db.delete(task)
    db.delete(column)
    db.commit()

    logger.info(
        f"Column deleted with {len(tasks)} task(s)",
        extra={"column_id": column_id, "user_id": user_id},
    )
    return True
