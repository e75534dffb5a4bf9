"""Task lifecycle and position sequencing within columns.

Positions inside a column are kept as the contiguous sequence ``0..n-1``
after every create, reorder, move and delete. Each operation validates
everything it needs before touching any row and commits once, so a failed
call leaves the column exactly as it was.

Reads of a column's positions that feed a write lock the column row first
(``SELECT ... FOR UPDATE``). On backends with row locks this serialises
concurrent reorders and inserts on the same column; SQLite ignores it.
"""
import logging
from typing import Dict, Iterable, List, Optional, Tuple

from sqlalchemy import func
from sqlalchemy.orm import Session

from taskflow.models import BoardColumn, Task
from taskflow.services.ownership import get_owned_column, get_owned_task

logger = logging.getLogger(__name__)


def _lock_column(db: Session, column_id: int) -> None:
    db.query(BoardColumn.id).filter(BoardColumn.id == column_id).with_for_update().first()


def _tasks_in_column(db: Session, column_id: int) -> List[Task]:
    return (
        db.query(Task)
        .filter(Task.column_id == column_id)
        .order_by(Task.position.asc(), Task.id.asc())
        .all()
    )


def _next_position(db: Session, column_id: int) -> int:
    max_position = db.query(func.max(Task.position)).filter(Task.column_id == column_id).scalar()
    return 0 if max_position is None else max_position + 1


def _compact(tasks: List[Task]) -> None:
    """Renumber already-ordered tasks to 0..n-1."""
    for index, task in enumerate(tasks):
        if task.position != index:
            task.position = index


def create_task(
    db: Session, title: str, description: Optional[str], column_id: int, user_id: int,
) -> Optional[Task]:
    """Append a task to the end of the column. ``None`` means the column is not the caller's."""
    column = get_owned_column(db, user_id, column_id)
    if column is None:
        logger.info("Task create denied", extra={"column_id": column_id, "user_id": user_id})
        return None

    _lock_column(db, column.id)
    task = Task(
        title=title,
        description=description,
        column_id=column.id,
        position=_next_position(db, column.id),
    )
    db.add(task)
    db.commit()
    db.refresh(task)
    return task


def update_task(
    db: Session, task_id: int, title: str, description: Optional[str], user_id: int,
) -> Optional[Task]:
    task = get_owned_task(db, user_id, task_id)
    if task is None:
        return None

    task.title = title
    task.description = description
    db.commit()
    db.refresh(task)
    return task


def delete_task(db: Session, task_id: int, user_id: int) -> bool:
    """Remove the task and close the gap it leaves in its column."""
    task = get_owned_task(db, user_id, task_id)
    if task is None:
        return False

    column_id = task.column_id
    _lock_column(db, column_id)
    db.delete(task)
    db.flush()
    _compact(_tasks_in_column(db, column_id))
    db.commit()

    logger.info("Task deleted", extra={"task_id": task_id, "column_id": column_id, "user_id": user_id})
    return True


def reorder_tasks(
    db: Session, column_id: int, reorder_list: Iterable[Tuple[int, int]], user_id: int,
) -> bool:
    """Apply ``(task_id, new_position)`` pairs to a column as a single unit.

    Fails without any effect when the column is not the caller's, when a
    task id is not in the column or appears twice, or when the requested
    positions collide with each other or with the tasks left unmentioned.
    The resulting order is then renumbered to ``0..n-1``, so a full
    permutation of ``0..n-1`` is stored exactly as submitted.
    """
    column = get_owned_column(db, user_id, column_id)
    if column is None:
        return False

    _lock_column(db, column.id)
    tasks_in_column = _tasks_in_column(db, column.id)
    tasks_by_id = {task.id: task for task in tasks_in_column}

    requested: Dict[int, int] = {}
    for task_id, new_position in reorder_list:
        if task_id not in tasks_by_id or task_id in requested or new_position < 0:
            logger.info(
                f"Reorder rejected for task {task_id}",
                extra={"column_id": column_id, "user_id": user_id},
            )
            return False
        requested[task_id] = new_position

    final_positions = {
        task.id: requested.get(task.id, task.position) for task in tasks_in_column
    }
    if len(set(final_positions.values())) != len(final_positions):
        logger.info("Reorder rejected: colliding positions", extra={"column_id": column_id, "user_id": user_id})
        return False

    _compact(sorted(tasks_in_column, key=lambda task: final_positions[task.id]))
    db.commit()
    return True


def move_task_to_column(db: Session, task_id: int, new_column_id: int, user_id: int) -> bool:
    """Move a task to the end of another column the caller also owns."""
    task = get_owned_task(db, user_id, task_id)
    if task is None:
        return False

    destination = get_owned_column(db, user_id, new_column_id)
    if destination is None:
        logger.info(
            "Task move denied: destination column not owned",
            extra={"task_id": task_id, "column_id": new_column_id, "user_id": user_id},
        )
        return False

    source_column_id = task.column_id
    if source_column_id == destination.id:
        return True

    # Always lock in ascending id order.
    for column_id in sorted((source_column_id, destination.id)):
        _lock_column(db, column_id)

    task.position = _next_position(db, destination.id)
    task.column = destination
    db.flush()
    _compact(_tasks_in_column(db, source_column_id))
    db.commit()

    logger.info(
        f"Task moved from column {source_column_id}",
        extra={"task_id": task_id, "column_id": destination.id, "user_id": user_id},
    )
    return True
