"""TaskFlow Database Models"""
from taskflow.models.user import User
from taskflow.models.board import Board, DEFAULT_COLUMN_NAMES
from taskflow.models.column import BoardColumn
from taskflow.models.task import Task

__all__ = [
    "User",
    "Board",
    "BoardColumn",
    "Task",
    "DEFAULT_COLUMN_NAMES",
]
