"""
Pydantic schemas for request/response validation
"""
from taskflow.schemas.user import UserRegister, UserLogin, RegisterResponse, Token
from taskflow.schemas.task import TaskCreate, TaskUpdate, TaskMove, TaskReorder, TaskResponse
from taskflow.schemas.column import ColumnCreate, ColumnUpdate, ColumnResponse
from taskflow.schemas.board import BoardCreate, BoardUpdate, BoardSummary, BoardResponse

__all__ = [
    "UserRegister",
    "UserLogin",
    "RegisterResponse",
    "Token",
    "TaskCreate",
    "TaskUpdate",
    "TaskMove",
    "TaskReorder",
    "TaskResponse",
    "ColumnCreate",
    "ColumnUpdate",
    "ColumnResponse",
    "BoardCreate",
    "BoardUpdate",
    "BoardSummary",
    "BoardResponse",
]
