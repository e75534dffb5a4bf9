"""Schemas for board columns"""
from typing import List

from pydantic import BaseModel, Field

from taskflow.schemas.task import TaskResponse


class ColumnCreate(BaseModel):
    name: str = Field(..., min_length=1, max_length=50)
    board_id: int = Field(..., alias="boardId")

    class Config:
        populate_by_name = True


class ColumnUpdate(BaseModel):
    name: str = Field(..., min_length=1, max_length=50)


class ColumnResponse(BaseModel):
    id: int
    name: str
    board_id: int = Field(..., alias="boardId")
    tasks: List[TaskResponse] = Field(default_factory=list)

    class Config:
        from_attributes = True
        populate_by_name = True
