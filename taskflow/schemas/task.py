"""Schemas for tasks"""
from typing import Optional

from pydantic import BaseModel, Field


class TaskCreate(BaseModel):
    title: str = Field(..., min_length=1, max_length=100)
    description: Optional[str] = Field(None, max_length=500)
    column_id: int = Field(..., alias="columnId")

    class Config:
        populate_by_name = True


class TaskUpdate(BaseModel):
    title: str = Field(..., min_length=1, max_length=100)
    description: Optional[str] = Field(None, max_length=500)


class TaskMove(BaseModel):
    new_column_id: int = Field(..., alias="newColumnId")

    class Config:
        populate_by_name = True


class TaskReorder(BaseModel):
    """A single task's requested position in a column reorder."""

    task_id: int = Field(..., alias="taskId")
    new_position: int = Field(..., ge=0, alias="newPosition")

    class Config:
        populate_by_name = True


class TaskResponse(BaseModel):
    id: int
    title: str
    description: Optional[str]
    position: int
    column_id: int = Field(..., alias="columnId")

    class Config:
        from_attributes = True
        populate_by_name = True
