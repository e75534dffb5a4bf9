"""Schemas for boards"""
from typing import List

from pydantic import BaseModel, Field

from taskflow.schemas.column import ColumnResponse


class BoardCreate(BaseModel):
    name: str = Field(..., min_length=1, max_length=50)


class BoardUpdate(BaseModel):
    name: str = Field(..., min_length=1, max_length=50)


class BoardSummary(BaseModel):
    id: int
    name: str
    user_id: int = Field(..., alias="userId")

    class Config:
        from_attributes = True
        populate_by_name = True


class BoardResponse(BoardSummary):
    columns: List[ColumnResponse] = Field(default_factory=list)
