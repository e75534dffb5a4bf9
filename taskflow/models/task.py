"""
Task Model
"""
from sqlalchemy import Column, Integer, String, ForeignKey
from sqlalchemy.orm import relationship
from taskflow.database import Base


class Task(Base):
    __tablename__ = "tasks"

    id = Column(Integer, primary_key=True, index=True, autoincrement=True)
    title = Column(String(100), nullable=False)
    description = Column(String(500), nullable=True)
    position = Column(Integer, default=0, nullable=False)
    column_id = Column(Integer, ForeignKey("columns.id"), nullable=False, index=True)

    # Relationships
    column = relationship("BoardColumn", back_populates="tasks")
