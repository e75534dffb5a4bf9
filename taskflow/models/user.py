"""
User Model
"""
from sqlalchemy import Column, Integer, String, DateTime
from sqlalchemy.sql import func
from taskflow.database import Base


class User(Base):
    __tablename__ = "users"

    id = Column(Integer, primary_key=True, index=True, autoincrement=True)
    name = Column(String(50), nullable=False)
    # Stored lower-cased; uniqueness is case-insensitive.
    email = Column(String(100), unique=True, index=True, nullable=False)
    password_hash = Column(String(255), nullable=False)
    created_at = Column(DateTime(timezone=True), server_default=func.now(), nullable=False)
