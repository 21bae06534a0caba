"""
Todo Entity

A single item in a user's ordered todo list.
"""

from datetime import datetime
from typing import Optional

from sqlalchemy import BigInteger
from sqlmodel import Column, DateTime, Field, Index, SQLModel


class Todo(SQLModel, table=True):
    """
    Todo entity - belongs to exactly one user.

    Business Rules:
    - Every read/update/delete is scoped by the owning internal user id
    - `position` is a sparse ordering key, lists are sorted by (position, id)
    - Siblings of the same user never share a position
    """

    __tablename__ = "todos"

    id: Optional[int] = Field(default=None, primary_key=True)
    user_id: int = Field(foreign_key="users.id", nullable=False, index=True)
    description: str = Field(max_length=1000)
    position: int = Field(sa_column=Column(BigInteger, nullable=False))
    completed: bool = Field(default=False)

    # Timestamps
    created_at: datetime = Field(
        default_factory=lambda: datetime.utcnow(), sa_column=Column(DateTime)
    )
    updated_at: datetime = Field(
        default_factory=lambda: datetime.utcnow(), sa_column=Column(DateTime)
    )

    __table_args__ = (Index("idx_todo_user_position", "user_id", "position"),)
