"""
User Entity

Represents a registered account that owns todos.
"""

from datetime import datetime
from typing import Optional
from uuid import UUID, uuid4

from sqlmodel import Column, DateTime, Field, SQLModel


class User(SQLModel, table=True):
    """
    User entity - identity record for authentication and todo ownership.

    Business Rules:
    - Email must be unique across all users
    - `id` is internal to storage; `user_id` is the only identity exposed to clients
    - `user_id` never changes after creation
    - Password stored as bcrypt hash
    """

    __tablename__ = "users"

    id: Optional[int] = Field(default=None, primary_key=True)
    user_id: UUID = Field(default_factory=uuid4, unique=True, index=True, nullable=False)
    email: str = Field(unique=True, index=True, max_length=255)
    password_hash: str = Field(max_length=60)  # Bcrypt output is 60 chars
    username: str = Field(default="", max_length=255)

    # Timestamps
    created_at: datetime = Field(
        default_factory=lambda: datetime.utcnow(), sa_column=Column(DateTime)
    )
    updated_at: datetime = Field(
        default_factory=lambda: datetime.utcnow(), sa_column=Column(DateTime)
    )
