"""
Todo Use Case DTOs
"""

from datetime import datetime
from typing import Optional

from pydantic import BaseModel

from todoapp.domain.entities import Todo


class CreateTodoCommand(BaseModel):
    description: str


class UpdateTodoCommand(BaseModel):
    description: str
    completed: bool = False


class UpdateTodoPositionCommand(BaseModel):
    """
    Where to move a todo, as the keys of the neighbors the client saw.

    prev_pos=None means "first in list"; both None means "last in list".
    """

    prev_pos: Optional[int] = None
    next_pos: Optional[int] = None


class TodoResponse(BaseModel):
    """Todo as exposed to clients (owner id hidden)"""

    id: int
    description: str
    position: int
    completed: bool
    created_at: datetime
    updated_at: datetime

    @classmethod
    def from_entity(cls, todo: Todo) -> "TodoResponse":
        return cls(
            id=todo.id,
            description=todo.description,
            position=todo.position,
            completed=todo.completed,
            created_at=todo.created_at,
            updated_at=todo.updated_at,
        )
