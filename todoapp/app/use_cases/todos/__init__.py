"""
Todo Use Cases

CRUD and reordering of a user's todos. Every operation is scoped by the
authenticated user.
"""

from .create_todo_use_case import CreateTodoUseCase
from .list_todos_use_case import ListTodosUseCase
from .update_todo_use_case import UpdateTodoUseCase
from .update_todo_position_use_case import UpdateTodoPositionUseCase
from .delete_todo_use_case import DeleteTodoUseCase
from .dtos import (
    CreateTodoCommand,
    UpdateTodoCommand,
    UpdateTodoPositionCommand,
    TodoResponse,
)

__all__ = [
    # Use Cases
    "CreateTodoUseCase",
    "ListTodosUseCase",
    "UpdateTodoUseCase",
    "UpdateTodoPositionUseCase",
    "DeleteTodoUseCase",
    # DTOs
    "CreateTodoCommand",
    "UpdateTodoCommand",
    "UpdateTodoPositionCommand",
    "TodoResponse",
]
