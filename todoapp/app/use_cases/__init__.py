"""
Use Cases

Organized into domain folders:
- auth/: Registration, login, logout, request authentication
- users/: Current user profile
- todos/: Todo CRUD and reordering
"""

from .auth import (
    RegisterUseCase,
    LoginUseCase,
    LogoutUseCase,
    AuthenticateUseCase,
)
from .users import (
    GetMeUseCase,
    UpdateUsernameUseCase,
    DeleteUserUseCase,
)
from .todos import (
    CreateTodoUseCase,
    ListTodosUseCase,
    UpdateTodoUseCase,
    UpdateTodoPositionUseCase,
    DeleteTodoUseCase,
)

__all__ = [
    # Auth
    "RegisterUseCase",
    "LoginUseCase",
    "LogoutUseCase",
    "AuthenticateUseCase",
    # Users
    "GetMeUseCase",
    "UpdateUsernameUseCase",
    "DeleteUserUseCase",
    # Todos
    "CreateTodoUseCase",
    "ListTodosUseCase",
    "UpdateTodoUseCase",
    "UpdateTodoPositionUseCase",
    "DeleteTodoUseCase",
]
