"""
Authentication Use Cases

Registration, login, logout and per-request authentication.
"""

from .register_use_case import RegisterUseCase
from .login_use_case import LoginUseCase
from .logout_use_case import LogoutUseCase
from .authenticate_use_case import AuthenticateUseCase
from .dtos import (
    RegisterCommand,
    RegisterResponse,
    LoginResult,
    AuthenticatedUser,
)

__all__ = [
    # Use Cases
    "RegisterUseCase",
    "LoginUseCase",
    "LogoutUseCase",
    "AuthenticateUseCase",
    # DTOs
    "RegisterCommand",
    "RegisterResponse",
    "LoginResult",
    "AuthenticatedUser",
]
