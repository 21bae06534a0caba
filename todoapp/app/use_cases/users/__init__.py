"""
User Management Use Cases
"""

from .get_me_use_case import GetMeUseCase
from .update_username_use_case import UpdateUsernameUseCase
from .delete_user_use_case import DeleteUserUseCase
from .dtos import UserProfile

__all__ = [
    "GetMeUseCase",
    "UpdateUsernameUseCase",
    "DeleteUserUseCase",
    "UserProfile",
]
