from abc import ABC, abstractmethod
from typing import Optional
from uuid import UUID

from todoapp.domain.entities import User


class IUserRepository(ABC):
    """User repository interface - application layer"""

    @abstractmethod
    async def get_by_email(self, email: str) -> Optional[User]:
        """Get user by email address"""
        pass

    @abstractmethod
    async def get_by_user_id(self, user_id: UUID) -> Optional[User]:
        """Get user by external UUID"""
        pass

    @abstractmethod
    async def get_by_user_id_for_update(self, user_id: UUID) -> Optional[User]:
        """Get user by external UUID and lock the row until the transaction ends"""
        pass

    @abstractmethod
    async def create(self, user: User) -> User:
        """Create a new user. Raises DuplicateKeyError if the email is taken."""
        pass

    @abstractmethod
    async def update_username(self, user_id: UUID, username: str) -> Optional[User]:
        """Set username. Returns None if no user matched."""
        pass

    @abstractmethod
    async def delete(self, user_id: UUID) -> bool:
        """Delete user and their todos. Returns True if a user was deleted."""
        pass
