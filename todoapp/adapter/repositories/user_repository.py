from datetime import datetime
from typing import Optional
from uuid import UUID

from sqlalchemy import delete, update
from sqlalchemy.exc import IntegrityError
from sqlmodel import select
from sqlmodel.ext.asyncio.session import AsyncSession

from todoapp.app.repositories.user_repository import IUserRepository
from todoapp.domain.entities import Todo, User
from todoapp.domain.errors import DuplicateKeyError


class UserRepository(IUserRepository):
    """User repository implementation using SQLModel"""

    def __init__(self, session: AsyncSession):
        self.session = session

    async def get_by_email(self, email: str) -> Optional[User]:
        """Get user by email address"""
        stmt = select(User).where(User.email == email)
        result = await self.session.exec(stmt)
        return result.one_or_none()

    async def get_by_user_id(self, user_id: UUID) -> Optional[User]:
        """Get user by external UUID"""
        stmt = select(User).where(User.user_id == user_id)
        result = await self.session.exec(stmt)
        return result.one_or_none()

    async def get_by_user_id_for_update(self, user_id: UUID) -> Optional[User]:
        """
        Get user by external UUID with a row lock.

        The lock serializes list mutations of one user. SQLite ignores
        FOR UPDATE, but it only allows one writer at a time anyway.
        """
        stmt = select(User).where(User.user_id == user_id).with_for_update()
        result = await self.session.exec(stmt)
        return result.one_or_none()

    async def create(self, user: User) -> User:
        """Create a new user"""
        self.session.add(user)
        try:
            await self.session.flush()
        except IntegrityError as e:
            raise DuplicateKeyError(str(e.orig)) from e
        await self.session.refresh(user)
        return user

    async def update_username(self, user_id: UUID, username: str) -> Optional[User]:
        """Set username, None if no user matched"""
        stmt = (
            update(User)
            .where(User.user_id == user_id)
            .values(username=username, updated_at=datetime.utcnow())
        )
        result = await self.session.execute(stmt)
        await self.session.flush()
        if result.rowcount == 0:
            return None

        stmt = (
            select(User)
            .where(User.user_id == user_id)
            .execution_options(populate_existing=True)
        )
        result = await self.session.exec(stmt)
        return result.one_or_none()

    async def delete(self, user_id: UUID) -> bool:
        """Delete user and their todos, under the same owner lock as todo writes"""
        user = await self.get_by_user_id_for_update(user_id)
        if user is None:
            return False

        await self.session.execute(delete(Todo).where(Todo.user_id == user.id))
        result = await self.session.execute(delete(User).where(User.id == user.id))
        await self.session.flush()
        return result.rowcount > 0
