from datetime import datetime
from typing import Dict, List, Optional

from sqlalchemy import delete, func, update
from sqlmodel import col, select
from sqlmodel.ext.asyncio.session import AsyncSession

from todoapp.app.repositories.todo_repository import ITodoRepository
from todoapp.domain.entities import Todo


def escape_like(keyword: str) -> str:
    """Make LIKE wildcards in user input match literally (escape char: backslash)"""
    return keyword.replace("\\", "\\\\").replace("%", "\\%").replace("_", "\\_")


class TodoRepository(ITodoRepository):
    """Todo repository implementation using SQLModel"""

    def __init__(self, session: AsyncSession):
        self.session = session

    async def create(self, todo: Todo) -> Todo:
        """Create a new todo"""
        self.session.add(todo)
        await self.session.flush()
        await self.session.refresh(todo)
        return todo

    async def get_owned(self, todo_id: int, owner_id: int) -> Optional[Todo]:
        """Get todo by ID if it belongs to owner"""
        stmt = select(Todo).where(Todo.id == todo_id, Todo.user_id == owner_id)
        result = await self.session.exec(stmt)
        return result.one_or_none()

    async def list_by_owner(self, owner_id: int) -> List[Todo]:
        """All todos of owner, ordered by position"""
        stmt = (
            select(Todo)
            .where(Todo.user_id == owner_id)
            .order_by(col(Todo.position), col(Todo.id))
        )
        result = await self.session.exec(stmt)
        return list(result.all())

    async def search(self, owner_id: int, keyword: str) -> List[Todo]:
        """Case-insensitive substring match on description"""
        stmt = (
            select(Todo)
            .where(
                Todo.user_id == owner_id,
                col(Todo.description).ilike(f"%{escape_like(keyword)}%", escape="\\"),
            )
            .order_by(col(Todo.position), col(Todo.id))
        )
        result = await self.session.exec(stmt)
        return list(result.all())

    async def max_position(self, owner_id: int) -> Optional[int]:
        """Highest position among owner's todos"""
        stmt = select(func.max(Todo.position)).where(Todo.user_id == owner_id)
        result = await self.session.exec(stmt)
        return result.one()

    async def update(
        self, todo_id: int, owner_id: int, description: str, completed: bool
    ) -> Optional[Todo]:
        """Update todo fields, None if no owned row matched"""
        stmt = (
            update(Todo)
            .where(Todo.id == todo_id, Todo.user_id == owner_id)
            .values(
                description=description,
                completed=completed,
                updated_at=datetime.utcnow(),
            )
        )
        return await self._execute_owned_update(stmt, todo_id, owner_id)

    async def update_position(
        self, todo_id: int, owner_id: int, position: int
    ) -> Optional[Todo]:
        """Set a single todo's position, None if no owned row matched"""
        stmt = (
            update(Todo)
            .where(Todo.id == todo_id, Todo.user_id == owner_id)
            .values(position=position, updated_at=datetime.utcnow())
        )
        return await self._execute_owned_update(stmt, todo_id, owner_id)

    async def renumber(self, owner_id: int, positions: Dict[int, int]) -> int:
        """Set positions for many owned todos"""
        updated = 0
        for todo_id, position in positions.items():
            stmt = (
                update(Todo)
                .where(Todo.id == todo_id, Todo.user_id == owner_id)
                .values(position=position)
            )
            result = await self.session.execute(stmt)
            updated += result.rowcount
        await self.session.flush()
        return updated

    async def delete(self, todo_id: int, owner_id: int) -> bool:
        """Delete todo, False if no owned row matched"""
        stmt = delete(Todo).where(Todo.id == todo_id, Todo.user_id == owner_id)
        result = await self.session.execute(stmt)
        await self.session.flush()
        return result.rowcount > 0

    async def _execute_owned_update(self, stmt, todo_id: int, owner_id: int) -> Optional[Todo]:
        result = await self.session.execute(stmt)
        await self.session.flush()
        if result.rowcount == 0:
            return None

        stmt = (
            select(Todo)
            .where(Todo.id == todo_id, Todo.user_id == owner_id)
            .execution_options(populate_existing=True)
        )
        result = await self.session.exec(stmt)
        return result.one_or_none()
