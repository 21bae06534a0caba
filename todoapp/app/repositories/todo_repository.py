from abc import ABC, abstractmethod
from typing import Dict, List, Optional

from todoapp.domain.entities import Todo


class ITodoRepository(ABC):
    """
    Todo repository interface - application layer

    Every method takes the owning internal user id. A row that exists but
    belongs to someone else behaves exactly like a missing row.
    """

    @abstractmethod
    async def create(self, todo: Todo) -> Todo:
        """Create a new todo"""
        pass

    @abstractmethod
    async def get_owned(self, todo_id: int, owner_id: int) -> Optional[Todo]:
        """Get todo by ID if it belongs to owner"""
        pass

    @abstractmethod
    async def list_by_owner(self, owner_id: int) -> List[Todo]:
        """All todos of owner, ordered by position"""
        pass

    @abstractmethod
    async def search(self, owner_id: int, keyword: str) -> List[Todo]:
        """Todos of owner whose description contains keyword, ordered by position"""
        pass

    @abstractmethod
    async def max_position(self, owner_id: int) -> Optional[int]:
        """Highest position among owner's todos, None if the list is empty"""
        pass

    @abstractmethod
    async def update(
        self, todo_id: int, owner_id: int, description: str, completed: bool
    ) -> Optional[Todo]:
        """Update todo fields. Returns None if no owned row matched."""
        pass

    @abstractmethod
    async def update_position(
        self, todo_id: int, owner_id: int, position: int
    ) -> Optional[Todo]:
        """Set a single todo's position. Returns None if no owned row matched."""
        pass

    @abstractmethod
    async def renumber(self, owner_id: int, positions: Dict[int, int]) -> int:
        """Set positions for many owned todos ({todo_id: position}). Returns rows updated."""
        pass

    @abstractmethod
    async def delete(self, todo_id: int, owner_id: int) -> bool:
        """Delete todo. Returns True if an owned row was deleted."""
        pass
