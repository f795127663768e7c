from abc import ABC, abstractmethod
from typing import Generic, List, Optional, TypeVar
from uuid import UUID

from src.app.repositories.pagination import ListQuery, Page

T = TypeVar("T")


class ICatalogRepository(ABC, Generic[T]):
    """Repository interface shared by the catalog resources - application layer"""

    @abstractmethod
    async def get_by_id(self, entity_id: UUID) -> Optional[T]:
        """Get non-deleted entity by ID"""
        pass

    @abstractmethod
    async def get_by_ids(self, entity_ids: List[UUID]) -> List[T]:
        """Get every non-deleted entity whose ID is in entity_ids"""
        pass

    @abstractmethod
    async def exists_by_name(self, name: str, exclude_id: Optional[UUID] = None) -> bool:
        """Check whether another non-deleted entity already uses the name"""
        pass

    @abstractmethod
    async def create(self, entity: T) -> T:
        """Create a new entity"""
        pass

    @abstractmethod
    async def update(self, entity: T) -> T:
        """Update existing entity"""
        pass

    @abstractmethod
    async def paginate(self, query: ListQuery) -> Page:
        """List entities matching the query filters, one page at a time"""
        pass


class IManufacturerRepository(ICatalogRepository[T]):
    """Manufacturer repository interface - adds tool links"""

    @abstractmethod
    async def get_tool_ids(self, manufacturer_id: UUID) -> List[UUID]:
        """Get IDs of the tools linked to a manufacturer"""
        pass

    @abstractmethod
    async def replace_tools(self, manufacturer_id: UUID, tool_ids: List[UUID]) -> None:
        """Replace the tool links of a manufacturer"""
        pass
