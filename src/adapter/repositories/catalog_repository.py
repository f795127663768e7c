from typing import Generic, List, Optional, Type, TypeVar
from uuid import UUID

from sqlalchemy import delete, func
from sqlmodel import select
from sqlmodel.ext.asyncio.session import AsyncSession

from src.adapter.repositories.query_builder import (
    ARRAY,
    BOOLEAN,
    STRING,
    QueryableField,
    build_filters,
)
from src.app.repositories.catalog_repository import (
    ICatalogRepository,
    IManufacturerRepository,
)
from src.app.repositories.pagination import ListQuery, Page
from src.domain.entities import Manufacturer, ManufacturerTool, Product, Technique, Tool

T = TypeVar("T")


class CatalogRepository(ICatalogRepository[T], Generic[T]):
    """Catalog repository implementation using SQLModel"""

    model: Type[T]

    def __init__(self, session: AsyncSession):
        self.session = session

    def queryable_fields(self) -> List[QueryableField]:
        return [
            QueryableField("active", self.model.is_active, BOOLEAN),
            QueryableField("deleted", self.model.is_deleted, BOOLEAN),
            QueryableField("name", self.model.name, STRING, regex=True),
        ]

    async def get_by_id(self, entity_id: UUID) -> Optional[T]:
        """Get non-deleted entity by ID"""
        stmt = select(self.model).where(
            self.model.id == entity_id, self.model.is_deleted == False
        )
        result = await self.session.exec(stmt)
        return result.one_or_none()

    async def get_by_ids(self, entity_ids: List[UUID]) -> List[T]:
        """Get every non-deleted entity whose ID is in entity_ids"""
        if not entity_ids:
            return []
        stmt = select(self.model).where(
            self.model.id.in_(entity_ids), self.model.is_deleted == False
        )
        result = await self.session.exec(stmt)
        return list(result.all())

    async def exists_by_name(self, name: str, exclude_id: Optional[UUID] = None) -> bool:
        """Check whether another non-deleted entity already uses the name"""
        stmt = select(func.count(self.model.id)).where(
            self.model.name == name, self.model.is_deleted == False
        )
        if exclude_id is not None:
            stmt = stmt.where(self.model.id != exclude_id)
        result = await self.session.exec(stmt)
        return result.one() > 0

    async def create(self, entity: T) -> T:
        """Create a new entity"""
        self.session.add(entity)
        await self.session.flush()
        await self.session.refresh(entity)
        return entity

    async def update(self, entity: T) -> T:
        """Update existing entity"""
        self.session.add(entity)
        await self.session.flush()
        await self.session.refresh(entity)
        return entity

    async def paginate(self, query: ListQuery) -> Page:
        """List entities matching the query filters, one page at a time"""
        filters = build_filters(self.model, self.queryable_fields(), query.filters)

        count_stmt = select(func.count(self.model.id)).where(*filters)
        total = (await self.session.exec(count_stmt)).one()

        stmt = select(self.model).where(*filters).order_by(self.model.created_at.desc())
        if not query.pagination:
            docs = list((await self.session.exec(stmt)).all())
            return Page.build(docs, total, page=1, limit=max(total, 1))

        stmt = stmt.offset((query.page - 1) * query.limit).limit(query.limit)
        docs = list((await self.session.exec(stmt)).all())
        return Page.build(docs, total, page=query.page, limit=query.limit)


class ToolRepository(CatalogRepository[Tool]):
    model = Tool


class TechniqueRepository(CatalogRepository[Technique]):
    model = Technique


class ProductRepository(CatalogRepository[Product]):
    model = Product

    def queryable_fields(self) -> List[QueryableField]:
        return super().queryable_fields() + [
            QueryableField("type", Product.tool_id, ARRAY),
            QueryableField("manufacturer", Product.manufacturer_id, ARRAY),
        ]


class ManufacturerRepository(CatalogRepository[Manufacturer], IManufacturerRepository[Manufacturer]):
    model = Manufacturer

    def queryable_fields(self) -> List[QueryableField]:
        return super().queryable_fields() + [
            QueryableField(
                "tools",
                ManufacturerTool.tool_id,
                ARRAY,
                clause=lambda tool_ids: Manufacturer.id.in_(
                    select(ManufacturerTool.manufacturer_id).where(
                        ManufacturerTool.tool_id.in_(tool_ids)
                    )
                ),
            ),
        ]

    async def get_tool_ids(self, manufacturer_id: UUID) -> List[UUID]:
        """Get IDs of the tools linked to a manufacturer"""
        stmt = select(ManufacturerTool.tool_id).where(
            ManufacturerTool.manufacturer_id == manufacturer_id
        )
        result = await self.session.exec(stmt)
        return list(result.all())

    async def replace_tools(self, manufacturer_id: UUID, tool_ids: List[UUID]) -> None:
        """Replace the tool links of a manufacturer"""
        await self.session.execute(
            delete(ManufacturerTool).where(ManufacturerTool.manufacturer_id == manufacturer_id)
        )
        for tool_id in dict.fromkeys(tool_ids):
            self.session.add(ManufacturerTool(manufacturer_id=manufacturer_id, tool_id=tool_id))
        await self.session.flush()
