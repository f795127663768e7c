from typing import Optional
from uuid import UUID

from sqlmodel import select
from sqlmodel.ext.asyncio.session import AsyncSession

from src.app.repositories.role_repository import IRoleRepository
from src.domain.entities import Role


class RoleRepository(IRoleRepository):
    """Role repository implementation using SQLModel"""

    def __init__(self, session: AsyncSession):
        self.session = session

    async def get_by_number(self, number: int) -> Optional[Role]:
        """Get non-deleted role by its number"""
        stmt = select(Role).where(Role.number == number, Role.is_deleted == False)
        result = await self.session.exec(stmt)
        return result.one_or_none()

    async def get_by_id(self, role_id: UUID) -> Optional[Role]:
        """Get role by ID"""
        stmt = select(Role).where(Role.id == role_id)
        result = await self.session.exec(stmt)
        return result.one_or_none()

    async def create(self, role: Role) -> Role:
        """Create a new role"""
        self.session.add(role)
        await self.session.flush()
        await self.session.refresh(role)
        return role
