from typing import Optional
from uuid import UUID

from sqlalchemy import func
from sqlmodel import select
from sqlmodel.ext.asyncio.session import AsyncSession

from src.app.repositories.account_repository import IAccountRepository
from src.domain.entities import Account


class AccountRepository(IAccountRepository):
    """Account repository implementation using SQLModel"""

    def __init__(self, session: AsyncSession):
        self.session = session

    async def get_by_email(self, email: str) -> Optional[Account]:
        """Get non-deleted account by email address"""
        stmt = select(Account).where(Account.email == email, Account.is_deleted == False)
        result = await self.session.exec(stmt)
        return result.first()

    async def get_by_id(self, account_id: UUID) -> Optional[Account]:
        """Get non-deleted account by ID"""
        stmt = select(Account).where(Account.id == account_id, Account.is_deleted == False)
        result = await self.session.exec(stmt)
        return result.one_or_none()

    async def exists_by_email(self, email: str, role_id: Optional[UUID] = None) -> bool:
        """Check whether a non-deleted account uses the email (optionally for one role)"""
        stmt = select(func.count(Account.id)).where(
            Account.email == email, Account.is_deleted == False
        )
        if role_id is not None:
            stmt = stmt.where(Account.role_id == role_id)
        result = await self.session.exec(stmt)
        return result.one() > 0

    async def create(self, account: Account) -> Account:
        """Create a new account"""
        self.session.add(account)
        await self.session.flush()
        await self.session.refresh(account)
        return account

    async def update(self, account: Account) -> Account:
        """Update existing account"""
        self.session.add(account)
        await self.session.flush()
        await self.session.refresh(account)
        return account
