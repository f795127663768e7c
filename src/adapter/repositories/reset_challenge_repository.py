from datetime import datetime
from typing import List, Optional
from uuid import UUID

from sqlmodel import select, update
from sqlmodel.ext.asyncio.session import AsyncSession

from src.app.repositories.reset_challenge_repository import IResetChallengeRepository
from src.domain.entities import ResetChallenge


class ResetChallengeRepository(IResetChallengeRepository):
    """ResetChallenge repository implementation using SQLModel"""

    def __init__(self, session: AsyncSession):
        self.session = session

    async def create(self, challenge: ResetChallenge) -> ResetChallenge:
        """Create a new reset challenge"""
        self.session.add(challenge)
        await self.session.flush()
        await self.session.refresh(challenge)
        return challenge

    async def get_redeemable(
        self, account_id: UUID, token: str, now: datetime
    ) -> Optional[ResetChallenge]:
        """Get the unused, active, unexpired challenge matching the token"""
        stmt = select(ResetChallenge).where(
            ResetChallenge.account_id == account_id,
            ResetChallenge.token == token,
            ResetChallenge.is_used == False,
            ResetChallenge.is_active == True,
            ResetChallenge.expires_at >= now,
        )
        result = await self.session.exec(stmt)
        return result.first()

    async def list_used(self, account_id: UUID, exclude_id: UUID) -> List[ResetChallenge]:
        """List used challenges of an account other than exclude_id"""
        stmt = select(ResetChallenge).where(
            ResetChallenge.account_id == account_id,
            ResetChallenge.id != exclude_id,
            ResetChallenge.is_used == True,
        )
        result = await self.session.exec(stmt)
        return list(result.all())

    async def deactivate(self, challenge_id: UUID) -> Optional[ResetChallenge]:
        """Deactivate an active challenge, returning the updated row"""
        return await self._update_where_active(challenge_id, is_active=False)

    async def mark_used(
        self, challenge_id: UUID, new_password_hash: str
    ) -> Optional[ResetChallenge]:
        """Mark an unused, active challenge as used and store the new password hash"""
        return await self._update_where_active(
            challenge_id, unused_only=True, is_used=True, new_password_hash=new_password_hash
        )

    async def _update_where_active(
        self, challenge_id: UUID, unused_only: bool = False, **values
    ) -> Optional[ResetChallenge]:
        """Conditional update; returns None when no active row matched"""
        stmt = update(ResetChallenge).where(
            ResetChallenge.id == challenge_id, ResetChallenge.is_active == True
        )
        if unused_only:
            stmt = stmt.where(ResetChallenge.is_used == False)
        result = await self.session.execute(
            stmt.values(**values).execution_options(synchronize_session=False)
        )
        await self.session.flush()
        if result.rowcount == 0:
            return None

        challenge = await self.session.get(ResetChallenge, challenge_id)
        await self.session.refresh(challenge)
        return challenge
