from datetime import datetime
from typing import Optional
from uuid import UUID

from sqlmodel import select, update
from sqlmodel.ext.asyncio.session import AsyncSession

from src.app.repositories.confirmation_challenge_repository import (
    IConfirmationChallengeRepository,
)
from src.domain.entities import ConfirmationChallenge


class ConfirmationChallengeRepository(IConfirmationChallengeRepository):
    """ConfirmationChallenge repository implementation using SQLModel"""

    def __init__(self, session: AsyncSession):
        self.session = session

    async def create(self, challenge: ConfirmationChallenge) -> ConfirmationChallenge:
        """Create a new confirmation challenge"""
        self.session.add(challenge)
        await self.session.flush()
        await self.session.refresh(challenge)
        return challenge

    async def get_redeemable(
        self, account_id: UUID, code: int, token: str, now: datetime
    ) -> Optional[ConfirmationChallenge]:
        """Get the unused, active, unexpired challenge matching code and token"""
        stmt = select(ConfirmationChallenge).where(
            ConfirmationChallenge.account_id == account_id,
            ConfirmationChallenge.code == code,
            ConfirmationChallenge.token == token,
            ConfirmationChallenge.is_used == False,
            ConfirmationChallenge.is_active == True,
            ConfirmationChallenge.expires_at >= now,
        )
        result = await self.session.exec(stmt)
        return result.first()

    async def get_latest_active(self, account_id: UUID) -> Optional[ConfirmationChallenge]:
        """Get the most recently created active challenge of an account"""
        stmt = (
            select(ConfirmationChallenge)
            .where(
                ConfirmationChallenge.account_id == account_id,
                ConfirmationChallenge.is_active == True,
            )
            .order_by(ConfirmationChallenge.created_at.desc())
            .limit(1)
        )
        result = await self.session.exec(stmt)
        return result.first()

    async def deactivate(self, challenge_id: UUID) -> Optional[ConfirmationChallenge]:
        """Deactivate an active challenge, returning the updated row"""
        return await self._update_where_active(challenge_id, is_active=False)

    async def deactivate_others(self, account_id: UUID, keep_id: UUID) -> int:
        """Deactivate every active challenge of the account except keep_id"""
        stmt = (
            update(ConfirmationChallenge)
            .where(
                ConfirmationChallenge.account_id == account_id,
                ConfirmationChallenge.id != keep_id,
                ConfirmationChallenge.is_active == True,
            )
            .values(is_active=False)
        )
        result = await self.session.execute(stmt)
        await self.session.flush()
        return result.rowcount

    async def mark_used(self, challenge_id: UUID) -> Optional[ConfirmationChallenge]:
        """Mark an unused, active challenge as used and inactive"""
        return await self._update_where_active(
            challenge_id, unused_only=True, is_active=False, is_used=True
        )

    async def _update_where_active(
        self, challenge_id: UUID, unused_only: bool = False, **values
    ) -> Optional[ConfirmationChallenge]:
        """Conditional update; returns None when no active row matched"""
        stmt = update(ConfirmationChallenge).where(
            ConfirmationChallenge.id == challenge_id,
            ConfirmationChallenge.is_active == True,
        )
        if unused_only:
            stmt = stmt.where(ConfirmationChallenge.is_used == False)
        result = await self.session.execute(
            stmt.values(**values).execution_options(synchronize_session=False)
        )
        await self.session.flush()
        if result.rowcount == 0:
            return None

        challenge = await self.session.get(ConfirmationChallenge, challenge_id)
        await self.session.refresh(challenge)
        return challenge
