from abc import ABC, abstractmethod
from datetime import datetime
from typing import List, Optional
from uuid import UUID

from src.domain.entities import ResetChallenge


class IResetChallengeRepository(ABC):
    """ResetChallenge repository interface - application layer"""

    @abstractmethod
    async def create(self, challenge: ResetChallenge) -> ResetChallenge:
        """Create a new reset challenge"""
        pass

    @abstractmethod
    async def get_redeemable(
        self, account_id: UUID, token: str, now: datetime
    ) -> Optional[ResetChallenge]:
        """Get the unused, active, unexpired challenge matching the token"""
        pass

    @abstractmethod
    async def list_used(self, account_id: UUID, exclude_id: UUID) -> List[ResetChallenge]:
        """List used challenges of an account other than exclude_id"""
        pass

    @abstractmethod
    async def deactivate(self, challenge_id: UUID) -> Optional[ResetChallenge]:
        """Deactivate an active challenge, returning the updated row"""
        pass

    @abstractmethod
    async def mark_used(
        self, challenge_id: UUID, new_password_hash: str
    ) -> Optional[ResetChallenge]:
        """Mark an active challenge as used and store the new password hash"""
        pass
