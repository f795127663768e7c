from abc import ABC, abstractmethod
from datetime import datetime
from typing import Optional
from uuid import UUID

from src.domain.entities import ConfirmationChallenge


class IConfirmationChallengeRepository(ABC):
    """ConfirmationChallenge repository interface - application layer"""

    @abstractmethod
    async def create(self, challenge: ConfirmationChallenge) -> ConfirmationChallenge:
        """Create a new confirmation challenge"""
        pass

    @abstractmethod
    async def get_redeemable(
        self, account_id: UUID, code: int, token: str, now: datetime
    ) -> Optional[ConfirmationChallenge]:
        """Get the unused, active, unexpired challenge matching code and token"""
        pass

    @abstractmethod
    async def get_latest_active(self, account_id: UUID) -> Optional[ConfirmationChallenge]:
        """Get the most recently created active challenge of an account"""
        pass

    @abstractmethod
    async def deactivate(self, challenge_id: UUID) -> Optional[ConfirmationChallenge]:
        """Deactivate an active challenge, returning the updated row"""
        pass

    @abstractmethod
    async def deactivate_others(self, account_id: UUID, keep_id: UUID) -> int:
        """Deactivate every active challenge of the account except keep_id"""
        pass

    @abstractmethod
    async def mark_used(self, challenge_id: UUID) -> Optional[ConfirmationChallenge]:
        """Mark an unused, active challenge as used and inactive"""
        pass
