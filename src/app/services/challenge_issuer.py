"""
Challenge Issuer

Generates and persists confirmation and password reset challenges.
"""

import secrets
from uuid import UUID

from src.app.services.lifecycle_policy import LifecyclePolicy
from src.app.services.unit_of_work import UnitOfWork
from src.domain.base import utc_now
from src.domain.entities import ConfirmationChallenge, ResetChallenge


def generate_code() -> int:
    """Six-digit numeric code"""
    return 100000 + secrets.randbelow(900000)


def generate_token() -> str:
    """256-bit random token as 64 uppercase hex characters"""
    return secrets.token_hex(32).upper()


class ChallengeIssuer:
    """
    Issues single-use challenges inside the caller's unit of work.

    The caller owns the transaction: the issuer only adds rows, the use case
    commits before sending any mail.
    """

    def __init__(self, uow: UnitOfWork, policy: LifecyclePolicy):
        self.uow = uow
        self.policy = policy

    async def issue_confirmation(self, account_id: UUID) -> ConfirmationChallenge:
        """Create a code/token pair and deactivate every other active one"""
        challenge = ConfirmationChallenge(
            account_id=account_id,
            code=generate_code(),
            token=generate_token(),
            expires_at=utc_now() + self.policy.challenge_ttl,
            is_used=False,
        )
        challenge = await self.uow.confirmation_challenges.create(challenge)
        await self.uow.confirmation_challenges.deactivate_others(account_id, challenge.id)
        return challenge

    async def issue_reset(self, account_id: UUID, current_password_hash: str) -> ResetChallenge:
        """Create a reset token snapshotting the password it will replace"""
        challenge = ResetChallenge(
            account_id=account_id,
            token=generate_token(),
            expires_at=utc_now() + self.policy.challenge_ttl,
            is_used=False,
            old_password_hash=current_password_hash,
        )
        return await self.uow.reset_challenges.create(challenge)
