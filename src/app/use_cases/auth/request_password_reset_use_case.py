"""
Request Password Reset Use Case

Issues a reset token and mails it to a confirmed account.
"""

import logging

from src.app.services.challenge_issuer import ChallengeIssuer
from src.app.services.lifecycle_policy import LifecyclePolicy
from src.app.services.mailer import IMailer
from src.app.services.unit_of_work import UnitOfWork
from src.libs.result import Error, ErrorKind, Result, Return
from .dtos import SentResponse
from .mail_templates import reset_mail

logger = logging.getLogger(__name__)


class RequestPasswordResetUseCase:
    """
    Use case for requesting a password reset.

    Business Rules:
    - Account must exist and be confirmed
    - Challenge snapshots the current password hash
    - Earlier reset challenges stay active until they expire
    - Mail failure deactivates the new challenge
    """

    def __init__(self, uow: UnitOfWork, mailer: IMailer, policy: LifecyclePolicy):
        self.uow = uow
        self.mailer = mailer
        self.policy = policy

    async def execute(self, email: str) -> Result[SentResponse]:
        async with self.uow:
            account = await self.uow.accounts.get_by_email(email)
            if account is None:
                return Return.err(
                    Error("ACCOUNT_NOT_FOUND", "User not found!", ErrorKind.not_found)
                )

            if not account.account_confirmed:
                return Return.err(
                    Error(
                        "ACCOUNT_NOT_CONFIRMED",
                        "Account not confirmed!",
                        ErrorKind.unauthorized,
                    )
                )

            challenge = await ChallengeIssuer(self.uow, self.policy).issue_reset(
                account.id, account.password_hash
            )
            await self.uow.commit()

            mail_result = await self.mailer.send(
                reset_mail(self.policy, account.email, challenge)
            )
            if mail_result.is_err():
                logger.warning(f"Reset mail failed for account {account.id}")
                await self.uow.reset_challenges.deactivate(challenge.id)
                await self.uow.commit()
                return Return.err(mail_result.error)

            return Return.ok(SentResponse(sent=True))
