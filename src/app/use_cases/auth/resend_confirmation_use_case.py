"""
Resend Confirmation Use Case

Issues a fresh confirmation challenge for an unconfirmed account.
"""

import logging

from src.app.services.challenge_issuer import ChallengeIssuer
from src.app.services.lifecycle_policy import LifecyclePolicy
from src.app.services.mailer import IMailer
from src.app.services.throttle_guard import ThrottleGuard
from src.app.services.unit_of_work import UnitOfWork
from src.libs.result import Error, ErrorKind, Result, Return
from .dtos import SentResponse
from .mail_templates import confirmation_mail

logger = logging.getLogger(__name__)


class ResendConfirmationUseCase:
    """
    Use case for resending the confirmation mail.

    Business Rules:
    - Account must exist and be unconfirmed
    - Throttled while the latest active challenge is younger than the window
    - The new challenge deactivates every other active challenge of the account
    - Mail failure deactivates the new challenge
    """

    def __init__(self, uow: UnitOfWork, mailer: IMailer, policy: LifecyclePolicy):
        self.uow = uow
        self.mailer = mailer
        self.policy = policy
        self.throttle = ThrottleGuard(policy.resend_throttle)

    async def execute(self, email: str) -> Result[SentResponse]:
        """
        Execute resend.

        Args:
            email: Address of the account awaiting confirmation

        Returns:
            Result with SentResponse, or Error
        """
        async with self.uow:
            account = await self.uow.accounts.get_by_email(email)
            if account is None:
                return Return.err(
                    Error("ACCOUNT_NOT_FOUND", "User not found!", ErrorKind.not_found)
                )

            if account.account_confirmed:
                return Return.err(
                    Error(
                        "ACCOUNT_ALREADY_CONFIRMED",
                        "Account already confirmed!",
                        ErrorKind.conflict,
                    )
                )

            last_challenge = await self.uow.confirmation_challenges.get_latest_active(account.id)
            if self.throttle.is_throttled(last_challenge):
                return Return.err(
                    Error(
                        "RESEND_THROTTLED",
                        "Wait a little before asking for a new code!",
                        ErrorKind.validation,
                    )
                )

            challenge = await ChallengeIssuer(self.uow, self.policy).issue_confirmation(
                account.id
            )
            await self.uow.commit()

            mail_result = await self.mailer.send(
                confirmation_mail(self.policy, account.email, challenge)
            )
            if mail_result.is_err():
                logger.warning(f"Confirmation resend failed for account {account.id}")
                await self.uow.confirmation_challenges.deactivate(challenge.id)
                await self.uow.commit()
                return Return.err(mail_result.error)

            return Return.ok(SentResponse(sent=True))
