import logging

from src.app.services.challenge_issuer import ChallengeIssuer
from src.app.services.lifecycle_policy import LifecyclePolicy
from src.app.services.mailer import IMailer
from src.app.services.passwords import hash_password
from src.app.services.unit_of_work import UnitOfWork
from src.domain.entities import Account
from src.libs.result import Error, ErrorKind, Result, Return
from .dtos import SentResponse, SignupCommand
from .mail_templates import confirmation_mail

logger = logging.getLogger(__name__)


class SignupUseCase:
    """
    Signup Use Case

    Command/Response Pattern:
    - Input: SignupCommand (validated business intent)
    - Output: Result[SentResponse]

    Business Logic:
    1. Password and confirmation must match
    2. Requested (or default) role must exist
    3. No non-deleted account may already use the email
    4. Create Account with account_confirmed=False
    5. Issue a ConfirmationChallenge and commit
    6. Mail code and token; on failure deactivate the challenge and report
       an internal error (the account row stays, resend recovers it)
    """

    def __init__(self, uow: UnitOfWork, mailer: IMailer, policy: LifecyclePolicy):
        self.uow = uow
        self.mailer = mailer
        self.policy = policy

    async def execute(self, command: SignupCommand) -> Result[SentResponse]:
        if command.password != command.password_confirm:
            return Return.err(
                Error(
                    "PASSWORD_MISMATCH",
                    "Password and password confirm must be same!",
                    ErrorKind.validation,
                )
            )

        async with self.uow:
            role_number = (
                command.role if command.role is not None else self.policy.default_signup_role
            )
            role = await self.uow.roles.get_by_number(role_number)
            if role is None:
                return Return.err(Error("ROLE_NOT_FOUND", "Role not found!", ErrorKind.not_found))

            # Email is unique among non-deleted accounts, whatever their role
            if await self.uow.accounts.exists_by_email(command.email):
                return Return.err(
                    Error("ACCOUNT_ALREADY_EXISTS", "User already exists!", ErrorKind.conflict)
                )

            account = Account(
                email=command.email,
                password_hash=hash_password(command.password),
                role_id=role.id,
                account_confirmed=False,
            )
            account = await self.uow.accounts.create(account)

            challenge = await ChallengeIssuer(self.uow, self.policy).issue_confirmation(
                account.id
            )
            await self.uow.commit()

            mail_result = await self.mailer.send(
                confirmation_mail(self.policy, account.email, challenge)
            )
            if mail_result.is_err():
                logger.warning(f"Confirmation mail failed for account {account.id}")
                await self.uow.confirmation_challenges.deactivate(challenge.id)
                await self.uow.commit()
                return Return.err(mail_result.error)

            return Return.ok(SentResponse(sent=True))
