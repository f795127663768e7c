"""
Confirm Account Use Case

Redeems a confirmation challenge and signs the account in.
"""

from src.app.services.session_issuer import ISessionIssuer, SessionClaims
from src.app.services.unit_of_work import UnitOfWork
from src.domain.base import utc_now
from src.libs.result import Error, ErrorKind, Result, Return
from .dtos import ConfirmAccountCommand, TokenResponse


class ConfirmAccountUseCase:
    """
    Use case for account confirmation.

    Business Rules:
    - Account must exist and still be unconfirmed
    - Code and token must match one unused, active, unexpired challenge
    - Account confirmation and challenge consumption commit together
    - A used challenge never confirms again
    - Returns a session credential (remember=False)
    """

    def __init__(self, uow: UnitOfWork, sessions: ISessionIssuer):
        self.uow = uow
        self.sessions = sessions

    async def execute(self, command: ConfirmAccountCommand) -> Result[TokenResponse]:
        """
        Execute account confirmation.

        Errors:
            - ACCOUNT_NOT_FOUND: No non-deleted account with that email
            - ACCOUNT_ALREADY_CONFIRMED: Nothing left to confirm
            - INVALID_CODE: Wrong, used or expired code/token pair
        """
        async with self.uow:
            account = await self.uow.accounts.get_by_email(command.email)
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

            now = utc_now()
            challenge = await self.uow.confirmation_challenges.get_redeemable(
                account.id, command.code, command.token, now
            )
            if challenge is None:
                return Return.err(
                    Error("INVALID_CODE", "Wrong/expired code!", ErrorKind.unauthorized)
                )

            account.account_confirmed = True
            account.last_edit_by = account.id
            account.last_edit_at = now
            account = await self.uow.accounts.update(account)

            consumed = await self.uow.confirmation_challenges.mark_used(challenge.id)
            if consumed is None:
                # Redeemed concurrently between lookup and update
                await self.uow.rollback()
                return Return.err(
                    Error("INVALID_CODE", "Wrong/expired code!", ErrorKind.unauthorized)
                )

            role = await self.uow.roles.get_by_id(account.role_id)
            if role is None:
                await self.uow.rollback()
                return Return.err(
                    Error("ROLE_NOT_FOUND", "Role not found!", ErrorKind.not_found)
                )

            claims = SessionClaims(
                id=str(account.id),
                email=account.email,
                role=role.number,
                remember=False,
            )
            token_result = self.sessions.mint(claims)
            if token_result.is_err():
                await self.uow.rollback()
                return Return.err(token_result.error)

            await self.uow.commit()

            return Return.ok(TokenResponse(token=token_result.value))
