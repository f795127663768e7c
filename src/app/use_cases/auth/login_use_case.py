"""
Login Use Case

Verifies credentials of a confirmed account and mints a session.
"""

import bcrypt

from src.app.services.passwords import verify_password
from src.app.services.session_issuer import ISessionIssuer, SessionClaims
from src.app.services.unit_of_work import UnitOfWork
from src.libs.result import Error, ErrorKind, Result, Return
from .dtos import LoginCommand, TokenResponse

_INVALID_CREDENTIALS = Error(
    "INVALID_CREDENTIALS", "Wrong credentials or account not confirmed!", ErrorKind.unauthorized
)


class LoginUseCase:
    """
    Use case for login and session issuance.

    Business Rules:
    - Unknown email, wrong password and unconfirmed account are one error
    - Password comparison is constant-time (bcrypt)
    - remember=True extends the session lifetime
    """

    def __init__(self, uow: UnitOfWork, sessions: ISessionIssuer):
        self.uow = uow
        self.sessions = sessions

    async def execute(self, command: LoginCommand) -> Result[TokenResponse]:
        """
        Execute login use case.

        Args:
            command: Email, plain text password and remember flag

        Returns:
            Result with TokenResponse, or Error(INVALID_CREDENTIALS)
        """
        async with self.uow:
            account = await self.uow.accounts.get_by_email(command.email)

            if account is None:
                # Hash anyway so unknown emails take as long as wrong passwords
                bcrypt.checkpw(b"dummy_password", bcrypt.gensalt(12))
                return Return.err(_INVALID_CREDENTIALS)

            if not verify_password(command.password, account.password_hash):
                return Return.err(_INVALID_CREDENTIALS)

            if not account.account_confirmed:
                return Return.err(_INVALID_CREDENTIALS)

            role = await self.uow.roles.get_by_id(account.role_id)
            if role is None:
                return Return.err(
                    Error("ROLE_NOT_FOUND", "Role not found!", ErrorKind.not_found)
                )

            token_result = self.sessions.mint(
                SessionClaims(
                    id=str(account.id),
                    email=account.email,
                    role=role.number,
                    remember=command.remember,
                )
            )
            if token_result.is_err():
                return Return.err(token_result.error)

            return Return.ok(TokenResponse(token=token_result.value))
