"""
Authenticate Session Use Case

Resolves a bearer credential into the account it was minted for.
"""

from uuid import UUID

from src.app.services.session_issuer import ISessionIssuer
from src.app.services.unit_of_work import UnitOfWork
from src.libs.result import Error, ErrorKind, Result, Return
from .dtos import CurrentAccount

_INVALID_SESSION = Error("INVALID_SESSION", "Invalid or expired token", ErrorKind.unauthorized)


class AuthenticateSessionUseCase:
    """
    Use case for session validation.

    Business Rules:
    - Signature and expiry must verify
    - Account must still exist, not be deleted and be confirmed
    - Sessions issued before the last password change are rejected
    - Role is read from storage, not trusted from the claims
    """

    def __init__(self, uow: UnitOfWork, sessions: ISessionIssuer):
        self.uow = uow
        self.sessions = sessions

    async def execute(self, token: str) -> Result[CurrentAccount]:
        decoded = self.sessions.decode(token)
        if decoded.is_err():
            return Return.err(decoded.error)

        session = decoded.value
        try:
            account_id = UUID(session.id)
        except ValueError:
            return Return.err(_INVALID_SESSION)

        async with self.uow:
            account = await self.uow.accounts.get_by_id(account_id)
            if account is None or not account.account_confirmed:
                return Return.err(_INVALID_SESSION)

            if account.password_changed_after(session.issued_at):
                return Return.err(
                    Error(
                        "PASSWORD_CHANGED",
                        "Password changed, please log in again!",
                        ErrorKind.unauthorized,
                    )
                )

            role = await self.uow.roles.get_by_id(account.role_id)
            if role is None:
                return Return.err(_INVALID_SESSION)

            return Return.ok(
                CurrentAccount(
                    id=account.id,
                    email=account.email,
                    role=role.number,
                    role_id=role.id,
                )
            )
