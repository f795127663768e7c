"""
Confirm Password Reset Use Case

Redeems a reset token, replaces the password and signs the account in.
"""

from src.app.services.passwords import hash_password, verify_password
from src.app.services.session_issuer import ISessionIssuer, SessionClaims
from src.app.services.unit_of_work import UnitOfWork
from src.domain.base import utc_now
from src.libs.result import Error, ErrorKind, Result, Return
from .dtos import ResetPasswordCommand, TokenResponse


class ConfirmPasswordResetUseCase:
    """
    Use case for completing a password reset.

    Business Rules:
    - Password and confirmation must match
    - Account must exist and be confirmed
    - New password must differ from the current one
    - Token must belong to the account, be unused, active and unexpired
    - New password must not match any password replaced or set by an
      earlier reset of the account
    - password_changed_at is stamped, invalidating older sessions
    - Returns a session credential (remember=False)
    """

    def __init__(self, uow: UnitOfWork, sessions: ISessionIssuer):
        self.uow = uow
        self.sessions = sessions

    async def execute(self, command: ResetPasswordCommand) -> Result[TokenResponse]:
        """
        Execute password reset confirmation.

        Args:
            command: Reset token, email and the new password twice

        Returns:
            Result with TokenResponse, or Error
        """
        if command.password != command.password_confirm:
            return Return.err(
                Error(
                    "PASSWORD_MISMATCH",
                    "Password and password confirm must be same!",
                    ErrorKind.validation,
                )
            )

        async with self.uow:
            account = await self.uow.accounts.get_by_email(command.email)
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

            if verify_password(command.password, account.password_hash):
                return Return.err(
                    Error(
                        "PASSWORD_UNCHANGED",
                        "New password must be different from the current one!",
                        ErrorKind.conflict,
                    )
                )

            now = utc_now()
            challenge = await self.uow.reset_challenges.get_redeemable(
                account.id, command.reset_token, now
            )
            if challenge is None:
                return Return.err(
                    Error("RESET_TOKEN_EXPIRED", "Reset token expired!", ErrorKind.not_found)
                )

            previous_resets = await self.uow.reset_challenges.list_used(account.id, challenge.id)
            for previous in previous_resets:
                for old_hash in (previous.old_password_hash, previous.new_password_hash):
                    if old_hash and verify_password(command.password, old_hash):
                        return Return.err(
                            Error(
                                "PASSWORD_REUSED",
                                "Password already used!",
                                ErrorKind.conflict,
                            )
                        )

            new_hash = hash_password(command.password)
            account.password_hash = new_hash
            account.password_changed_at = now
            account.last_edit_at = now
            account.last_edit_by = account.id
            account = await self.uow.accounts.update(account)

            consumed = await self.uow.reset_challenges.mark_used(challenge.id, new_hash)
            if consumed is None:
                await self.uow.rollback()
                return Return.err(
                    Error("RESET_TOKEN_EXPIRED", "Reset token expired!", ErrorKind.not_found)
                )

            role = await self.uow.roles.get_by_id(account.role_id)
            if role is None:
                await self.uow.rollback()
                return Return.err(
                    Error("ROLE_NOT_FOUND", "Role not found!", ErrorKind.not_found)
                )

            token_result = self.sessions.mint(
                SessionClaims(
                    id=str(account.id),
                    email=account.email,
                    role=role.number,
                    remember=False,
                )
            )
            if token_result.is_err():
                await self.uow.rollback()
                return Return.err(token_result.error)

            await self.uow.commit()

            return Return.ok(TokenResponse(token=token_result.value))
