import logging
from typing import List

from pydantic import BaseModel

from src.app.services.passwords import hash_password
from src.app.services.unit_of_work import UnitOfWork
from src.domain.entities import Account, RoleNumber
from src.libs.result import Error, ErrorKind, Result, Return

logger = logging.getLogger(__name__)


class AdminSeed(BaseModel):
    email: str
    password: str


class SeedAdminsUseCase:
    """
    Creates configured administrator accounts.

    Business Rules:
    - ADMIN role must already be seeded
    - Seeded accounts are confirmed from the start
    - Emails already used by a non-deleted account are skipped
    """

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(self, admins: List[AdminSeed]) -> Result[int]:
        """Returns the number of accounts created"""
        if not admins:
            return Return.ok(0)

        created = 0
        async with self.uow:
            role = await self.uow.roles.get_by_number(RoleNumber.ADMIN.value)
            if role is None:
                return Return.err(
                    Error("ROLE_NOT_FOUND", "Role not found!", ErrorKind.not_found)
                )

            for admin in admins:
                if await self.uow.accounts.exists_by_email(admin.email):
                    continue

                await self.uow.accounts.create(
                    Account(
                        email=admin.email,
                        password_hash=hash_password(admin.password),
                        role_id=role.id,
                        account_confirmed=True,
                    )
                )
                created += 1

            if created:
                await self.uow.commit()
                logger.info(f"Seeded {created} admin account(s)")

        return Return.ok(created)
