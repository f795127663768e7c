import logging

from src.app.services.lifecycle_policy import LifecyclePolicy
from src.app.services.unit_of_work import UnitOfWork
from src.domain.entities import Role
from src.libs.result import Result, Return

logger = logging.getLogger(__name__)


class SeedRolesUseCase:
    """
    Creates every role of the policy's role table that is missing.

    Business Rules:
    - Existing roles are left untouched
    - Safe to run on every startup
    """

    def __init__(self, uow: UnitOfWork, policy: LifecyclePolicy):
        self.uow = uow
        self.policy = policy

    async def execute(self) -> Result[int]:
        """Returns the number of roles created"""
        created = 0
        async with self.uow:
            for number, name in sorted(self.policy.roles.items()):
                if await self.uow.roles.get_by_number(number) is not None:
                    continue

                await self.uow.roles.create(
                    Role(name=name, description=f"{name.title()} role", number=number)
                )
                created += 1

            if created:
                await self.uow.commit()
                logger.info(f"Seeded {created} role(s)")

        return Return.ok(created)
