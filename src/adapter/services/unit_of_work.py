from sqlmodel.ext.asyncio.session import AsyncSession

from src.adapter.repositories.account_repository import AccountRepository
from src.adapter.repositories.catalog_repository import (
    ManufacturerRepository,
    ProductRepository,
    TechniqueRepository,
    ToolRepository,
)
from src.adapter.repositories.confirmation_challenge_repository import (
    ConfirmationChallengeRepository,
)
from src.adapter.repositories.reset_challenge_repository import ResetChallengeRepository
from src.adapter.repositories.role_repository import RoleRepository
from src.app.services.unit_of_work import UnitOfWork


class SqlAlchemyUnitOfWork(UnitOfWork):
    """SQLAlchemy implementation of UnitOfWork pattern"""

    def __init__(self, session: AsyncSession):
        self.session = session

    async def __aenter__(self):
        # Initialize all repositories with the session
        self.accounts = AccountRepository(self.session)
        self.roles = RoleRepository(self.session)
        self.confirmation_challenges = ConfirmationChallengeRepository(self.session)
        self.reset_challenges = ResetChallengeRepository(self.session)
        self.manufacturers = ManufacturerRepository(self.session)
        self.tools = ToolRepository(self.session)
        self.techniques = TechniqueRepository(self.session)
        self.products = ProductRepository(self.session)
        return self

    async def __aexit__(self, *args):
        await self.rollback()

    async def commit(self):
        await self.session.commit()

    async def rollback(self):
        await self.session.rollback()
