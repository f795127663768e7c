from abc import ABC, abstractmethod

from src.app.repositories.account_repository import IAccountRepository
from src.app.repositories.catalog_repository import ICatalogRepository, IManufacturerRepository
from src.app.repositories.confirmation_challenge_repository import (
    IConfirmationChallengeRepository,
)
from src.app.repositories.reset_challenge_repository import IResetChallengeRepository
from src.app.repositories.role_repository import IRoleRepository


class UnitOfWork(ABC):
    """Abstract UnitOfWork - defines repository access and transaction management"""

    # Repository properties (initialized in __aenter__)
    accounts: IAccountRepository
    roles: IRoleRepository
    confirmation_challenges: IConfirmationChallengeRepository
    reset_challenges: IResetChallengeRepository
    manufacturers: IManufacturerRepository
    tools: ICatalogRepository
    techniques: ICatalogRepository
    products: ICatalogRepository

    @abstractmethod
    async def __aenter__(self):
        pass

    @abstractmethod
    async def __aexit__(self, *args):
        pass

    @abstractmethod
    async def commit(self):
        pass

    @abstractmethod
    async def rollback(self):
        pass
