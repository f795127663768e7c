from uuid import UUID

from pydantic import BaseModel

from src.app.services.unit_of_work import UnitOfWork
from src.libs.result import Result, Return
from .resources import CatalogResource


class GetCatalogItemUseCase:
    """Fetches one non-deleted catalog row with its references embedded"""

    def __init__(self, uow: UnitOfWork, resource: CatalogResource):
        self.uow = uow
        self.resource = resource

    async def execute(self, item_id: UUID) -> Result[BaseModel]:
        async with self.uow:
            entity = await self.resource.repository(self.uow).get_by_id(item_id)
            if entity is None:
                return Return.err(self.resource.not_found())

            return Return.ok(await self.resource.render(self.uow, entity))
