from uuid import UUID

from pydantic import BaseModel

from src.app.services.unit_of_work import UnitOfWork
from src.domain.base import utc_now
from src.libs.result import Result, Return
from .resources import CatalogResource


class DeleteCatalogItemUseCase:
    """
    Soft-deletes a catalog row.

    Business Rules:
    - Row must exist and not already be deleted
    - Only is_deleted flips; links and files stay in place
    """

    def __init__(self, uow: UnitOfWork, resource: CatalogResource):
        self.uow = uow
        self.resource = resource

    async def execute(self, item_id: UUID, actor_id: UUID) -> Result[BaseModel]:
        async with self.uow:
            repository = self.resource.repository(self.uow)
            entity = await repository.get_by_id(item_id)
            if entity is None:
                return Return.err(self.resource.not_found())

            entity.is_deleted = True
            entity.last_edit_by = actor_id
            entity.last_edit_at = utc_now()
            entity = await repository.update(entity)

            await self.uow.commit()

            return Return.ok(await self.resource.render(self.uow, entity))
