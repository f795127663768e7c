"""
Create Catalog Item Use Case
"""

import logging
from typing import Dict, Optional
from uuid import UUID

from pydantic import BaseModel

from src.app.services.file_storage import IFileStorage
from src.app.services.unit_of_work import UnitOfWork
from src.domain.entities import FileField
from src.libs.result import Result, Return
from .dtos import FileUpload
from .file_uploads import check_uploads, store_uploads
from .resources import CatalogResource

logger = logging.getLogger(__name__)


class CreateCatalogItemUseCase:
    """
    Use case for creating a catalog row.

    Business Rules:
    - Name unique among non-deleted rows of the resource
    - JSON form fields must parse, referenced rows must exist
    - Uploads are type-checked before anything is written
    - created_by stamped with the acting account
    - Nothing is committed when an upload fails
    """

    def __init__(self, uow: UnitOfWork, resource: CatalogResource, storage: IFileStorage):
        self.uow = uow
        self.resource = resource
        self.storage = storage

    async def execute(
        self,
        command: BaseModel,
        actor_id: UUID,
        files: Optional[Dict[FileField, FileUpload]] = None,
    ) -> Result[BaseModel]:
        """
        Execute creation.

        Args:
            command: Resource specific command (ToolCommand, ProductCommand, ...)
            actor_id: Account performing the write
            files: Uploads keyed by slot

        Returns:
            Result with the rendered read model, or Error
        """
        files = files or {}
        checked = check_uploads(self.resource, files)
        if checked.is_err():
            return checked

        async with self.uow:
            repository = self.resource.repository(self.uow)
            if await repository.exists_by_name(command.name):
                return Return.err(self.resource.name_taken())

            values = await self.resource.column_values(self.uow, command)
            if values.is_err():
                return values

            entity = await repository.create(
                self.resource.model(**values.value, created_by=actor_id)
            )
            await self.resource.after_save(self.uow, entity, command)

            stored = await store_uploads(self.storage, self.resource, entity, files, actor_id)
            if stored.is_err():
                logger.warning(f"Upload failed while creating {self.resource.label} {entity.id}")
                return stored
            entity = await repository.update(entity)

            await self.uow.commit()

            return Return.ok(await self.resource.render(self.uow, entity))
