"""
Update Catalog Item Use Case
"""

import logging
from typing import Dict, Optional
from uuid import UUID

from pydantic import BaseModel

from src.app.services.file_storage import IFileStorage
from src.app.services.unit_of_work import UnitOfWork
from src.domain.base import utc_now
from src.domain.entities import FileField
from src.libs.result import Result, Return
from .dtos import FileUpload
from .file_uploads import check_uploads, store_uploads
from .resources import CatalogResource, parse_json_field

logger = logging.getLogger(__name__)


class UpdateCatalogItemUseCase:
    """
    Use case for replacing the fields of a catalog row.

    Business Rules:
    - Row must exist and not be deleted
    - Name unique among the other non-deleted rows
    - to_be_deleted (products) clears file slots before new uploads land
    - last_edit_by / last_edit_at stamped with the acting account
    """

    def __init__(self, uow: UnitOfWork, resource: CatalogResource, storage: IFileStorage):
        self.uow = uow
        self.resource = resource
        self.storage = storage

    async def execute(
        self,
        item_id: UUID,
        command: BaseModel,
        actor_id: UUID,
        files: Optional[Dict[FileField, FileUpload]] = None,
    ) -> Result[BaseModel]:
        files = files or {}
        checked = check_uploads(self.resource, files)
        if checked.is_err():
            return checked

        to_be_deleted = parse_json_field(
            "to_be_deleted", getattr(command, "to_be_deleted", None), {}
        )
        if to_be_deleted.is_err():
            return to_be_deleted

        async with self.uow:
            repository = self.resource.repository(self.uow)
            entity = await repository.get_by_id(item_id)
            if entity is None:
                return Return.err(self.resource.not_found())

            if command.name != entity.name and await repository.exists_by_name(
                command.name, exclude_id=entity.id
            ):
                return Return.err(self.resource.name_taken())

            values = await self.resource.column_values(self.uow, command)
            if values.is_err():
                return values

            for column, value in values.value.items():
                setattr(entity, column, value)
            for field in self.resource.file_fields:
                if to_be_deleted.value.get(field.value):
                    setattr(entity, field.value, None)
            entity.last_edit_by = actor_id
            entity.last_edit_at = utc_now()

            entity = await repository.update(entity)
            await self.resource.after_save(self.uow, entity, command)

            stored = await store_uploads(self.storage, self.resource, entity, files, actor_id)
            if stored.is_err():
                logger.warning(f"Upload failed while updating {self.resource.label} {entity.id}")
                return stored
            entity = await repository.update(entity)

            await self.uow.commit()

            return Return.ok(await self.resource.render(self.uow, entity))
