"""
Upload handling shared by the create and update use cases.
"""

import time
from typing import Dict, Optional

from src.app.services.file_storage import IFileStorage
from src.domain.base import utc_now
from src.domain.entities import FileField
from src.libs.result import Error, ErrorKind, Result, Return
from .dtos import FileUpload
from .resources import CatalogResource


def check_uploads(resource: CatalogResource, files: Dict[FileField, FileUpload]) -> Result[None]:
    """Reject unknown slots and MIME subtypes before anything is written"""
    for field, upload in files.items():
        allowed = resource.file_fields.get(field)
        if allowed is None:
            return Return.err(
                Error(
                    "UNKNOWN_FILE_FIELD",
                    f"File name must be one of {_slots(resource)}",
                    ErrorKind.validation,
                )
            )
        if upload.content_type.split("/")[-1] not in allowed:
            return Return.err(
                Error("WRONG_FILE_TYPE", f"Wrong {field.value} type!", ErrorKind.validation)
            )
    return Return.ok()


async def store_uploads(
    storage: IFileStorage,
    resource: CatalogResource,
    entity,
    files: Dict[FileField, FileUpload],
    actor_id,
) -> Result[None]:
    """
    Save every upload and attach its metadata to the entity.

    Files are named ``{id}_{field}_{epoch_ms}.{subtype}``. An upload whose
    name matches the file already attached to the slot is skipped.
    """
    for field, upload in files.items():
        current: Optional[dict] = getattr(entity, field.value)
        if current and current.get("name") == upload.filename:
            continue

        subtype = upload.content_type.split("/")[-1]
        file_name = f"{entity.id}_{field.value}_{int(time.time() * 1000)}.{subtype}"
        saved = await storage.save(resource.folder, file_name, upload.content)
        if saved.is_err():
            return Return.err(
                Error(saved.error.code, f"Failed to upload {field.value}!", ErrorKind.internal)
            )

        setattr(
            entity,
            field.value,
            {
                "url": saved.value,
                "name": upload.filename,
                "mimetype": upload.content_type,
                "size": upload.size,
            },
        )
        entity.last_edit_by = actor_id
        entity.last_edit_at = utc_now()
    return Return.ok()


def _slots(resource: CatalogResource) -> str:
    return ", ".join(field.value for field in resource.file_fields)
