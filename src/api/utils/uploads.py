from typing import Dict, Optional

from fastapi import UploadFile

from src.app.use_cases.catalog import FileUpload
from src.domain.entities import FileField


async def read_uploads(**slots: Optional[UploadFile]) -> Dict[FileField, FileUpload]:
    """Read the uploaded files of a multipart request into memory, keyed by slot"""
    files: Dict[FileField, FileUpload] = {}
    for slot, upload in slots.items():
        # Browsers send an empty part when the file input is left blank
        if upload is None or not upload.filename:
            continue
        content = await upload.read()
        files[FileField(slot)] = FileUpload(
            filename=upload.filename,
            content_type=upload.content_type or "application/octet-stream",
            content=content,
            size=len(content),
        )
    return files
