import asyncio
import logging
from pathlib import Path
from typing import Iterable

from src.app.services.file_storage import IFileStorage
from src.libs.result import Error, ErrorKind, Result, Return

logger = logging.getLogger(__name__)

PUBLIC_FOLDERS = ("manufacturers", "tools", "techniques", "products")


class LocalFileStorage(IFileStorage):
    """Public folder on the local filesystem (served as static files)"""

    def __init__(self, root: str, public_url: str):
        self.root = Path(root)
        self.public_url = public_url.rstrip("/")

    def ensure_folders(self, folders: Iterable[str] = PUBLIC_FOLDERS) -> None:
        """Create the public folder and its per-resource subfolders if missing"""
        for folder in folders:
            self.root.joinpath(folder).mkdir(parents=True, exist_ok=True)

    async def save(self, folder: str, file_name: str, content: bytes) -> Result[str]:
        # Keep only the file name part to avoid directory traversal
        safe_name = Path(file_name).name
        target = self.root.joinpath(Path(folder).name, safe_name)
        try:
            target.parent.mkdir(parents=True, exist_ok=True)
            await asyncio.to_thread(target.write_bytes, content)
        except OSError as exc:
            logger.error(f"Failed to write {target}: {exc}")
            return Return.err(
                Error("UPLOAD_FAILED", "Failed to upload file!", ErrorKind.internal)
            )
        return Return.ok(f"{self.public_url}/{Path(folder).name}/{safe_name}")
