from abc import ABC, abstractmethod

from src.libs.result import Result


class IFileStorage(ABC):
    """Stores uploaded files and hands back their public URL"""

    @abstractmethod
    async def save(self, folder: str, file_name: str, content: bytes) -> Result[str]:
        """Persist content under folder/file_name and return its public URL"""
        pass
