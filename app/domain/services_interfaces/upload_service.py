from abc import ABC, abstractmethod
from app.domain.entities.upload import UploadResult


class UploadServiceInterface(ABC):
    @abstractmethod
    async def upload(self, data: bytes, filename: str) -> UploadResult:
        """
        Uploads a local audio file and returns the url it can be played from.

        :raises UploadError: If the upload was rejected or failed
        """
        pass
