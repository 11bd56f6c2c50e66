from app.domain.entities.upload import UploadResult
from abc import ABC, abstractmethod


class UploadRepoInterface(ABC):
    @abstractmethod
    async def save(self, data: bytes, filename: str) -> UploadResult:
        raise NotImplementedError
