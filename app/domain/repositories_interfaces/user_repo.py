from app.domain.entities.user import User
from abc import ABC, abstractmethod
from typing import Optional

class UserRepoInterface(ABC):
    @abstractmethod
    async def get(self, username: str) -> Optional[User]:
        raise NotImplementedError

    @abstractmethod
    async def save(self, user: User) -> None:
        raise NotImplementedError

    @abstractmethod
    async def get_all(self) -> list[User]:
        raise NotImplementedError
