from typing import Optional
from infrastructure.json_file_store import JsonFileStore
from app.domain.repositories_interfaces.user_repo import UserRepoInterface
from app.domain.entities.user import User


class FileUserRepo(UserRepoInterface):
    """Users kept in one JSON file as a list, in registration order."""

    def __init__(self, store: JsonFileStore):
        self.store = store

    async def get(self, username: str) -> Optional[User]:
        for user in await self.get_all():
            if user.username == username:
                return user
        return None

    async def save(self, user: User) -> None:
        dumped = user.model_dump(by_alias=True)

        def upsert(data: list) -> list:
            data = [item for item in data if item.get('username') != user.username]
            data.append(dumped)
            return data

        await self.store.update(upsert)

    async def get_all(self) -> list[User]:
        return [User.model_validate(item) for item in await self.store.read()]
