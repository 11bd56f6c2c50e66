from typing import Optional
from infrastructure.redis_config import RedisPool
from app.domain.repositories_interfaces.user_repo import UserRepoInterface
from app.domain.entities.user import User


class RedisUserRepo(UserRepoInterface):
    def __init__(self, redis_pool: RedisPool):
        self.redis_pool = redis_pool
    
    async def get(self, username: str) -> Optional[User]:
        async with self.redis_pool.get_connection() as conn:
            data = await conn.get(f'user:{username}')
            if data:
                return User.model_validate_json(data)
            return None

    async def save(self, user: User) -> None:
        async with self.redis_pool.get_connection() as conn:
            await conn.set(f'user:{user.username}', user.model_dump_json(by_alias=True))

    async def get_all(self) -> list[User]:
        async with self.redis_pool.get_connection() as conn:
            users = []
            async for key in conn.scan_iter(match='user:*'):
                data = await conn.get(key)
                if data:
                    users.append(User.model_validate_json(data))
            return sorted(users, key=lambda user: user.username)
