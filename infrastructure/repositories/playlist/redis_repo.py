import json
from infrastructure.redis_config import RedisPool
from app.domain.repositories_interfaces.playlist_repo import PlaylistRepoInterface 
from app.domain.entities.playlist import Playlist, dump_playlists, load_playlists


class RedisPlaylistRepo(PlaylistRepoInterface):
    def __init__(self, redis_pool: RedisPool):
        self.redis_pool = redis_pool
    
    async def get(self, username: str) -> list[Playlist]:
        async with self.redis_pool.get_connection() as conn:
            data = await conn.get(f'playlists:{username}')
            # Users who never saved anything simply have no playlists
            if data:
                return load_playlists(json.loads(data))
            return []

    async def save(self, username: str, playlists: list[Playlist]) -> None:
        async with self.redis_pool.get_connection() as conn:
            # Authoritative copy, so no expiry unlike a cache entry
            await conn.set(f'playlists:{username}', json.dumps(dump_playlists(playlists)))
