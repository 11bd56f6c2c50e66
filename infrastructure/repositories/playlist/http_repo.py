import asyncio
import logging
from urllib.parse import quote
import aiohttp
from app.domain.services_interfaces.aiohttp_service import AiohttpServiceInterface
from app.domain.repositories_interfaces.playlist_repo import PlaylistRepoInterface
from app.domain.entities.playlist import Playlist, dump_playlists, load_playlists
from app.domain.errors import RemoteUnavailableError


logger = logging.getLogger('external_apis')


class HttpPlaylistRepo(PlaylistRepoInterface):
    """Remote playlist store reached through the companion server API."""

    def __init__(self, aiohttp_service: AiohttpServiceInterface, base_url: str):
        self.aiohttp_service = aiohttp_service
        self.base_url = base_url.rstrip('/')

    def _url(self, username: str) -> str:
        return f"{self.base_url}/api/playlists/{quote(username, safe='')}"

    async def get(self, username: str) -> list[Playlist]:
        try:
            data = await self.aiohttp_service.get(self._url(username))
            return load_playlists(data)
        except (aiohttp.ClientError, asyncio.TimeoutError, ValueError) as e:
            # ValueError covers broken JSON bodies and pydantic ValidationError
            raise RemoteUnavailableError(f'Failed to load playlists: {e!r}') from e

    async def save(self, username: str, playlists: list[Playlist]) -> None:
        try:
            await self.aiohttp_service.post(self._url(username), dump_playlists(playlists))
        except (aiohttp.ClientError, asyncio.TimeoutError, ValueError) as e:
            raise RemoteUnavailableError(f'Failed to save playlists: {e!r}') from e
