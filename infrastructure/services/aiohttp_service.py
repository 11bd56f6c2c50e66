from typing import Optional
import aiohttp
from app.domain.services_interfaces.aiohttp_service import AiohttpServiceInterface


class AiohttpService(AiohttpServiceInterface):
    def __init__(self, timeout: float = 10):
        self.timeout = aiohttp.ClientTimeout(total=timeout)
        self.aiohttp_client: Optional[aiohttp.ClientSession] = None

    def _client(self) -> aiohttp.ClientSession:
        # Created lazily, a ClientSession must be built inside a running event loop
        if self.aiohttp_client is None or self.aiohttp_client.closed:
            self.aiohttp_client = aiohttp.ClientSession(timeout=self.timeout)
        return self.aiohttp_client

    async def get(self, url, headers=None, params=None):
        async with self._client().get(url, headers=headers, params=params) as response:
            response.raise_for_status()
            return await response.json()
    
    async def post(self, url, payload):
        async with self._client().post(url, json=payload) as response:
            response.raise_for_status()
            # Any 2xx is an accepted write, a body is optional
            if response.content_type != 'application/json':
                return None
            return await response.json()

    async def post_file(self, url, field, data, filename, content_type):
        form = aiohttp.FormData()
        form.add_field(field, data, filename=filename, content_type=content_type)
        async with self._client().post(url, data=form) as response:
            try:
                return response.status, await response.json()
            except aiohttp.ContentTypeError:
                return response.status, {'error': await response.text()}

    async def close(self):
        if self.aiohttp_client is not None:
            await self.aiohttp_client.close()
            self.aiohttp_client = None
