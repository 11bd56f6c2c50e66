import asyncio
import logging
import aiohttp
from app.domain.services_interfaces.aiohttp_service import AiohttpServiceInterface
from app.domain.services_interfaces.upload_service import UploadServiceInterface
from app.domain.entities.upload import UploadResult
from app.domain.errors import UploadError


logger = logging.getLogger('external_apis')


class HttpUploadService(UploadServiceInterface):
    def __init__(self, aiohttp_service: AiohttpServiceInterface, base_url: str):
        self.aiohttp_service = aiohttp_service
        self.url = f"{base_url.rstrip('/')}/api/upload"

    async def upload(self, data: bytes, filename: str) -> UploadResult:
        try:
            status, body = await self.aiohttp_service.post_file(
                self.url, 'file', data, filename, 'audio/mpeg'
            )
        except (aiohttp.ClientError, asyncio.TimeoutError) as e:
            raise UploadError(f'Upload failed: {e!r}') from e
        if status >= 400 or 'url' not in body:
            raise UploadError(body.get('error') or 'Upload failed')
        logger.info(f"Uploaded {filename} to {body['url']}")
        return UploadResult(url=body['url'], filename=body.get('filename', filename))
