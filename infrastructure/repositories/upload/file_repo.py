import os
import random
import time
import aiofiles
from app.domain.repositories_interfaces.upload_repo import UploadRepoInterface
from app.domain.entities.upload import UploadResult


class FileUploadRepo(UploadRepoInterface):
    def __init__(self, uploads_dir: str, url_prefix: str = '/mp3'):
        self.uploads_dir = uploads_dir
        self.url_prefix = url_prefix.rstrip('/')

    @staticmethod
    def unique_filename(filename: str) -> str:
        # timestamp-random-originalname, path components of the client name are dropped
        name = os.path.basename(filename.replace('\\', '/')) or 'upload.mp3'
        return f'{int(time.time() * 1000)}-{random.randint(0, 10**9)}-{name}'

    async def save(self, data: bytes, filename: str) -> UploadResult:
        os.makedirs(self.uploads_dir, exist_ok=True)
        stored_name = self.unique_filename(filename)
        async with aiofiles.open(os.path.join(self.uploads_dir, stored_name), 'wb') as f:
            await f.write(data)
        return UploadResult(url=f'{self.url_prefix}/{stored_name}', filename=stored_name)
