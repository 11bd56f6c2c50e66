import asyncio
import json
import os
import aiofiles


class JsonFileStore:
    """
    One JSON document on disk shared by every record of a collection.

    Reads and writes go through a single lock because every write rewrites the whole file.
    The document is written to a temporary file first and moved into place.
    """

    def __init__(self, path: str, default_factory=dict):
        self.path = path
        self.default_factory = default_factory
        self.lock = asyncio.Lock()

    async def _read(self):
        if not os.path.exists(self.path):
            return self.default_factory()
        async with aiofiles.open(self.path, 'r', encoding='utf-8') as f:
            content = await f.read()
        return json.loads(content) if content.strip() else self.default_factory()

    async def _write(self, data) -> None:
        os.makedirs(os.path.dirname(self.path) or '.', exist_ok=True)
        tmp_path = f'{self.path}.tmp'
        async with aiofiles.open(tmp_path, 'w', encoding='utf-8') as f:
            await f.write(json.dumps(data, indent=2, ensure_ascii=False))
        os.replace(tmp_path, self.path)

    async def read(self):
        async with self.lock:
            return await self._read()

    async def update(self, func):
        """
        Applies func to the stored document and writes the result back.

        :param func: Callable receiving the current document and returning the new one.
        :return: The new document.
        """
        async with self.lock:
            data = func(await self._read())
            await self._write(data)
            return data
