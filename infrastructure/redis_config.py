from redis.asyncio import Redis


class RedisPool:
    def __init__(self, host: str, port: int, db: int):
        self.host = host
        self.port = port
        self.db = db
        self.pool = None

    async def create_pool(self):
        self.pool = Redis(host=self.host, port=self.port, db=self.db)
        await self.pool.ping()

    def get_connection(self) -> Redis:
        # Client sharing the pool, closing it leaves the pool open
        return self.pool.client()
    
    async def close_pool(self):
        await self.pool.aclose()
        self.pool = None
