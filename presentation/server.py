import logging
import os
from aiohttp import web
from config.logging_config import setup_logging
from config.main_config import (DATA_DIR, MAX_UPLOAD_SIZE, REDIS_DB, REDIS_HOST, REDIS_PORT, SERVER_HOST,
                                SERVER_PORT, STORAGE_BACKEND, UPLOADS_DIR)
from infrastructure.json_file_store import JsonFileStore
from infrastructure.redis_config import RedisPool
from infrastructure.repositories.playlist.file_repo import FilePlaylistRepo
from infrastructure.repositories.playlist.redis_repo import RedisPlaylistRepo
from infrastructure.repositories.user.file_repo import FileUserRepo
from infrastructure.repositories.user.redis_repo import RedisUserRepo
from infrastructure.repositories.upload.file_repo import FileUploadRepo
from infrastructure.services.repo_service import RepoService
from presentation.middlewares.repo_middleware import RepoMiddleware
from presentation.routes import playlists_routes, uploads_routes, users_routes
from presentation.utils import MAX_UPLOAD_SIZE_KEY
from presentation.handlers import playlists, uploads, users # Importing handlers to register them in route tables


logger = logging.getLogger('handlers')


def create_app(repo_service: RepoService, uploads_dir: str, max_upload_size: int) -> web.Application:
    os.makedirs(uploads_dir, exist_ok=True)
    app = web.Application(middlewares=[RepoMiddleware(repo_service)])
    app[MAX_UPLOAD_SIZE_KEY] = max_upload_size
    app.add_routes(users_routes)
    app.add_routes(playlists_routes)
    app.add_routes(uploads_routes)
    # Uploaded files are played back from here
    app.router.add_static('/mp3', uploads_dir)
    return app


def file_repo_service(data_dir: str, uploads_dir: str) -> RepoService:
    users_store = JsonFileStore(os.path.join(data_dir, 'users.json'), default_factory=list)
    playlists_store = JsonFileStore(os.path.join(data_dir, 'playlists.json'), default_factory=dict)
    return RepoService(
        user_repo=FileUserRepo(users_store),
        playlist_repo=FilePlaylistRepo(playlists_store),
        upload_repo=FileUploadRepo(uploads_dir),
    )


def redis_repo_service(redis_pool: RedisPool, uploads_dir: str) -> RepoService:
    return RepoService(
        user_repo=RedisUserRepo(redis_pool),
        playlist_repo=RedisPlaylistRepo(redis_pool),
        upload_repo=FileUploadRepo(uploads_dir),
    )


def build_app() -> web.Application:
    if STORAGE_BACKEND == 'redis':
        redis_pool = RedisPool(host=REDIS_HOST, port=REDIS_PORT, db=REDIS_DB)
        app = create_app(redis_repo_service(redis_pool, UPLOADS_DIR), UPLOADS_DIR, MAX_UPLOAD_SIZE)

        async def redis_lifecycle(app):
            await redis_pool.create_pool()
            yield
            await redis_pool.close_pool()

        app.cleanup_ctx.append(redis_lifecycle)
    elif STORAGE_BACKEND == 'file':
        os.makedirs(DATA_DIR, exist_ok=True)
        app = create_app(file_repo_service(DATA_DIR, UPLOADS_DIR), UPLOADS_DIR, MAX_UPLOAD_SIZE)
    else:
        raise ValueError(f"Unknown storage backend: {STORAGE_BACKEND}")
    logger.info(f"Storage backend: {STORAGE_BACKEND}, uploads directory: {UPLOADS_DIR}")
    return app


def main():
    setup_logging()
    web.run_app(build_app(), host=SERVER_HOST, port=SERVER_PORT)


if __name__ == '__main__':
    main()
