from contextlib import asynccontextmanager
from config.main_config import API_BASE_URL, CACHE_PATH, REMOTE_TIMEOUT, YOUTUBE_API_KEY, YOUTUBE_MAX_RESULTS
from infrastructure.repositories.playlist.cache_repo import JsonPlaylistCacheRepo
from infrastructure.repositories.playlist.http_repo import HttpPlaylistRepo
from infrastructure.services.aiohttp_service import AiohttpService
from infrastructure.services.upload_service import HttpUploadService
from infrastructure.services.youtube_service import YoutubeSearchService
from app.use_cases.library.library_use_cases import LibraryUseCases
from app.use_cases.playlists.sync_use_cases import PlaylistSyncUseCases


def build_library(aiohttp_service: AiohttpService, base_url: str = API_BASE_URL, cache_path: str = CACHE_PATH,
                  youtube_api_key: str = YOUTUBE_API_KEY) -> LibraryUseCases:
    # Creating repo and service instances for the client side of the library
    sync = PlaylistSyncUseCases(
        remote_repo=HttpPlaylistRepo(aiohttp_service, base_url),
        cache_repo=JsonPlaylistCacheRepo(cache_path),
    )
    return LibraryUseCases(
        sync=sync,
        search_service=YoutubeSearchService(aiohttp_service, youtube_api_key, YOUTUBE_MAX_RESULTS),
        upload_service=HttpUploadService(aiohttp_service, base_url),
    )


@asynccontextmanager
async def open_library(base_url: str = API_BASE_URL, cache_path: str = CACHE_PATH,
                       youtube_api_key: str = YOUTUBE_API_KEY, timeout: float = REMOTE_TIMEOUT):
    """
    Yields a ready LibraryUseCases and closes its HTTP session on exit.

    Usage:
        async with open_library() as library:
            session = Session(username='alice')
            playlists = await library.open(session)
    """
    aiohttp_service = AiohttpService(timeout=timeout)
    try:
        yield build_library(aiohttp_service, base_url, cache_path, youtube_api_key)
    finally:
        await aiohttp_service.close()
