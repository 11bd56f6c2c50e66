"""Shared fixtures: in-memory fakes for the remote store, search and upload services"""

import asyncio
import pytest
from app.domain.entities.playlist import Playlist, dump_playlists, load_playlists
from app.domain.entities.search_result import SearchResult
from app.domain.entities.session import Session
from app.domain.entities.upload import UploadResult
from app.domain.entities.video import Video
from app.domain.errors import RemoteUnavailableError, UploadError
from app.domain.repositories_interfaces.playlist_repo import PlaylistRepoInterface
from app.domain.services_interfaces.search_service import SearchServiceInterface
from app.domain.services_interfaces.upload_service import UploadServiceInterface
from app.use_cases.library.library_use_cases import LibraryUseCases
from app.use_cases.playlists.sync_use_cases import PlaylistSyncUseCases
from infrastructure.repositories.playlist.cache_repo import JsonPlaylistCacheRepo


class FakeRemoteRepo(PlaylistRepoInterface):
    """Remote store kept in memory. Stores copies so callers never share objects with it."""

    def __init__(self):
        self.data = {}
        self.fail = False
        self.gate = None
        self.delay = 0
        self.in_flight = 0
        self.max_in_flight = 0
        self.saves = []

    async def _round_trip(self):
        self.in_flight += 1
        self.max_in_flight = max(self.max_in_flight, self.in_flight)
        try:
            if self.gate is not None:
                await self.gate.wait()
            if self.delay:
                await asyncio.sleep(self.delay)
        finally:
            self.in_flight -= 1
        if self.fail:
            raise RemoteUnavailableError('remote down')

    async def get(self, username: str) -> list[Playlist]:
        await self._round_trip()
        return load_playlists(dump_playlists(self.data.get(username, [])))

    async def save(self, username: str, playlists: list[Playlist]) -> None:
        await self._round_trip()
        self.data[username] = load_playlists(dump_playlists(playlists))
        self.saves.append(username)


class FakeSearchService(SearchServiceInterface):
    def __init__(self):
        self.results = []
        self.queries = []

    async def search(self, query: str) -> list[SearchResult]:
        self.queries.append(query)
        return list(self.results)


class FakeUploadService(UploadServiceInterface):
    def __init__(self):
        self.uploads = []
        self.fail = False

    async def upload(self, data: bytes, filename: str) -> UploadResult:
        if self.fail:
            raise UploadError('Upload failed')
        self.uploads.append((data, filename))
        stored = f'1700000000000-42-{filename}'
        return UploadResult(url=f'/mp3/{stored}', filename=stored)


@pytest.fixture
def make_video():
    def factory(video_id, title=None, rating=1, **kwargs):
        return Video(video_id=video_id, title=title if title is not None else video_id, rating=rating, **kwargs)
    return factory


@pytest.fixture
def make_playlist():
    def factory(playlist_id, name=None, videos=None):
        return Playlist(id=playlist_id, name=name or playlist_id, videos=videos or [])
    return factory


@pytest.fixture
def remote():
    return FakeRemoteRepo()


@pytest.fixture
def cache_path(tmp_path):
    return str(tmp_path / 'cache' / 'playlists.json')


@pytest.fixture
def cache(cache_path):
    return JsonPlaylistCacheRepo(cache_path)


@pytest.fixture
def sync(remote, cache):
    return PlaylistSyncUseCases(remote_repo=remote, cache_repo=cache)


@pytest.fixture
def search_service():
    return FakeSearchService()


@pytest.fixture
def upload_service():
    return FakeUploadService()


@pytest.fixture
def library(sync, search_service, upload_service):
    return LibraryUseCases(sync=sync, search_service=search_service, upload_service=upload_service)


@pytest.fixture
def session():
    return Session(username='alice')


@pytest.fixture
def aiohttp_unused_port(unused_tcp_port_factory):
    """pytest-aiohttp >= 1.0 dropped this fixture; pytest-asyncio's factory is its replacement."""
    return unused_tcp_port_factory
