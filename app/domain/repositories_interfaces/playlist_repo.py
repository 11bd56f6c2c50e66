from app.domain.entities.playlist import Playlist
from abc import ABC, abstractmethod


class PlaylistRepoInterface(ABC):
    """Authoritative store of playlist collections, one record per username."""

    @abstractmethod
    async def get(self, username: str) -> list[Playlist]:
        raise NotImplementedError

    @abstractmethod
    async def save(self, username: str, playlists: list[Playlist]) -> None:
        raise NotImplementedError


class PlaylistCacheInterface(ABC):
    """Local copy of playlist collections. Reads and writes are synchronous and never fail."""

    @abstractmethod
    def read(self, username: str) -> list[Playlist]:
        raise NotImplementedError

    @abstractmethod
    def write(self, username: str, playlists: list[Playlist]) -> None:
        raise NotImplementedError
