import asyncio
import logging
from collections import defaultdict
from app.domain.entities.playlist import Playlist
from app.domain.errors import RemoteUnavailableError
from app.domain.repositories_interfaces.playlist_repo import PlaylistCacheInterface, PlaylistRepoInterface


logger = logging.getLogger('use_cases')


class PlaylistSyncUseCases:
    """
    Keeps the local cache and the remote store of playlists in step.

    Reads prefer the remote store and fall back to the cache when it is unreachable.
    Writes always land in the cache first and reach the remote store on a best effort basis.
    Remote round trips of one username run one at a time, different usernames never wait
    for each other.
    """

    def __init__(self, remote_repo: PlaylistRepoInterface, cache_repo: PlaylistCacheInterface):
        self.remote_repo = remote_repo
        self.cache_repo = cache_repo
        self._locks = defaultdict(asyncio.Lock)
        # Bumped on every local write, lets a load notice a save that started meanwhile
        self._local_versions = defaultdict(int)

    async def load_playlists(self, username: str) -> list[Playlist]:
        """
        Loads the playlists of a user.

        :param username: Owner of the playlists.
        :return: The remote collection, which also replaces the cached one. If the remote
        store fails, the cached collection, possibly stale or empty.
        """
        async with self._locks[username]:
            version = self._local_versions[username]
            try:
                playlists = await self.remote_repo.get(username)
            except RemoteUnavailableError as e:
                logger.warning(f"Remote load failed, using cached playlists: {e}", extra={'user': username})
                return self.cache_repo.read(username)
            if version != self._local_versions[username]:
                # A save queued behind this load wrote newer data to the cache
                logger.info("Local changes made during remote load, keeping cached playlists",
                            extra={'user': username})
                return self.cache_repo.read(username)
            self.cache_repo.write(username, playlists)
            logger.info(f"Loaded {len(playlists)} playlists from remote", extra={'user': username})
            return playlists

    async def save_playlists(self, username: str, playlists: list[Playlist]) -> bool:
        """
        Saves the full playlist collection of a user to both stores.

        :param username: Owner of the playlists.
        :param playlists: The whole collection, it replaces what the stores held.
        :return: True if the remote store accepted the collection. False only means the remote
        copy may be behind this device, the cache is updated either way.
        """
        self.cache_repo.write(username, playlists)
        self._local_versions[username] += 1
        async with self._locks[username]:
            try:
                await self.remote_repo.save(username, playlists)
            except RemoteUnavailableError as e:
                logger.warning(f"Remote save failed, playlists kept in local cache only: {e}",
                               extra={'user': username})
                return False
        logger.info(f"Saved {len(playlists)} playlists to cache and remote", extra={'user': username})
        return True
