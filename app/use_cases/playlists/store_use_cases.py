import logging
from pydantic import ValidationError
from app.domain.entities.playlist import Playlist, load_playlists
from app.domain.errors import InvalidPlaylistsPayloadError
from app.domain.repositories_interfaces.playlist_repo import PlaylistRepoInterface


logger = logging.getLogger('use_cases')


class PlaylistStoreUseCases:
    """Server side access to the authoritative playlist collections."""

    def __init__(self, repo: PlaylistRepoInterface):
        self.repo = repo

    async def get(self, username: str) -> list[Playlist]:
        playlists = await self.repo.get(username)
        logger.info(f"Loading playlists, found {len(playlists)}", extra={'user': username})
        return playlists

    async def replace(self, username: str, payload) -> list[Playlist]:
        """
        Replaces the whole collection of a user with the received payload.

        :param username: Owner of the playlists.
        :param payload: Decoded JSON body, must be a list of playlists.
        :return: The validated collection that was stored.
        :raises InvalidPlaylistsPayloadError: If the payload is not a list of playlists.
        """
        if not isinstance(payload, list):
            raise InvalidPlaylistsPayloadError('Playlists must be an array')
        try:
            playlists = load_playlists(payload)
        except ValidationError as e:
            raise InvalidPlaylistsPayloadError(f'Invalid playlist data: {e.error_count()} errors') from e
        await self.repo.save(username, playlists)
        logger.info(f"Saved {len(playlists)} playlists", extra={'user': username})
        return playlists
