from infrastructure.json_file_store import JsonFileStore
from app.domain.repositories_interfaces.playlist_repo import PlaylistRepoInterface
from app.domain.entities.playlist import Playlist, dump_playlists, load_playlists


class FilePlaylistRepo(PlaylistRepoInterface):
    """Playlists of all users kept in one JSON file as {username: [playlist, ...]}."""

    def __init__(self, store: JsonFileStore):
        self.store = store

    async def get(self, username: str) -> list[Playlist]:
        data = await self.store.read()
        return load_playlists(data.get(username, []))

    async def save(self, username: str, playlists: list[Playlist]) -> None:
        dumped = dump_playlists(playlists)

        def replace_user_playlists(data: dict) -> dict:
            data[username] = dumped
            return data

        await self.store.update(replace_user_playlists)
