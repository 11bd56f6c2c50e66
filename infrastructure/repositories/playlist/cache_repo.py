import json
import logging
import os
from pydantic import ValidationError
from app.domain.repositories_interfaces.playlist_repo import PlaylistCacheInterface
from app.domain.entities.playlist import Playlist, dump_playlists, load_playlists


logger = logging.getLogger('repositories')


class JsonPlaylistCacheRepo(PlaylistCacheInterface):
    """
    Local cache of playlists, persisted to a JSON file so it survives restarts.

    The in-memory copy is the one served to readers; the file is only loaded once on
    creation and rewritten after every write. A failing disk never makes a write fail,
    the data stays available from memory until the process exits.
    """

    def __init__(self, path: str):
        self.path = os.path.expanduser(path)
        self.data = self._load()

    def _load(self) -> dict:
        if not os.path.exists(self.path):
            return {}
        try:
            with open(self.path, 'r', encoding='utf-8') as f:
                data = json.load(f)
        except (OSError, ValueError) as e:
            logger.error(f"Playlist cache {self.path} is unreadable, starting empty: {e}")
            return {}
        if not isinstance(data, dict):
            logger.error(f"Playlist cache {self.path} has unexpected layout, starting empty")
            return {}
        return data

    def read(self, username: str) -> list[Playlist]:
        try:
            return load_playlists(self.data.get(username, []))
        except ValidationError as e:
            logger.error(f"Cached playlists are invalid, ignoring them: {e}", extra={'user': username})
            return []

    def write(self, username: str, playlists: list[Playlist]) -> None:
        self.data[username] = dump_playlists(playlists)
        try:
            os.makedirs(os.path.dirname(self.path) or '.', exist_ok=True)
            tmp_path = f'{self.path}.tmp'
            with open(tmp_path, 'w', encoding='utf-8') as f:
                json.dump(self.data, f, ensure_ascii=False)
            os.replace(tmp_path, self.path)
        except OSError as e:
            logger.error(f"Could not persist playlist cache to {self.path}: {e}",
                         exc_info=True, extra={'user': username})
