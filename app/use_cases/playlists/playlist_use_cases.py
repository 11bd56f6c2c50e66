import logging
import uuid
from typing import Optional
from app.domain.entities.playlist import Playlist
from app.domain.entities.video import Video, clamp_rating
from app.domain.errors import InvalidPlaylistNameError


logger = logging.getLogger('use_cases')


def validate_playlist_name(name) -> str:
    name = (name or '').strip()
    if not name:
        raise InvalidPlaylistNameError('Playlist name cannot be empty')
    return name


def generate_playlist_id() -> str:
    return uuid.uuid4().hex


class PlaylistUseCases:
    """
    In-memory operations on the playlists of one user.

    Nothing here touches storage: callers load the collection, apply changes through
    this class and persist ``playlists`` afterwards.
    """

    def __init__(self, playlists: list[Playlist]):
        self.playlists = playlists

    def get_playlist(self, playlist_id: str) -> Optional[Playlist]:
        for playlist in self.playlists:
            if playlist.id == playlist_id:
                return playlist
        return None

    def create_playlist(self, name: str) -> Playlist:
        """
        Creates an empty playlist and appends it to the collection.

        :param name: Name of the playlist. Leading and trailing spaces are dropped.
        :return: The new Playlist instance.
        :raises InvalidPlaylistNameError: If the name is empty.
        """
        playlist = Playlist(id=generate_playlist_id(), name=validate_playlist_name(name))
        self.playlists.append(playlist)
        return playlist

    def rename_playlist(self, playlist_id: str, name: str) -> bool:
        name = validate_playlist_name(name)
        playlist = self.get_playlist(playlist_id)
        if not playlist:
            return False
        playlist.name = name
        return True

    def add_video(self, playlist_id: str, video: Video) -> bool:
        """
        Appends a video to the end of a playlist.

        :param playlist_id: The playlist to add the video to.
        :param video: The Video instance to add.
        :return: False if the playlist is unknown or already contains the video, True otherwise.
        """
        playlist = self.get_playlist(playlist_id)
        if not playlist:
            logger.info(f"Playlist {playlist_id} not found, video {video.video_id} skipped")
            return False
        if playlist.find_video(video.video_id):
            logger.info(f"Video {video.video_id} is already in playlist {playlist_id}")
            return False
        playlist.videos.append(video)
        return True

    def set_rating(self, playlist_id: str, video_id: str, rating) -> Optional[int]:
        """
        Stores a rating for a video, clamped into the allowed range.

        :return: The rating actually stored or None if the video was not found.
        """
        playlist = self.get_playlist(playlist_id)
        video = playlist.find_video(video_id) if playlist else None
        if not video:
            return None
        video.rating = clamp_rating(rating)
        return video.rating

    def remove_video(self, playlist_id: str, video_id: str) -> bool:
        playlist = self.get_playlist(playlist_id)
        if not playlist:
            return False
        videos = [video for video in playlist.videos if video.video_id != video_id]
        removed = len(videos) != len(playlist.videos)
        playlist.videos = videos
        return removed

    def delete_playlist(self, playlist_id: str) -> bool:
        playlists = [playlist for playlist in self.playlists if playlist.id != playlist_id]
        removed = len(playlists) != len(self.playlists)
        # Mutate in place so every holder of the list sees the change
        self.playlists[:] = playlists
        return removed

    def contains_video(self, video_id: str) -> bool:
        return any(playlist.find_video(video_id) for playlist in self.playlists)
