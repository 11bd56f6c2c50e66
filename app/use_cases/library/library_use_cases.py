import logging
import time
from typing import Callable, Optional
from pydantic import BaseModel
from app.domain.entities.playlist import Playlist
from app.domain.entities.search_result import SearchResult
from app.domain.entities.session import Session, SortMode
from app.domain.entities.video import MediaType, Video, extract_youtube_id, thumbnail_url, watch_url
from app.domain.errors import UploadError
from app.domain.services_interfaces.search_service import SearchServiceInterface
from app.domain.services_interfaces.upload_service import UploadServiceInterface
from app.use_cases.playlists.playlist_use_cases import PlaylistUseCases, validate_playlist_name
from app.use_cases.playlists.sync_use_cases import PlaylistSyncUseCases
from app.use_cases.playlists.view_use_cases import (PlaylistView, SearchRow, render_playlist,
                                                    render_search_results, sort_videos)


logger = logging.getLogger('use_cases')


class MutationResult(BaseModel):
    # changed: the collection was modified, synced: the remote store accepted it
    changed: bool
    synced: bool = False
    playlists: list[Playlist] = []
    playlist: Optional[Playlist] = None


class LibraryUseCases:
    """
    User level actions on a playlist library.

    Every action receives the Session it works for. Mutations load the collection
    (remote first), change it in memory and save it to cache and remote. Views are always
    rendered from the collection the action ended with.
    """

    def __init__(self, sync: PlaylistSyncUseCases, search_service: SearchServiceInterface,
                 upload_service: UploadServiceInterface):
        self.sync = sync
        self.search_service = search_service
        self.upload_service = upload_service

    async def _mutate(self, session: Session, action: Callable[[PlaylistUseCases], bool]) -> MutationResult:
        playlists = await self.sync.load_playlists(session.username)
        use_cases = PlaylistUseCases(playlists)
        changed = bool(action(use_cases))
        synced = False
        if changed:
            synced = await self.sync.save_playlists(session.username, use_cases.playlists)
        return MutationResult(
            changed=changed,
            synced=synced,
            playlists=use_cases.playlists,
            playlist=use_cases.get_playlist(session.current_playlist_id),
        )

    async def open(self, session: Session) -> list[Playlist]:
        """
        Loads the library of the session user and makes sure a playlist is selected.

        Keeps the selected playlist when it still exists, otherwise selects the first one.
        """
        playlists = await self.sync.load_playlists(session.username)
        ids = [playlist.id for playlist in playlists]
        if session.current_playlist_id not in ids:
            session.current_playlist_id = ids[0] if ids else None
        return playlists

    async def select_playlist(self, session: Session, playlist_id: str) -> Optional[Playlist]:
        playlists = await self.sync.load_playlists(session.username)
        playlist = PlaylistUseCases(playlists).get_playlist(playlist_id)
        session.current_playlist_id = playlist.id if playlist else None
        session.filter_text = ''
        if not playlist:
            logger.info(f"Playlist {playlist_id} not found", extra={'user': session.username})
        return playlist

    async def create_playlist(self, session: Session, name: str) -> MutationResult:
        # Rejected before anything is loaded or changed
        name = validate_playlist_name(name)
        created = []

        def create(use_cases: PlaylistUseCases) -> bool:
            created.append(use_cases.create_playlist(name))
            return True

        result = await self._mutate(session, create)
        session.current_playlist_id = created[0].id
        session.filter_text = ''
        result.playlist = created[0]
        logger.info(f"Created playlist {name}", extra={'user': session.username})
        return result

    async def rename_playlist(self, session: Session, playlist_id: str, name: str) -> MutationResult:
        name = validate_playlist_name(name)
        return await self._mutate(session, lambda use_cases: use_cases.rename_playlist(playlist_id, name))

    async def delete_playlist(self, session: Session, playlist_id: str) -> MutationResult:
        result = await self._mutate(session, lambda use_cases: use_cases.delete_playlist(playlist_id))
        if session.current_playlist_id == playlist_id or result.playlist is None:
            session.current_playlist_id = result.playlists[0].id if result.playlists else None
            session.filter_text = ''
            result.playlist = result.playlists[0] if result.playlists else None
        return result

    async def add_video(self, session: Session, video: Video, playlist_id: str = None) -> MutationResult:
        """
        Adds a video to a playlist, the selected one by default.

        :return: MutationResult with changed=False if there is no such playlist or the
        video is already in it.
        """
        playlist_id = playlist_id or session.current_playlist_id
        if not playlist_id:
            return MutationResult(changed=False)
        result = await self._mutate(session, lambda use_cases: use_cases.add_video(playlist_id, video))
        if result.changed:
            logger.info(f"Added video {video.video_id} to {playlist_id}", extra={'user': session.username})
        return result

    async def add_search_result(self, session: Session, result: SearchResult,
                                playlist_id: str = None) -> MutationResult:
        video = Video(
            video_id=result.video_id,
            title=result.title,
            source_url=watch_url(result.video_id),
            thumbnail_url=result.thumbnail_url or thumbnail_url(result.video_id),
            media_type=MediaType.STREAMED,
        )
        return await self.add_video(session, video, playlist_id)

    async def add_to_new_playlist(self, session: Session, name: str, result: SearchResult) -> MutationResult:
        """Creates a playlist and adds a search result to it in one save."""
        name = validate_playlist_name(name)
        created = []
        video = Video(
            video_id=result.video_id,
            title=result.title,
            source_url=watch_url(result.video_id),
            thumbnail_url=result.thumbnail_url or thumbnail_url(result.video_id),
        )

        def create_and_add(use_cases: PlaylistUseCases) -> bool:
            playlist = use_cases.create_playlist(name)
            created.append(playlist)
            return use_cases.add_video(playlist.id, video)

        mutation = await self._mutate(session, create_and_add)
        session.current_playlist_id = created[0].id
        session.filter_text = ''
        mutation.playlist = created[0]
        return mutation

    async def add_video_url(self, session: Session, url: str, title: str = None) -> MutationResult:
        video_id = extract_youtube_id(url)
        if not video_id:
            logger.info(f"Not a YouTube url: {url}", extra={'user': session.username})
            return MutationResult(changed=False)
        video = Video(
            video_id=video_id,
            title=title or video_id,
            source_url=watch_url(video_id),
            thumbnail_url=thumbnail_url(video_id),
        )
        return await self.add_video(session, video)

    async def add_local_audio(self, session: Session, title: str, data: bytes, filename: str) -> MutationResult:
        """
        Uploads an MP3 file and adds it to the selected playlist.

        :raises UploadError: If the title is empty, the file is not an MP3 or the upload failed.
        """
        if not session.current_playlist_id:
            return MutationResult(changed=False)
        title = (title or '').strip()
        if not title or not data:
            raise UploadError('Please fill in all fields')
        if not filename.lower().endswith('.mp3'):
            raise UploadError('Please upload an MP3 file')
        uploaded = await self.upload_service.upload(data, filename)
        video = Video(
            video_id=f'mp3_{int(time.time() * 1000)}',
            title=title,
            source_url=uploaded.url,
            thumbnail_url='',
            media_type=MediaType.LOCAL_AUDIO,
        )
        return await self.add_video(session, video)

    async def rate_video(self, session: Session, video_id: str, rating) -> MutationResult:
        playlist_id = session.current_playlist_id
        return await self._mutate(
            session, lambda use_cases: use_cases.set_rating(playlist_id, video_id, rating) is not None
        )

    async def remove_video(self, session: Session, video_id: str) -> MutationResult:
        playlist_id = session.current_playlist_id
        return await self._mutate(session, lambda use_cases: use_cases.remove_video(playlist_id, video_id))

    def set_sort_mode(self, session: Session, mode: SortMode) -> None:
        session.sort_mode = SortMode(mode)

    def toggle_sort_mode(self, session: Session) -> SortMode:
        session.sort_mode = SortMode.RATING if session.sort_mode == SortMode.NAME else SortMode.NAME
        return session.sort_mode

    def set_filter(self, session: Session, text: str) -> None:
        session.filter_text = text or ''

    def render(self, session: Session, playlists: list[Playlist]) -> Optional[PlaylistView]:
        """
        Renders the selected playlist of a collection.

        :return: None if no playlist is selected or it is not in the collection.
        """
        playlist = PlaylistUseCases(playlists).get_playlist(session.current_playlist_id)
        return render_playlist(playlist, session.sort_mode, session.filter_text)

    async def view(self, session: Session) -> Optional[PlaylistView]:
        return self.render(session, await self.sync.load_playlists(session.username))

    async def search(self, session: Session, query: str) -> list[SearchRow]:
        """
        Searches the external catalog and flags results that are already saved.

        Results count as added when they are in the selected playlist, or in any playlist
        when none is selected. Uses the local cache, no remote round trip.
        """
        query = (query or '').strip()
        if not query:
            return []
        results = await self.search_service.search(query)
        playlists = self.sync.cache_repo.read(session.username)
        use_cases = PlaylistUseCases(playlists)
        current = use_cases.get_playlist(session.current_playlist_id)
        scope = [current] if current else playlists
        added_ids = {video.video_id for playlist in scope for video in playlist.videos}
        return render_search_results(results, added_ids)

    def first_to_play(self, session: Session, playlists: list[Playlist]) -> Optional[Video]:
        # Playback starts from the top of the current sort order, the filter is ignored
        playlist = PlaylistUseCases(playlists).get_playlist(session.current_playlist_id)
        if not playlist or not playlist.videos:
            return None
        return sort_videos(playlist.videos, session.sort_mode)[0]
