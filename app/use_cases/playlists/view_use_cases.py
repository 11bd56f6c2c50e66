import re
import unicodedata
from typing import Iterable, Optional
from pydantic import BaseModel
from app.domain.entities.playlist import Playlist
from app.domain.entities.search_result import SearchResult
from app.domain.entities.session import SortMode
from app.domain.entities.video import Video


"""
Rendering of playlists and search results for display.

Every function here is pure: inputs are copied, never reordered or modified in place.
"""

DASHES = re.compile('[–—]')
NUMBER_CHUNKS = re.compile(r'(\d+)')
ISO_DURATION = re.compile(r'PT(?:(\d+)H)?(?:(\d+)M)?(?:(\d+)S)?')


class PlaylistView(BaseModel):
    videos: list[Video]
    # True when the playlist is empty or nothing matches the filter
    no_results: bool


class SearchRow(BaseModel):
    video_id: str
    title: str
    thumbnail_url: Optional[str] = None
    duration_text: str
    views_text: str
    added: bool


def title_key(title: Optional[str]) -> tuple:
    """
    Natural sort key of a title.

    Case and accents are ignored, en and em dashes compare like a plain hyphen and
    runs of digits compare by value, so "Track 2" sorts before "Track 10".
    """
    title = DASHES.sub('-', (title or '').strip())
    title = unicodedata.normalize('NFKD', title.casefold())
    title = ''.join(char for char in title if not unicodedata.combining(char))
    # re.split with a capture group alternates text and digits, starting with text
    chunks = NUMBER_CHUNKS.split(title)
    return tuple(int(chunk) if i % 2 else chunk for i, chunk in enumerate(chunks))


def filter_videos(videos: Iterable[Video], text: str) -> list[Video]:
    text = (text or '').strip().casefold()
    if not text:
        return list(videos)
    return [video for video in videos if text in (video.title or '').casefold()]


def sort_videos(videos: Iterable[Video], mode: SortMode) -> list[Video]:
    if mode == SortMode.RATING:
        return sorted(videos, key=lambda video: (-video.rating, title_key(video.title)))
    return sorted(videos, key=lambda video: title_key(video.title))


def render_videos(videos: Iterable[Video], mode: SortMode, text: str = '') -> PlaylistView:
    """
    Builds the display list of a playlist.

    :param videos: Videos of the playlist in stored order.
    :param mode: Active sort mode.
    :param text: Filter typed by the user, matched against titles.
    :return: PlaylistView with the filtered, sorted videos and a no_results flag.
    """
    shown = sort_videos(filter_videos(videos, text), mode)
    return PlaylistView(videos=shown, no_results=not shown)


def render_playlist(playlist: Optional[Playlist], mode: SortMode, text: str = '') -> Optional[PlaylistView]:
    # None stands for "no playlist selected", an empty view for "nothing to show"
    if playlist is None:
        return None
    return render_videos(playlist.videos, mode, text)


def format_duration(duration: Optional[str]) -> str:
    match = ISO_DURATION.match(duration or '')
    if not duration or not match:
        return 'N/A'
    hours, minutes, seconds = (int(part or 0) for part in match.groups())
    if hours:
        return f'{hours}:{minutes:02d}:{seconds:02d}'
    return f'{minutes}:{seconds:02d}'


def format_view_count(view_count) -> str:
    try:
        count = int(view_count or 0)
    except (TypeError, ValueError):
        count = 0
    if count >= 1_000_000:
        return f'{count / 1_000_000:.1f}M views'
    if count >= 1_000:
        return f'{count / 1_000:.1f}K views'
    return f'{count} views'


def render_search_results(results: Iterable[SearchResult], added_ids: set) -> list[SearchRow]:
    return [
        SearchRow(
            video_id=result.video_id,
            title=result.title,
            thumbnail_url=result.thumbnail_url,
            duration_text=format_duration(result.duration),
            views_text=format_view_count(result.view_count),
            added=result.video_id in added_ids,
        )
        for result in results
    ]
