import re
from enum import Enum
from pydantic import BaseModel, ConfigDict, Field, field_validator
from typing import Optional


MIN_RATING = 1
MAX_RATING = 10


"""
Video Entity:
1. video_id (str): Identifier of the video, unique inside one playlist. Cannot be None.
2. title (str): Title shown in the playlist.
3. source_url (str): Watch url for streamed videos or /mp3/<file> url for uploaded audio.
4. thumbnail_url (str, Optional): Preview image. Uploaded audio has none.
5. media_type (MediaType): Streamed video or uploaded local audio.
6. rating (int): User rating, always in [1, 10]. Defaults to 1.
Field aliases keep the json layout the server stores (videoId, url, thumbnail, type).
"""

class MediaType(str, Enum):
    STREAMED = 'youtube'
    LOCAL_AUDIO = 'mp3'


def clamp_rating(rating) -> int:
    try:
        rating = int(rating)
    except (TypeError, ValueError):
        return MIN_RATING
    # 0 is treated like a missing rating
    if not rating:
        return MIN_RATING
    return max(MIN_RATING, min(MAX_RATING, rating))


class Video(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    video_id: str = Field(alias='videoId')
    title: str = ''
    source_url: str = Field(default='', alias='url')
    thumbnail_url: Optional[str] = Field(default=None, alias='thumbnail')
    media_type: MediaType = Field(default=MediaType.STREAMED, alias='type')
    rating: int = MIN_RATING

    @field_validator('rating', mode='before')
    @classmethod
    def _clamp_rating(cls, value):
        return clamp_rating(value)

    @property
    def playback_url(self) -> str:
        # Streamed videos play in the embedded player, uploaded audio straight from its url
        if self.media_type == MediaType.LOCAL_AUDIO:
            return self.source_url
        return embed_url(self.video_id)


YOUTUBE_ID_PATTERN = re.compile(r'(?:youtube\.com/watch\?v=|youtu\.be/|youtube\.com/embed/)([^&\n?#]+)')


def extract_youtube_id(url: str) -> Optional[str]:
    # Supports watch?v=, youtu.be/ and embed/ urls
    match = YOUTUBE_ID_PATTERN.search(url or '')
    return match.group(1) if match else None


def watch_url(video_id: str) -> str:
    return f'https://www.youtube.com/watch?v={video_id}'


def thumbnail_url(video_id: str) -> str:
    return f'https://img.youtube.com/vi/{video_id}/mqdefault.jpg' if video_id else ''


def embed_url(video_id: str) -> str:
    return f'https://www.youtube.com/embed/{video_id}?autoplay=1' if video_id else ''
