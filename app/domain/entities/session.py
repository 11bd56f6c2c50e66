from enum import Enum
from pydantic import BaseModel
from typing import Optional


class SortMode(str, Enum):
    NAME = 'name'
    RATING = 'rating'


"""
Session Entity:
Per-user context passed into every library operation.
1. username (str): Owner of the playlists being edited.
2. current_playlist_id (str, Optional): Selected playlist, None when nothing is selected.
3. sort_mode (SortMode): Active sort order of the playlist view.
4. filter_text (str): Text typed into the playlist filter, empty string shows everything.
"""
class Session(BaseModel):
    username: str
    current_playlist_id: Optional[str] = None
    sort_mode: SortMode = SortMode.NAME
    filter_text: str = ''
