from pydantic import BaseModel
from typing import Optional


"""
SearchResult Entity:
Candidate video returned by the external catalog search.
1. video_id (str): Catalog id of the video.
2. title (str): Video title.
3. thumbnail_url (str, Optional): Medium size thumbnail.
4. duration (str, Optional): ISO 8601 duration, e.g. PT3M21S.
5. view_count (int): Number of views, 0 when the catalog does not report it.
"""
class SearchResult(BaseModel):
    video_id: str
    title: str
    thumbnail_url: Optional[str] = None
    duration: Optional[str] = None
    view_count: int = 0
    description: Optional[str] = None
    channel_title: Optional[str] = None
