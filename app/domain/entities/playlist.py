from pydantic import BaseModel, ConfigDict, TypeAdapter
from app.domain.entities.video import Video

"""
Playlist Entity:
1. id (str): Opaque unique identifier generated on creation. Never changes.
2. name (str): Name of the playlist. Can be renamed but never empty.
3. videos (list): Ordered list of Video instances, kept in insertion order.
"""

class Playlist(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    id: str
    name: str
    videos: list[Video] = []

    def find_video(self, video_id: str):
        for video in self.videos:
            if video.video_id == video_id:
                return video
        return None


playlists_adapter = TypeAdapter(list[Playlist])


def dump_playlists(playlists: list[Playlist]) -> list[dict]:
    # Shape stored by the cache and the server: camelCase keys, enum values as strings
    return playlists_adapter.dump_python(playlists, mode='json', by_alias=True)


def load_playlists(data) -> list[Playlist]:
    return playlists_adapter.validate_python(data)
