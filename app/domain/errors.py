"""
Errors raised by the playlist application.

Only failures that callers must react to are exceptions. Unknown ids and duplicate
videos are reported through return values of the use cases instead.
"""


class PlaylistAppError(Exception):
    """Base class for every application error."""

    def __init__(self, message: str = ''):
        super().__init__(message)
        self.message = message


class RemoteUnavailableError(PlaylistAppError):
    """The remote playlist store could not be reached or answered with an error."""


class UploadError(PlaylistAppError):
    """An audio file could not be uploaded."""


class InvalidPlaylistNameError(PlaylistAppError):
    """Playlist name is empty."""


class UserValidationError(PlaylistAppError):
    """Registration or login data is incomplete or does not follow the rules."""


class UserExistsError(PlaylistAppError):
    """Username is already taken."""


class InvalidPlaylistsPayloadError(PlaylistAppError):
    """Data sent to the playlist store is not a list of playlists."""
