# Repository service that contains the repositories the server handlers work with.
class RepoService:
    def __init__(self, user_repo, playlist_repo, upload_repo):
        self.user_repo = user_repo
        self.playlist_repo = playlist_repo
        self.upload_repo = upload_repo
