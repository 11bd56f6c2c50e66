from aiohttp import web


class RepoMiddleware:
    # Marks the instance as a new style aiohttp middleware
    __middleware_version__ = 1

    def __init__(self, repo_service):
        self.repo_service = repo_service
    
    async def __call__(self, request: web.Request, handler):
        request['repo_service'] = self.repo_service
        return await handler(request)
