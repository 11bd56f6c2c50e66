import json
import logging
from aiohttp import web
from app.domain.entities.playlist import dump_playlists
from app.domain.errors import InvalidPlaylistsPayloadError
from app.use_cases.playlists.store_use_cases import PlaylistStoreUseCases
from presentation import messages
from presentation.routes import playlists_routes
from presentation.utils import error_handler, error_response


logger = logging.getLogger('handlers')


def get_use_cases(request: web.Request) -> PlaylistStoreUseCases:
    return PlaylistStoreUseCases(repo=request['repo_service'].playlist_repo)


@playlists_routes.get('/api/playlists/{username}')
@error_handler
async def get_playlists(request: web.Request):
    username = request.match_info['username']
    logger.info("LOAD PLAYLISTS", extra={'user': username})
    playlists = await get_use_cases(request).get(username)
    return web.json_response(dump_playlists(playlists))


@playlists_routes.post('/api/playlists/{username}')
@error_handler
async def save_playlists(request: web.Request):
    username = request.match_info['username']
    logger.info("SAVE PLAYLISTS", extra={'user': username})
    try:
        payload = await request.json()
    except json.JSONDecodeError:
        return error_response(messages.INVALID_JSON, 400)
    try:
        await get_use_cases(request).replace(username, payload)
    except InvalidPlaylistsPayloadError as e:
        logger.error(f"Rejected playlists payload: {e.message}", extra={'user': username})
        return error_response(e.message, 400)
    except OSError as e:
        logger.error(f"Failed to save playlists: {e}", exc_info=True, extra={'user': username})
        return error_response(messages.PLAYLISTS_NOT_SAVED, 500)
    return web.json_response({'message': messages.PLAYLISTS_SAVED})
