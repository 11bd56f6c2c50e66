import functools
import json
import logging
from aiohttp import web
from presentation import messages


logger = logging.getLogger('handlers')

MAX_UPLOAD_SIZE_KEY = web.AppKey('max_upload_size', int)


def error_response(message: str, status: int) -> web.Response:
    return web.json_response({'error': message}, status=status)


def error_handler(func):
    """
    A decorator that wraps request handlers to handle unexpected exceptions.

    HTTP exceptions raised on purpose are passed through. Anything else is logged with
    its traceback and answered with a 500 JSON error.

    :param func: The asynchronous handler to be wrapped.
    :return: The wrapped handler with error handling.
    """
    @functools.wraps(func)
    async def wrapper(request: web.Request):
        try:
            return await func(request)
        except web.HTTPException:
            raise
        except Exception as e:
            user = request.match_info.get('username', 'SYSTEM')
            logger.error(f"Error in {func.__name__}: {e}", exc_info=True, extra={'user': user})
            return error_response(messages.INTERNAL_ERROR, 500)
    return wrapper


async def read_body(request: web.Request):
    """
    Reads a JSON or form encoded request body.

    :return: The decoded body or None if a JSON body could not be parsed.
    """
    if request.content_type == 'application/json':
        try:
            return await request.json()
        except json.JSONDecodeError:
            return None
    return dict(await request.post())
