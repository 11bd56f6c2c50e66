import logging
from aiohttp import hdrs, web
from presentation import messages
from presentation.routes import uploads_routes
from presentation.utils import MAX_UPLOAD_SIZE_KEY, error_handler, error_response


logger = logging.getLogger('handlers')

MP3_CONTENT_TYPES = ('audio/mpeg', 'audio/mp3')


def is_mp3(filename: str, content_type: str) -> bool:
    return content_type in MP3_CONTENT_TYPES or filename.lower().endswith('.mp3')


@uploads_routes.post('/api/upload')
@error_handler
async def upload(request: web.Request):
    max_size = request.app[MAX_UPLOAD_SIZE_KEY]
    if not request.content_type.startswith('multipart/'):
        return error_response(messages.NO_FILE, 400)

    reader = await request.multipart()
    field = await reader.next()
    while field is not None and field.name != 'file':
        field = await reader.next()
    if field is None or not field.filename:
        return error_response(messages.NO_FILE, 400)

    content_type = field.headers.get(hdrs.CONTENT_TYPE, '')
    if not is_mp3(field.filename, content_type):
        return error_response(messages.ONLY_MP3, 400)

    # Read in chunks so an oversized file is refused without buffering all of it
    data = bytearray()
    while True:
        chunk = await field.read_chunk()
        if not chunk:
            break
        data.extend(chunk)
        if len(data) > max_size:
            return error_response(messages.FILE_TOO_LARGE.format(size=max_size // (1024 * 1024)), 400)

    result = await request['repo_service'].upload_repo.save(bytes(data), field.filename)
    logger.info(f"UPLOADED {result.filename}")
    return web.json_response({'message': messages.UPLOADED, 'url': result.url, 'filename': result.filename})
