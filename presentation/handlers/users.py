import logging
from aiohttp import web
from app.domain.errors import UserExistsError, UserValidationError
from app.use_cases.users.user_use_cases import UserUseCases
from presentation import messages
from presentation.routes import users_routes
from presentation.utils import error_handler, error_response, read_body


logger = logging.getLogger('handlers')


def get_use_cases(request: web.Request) -> UserUseCases:
    return UserUseCases(repo=request['repo_service'].user_repo)


@users_routes.get('/api/users')
@error_handler
async def get_users(request: web.Request):
    users = await get_use_cases(request).get_all()
    return web.json_response([user.public_dump() for user in users])


@users_routes.post('/api/register')
@error_handler
async def register(request: web.Request):
    body = await read_body(request)
    if not isinstance(body, dict):
        return error_response(messages.INVALID_JSON, 400)
    username = body.get('username')
    logger.info("REGISTER", extra={'user': username})
    try:
        user = await get_use_cases(request).register(
            username=username,
            password=body.get('password'),
            display_name=body.get('firstName'),
            avatar_url=body.get('imageUrl'),
        )
    except (UserValidationError, UserExistsError) as e:
        return error_response(e.message, 400)
    return web.json_response({'message': messages.REGISTERED, 'user': user.public_dump()}, status=201)


@users_routes.post('/api/login')
@error_handler
async def login(request: web.Request):
    body = await read_body(request)
    if not isinstance(body, dict):
        return error_response(messages.INVALID_JSON, 400)
    username = body.get('username')
    logger.info("LOGIN", extra={'user': username})
    try:
        user = await get_use_cases(request).login(username, body.get('password'))
    except UserValidationError as e:
        return error_response(e.message, 400)
    if not user:
        return error_response(messages.INVALID_CREDENTIALS, 401)
    return web.json_response({'message': messages.LOGGED_IN, 'user': user.public_dump()})


@users_routes.post('/api/logout')
@error_handler
async def logout(request: web.Request):
    # Sessions live on the client, nothing to clear here
    return web.json_response({'message': messages.LOGGED_OUT})
