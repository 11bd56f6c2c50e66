from aiohttp import web


users_routes = web.RouteTableDef()
playlists_routes = web.RouteTableDef()
uploads_routes = web.RouteTableDef()
