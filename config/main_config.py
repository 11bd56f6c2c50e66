import os


SERVER_HOST = os.getenv('SERVER_HOST', '0.0.0.0')
SERVER_PORT = int(os.getenv('SERVER_PORT', '3000'))
DATA_DIR = os.getenv('DATA_DIR', 'data')
UPLOADS_DIR = os.getenv('UPLOADS_DIR', 'uploads')
MAX_UPLOAD_SIZE = int(os.getenv('MAX_UPLOAD_SIZE', str(10 * 1024 * 1024)))

# 'file' keeps users and playlists in JSON files under DATA_DIR, 'redis' keeps them in Redis
STORAGE_BACKEND = os.getenv('STORAGE_BACKEND', 'file')
REDIS_HOST = os.getenv('REDIS_HOST', 'localhost')
REDIS_PORT = int(os.getenv('REDIS_PORT', '6379'))
REDIS_DB = int(os.getenv('REDIS_DB', '0'))

API_BASE_URL = os.getenv('API_BASE_URL', 'http://localhost:3000')
CACHE_PATH = os.getenv('CACHE_PATH', '~/.playlist_sync/cache.json')
REMOTE_TIMEOUT = float(os.getenv('REMOTE_TIMEOUT', '10'))

YOUTUBE_API_KEY = os.getenv('YOUTUBE_API_KEY')
YOUTUBE_MAX_RESULTS = int(os.getenv('YOUTUBE_MAX_RESULTS', '10'))

LOG_FILE = os.getenv('LOG_FILE', 'app.log')
LOG_LEVEL = os.getenv('LOG_LEVEL', 'INFO')
