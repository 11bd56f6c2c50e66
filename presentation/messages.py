INVALID_CREDENTIALS = 'Invalid username or password'
INVALID_JSON = 'Request body must be valid JSON'
REGISTERED = 'User registered successfully'
LOGGED_IN = 'Login successful'
LOGGED_OUT = 'Logout successful'
PLAYLISTS_SAVED = 'Playlists saved successfully'
PLAYLISTS_NOT_SAVED = 'Failed to save playlists'
NO_FILE = 'No file uploaded'
ONLY_MP3 = 'Only MP3 files are allowed'
FILE_TOO_LARGE = 'File too large. Maximum size is {size}MB'
UPLOADED = 'File uploaded successfully'
INTERNAL_ERROR = 'Internal server error'
