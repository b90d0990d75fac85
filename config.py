import os
from datetime import timedelta

from dotenv import load_dotenv

load_dotenv()

SECRET_KEY = os.environ.get('SECRET_KEY', 'dev_secret_key')
PORT = int(os.environ.get('PORT', '3000'))

LOG_LEVEL = os.environ.get('LOG_LEVEL', 'INFO')
LOG_FILE = os.environ.get('LOG_FILE') or None


# MongoDB
MONGO_URI = os.environ.get('MONGO_URI', 'mongodb://localhost:27017/movievote')
MONGO_DB_NAME = os.environ.get('MONGO_DB_NAME', 'movievote')
MOVIES_COLLECTION = 'movies'


# OAuth provider (42 intra by default)
OAUTH_PROVIDER = os.environ.get('OAUTH_PROVIDER', '42')
OAUTH_CLIENT_ID = os.environ.get('CLIENT_ID', '')
OAUTH_CLIENT_SECRET = os.environ.get('CLIENT_SECRET', '')
OAUTH_CALLBACK_URL = os.environ.get('CALLBACK_URL', 'http://localhost:3000/auth/42/callback')
OAUTH_AUTHORIZE_URL = os.environ.get('OAUTH_AUTHORIZE_URL', 'https://api.intra.42.fr/oauth/authorize')
OAUTH_TOKEN_URL = os.environ.get('OAUTH_TOKEN_URL', 'https://api.intra.42.fr/oauth/token')
OAUTH_PROFILE_URL = os.environ.get('OAUTH_PROFILE_URL', 'https://api.intra.42.fr/v2/me')
OAUTH_SCOPE = os.environ.get('OAUTH_SCOPE', 'public')
OAUTH_TIMEOUT = float(os.environ.get('OAUTH_TIMEOUT', '15'))


# CORS config (for Flask-CORS), only the JSON standings are exposed
CORS_ORIGINS = [
	origin.strip()
	for origin in os.environ.get('CORS_ORIGINS', 'http://localhost:5173,http://localhost:3000').split(',')
	if origin.strip()
]
CORS_RESOURCES = {
	r"/api/*": {
		"origins": CORS_ORIGINS
	}
}
CORS_METHODS = ["GET", "OPTIONS"]


# JWT config for flask_jwt_extended, the session lives in an access cookie
JWT_SECRET_KEY = os.environ.get('JWT_SECRET', SECRET_KEY)
JWT_TOKEN_LOCATION = ["cookies"]
JWT_ACCESS_TOKEN_EXPIRES = timedelta(days=1)
JWT_COOKIE_SECURE = os.environ.get('JWT_COOKIE_SECURE', 'false').lower() in {'1', 'true', 'yes'}
JWT_COOKIE_CSRF_PROTECT = True
JWT_CSRF_CHECK_FORM = True
JWT_CSRF_IN_COOKIES = True
