from .auth import create_access_token
