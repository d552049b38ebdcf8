from jose import jwt
from datetime import datetime, timedelta, timezone

from app.core.settings import get_auth_data, ACCESS_TOKEN_EXPIRE_MINUTES


def create_access_token(data: dict, expires_delta: timedelta | None = None) -> str:
    to_encode = data.copy()
    expire = datetime.now(timezone.utc) + (
        expires_delta or timedelta(minutes=ACCESS_TOKEN_EXPIRE_MINUTES)
    )
    to_encode.update({"exp": expire})
    auth_data = get_auth_data()
    encode_jwt = jwt.encode(
        to_encode, 
        auth_data["secret_key"], 
        algorithm=auth_data["algorithm"]
    )
    return encode_jwt
