from datetime import datetime, timedelta, timezone
from jose import jwt, JWTError
from app.config import get_settings

# Get settings
settings = get_settings()

def create_access_token(data, expires_delta=None):
    """Create JWT access token"""
    to_encode = data.copy()

    if expires_delta:
        expire = datetime.now(timezone.utc) + expires_delta
    else:
        expire = datetime.now(timezone.utc) + timedelta(minutes=settings["ACCESS_TOKEN_EXPIRE_MINUTES"])

    to_encode.update({"exp": expire})
    encoded_jwt = jwt.encode(to_encode, settings["SECRET_KEY"], algorithm=settings["ALGORITHM"])

    return encoded_jwt

def decode_token(token):
    """Decode JWT token, returning None when it is invalid or expired"""
    try:
        payload = jwt.decode(token, settings["SECRET_KEY"], algorithms=[settings["ALGORITHM"]])
        return payload
    except JWTError:
        return None
