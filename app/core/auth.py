import logging
from typing import Optional

from fastapi import Depends, Header, HTTPException, status
from fastapi.security import HTTPBearer, HTTPAuthorizationCredentials

from app.core.security import decode_token
from app.database.mongo_connection import get_database
from app.models import user as user_model

logger = logging.getLogger(__name__)

# Security scheme
security = HTTPBearer(auto_error=False)

async def verify_token_and_get_user(db, token):
    """Verify JWT token and return the user it belongs to"""
    payload = decode_token(token)
    if not payload:
        return None

    user_id = payload.get("user_id")
    if not user_id:
        return None

    return await user_model.get_user_by_id(db, user_id)

async def get_current_user(
    credentials: Optional[HTTPAuthorizationCredentials] = Depends(security),
    x_auth_token: Optional[str] = Header(None, alias="x-auth-token"),
    db = Depends(get_database)
):
    """
    Get the current user based on the token

    Accepts either an ``Authorization: Bearer`` header or the legacy
    ``x-auth-token`` header.
    """
    token = credentials.credentials if credentials else x_auth_token
    if not token:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Authentication credentials required",
            headers={"WWW-Authenticate": "Bearer"},
        )

    user = await verify_token_and_get_user(db, token)

    if not user:
        logger.warning("Rejected request with an invalid token")
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Could not validate credentials",
            headers={"WWW-Authenticate": "Bearer"},
        )

    return user
