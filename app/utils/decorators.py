"""
Decorators for the DevConnector API
"""

import functools
import logging
from typing import Callable

logger = logging.getLogger(__name__)

def require_authentication(func: Callable) -> Callable:
    """
    Decorator that marks an endpoint as private

    Usage:
    @require_authentication
    async def my_endpoint(current_user = Depends(get_current_user)):
        pass
    """
    @functools.wraps(func)
    async def wrapper(*args, **kwargs):
        # The actual authentication is handled by FastAPI's Depends system
        return await func(*args, **kwargs)
    wrapper.requires_authentication = True
    return wrapper

def log_endpoint_access(func: Callable) -> Callable:
    """
    Decorator that logs endpoint access

    Usage:
    @log_endpoint_access
    async def my_endpoint():
        pass
    """
    @functools.wraps(func)
    async def wrapper(*args, **kwargs):
        current_user = kwargs.get("current_user")
        if current_user:
            logger.info(f"Accessing endpoint: {func.__name__} (user={current_user.get('_id')})")
        else:
            logger.info(f"Accessing endpoint: {func.__name__}")
        return await func(*args, **kwargs)
    return wrapper
