import logging

logger = logging.getLogger(__name__)

PROFILE_PLACEHOLDER = "Profile Route"

async def get_profile_logic() -> str:
    """Placeholder profile endpoint"""
    logger.debug("Serving profile placeholder")
    return PROFILE_PLACEHOLDER
