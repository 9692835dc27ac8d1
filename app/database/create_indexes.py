import asyncio
import logging
from pymongo import IndexModel, ASCENDING, DESCENDING

from app.database.mongo_connection import get_database

logger = logging.getLogger(__name__)

async def create_indexes(db=None):
    """Create database indexes"""
    if db is None:
        db = await get_database()

    # User collection indexes
    user_indexes = [
        IndexModel([("email", ASCENDING)], unique=True),
        IndexModel([("date", ASCENDING)])
    ]

    try:
        await db.users.create_indexes(user_indexes)
        logger.info("User indexes created successfully")
    except Exception as e:
        logger.error(f"Error creating user indexes: {e}")

    # Post collection indexes
    post_indexes = [
        IndexModel([("date", DESCENDING)]),
        IndexModel([("user", ASCENDING)])
    ]

    try:
        await db.posts.create_indexes(post_indexes)
        logger.info("Post indexes created successfully")
    except Exception as e:
        logger.error(f"Error creating post indexes: {e}")

if __name__ == "__main__":
    asyncio.run(create_indexes())
