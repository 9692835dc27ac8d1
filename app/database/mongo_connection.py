from motor.motor_asyncio import AsyncIOMotorClient
from pymongo.errors import ConnectionFailure
import logging
from typing import Optional
from app.config import get_settings

# Configure logging
logger = logging.getLogger(__name__)

class MongoDB:
    """MongoDB connection manager"""
    client: Optional[AsyncIOMotorClient] = None
    database = None

# MongoDB connection instance
mongodb = MongoDB()

async def connect_to_mongo():
    """Create database connection"""
    settings = get_settings()

    mongo_url = settings["MONGODB_URI"]
    database_name = settings["MONGO_DB_NAME"]
    timeout_ms = settings["MONGODB_TIMEOUT_MS"]

    try:
        mongodb.client = AsyncIOMotorClient(
            mongo_url,
            serverSelectionTimeoutMS=timeout_ms,
            connectTimeoutMS=timeout_ms,
            maxPoolSize=settings["MONGODB_MAX_CONNECTIONS"],
            minPoolSize=settings["MONGODB_MIN_CONNECTIONS"]
        )

        # Test the connection
        await mongodb.client.admin.command('ping')

        mongodb.database = mongodb.client[database_name]

        logger.info(f"Successfully connected to MongoDB: {database_name}")

    except ConnectionFailure as e:
        logger.error(f"Failed to connect to MongoDB: {e}")
        raise

async def close_mongo_connection():
    """Close database connection"""
    if mongodb.client is not None:
        mongodb.client.close()
        mongodb.client = None
        mongodb.database = None
        logger.info("MongoDB connection closed")

async def get_database():
    """Get database instance, connecting lazily on first use"""
    if mongodb.database is None:
        await connect_to_mongo()
    return mongodb.database

# Health check function
async def ping_database():
    """Check if database is accessible"""
    try:
        if mongodb.client is not None:
            await mongodb.client.admin.command('ping')
            return True
        return False
    except Exception as e:
        logger.error(f"Database ping failed: {e}")
        return False

async def database_health():
    """Database health report used by the /health/db endpoint"""
    try:
        if await ping_database():
            return {
                "status": "healthy",
                "database_name": mongodb.database.name if mongodb.database is not None else "unknown"
            }
        return {"status": "unhealthy", "error": "Database ping failed"}
    except Exception as e:
        return {"status": "unhealthy", "error": str(e)}
