import os
from dotenv import load_dotenv
from functools import lru_cache

# Load environment variables
load_dotenv()

@lru_cache()
def get_settings():
    """Get application settings"""
    return {
        # API settings
        "API_PREFIX": os.getenv("API_PREFIX", "/api"),
        "PROJECT_NAME": "DevConnector API",
        "VERSION": "1.0.0",

        # Security settings
        "SECRET_KEY": os.getenv("SECRET_KEY", "your-super-secret-key-change-in-production"),
        "ALGORITHM": os.getenv("ALGORITHM", "HS256"),
        "ACCESS_TOKEN_EXPIRE_MINUTES": int(os.getenv("ACCESS_TOKEN_EXPIRE_MINUTES", "360")),

        # MongoDB settings
        "MONGODB_URI": os.getenv("MONGODB_URI", "mongodb://localhost:27017"),
        "MONGO_DB_NAME": os.getenv("MONGO_DB_NAME", "devconnector"),
        "MONGODB_MAX_CONNECTIONS": int(os.getenv("MONGODB_MAX_CONNECTIONS", "50")),
        "MONGODB_MIN_CONNECTIONS": int(os.getenv("MONGODB_MIN_CONNECTIONS", "5")),
        "MONGODB_TIMEOUT_MS": int(os.getenv("MONGODB_TIMEOUT_MS", "5000")),

        # CORS
        "CORS_ORIGINS": [
            origin.strip()
            for origin in os.getenv("CORS_ORIGINS", "*").split(",")
            if origin.strip()
        ],

        # Environment
        "ENVIRONMENT": os.getenv("ENVIRONMENT", "development"),
        "DEBUG": os.getenv("DEBUG", "True").lower() == "true",
        "LOG_LEVEL": os.getenv("LOG_LEVEL", "INFO").upper()
    }
