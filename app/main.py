from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from contextlib import asynccontextmanager
import logging

from app.routes import router
from app.database.mongo_connection import (
    connect_to_mongo, close_mongo_connection, database_health, mongodb
)
from app.database.create_indexes import create_indexes
from app.config import get_settings
from app.core.middleware import LoggingMiddleware

settings = get_settings()

# Configure logging
logging.basicConfig(
    level=settings["LOG_LEVEL"],
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s"
)
logger = logging.getLogger(__name__)

@asynccontextmanager
async def lifespan(app: FastAPI):
    # Startup
    await connect_to_mongo()
    await create_indexes(mongodb.database)
    yield
    # Shutdown
    await close_mongo_connection()

# Create FastAPI app
app = FastAPI(
    title=settings["PROJECT_NAME"],
    description="Developer social network API: profiles, posts, likes and comments",
    version=settings["VERSION"],
    lifespan=lifespan
)

# Add middleware
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings["CORS_ORIGINS"],
    allow_credentials=settings["CORS_ORIGINS"] != ["*"],
    allow_methods=["*"],
    allow_headers=["*"],
)

app.add_middleware(LoggingMiddleware)

@app.exception_handler(RequestValidationError)
async def validation_exception_handler(request: Request, exc: RequestValidationError):
    """Return 400 for malformed request bodies"""
    logger.warning(f"Validation error on {request.method} {request.url.path}: {exc.errors()}")

    errors = [
        {
            "msg": error.get("msg"),
            "param": ".".join(str(part) for part in error.get("loc", ())[1:]),
            "location": error.get("loc", ("body",))[0]
        }
        for error in exc.errors()
    ]
    return JSONResponse(
        status_code=400,
        content={"detail": "Invalid request body", "errors": errors}
    )

@app.exception_handler(Exception)
async def global_exception_handler(request: Request, exc: Exception):
    """Hide internal details of unhandled errors from clients"""
    logger.error(
        f"Unhandled exception on {request.method} {request.url.path}: {type(exc).__name__}: {exc}",
        exc_info=True
    )
    return JSONResponse(
        status_code=500,
        content={"detail": "Server error"}
    )

# Include routes
app.include_router(router, prefix=settings["API_PREFIX"])

@app.get("/")
async def root():
    return {
        "message": f"{settings['PROJECT_NAME']} is running!",
        "version": settings["VERSION"],
        "status": "healthy"
    }

@app.get("/health")
async def health_check():
    """API health check endpoint"""
    return {
        "status": "healthy",
        "message": f"{settings['PROJECT_NAME']} is running",
        "version": settings["VERSION"]
    }

@app.get("/health/db")
async def database_health_check():
    """Database health check endpoint"""
    return await database_health()

if __name__ == "__main__":
    import uvicorn
    uvicorn.run(
        "app.main:app",
        host="0.0.0.0",
        port=8000,
        reload=settings["DEBUG"]
    )
