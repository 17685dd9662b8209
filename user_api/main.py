"""User API - FastAPI Application."""

import traceback
from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from user_api import __version__
from user_api.config import settings
from user_api.database import close_db, init_db
from user_api.logger import configure_logging, get_logger
from user_api.routers import users
from user_api.schemas import MessageResponse
from user_api.utils.exceptions import ApiError

# Initialize logging early
configure_logging()
logger = get_logger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncIterator[None]:
    """Application lifespan - sync the schema on startup, dispose the engine on shutdown."""
    await init_db()
    logger.info("Application started", version=__version__, environment=settings.environment)
    yield
    await close_db()
    logger.info("Application shutting down")


app = FastAPI(
    title="User API",
    description="Minimal user management: signup, list, fetch, update and delete by username",
    version=__version__,
    lifespan=lifespan,
)


@app.exception_handler(ApiError)
async def api_error_handler(request: Request, exc: ApiError) -> JSONResponse:
    """Render router errors as ``{"message": ...}`` or ``{"error": ...}``."""
    return exc.to_response()


@app.exception_handler(Exception)
async def global_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    """Global exception handler to ensure JSON response."""
    logger.exception("Unhandled error", error=str(exc), path=request.url.path)

    content: dict[str, str] = {"error": "An internal server error occurred. Please try again later."}
    # Only show exception details in DEBUG mode
    if settings.debug:
        content = {"error": str(exc), "trace": traceback.format_exc()}

    return JSONResponse(status_code=500, content=content)


# Include routers
app.include_router(users.router)


@app.get("/health", response_model=MessageResponse)
async def health_check() -> MessageResponse:
    """Liveness probe. Makes no storage call."""
    return MessageResponse(message="Server is running")
