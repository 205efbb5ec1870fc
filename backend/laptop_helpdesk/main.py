"""Main FastAPI application."""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request, status
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from laptop_helpdesk.api.middleware import LoggingMiddleware
from laptop_helpdesk.api.routes import router
from laptop_helpdesk.config import get_settings
from laptop_helpdesk.database.catalog_store import catalog_store
from laptop_helpdesk.exceptions import HelpdeskError, NoActiveOrderError, ValidationError
from laptop_helpdesk.utils.logger import setup_logging

# Setup logging
setup_logging()
logger = logging.getLogger(__name__)

settings = get_settings()


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan manager."""
    logger.info("Starting application...")
    if not catalog_store.loaded:
        catalog_store.load()
    yield
    logger.info("Shutting down application...")


# Create FastAPI app
app = FastAPI(
    title=settings.app_name,
    version=settings.app_version,
    description="Laptop search, recommendations and order intake for the helpdesk assistant",
    lifespan=lifespan,
)

# Add CORS middleware
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# Add custom middleware
app.add_middleware(LoggingMiddleware)

# Include routers
app.include_router(router)


def _error_response(status_code: int, exc: HelpdeskError) -> JSONResponse:
    return JSONResponse(
        status_code=status_code,
        content={"error": exc.title, "detail": str(exc)},
    )


# Exception handlers
@app.exception_handler(ValidationError)
async def validation_error_handler(request: Request, exc: ValidationError) -> JSONResponse:
    """Malformed input: the caller should re-prompt."""
    logger.warning("Validation error on %s: %s", request.url.path, exc)
    return _error_response(status.HTTP_400_BAD_REQUEST, exc)


@app.exception_handler(NoActiveOrderError)
async def no_active_order_handler(request: Request, exc: NoActiveOrderError) -> JSONResponse:
    """Submission without an in-flight order."""
    logger.warning("No active order for session %s", exc.session_key)
    return _error_response(status.HTTP_409_CONFLICT, exc)


@app.exception_handler(Exception)
async def global_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    """Global exception handler."""
    logger.error("Unhandled exception: %s", exc, exc_info=True)
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content={
            "error": "Internal Server Error",
            "detail": "An unexpected error occurred",
        },
    )


# Root endpoint
@app.get("/")
async def root() -> dict[str, str]:
    """Root endpoint."""
    return {
        "name": settings.app_name,
        "version": settings.app_version,
        "status": "running",
    }


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(
        "laptop_helpdesk.main:app",
        host=settings.api_host,
        port=settings.api_port,
        reload=settings.debug,
        log_level=settings.log_level.lower(),
    )
