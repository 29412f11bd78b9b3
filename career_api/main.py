"""FastAPI application entry point.

Overwatch Career API - player profiles scraped from career pages.
"""

from contextlib import asynccontextmanager
from collections.abc import AsyncGenerator
import logging

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from career_api.context import build_context, close_context, ping_cache
from career_api.routes import api_router
from career_api.schemas import ErrorResponse
from career_api.services.errors import ProfileError
from career_api.settings import get_settings

logger = logging.getLogger("uvicorn.error")


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """Application lifespan manager.

    Handles startup and shutdown events.
    """
    # Startup
    settings = get_settings()
    ctx = build_context(settings)
    app.state.context = ctx

    # Without Redis every lookup runs as a cache miss
    try:
        await ping_cache(ctx)
    except Exception:
        logger.exception("Redis init failed")

    yield

    # Shutdown
    await close_context(ctx)


def _error_response(status_code: int, code: str, message: str, detail: dict | None = None) -> JSONResponse:
    body = ErrorResponse.build(code, message, detail)
    return JSONResponse(status_code=status_code, content=body.model_dump())


def create_app() -> FastAPI:
    """Create and configure FastAPI application."""
    settings = get_settings()

    app = FastAPI(
        title=settings.app_name,
        version=settings.app_version,
        description="Overwatch player profiles (portrait, title, endorsement, competitive ranks)",
        lifespan=lifespan,
        docs_url="/docs",
        redoc_url="/redoc",
        openapi_url="/openapi.json",
    )

    @app.exception_handler(ProfileError)
    async def profile_error_handler(request: Request, exc: ProfileError) -> JSONResponse:
        """Map lookup failures to the structured error format."""
        return _error_response(exc.status_code, exc.code, exc.message, exc.detail)

    # Exception handler for structured error format
    @app.exception_handler(Exception)
    async def global_exception_handler(request: Request, exc: Exception) -> JSONResponse:
        """Global exception handler returning structured error format."""
        logger.exception("Unhandled error")
        return _error_response(
            500,
            "INTERNAL_ERROR",
            str(exc) if settings.debug else "Internal server error",
        )

    # Health check endpoint
    @app.get("/health", tags=["health"])
    async def health_check() -> dict[str, bool]:
        """Health check endpoint."""
        return {"ok": True}

    app.include_router(api_router)

    return app


# Application instance
app = create_app()


if __name__ == "__main__":
    import uvicorn

    settings = get_settings()
    uvicorn.run(
        "career_api.main:app",
        host=settings.host,
        port=settings.port,
        reload=settings.debug,
    )
