"""FastAPI application factory."""

from contextlib import asynccontextmanager
from typing import AsyncGenerator

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from revlink import __version__
from revlink.api.routers import health, links
from revlink.config import get_settings
from revlink.config.logging import configure_logging
from revlink.core.exceptions import ConfigurationError, RepositoryError, RevlinkError


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """Application lifespan manager."""
    settings = get_settings()
    configure_logging(
        log_level=settings.log_level,
        json_logs=settings.is_production,
    )
    yield


async def revlink_error_handler(request: Request, exc: RevlinkError) -> JSONResponse:
    """Report a broken link as an unprocessable request."""
    status_code = 400 if isinstance(exc, (ConfigurationError, RepositoryError)) else 422
    return JSONResponse(status_code=status_code, content={"detail": exc.to_dict()})


def create_app() -> FastAPI:
    """Create and configure the FastAPI application."""
    settings = get_settings()

    app = FastAPI(
        title="revlink",
        description="Resolve revision-pinned file links to public URLs",
        version=__version__,
        docs_url="/docs" if settings.is_development else None,
        redoc_url="/redoc" if settings.is_development else None,
        lifespan=lifespan,
    )

    app.add_exception_handler(RevlinkError, revlink_error_handler)

    # Include routers
    app.include_router(health.router, tags=["Health"])
    app.include_router(links.router, prefix="/api/v1", tags=["Links"])

    return app


# Create default app instance
app = create_app()


def run() -> None:
    """Run the application with uvicorn."""
    import uvicorn

    settings = get_settings()
    uvicorn.run(
        "revlink.api.main:app",
        host=settings.api_host,
        port=settings.api_port,
        reload=settings.is_development,
    )


if __name__ == "__main__":
    run()
