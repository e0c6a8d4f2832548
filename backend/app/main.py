"""
Digital Will Registry - Main Application Entry Point

Record keeping for estate plans: users, executors, wills, and the assets
and beneficiaries attached to each will.
"""

import logging

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from app.core.config import settings
from app.core.database import init_db
from app.core.exceptions import RegistryError
from app.core.logging_config import setup_logging

logger = logging.getLogger(__name__)

# Import module routers
from app.modules.estate_planning.router import router as estate_planning_router


def create_app() -> FastAPI:
    """Create and configure the FastAPI application."""

    setup_logging(settings.LOG_LEVEL)

    app = FastAPI(
        title=settings.APP_NAME,
        version=settings.APP_VERSION,
        description="Digital estate planning records: users, executors, wills, assets and beneficiaries",
        docs_url="/api/docs",
        redoc_url="/api/redoc",
    )

    @app.exception_handler(RegistryError)
    async def registry_error_handler(request: Request, exc: RegistryError):
        """Return rejected operations as {"detail", "error"} JSON."""
        return JSONResponse(
            status_code=exc.status_code,
            content={"detail": exc.message, "error": type(exc).__name__},
        )

    # Register module routers
    app.include_router(estate_planning_router, prefix="/api/v1/estate-planning", tags=["Estate Planning"])

    @app.get("/", tags=["Health"])
    async def root():
        """Root endpoint - health check."""
        return {
            "application": settings.APP_NAME,
            "version": settings.APP_VERSION,
            "status": "running"
        }

    @app.get("/api/health", tags=["Health"])
    async def health_check():
        """API health check endpoint."""
        return {"status": "healthy"}

    @app.on_event("startup")
    async def startup_event():
        """Make sure the registry tables exist before serving requests."""
        init_db()
        logger.info("Application startup complete")

    return app


# Create the application instance
app = create_app()


if __name__ == "__main__":
    import uvicorn
    uvicorn.run("app.main:app", host="0.0.0.0", port=8000, reload=True)
