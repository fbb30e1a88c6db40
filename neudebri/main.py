"""
Neudebri FastAPI Backend Application

Main application entry point for the hospital management API.
"""

import logging
from typing import Optional

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware

from neudebri.api import router
from neudebri.core.config import Settings, get_settings
from neudebri.core.exceptions import register_exception_handlers
from neudebri.core.logging_config import configure_logging
from neudebri.schemas import HealthCheck
from neudebri.services import HospitalStore

logger = logging.getLogger(__name__)


def create_app(
    settings: Optional[Settings] = None, store: Optional[HospitalStore] = None
) -> FastAPI:
    """
    Build the application.

    Args:
        settings: Configuration; defaults to the environment-backed settings
        store: Data store; defaults to a fresh store, seeded when
            ``settings.seed_demo_data`` is set

    Returns:
        Configured FastAPI application
    """
    settings = settings or get_settings()
    configure_logging(settings.log_level)

    app = FastAPI(
        title=settings.app_name,
        description="Hospital management API: patients, clinical care, billing, HR and wards",
        version=settings.app_version,
        debug=settings.debug,
    )
    app.state.settings = settings
    app.state.store = store or HospitalStore(seed=settings.seed_demo_data)

    # Configure CORS
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=settings.cors_allow_credentials,
        allow_methods=settings.cors_allow_methods,
        allow_headers=settings.cors_allow_headers,
    )

    register_exception_handlers(app)

    # Include API routes
    app.include_router(router, prefix="/api")

    @app.get("/", tags=["root"])
    async def root():
        """Root endpoint with API information."""
        return {
            "message": settings.app_name,
            "version": settings.app_version,
            "status": "running",
            "docs": "/docs",
            "api": "/api",
        }

    @app.get("/health", response_model=HealthCheck, tags=["health"])
    async def health_check(request: Request):
        """Health check endpoint."""
        return HealthCheck(
            status="healthy",
            version=settings.app_version,
            timestamp=request.app.state.store.now(),
        )

    @app.on_event("startup")
    async def startup_event():
        logger.info(f"{settings.app_name} v{settings.app_version}")
        logger.info(f"Server running on http://{settings.host}:{settings.port}")
        logger.info(f"API Documentation: http://{settings.host}:{settings.port}/docs")

    @app.on_event("shutdown")
    async def shutdown_event():
        logger.info(f"Shutting down {settings.app_name}")

    return app


app = create_app()


if __name__ == "__main__":
    import uvicorn

    settings = get_settings()
    uvicorn.run(
        "neudebri.main:app", host=settings.host, port=settings.port, reload=settings.debug
    )
