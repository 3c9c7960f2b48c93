"""
Skinfold Body Fat Calculator — Main Application Entry Point
=============================================================
This is the FastAPI application factory. It:
  1. Creates the FastAPI app instance with metadata
  2. Creates the session state holding the stored measurements
  3. Registers all API routers
  4. Configures CORS middleware for frontend integration
  5. Provides a health check endpoint

To run locally:
  uvicorn skinfold.main:app --reload --host 0.0.0.0 --port 8000
"""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from skinfold.core.config import settings
from skinfold.core.session import SessionState

# Import all routers
from skinfold.routers import body_fat, measurements

# Configure logging so we can see what's happening in the console
logging.basicConfig(
    level=settings.LOG_LEVEL,
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
)
logger = logging.getLogger(__name__)


# ============================================================
# APPLICATION LIFESPAN (Startup / Shutdown)
# ============================================================
@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    Handles application startup and shutdown events.

    On STARTUP:
      - Logs the effective configuration.

    On SHUTDOWN:
      - Logs the measurements still held; they are not persisted.
    """
    # ----- STARTUP -----
    logger.info(f"Starting {settings.APP_NAME} v{settings.APP_VERSION}...")
    logger.info(f"Strict sex validation: {settings.STRICT_SEX}")

    yield  # Application is running — handle requests

    # ----- SHUTDOWN -----
    logger.info(
        f"Shutting down; discarding stored measurements "
        f"(total={app.state.session.measurements.total()}mm)"
    )


def create_app() -> FastAPI:
    """Build a FastAPI app with its own, empty session state."""
    app = FastAPI(
        title=settings.APP_NAME,
        version=settings.APP_VERSION,
        description=(
            "Backend API for the Skinfold Body Fat Calculator. "
            "Estimates body fat percentage from seven caliper measurements "
            "(Jackson & Pollock + Siri) and classifies it against age- and "
            "sex-banded norms."
        ),
        lifespan=lifespan,
        docs_url="/docs",
        redoc_url="/redoc",
    )

    # The session owns the only mutable state: the stored measurements
    app.state.session = SessionState()

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.CORS_ORIGINS,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    app.include_router(measurements.router)  # /measurements/*
    app.include_router(body_fat.router)      # /body-fat/*

    @app.get("/", tags=["Health"])
    async def root():
        """
        Root endpoint — serves as a health check.
        Returns basic app info to confirm the API is running.
        """
        return {
            "app": settings.APP_NAME,
            "version": settings.APP_VERSION,
            "status": "healthy",
            "docs": "/docs",
        }

    @app.get("/health", tags=["Health"])
    async def health_check():
        """Health check endpoint for Docker/Kubernetes health probes."""
        return {"status": "ok"}

    return app


app = create_app()
