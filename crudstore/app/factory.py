"""
Application factory - creates and configures the FastAPI application.
This isolates all initialization logic from main.py.
"""
import logging
from contextlib import asynccontextmanager
from typing import Optional

from fastapi import FastAPI
from fastapi.routing import APIRoute

from crudstore import __version__
from crudstore.api.all_routes import router as all_routes_router
from crudstore.api.routes.health import metrics_router
from crudstore.config import Settings, load_settings
from crudstore.dependencies.services import get_services
from crudstore.exceptions.handlers import setup_exception_handlers
from crudstore.middleware.logging_setup import setup_logging
from crudstore.middleware.setup import setup_middleware

logger = logging.getLogger(__name__)


def log_endpoints(app: FastAPI) -> None:
    """Log every registered API endpoint."""
    logger.info("API endpoints:")
    for route in app.routes:
        if isinstance(route, APIRoute):
            for method in sorted(route.methods):
                logger.info(f"  - {method:<6} {route.path}")


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Manage application lifespan."""
    logger.info("Application starting up...")
    # Build the stores before the first request arrives
    get_services()
    log_endpoints(app)
    yield
    logger.info("Application shutting down...")


def create_app(settings: Optional[Settings] = None) -> FastAPI:
    """
    Create and configure the FastAPI application.

    Args:
        settings: Settings to use (default: read from the environment)

    Returns:
        Configured FastAPI app instance ready to run.
    """
    settings = settings or load_settings()
    setup_logging(settings.log_level)

    app = FastAPI(
        title=settings.project_name,
        description="Uniform CRUD over in-memory resource collections",
        version=__version__,
        lifespan=lifespan
    )
    app.state.settings = settings

    setup_middleware(app, settings.cors_allow_origins)
    setup_exception_handlers(app)

    app.include_router(all_routes_router, prefix=settings.api_prefix)
    app.include_router(metrics_router)

    logger.info("FastAPI app created and configured")
    return app
