"""
crudstore - REST API over in-memory resource collections.

Main entry point. All initialization logic is in app/factory.py.
"""
import logging

import uvicorn

from crudstore.app import create_app

logger = logging.getLogger(__name__)

# Module-level app for ASGI servers: uvicorn crudstore.main:app
app = create_app()


def run() -> None:
    """Serve the application with uvicorn."""
    settings = app.state.settings
    logger.info(f"Server starting on http://{settings.host}:{settings.port}")

    config = uvicorn.Config(
        app,
        host=settings.host,
        port=settings.port,
        log_level=settings.log_level.lower(),
        access_log=False,
        timeout_keep_alive=30,
        timeout_graceful_shutdown=30,
    )
    server = uvicorn.Server(config)

    try:
        server.run()
    except KeyboardInterrupt:
        logger.info("Received keyboard interrupt, shutting down...")
    finally:
        logger.info("Service stopped")


if __name__ == "__main__":
    run()
