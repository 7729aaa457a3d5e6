"""Word Counter HTTP server entry point."""

import uvicorn

from .config import settings
from .logging import configure_logging
from .version import __version__


def main():
    """Main entry point for the Word Counter server."""
    # Initialize logging first
    logger = configure_logging(settings)

    logger.info(
        "Starting Word Counter",
        version=__version__,
        host=settings.host,
        port=settings.port,
        environment=settings.environment,
        log_format=settings.log_format,
        log_level=settings.log_level,
    )

    try:
        from .http_server import create_app

        app = create_app(settings)
        uvicorn.run(
            app,
            host=settings.host,
            port=settings.port,
            log_config=None,  # keep our structlog handler
            log_level=settings.log_level.lower(),
        )
    except Exception as e:
        logger.error(
            "Failed to start server",
            error=str(e),
            error_type=type(e).__name__,
        )
        raise


if __name__ == "__main__":
    main()
