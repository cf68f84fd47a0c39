"""Command-line entrypoint that serves the API with uvicorn."""

import logging

import uvicorn

from photosphere.app_logging import configure_logging
from photosphere.config import Settings


def main() -> None:
    """Serve the PhotoSphere API on the configured host and port."""
    settings = Settings()
    configure_logging(settings.log_level)
    logging.getLogger(__name__).info(
        "PhotoSphere running on %s:%s", settings.host, settings.port
    )
    uvicorn.run(
        "photosphere.api.asgi:app",
        host=settings.host,
        port=settings.port,
        reload=False,
    )


if __name__ == "__main__":
    main()
