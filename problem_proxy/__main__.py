"""
Server entry point.

Runs the API with uvicorn on the configured host and port::

    python -m problem_proxy
"""

import logging

import uvicorn

from problem_proxy.main import app

logger = logging.getLogger(__name__)


def main() -> None:
    """Serve the application until interrupted."""
    settings = app.state.settings
    logger.info("Server running on port %d", settings.port)
    uvicorn.run(
        app,
        host=settings.host,
        port=settings.port,
        log_level=settings.log_level.lower(),
        log_config=None,
    )


if __name__ == "__main__":
    main()
