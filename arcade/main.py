"""
Entry point for the arcade asset server.

Run with ``python -m arcade.main`` or ``uvicorn arcade.main:app``.
"""

import uvicorn

from .app.factory import create_app
from .config import get_config
from .structured_logging.enhanced_logging_config import get_logger, setup_logging

logger = get_logger(__name__)

app = create_app()


def main() -> None:
    config = get_config()
    setup_logging(config.logging)
    logger.info("Starting server", host=config.server.host, port=config.server.port)
    uvicorn.run(app, host=config.server.host, port=config.server.port, log_config=None)


if __name__ == "__main__":
    main()
