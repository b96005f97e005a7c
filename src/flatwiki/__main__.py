"""Run the wiki server: ``python -m flatwiki``."""

import logging

import uvicorn

from flatwiki.config import settings


def main() -> None:
    """Start uvicorn with the configured host, port and log level."""
    logging.basicConfig(
        level=settings.log_level.upper(),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    uvicorn.run(
        "flatwiki.main:app",
        host=settings.host,
        port=settings.port,
        log_level=settings.log_level,
    )


if __name__ == "__main__":
    main()
