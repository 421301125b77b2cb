"""Root logger setup shared by the API process and the CLI scripts."""

import logging

from app.core.config import settings

# Loggers that are noisy at INFO and only useful when debugging.
_QUIET_LOGGERS = ("uvicorn.access", "httpx", "httpcore", "multipart")


def setup_logging(level: str | None = None) -> None:
    """Configure root logging once; level defaults to settings.LOG_LEVEL."""
    logging.basicConfig(
        level=getattr(logging, (level or settings.LOG_LEVEL).upper(), logging.INFO),
        format="%(asctime)s %(levelname)s %(name)s %(message)s",
        datefmt="%Y-%m-%dT%H:%M:%S",
    )
    for name in _QUIET_LOGGERS:
        logging.getLogger(name).setLevel(logging.WARNING)
    if settings.DEBUG:
        logging.getLogger("sqlalchemy.engine").setLevel(logging.INFO)
