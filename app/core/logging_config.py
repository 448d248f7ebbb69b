# app/core/logging_config.py
import logging
import sys
import structlog

from app.core.settings import settings


def setup_logging() -> None:
    """
    Configure structlog + stdlib logging.
    Logs go to stdout as JSON, one event per line.
    """
    level = getattr(logging, settings.LOG_LEVEL.upper(), logging.INFO)
    logging.basicConfig(
        format="%(message)s",
        stream=sys.stdout,
        level=level,
    )

    structlog.configure(
        processors=[
            structlog.processors.add_log_level,
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.processors.format_exc_info,
            structlog.processors.JSONRenderer(),
        ],
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=True,
    )


# Global logger, import it anywhere
logger = structlog.get_logger("cleanquote")
