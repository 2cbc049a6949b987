"""
Structured logging configuration
"""
import structlog
import logging
import sys

from suggest_engine.config import settings


def setup_logging(debug: bool = False):
    """Configure structured JSON logging on top of stdlib logging"""
    logging.basicConfig(
        format="%(message)s",
        stream=sys.stdout,
        level=logging.DEBUG if debug else logging.INFO
    )

    structlog.configure(
        processors=[
            structlog.stdlib.filter_by_level,
            structlog.stdlib.add_logger_name,
            structlog.stdlib.add_log_level,
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.processors.StackInfoRenderer(),
            structlog.processors.format_exc_info,
            structlog.processors.JSONRenderer()
        ],
        wrapper_class=structlog.stdlib.BoundLogger,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )

    # Every record carries the service name
    return structlog.get_logger("suggest_engine").bind(
        service="suggest-projects",
        environment=settings.ENVIRONMENT,
    )


# Global logger instance
logger = setup_logging(debug=settings.DEBUG)
