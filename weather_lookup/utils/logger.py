import logging
import sys
from typing import Optional

from pythonjsonlogger import jsonlogger

from weather_lookup.config import get_settings

settings = get_settings()

LOG_FORMAT = "%(asctime)s %(name)s %(levelname)s %(message)s"


def build_formatter() -> jsonlogger.JsonFormatter:
    """
    JSON formatter shared by the backend and the terminal client.

    Every line carries the service name.
    """
    return jsonlogger.JsonFormatter(
        fmt=LOG_FORMAT,
        datefmt="%Y-%m-%dT%H:%M:%S%z",
        rename_fields={"asctime": "timestamp", "levelname": "level", "name": "logger"},
        static_fields={"service": settings.app_name},
    )


def setup_logger(name: str, level: Optional[str] = None) -> logging.Logger:
    """
    Return a logger writing structured JSON lines to stdout.

    Args:
        name: The name of the logger (usually __name__)
        level: Overrides the configured LOG_LEVEL for this logger

    Returns:
        Configured logger instance
    """
    logger = logging.getLogger(name)

    if logger.handlers:
        return logger

    resolved = getattr(logging, (level or settings.log_level).upper(), logging.INFO)
    logger.setLevel(resolved)

    handler = logging.StreamHandler(sys.stdout)
    handler.setFormatter(build_formatter())
    logger.addHandler(handler)
    logger.propagate = False

    return logger
