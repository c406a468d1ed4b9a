"""Logging configuration for the client."""

import logging
import sys

from reel.config import Settings

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"

# Transport libraries log every request at INFO
NOISY_LOGGERS = ("httpx", "httpcore", "dishka")


def log_level(settings: Settings) -> int:
    """Pick the ``reel`` log level for the environment."""
    if settings.debug:
        return logging.DEBUG
    if settings.environment == "test":
        return logging.WARNING
    return logging.INFO


def setup_logging(settings: Settings) -> None:
    """Configure the ``reel`` logger.

    Only the client's own logger gets a handler; the host application's
    root logger is left alone. Calling it again replaces the handler.

    Args:
        settings: Client settings
    """
    level = log_level(settings)

    handler = logging.StreamHandler(sys.stdout)
    handler.setFormatter(logging.Formatter(LOG_FORMAT, datefmt="%Y-%m-%d %H:%M:%S"))

    logger = logging.getLogger("reel")
    for existing in list(logger.handlers):
        logger.removeHandler(existing)
    logger.addHandler(handler)
    logger.setLevel(level)
    logger.propagate = False

    for name in NOISY_LOGGERS:
        logging.getLogger(name).setLevel(max(level, logging.WARNING))

    logger.debug(
        "Logging configured: environment=%s, level=%s",
        settings.environment,
        logging.getLevelName(level),
    )
