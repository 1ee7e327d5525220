"""
Logging infrastructure.

Standard-library logging with one shared format. Modules keep using
`logging.getLogger(__name__)`; entry points call `configure_logging`.
"""
import logging
from typing import Union


LOG_FORMAT = "%(asctime)s | %(levelname)s | %(name)s | %(message)s"


def _to_level(level: Union[str, int]) -> int:
    if isinstance(level, int):
        return level
    resolved = logging.getLevelName(level.upper())
    return resolved if isinstance(resolved, int) else logging.INFO


def configure_logging(level: Union[str, int] = "INFO") -> None:
    """
    Configure root logging for an entry point (API server, scripts).

    Args:
        level: Level name ("DEBUG", "INFO", ...) or numeric level
    """
    logging.basicConfig(level=_to_level(level), format=LOG_FORMAT)
    logging.getLogger().setLevel(_to_level(level))


def get_logger(name: str, level: Union[str, int] = "INFO") -> logging.Logger:
    """
    Get a logger with its own stream handler.

    Args:
        name: Logger name (usually module name)
        level: Level for this logger

    Returns:
        Logger instance
    """
    logger = logging.getLogger(name)
    if not logger.handlers:
        handler = logging.StreamHandler()
        handler.setFormatter(logging.Formatter(LOG_FORMAT))
        logger.addHandler(handler)
        logger.setLevel(_to_level(level))
    return logger
