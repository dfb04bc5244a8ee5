import logging
import os

LOG_LEVEL_ENV = "HEAPPERM_LOG_LEVEL"
LOG_FORMAT = "%(asctime)s | %(levelname)s | %(name)s | %(message)s"


def _configured_level(default: int = logging.WARNING) -> int:
    name = os.getenv(LOG_LEVEL_ENV, "").strip().upper()
    return logging.getLevelNamesMapping().get(name, default)


def get_logger(name: str) -> logging.Logger:
    """
    logger for a heapperm module, set up once with a stream handler. the
    level comes from HEAPPERM_LOG_LEVEL, falling back to WARNING.
    """
    logger = logging.getLogger(name)
    if logger.handlers:
        return logger

    handler = logging.StreamHandler()
    handler.setFormatter(logging.Formatter(LOG_FORMAT))
    logger.addHandler(handler)
    logger.setLevel(_configured_level())
    return logger
