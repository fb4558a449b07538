import logging

from .config import Settings

LOGGER_NAME = 'movie_search'
DEFAULT_LEVEL = 'INFO'


def configure_logging(settings: Settings) -> logging.Logger:
    """
    Set the log level from settings.
    Handlers and formats belong to whoever runs the app (uvicorn, gunicorn...),
    so only levels are touched here.

    :param settings: Settings object holding LOG_LEVEL.
    :return: The package logger.
    """
    level = (settings.LOG_LEVEL or DEFAULT_LEVEL).strip().upper()
    # getLevelName maps known names to ints
    known = isinstance(logging.getLevelName(level), int)
    if not known:
        level = DEFAULT_LEVEL
    logging.getLogger().setLevel(level)

    logger = logging.getLogger(LOGGER_NAME)
    logger.setLevel(level)
    if not known:
        logger.warning(
            "Unknown LOG_LEVEL %r, using %s", settings.LOG_LEVEL, DEFAULT_LEVEL
        )
    return logger
