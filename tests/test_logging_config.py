import logging

from movie_search.config import Settings
from movie_search.logging_config import LOGGER_NAME, configure_logging


def test_configure_logging_sets_package_level():
    root = logging.getLogger()
    previous = root.level
    try:
        logger = configure_logging(Settings(LOG_LEVEL="debug"))
        assert logger.name == LOGGER_NAME
        assert logger.level == logging.DEBUG
        assert root.level == logging.DEBUG
    finally:
        root.setLevel(previous)
        logging.getLogger(LOGGER_NAME).setLevel(logging.NOTSET)


def test_configure_logging_unknown_level_falls_back_to_info():
    root = logging.getLogger()
    previous = root.level
    try:
        logger = configure_logging(Settings(LOG_LEVEL="verbose"))
        assert logger.level == logging.INFO
        assert root.level == logging.INFO
    finally:
        root.setLevel(previous)
        logging.getLogger(LOGGER_NAME).setLevel(logging.NOTSET)
