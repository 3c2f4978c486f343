import logging
import logging.config
import os

import yaml

from figma2static.core.config import get_setting

settings = get_setting()

_app_logger = None

logging_file = os.path.join(os.path.dirname(__file__), "logging_config.yaml")
with open(logging_file, "rt", encoding="utf-8") as f:
    config = yaml.safe_load(f.read())


def _initialize_logging() -> None:
    logging.config.dictConfig(config)

    for handler in logging.root.handlers:
        if type(handler) is logging.StreamHandler:
            handler.setLevel(settings.LOG_LEVEL.upper())


def get_logging() -> logging.Logger:
    """Get or initialize the application logger"""
    global _app_logger

    if _app_logger:
        return _app_logger

    _initialize_logging()

    _app_logger = logging.getLogger(settings.APP_NAME)
    _app_logger.setLevel(logging.DEBUG)

    return _app_logger
