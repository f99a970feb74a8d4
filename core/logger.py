"""Logging helpers for the validation service.

`get_logger` hands out loggers that share one stream handler and one rotating
file handler. The log directory and level can be overridden through the
`APP_LOG_DIR` and `APP_LOG_LEVEL` environment variables.
"""

import logging
import os
from logging.handlers import RotatingFileHandler

LOG_DIR = os.getenv("APP_LOG_DIR", os.path.join(os.path.dirname(__file__), "..", "logs"))
os.makedirs(LOG_DIR, exist_ok=True)

LOG_FILE = os.path.join(LOG_DIR, "app.log")
DEFAULT_LEVEL = logging.getLevelName(os.getenv("APP_LOG_LEVEL", "INFO").upper())
if not isinstance(DEFAULT_LEVEL, int):
    DEFAULT_LEVEL = logging.INFO

_formatter = logging.Formatter("%(asctime)s %(levelname)s [%(name)s] %(message)s")

_stream_handler = logging.StreamHandler()
_stream_handler.setFormatter(_formatter)

_file_handler = RotatingFileHandler(LOG_FILE, maxBytes=5 * 1024 * 1024, backupCount=3)
_file_handler.setFormatter(_formatter)


def get_logger(name: str = __name__, level: int = DEFAULT_LEVEL) -> logging.Logger:
    """Return a logger wired to the shared stream and rotating file handlers.

    Handlers are attached only once per logger name, so modules can call this
    at import time without duplicating output.
    """
    logger = logging.getLogger(name)
    if not logger.handlers:
        logger.setLevel(level)
        logger.addHandler(_stream_handler)
        logger.addHandler(_file_handler)
        logger.propagate = False
    return logger
