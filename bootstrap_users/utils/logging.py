# bootstrap_users/utils/logging.py
import logging
import sys

from bootstrap_users.utils.settings import LOG_LEVEL

ROOT_LOGGER_NAME = "bootstrap_users"
LOG_FORMAT = "%(asctime)s %(levelname)s [%(name)s] %(message)s"


def _configure_root() -> logging.Logger:
    root = logging.getLogger(ROOT_LOGGER_NAME)
    if not root.handlers:
        handler = logging.StreamHandler(sys.stderr)
        handler.setFormatter(logging.Formatter(LOG_FORMAT))
        root.addHandler(handler)
        root.setLevel(LOG_LEVEL)
    return root


def get_logger(name: str) -> logging.Logger:
    """Return a logger under the package logger, which writes to stderr."""
    _configure_root()
    return logging.getLogger(name)
