# bootstrap_users/utils/settings.py
import logging
import os
from dotenv import load_dotenv

load_dotenv()


def env_bool(name: str, default: bool = False) -> bool:
    raw = os.getenv(name)
    if raw is None:
        return default
    return raw.strip().lower() in {"1", "true", "yes", "on"}


def env_log_level(name: str, default: str = "INFO") -> str:
    """Return a known logging level name, falling back to ``default``."""
    raw = (os.getenv(name) or default).strip().upper()
    if isinstance(logging.getLevelName(raw), int):
        return raw
    return default


DATABASE_URL = os.getenv("DATABASE_URL", "sqlite:///./bootstrap.db")
DB_ECHO = env_bool("DB_ECHO", False)
# failed runs exit 0 unless this is switched on
EXIT_ON_ERROR = env_bool("EXIT_ON_ERROR", False)
LOG_LEVEL = env_log_level("LOG_LEVEL")
