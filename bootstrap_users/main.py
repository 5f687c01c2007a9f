# bootstrap_users/main.py
from bootstrap_users.data.database import build_engine, build_session_factory
from bootstrap_users.data.seed import run
from bootstrap_users.utils.logging import get_logger
from bootstrap_users.utils.settings import DATABASE_URL, DB_ECHO, EXIT_ON_ERROR

logger = get_logger(__name__)


def main() -> int:
    engine = None
    try:
        # a bad URL or a missing driver fails here, before any connection
        engine = build_engine(DATABASE_URL, echo=DB_ECHO)
        result = run(build_session_factory(engine))
    except Exception:
        logger.exception("Could not set up the database engine")
        result = None
    finally:
        if engine is not None:
            engine.dispose()

    if result is None and EXIT_ON_ERROR:
        logger.error("Exiting with status 1 (EXIT_ON_ERROR is set)")
        return 1
    return 0
