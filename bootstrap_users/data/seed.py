# bootstrap_users/data/seed.py
from typing import Callable, Optional

from sqlalchemy.orm import Session

from bootstrap_users.domain.schemas import BootstrapResult, UserCreate
from bootstrap_users.services.user_service import UserService
from bootstrap_users.utils.logging import get_logger

logger = get_logger(__name__)

SEED_USER_NAME = "Alice"


def run(session_factory: Callable[[], Session]) -> Optional[BootstrapResult]:
    """Insert the seed user, read every user back and print both.

    Any failure is logged and swallowed; the caller gets ``None``. The
    session is closed once, on every path where it was opened.
    """
    db = None
    try:
        db = session_factory()
        service = UserService(db)

        created = service.create_user(UserCreate(name=SEED_USER_NAME))
        print(created.model_dump())

        users = service.list_users()
        print([u.model_dump() for u in users])

        return BootstrapResult(created=created, users=users)
    except Exception:
        logger.exception("Bootstrap run failed")
        return None
    finally:
        if db is not None:
            db.close()
