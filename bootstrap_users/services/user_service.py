from sqlalchemy.orm import Session
from bootstrap_users.data.models.user import UserModel
from bootstrap_users.repos.user_repo import UserRepo
from bootstrap_users.domain.schemas import UserCreate, UserRead
from bootstrap_users.utils.logging import get_logger

logger = get_logger(__name__)


class UserService:
    def __init__(self, db: Session):
        self.repo = UserRepo(db)

    def create_user(self, payload: UserCreate) -> UserRead:
        """Insert a new user. Names are not unique, so this always adds a row."""
        created = self.repo.create_user(UserModel(name=payload.name))
        logger.info(f"Created user {created.id} ({created.name})")
        return UserRead.model_validate(created)

    def list_users(self) -> list[UserRead]:
        users = self.repo.list_users()
        logger.debug(f"Fetched {len(users)} users")
        return [UserRead.model_validate(u) for u in users]
