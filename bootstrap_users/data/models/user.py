from sqlalchemy import Column, Integer, String
from bootstrap_users.data.database import Base


class UserModel(Base):
    __tablename__ = "users"
    id = Column(Integer, primary_key=True, autoincrement=True)
    name = Column(String, nullable=False)

    def __repr__(self) -> str:
        return f"UserModel(id={self.id!r}, name={self.name!r})"
