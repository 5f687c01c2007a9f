# bootstrap_users/domain/schemas.py
from pydantic import BaseModel, ConfigDict
from typing import List


class UserCreate(BaseModel):
    """Insert payload for a user. The name is taken as given."""

    name: str


class UserRead(BaseModel):
    """User as stored, including the id assigned by the data store."""

    id: int
    name: str

    model_config = ConfigDict(from_attributes=True)


class BootstrapResult(BaseModel):
    created: UserRead
    users: List[UserRead]
