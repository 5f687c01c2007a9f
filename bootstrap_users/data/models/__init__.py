# import models so they are registered on Base.metadata

from bootstrap_users.data.models.user import UserModel

__all__ = ["UserModel"]
