from .models import User
from .repository import UserRepository
from .directory import DEFAULT_USERS, StaticUserDirectory, SqlUserDirectory, UserDirectory
from .service import UserService, seed_default_users

__all__ = [
    "User",
    "UserRepository",
    "DEFAULT_USERS",
    "StaticUserDirectory",
    "SqlUserDirectory",
    "UserDirectory",
    "UserService",
    "seed_default_users",
]
