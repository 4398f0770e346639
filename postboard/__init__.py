"""postboard: CRUD over posts and users backed by PostgreSQL"""

from postboard.app import create_app
from postboard.config import Settings
from postboard.post_repository import PostRepository
from postboard.repository import Repository
from postboard.user_repository import UserRepository

__all__ = [
    "create_app",
    "Settings",
    "Repository",
    "PostRepository",
    "UserRepository",
]
