from .article_repository import ArticleRepository
from .security import PasswordHasher, TokenService
from .user_repository import UserRepository

__all__ = [
    "ArticleRepository",
    "PasswordHasher",
    "TokenService",
    "UserRepository",
]
