from .article_service import ArticleService
from .auth_service import AuthService
from .user_service import UserService

__all__ = [
    "ArticleService",
    "AuthService",
    "UserService",
]
