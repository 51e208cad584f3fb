from .article import Article, ArticleChanges, ArticleField
from .identity import Identity
from .user import User

__all__ = [
    "Article",
    "ArticleChanges",
    "ArticleField",
    "Identity",
    "User",
]
