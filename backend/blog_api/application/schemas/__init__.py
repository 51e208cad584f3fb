from .article import ArticleCreate, ArticlePatch, ArticleResponse, ArticleUpdate
from .common import (
    DEFAULT_LIMIT,
    DEFAULT_PAGE,
    MessageResponse,
    PaginationQuery,
    ResourceIdParams,
)
from .user import (
    LoginRequest,
    LoginResponse,
    RegisterRequest,
    RegisterResponse,
    UserResponse,
)

__all__ = [
    "ArticleCreate",
    "ArticlePatch",
    "ArticleResponse",
    "ArticleUpdate",
    "DEFAULT_LIMIT",
    "DEFAULT_PAGE",
    "MessageResponse",
    "PaginationQuery",
    "ResourceIdParams",
    "LoginRequest",
    "LoginResponse",
    "RegisterRequest",
    "RegisterResponse",
    "UserResponse",
]
