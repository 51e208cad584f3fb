"""FastAPI dependency injection — wires infrastructure to application layer."""

from collections.abc import AsyncGenerator
from functools import lru_cache

from fastapi import Depends, Request
from sqlalchemy.ext.asyncio import AsyncSession

from blog_api.config import get_settings
from blog_api.application.interfaces import PasswordHasher, TokenService
from blog_api.application.pipeline import Authenticator, OwnershipAuthorizer, RequestPipeline
from blog_api.application.services import ArticleService, AuthService, UserService
from blog_api.infrastructure.database.session import get_db_session
from blog_api.infrastructure.database.repositories import (
    SQLAlchemyArticleRepository,
    SQLAlchemyUserRepository,
)
from blog_api.infrastructure.security import BcryptPasswordHasher, JWTTokenService


@lru_cache
def get_token_service() -> TokenService:
    """Process-wide token service built from the signing secret."""
    settings = get_settings()
    return JWTTokenService(
        secret=settings.jwt_secret,
        algorithm=settings.jwt_algorithm,
        expires_minutes=settings.jwt_expires_minutes,
    )


@lru_cache
def get_password_hasher() -> PasswordHasher:
    return BcryptPasswordHasher(rounds=get_settings().bcrypt_rounds)


def get_pipeline(request: Request) -> RequestPipeline:
    """The app-wide pipeline runner, bound to the app's error normalizer."""
    return request.app.state.pipeline


def get_authenticator(
    tokens: TokenService = Depends(get_token_service),
) -> Authenticator:
    return Authenticator(tokens)


async def get_article_service(
    session: AsyncSession = Depends(get_db_session),
) -> AsyncGenerator[ArticleService, None]:
    """Provides an ArticleService instance with its repository wired up."""
    repository = SQLAlchemyArticleRepository(session)
    yield ArticleService(repository)


async def get_article_ownership(
    session: AsyncSession = Depends(get_db_session),
) -> AsyncGenerator[OwnershipAuthorizer, None]:
    """Ownership check for articles, reading through the request's session."""
    repository = SQLAlchemyArticleRepository(session)
    yield OwnershipAuthorizer("Article", repository.get_owner_id)


async def get_user_service(
    session: AsyncSession = Depends(get_db_session),
) -> AsyncGenerator[UserService, None]:
    """Provides a UserService instance with its repository wired up."""
    repository = SQLAlchemyUserRepository(session)
    yield UserService(repository)


async def get_auth_service(
    session: AsyncSession = Depends(get_db_session),
    hasher: PasswordHasher = Depends(get_password_hasher),
    tokens: TokenService = Depends(get_token_service),
) -> AsyncGenerator[AuthService, None]:
    """Provides an AuthService with the user repository, hasher and token service."""
    repository = SQLAlchemyUserRepository(session)
    yield AuthService(repository, hasher=hasher, tokens=tokens)
