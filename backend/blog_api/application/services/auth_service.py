"""Application service for registration and login."""

import asyncio
import logging

from blog_api.application.interfaces import PasswordHasher, TokenService, UserRepository
from blog_api.application.schemas import LoginRequest, RegisterRequest
from blog_api.domain.entities import User
from blog_api.domain.exceptions import DuplicateUserError, InvalidCredentialsError

logger = logging.getLogger(__name__)


class AuthService:
    """Registers accounts and exchanges credentials for bearer tokens.

    bcrypt is CPU-bound, so hashing and verification run in a worker thread
    to keep the event loop free for other requests.
    """

    def __init__(
        self,
        repository: UserRepository,
        hasher: PasswordHasher,
        tokens: TokenService,
    ):
        self._repository = repository
        self._hasher = hasher
        self._tokens = tokens

    async def register(self, data: RegisterRequest) -> User:
        # Collision check comes first so a duplicate never pays for a hash.
        if await self._repository.exists_with_email_or_username(data.email, data.username):
            raise DuplicateUserError()

        password_hash = await asyncio.to_thread(self._hasher.hash, data.password)
        user = await self._repository.create(
            User(username=data.username, email=data.email, password_hash=password_hash)
        )
        logger.info("Registered user id=%s", user.id)
        return user

    async def login(self, data: LoginRequest) -> tuple[User, str]:
        """Return the user and a fresh token.

        Unknown email and wrong password raise the same error after the same
        amount of hashing work.
        """
        user = await self._repository.get_by_email(data.email)
        if user is None:
            await asyncio.to_thread(self._hasher.dummy_verify)
            valid = False
        else:
            valid = await asyncio.to_thread(self._hasher.verify, data.password, user.password_hash)

        # Single raise site: both rejections render identically, traceback included.
        if not valid:
            logger.info("Login rejected for %s", "unknown email" if user is None else f"user id={user.id}")
            raise InvalidCredentialsError()

        return user, self._tokens.issue(user.id)
