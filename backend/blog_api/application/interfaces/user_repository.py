from abc import ABC, abstractmethod

from blog_api.domain.entities import User


class UserRepository(ABC):
    """Port for user persistence."""

    @abstractmethod
    async def get_by_id(self, user_id: int) -> User | None:
        ...

    @abstractmethod
    async def get_by_email(self, email: str) -> User | None:
        ...

    @abstractmethod
    async def exists_with_email_or_username(self, email: str, username: str) -> bool:
        """True when either value is already taken."""
        ...

    @abstractmethod
    async def get_all(self, skip: int = 0, limit: int = 10) -> list[User]:
        ...

    @abstractmethod
    async def create(self, user: User) -> User:
        """Persist a new user.

        Raises DuplicateUserError when the store rejects a duplicate
        username or email.
        """
        ...
