"""Application service (use case) for read-only User operations."""

from blog_api.application.interfaces import UserRepository
from blog_api.domain.entities import User
from blog_api.domain.exceptions import EntityNotFoundError


class UserService:
    def __init__(self, repository: UserRepository):
        self._repository = repository

    async def get_user(self, user_id: int) -> User:
        user = await self._repository.get_by_id(user_id)
        if user is None:
            raise EntityNotFoundError("User", user_id)
        return user

    async def list_users(self, skip: int = 0, limit: int = 10) -> list[User]:
        return await self._repository.get_all(skip=skip, limit=limit)
