"""SQLAlchemy implementation of the UserRepository port."""

import logging

from sqlalchemy import or_, select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from blog_api.application.interfaces import UserRepository
from blog_api.domain.entities import User
from blog_api.domain.exceptions import DuplicateUserError
from blog_api.infrastructure.database.models import UserModel

logger = logging.getLogger(__name__)


class SQLAlchemyUserRepository(UserRepository):
    def __init__(self, session: AsyncSession):
        self._session = session

    def _to_entity(self, model: UserModel) -> User:
        return User(
            id=model.id,
            username=model.username,
            email=model.email,
            password_hash=model.password_hash,
            created_at=model.created_at,
        )

    async def get_by_id(self, user_id: int) -> User | None:
        result = await self._session.get(UserModel, user_id)
        return self._to_entity(result) if result else None

    async def get_by_email(self, email: str) -> User | None:
        stmt = select(UserModel).where(UserModel.email == email)
        result = await self._session.execute(stmt)
        model = result.scalar_one_or_none()
        return self._to_entity(model) if model else None

    async def exists_with_email_or_username(self, email: str, username: str) -> bool:
        stmt = (
            select(UserModel.id)
            .where(or_(UserModel.email == email, UserModel.username == username))
            .limit(1)
        )
        result = await self._session.execute(stmt)
        return result.scalar_one_or_none() is not None

    async def get_all(self, skip: int = 0, limit: int = 10) -> list[User]:
        stmt = select(UserModel).order_by(UserModel.id).offset(skip).limit(limit)
        result = await self._session.execute(stmt)
        return [self._to_entity(row) for row in result.scalars().all()]

    async def create(self, user: User) -> User:
        model = UserModel(
            username=user.username,
            email=user.email,
            password_hash=user.password_hash,
            created_at=user.created_at,
        )
        self._session.add(model)
        try:
            await self._session.flush()
        except IntegrityError:
            # A concurrent registration got past the collision check.
            await self._session.rollback()
            logger.info("Registration rejected by unique constraint")
            raise DuplicateUserError()
        return self._to_entity(model)
