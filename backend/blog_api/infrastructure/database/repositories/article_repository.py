"""Concrete repository implementation backed by SQLAlchemy."""

from sqlalchemy import delete, select, update
from sqlalchemy.ext.asyncio import AsyncSession

from blog_api.application.interfaces import ArticleRepository
from blog_api.domain.entities import Article, ArticleChanges, ArticleField
from blog_api.infrastructure.database.models import ArticleModel

# The only columns an update may ever write.
_UPDATABLE_COLUMNS = {
    ArticleField.TITLE: ArticleModel.title,
    ArticleField.BODY: ArticleModel.body,
    ArticleField.CATEGORY: ArticleModel.category,
}


class SQLAlchemyArticleRepository(ArticleRepository):
    """Implements the ArticleRepository port using SQLAlchemy async sessions."""

    def __init__(self, session: AsyncSession):
        self._session = session

    def _to_entity(self, model: ArticleModel) -> Article:
        """Map ORM model → domain entity."""
        return Article(
            id=model.id,
            title=model.title,
            body=model.body,
            category=model.category,
            owner_id=model.owner_id,
            created_at=model.created_at,
        )

    def _to_model(self, entity: Article) -> ArticleModel:
        """Map domain entity → ORM model (for creation)."""
        return ArticleModel(
            title=entity.title,
            body=entity.body,
            category=entity.category,
            owner_id=entity.owner_id,
            created_at=entity.created_at,
        )

    async def get_by_id(self, article_id: int) -> Article | None:
        result = await self._session.get(ArticleModel, article_id)
        return self._to_entity(result) if result else None

    async def get_all(self, skip: int = 0, limit: int = 10) -> list[Article]:
        stmt = select(ArticleModel).order_by(ArticleModel.id).offset(skip).limit(limit)
        result = await self._session.execute(stmt)
        return [self._to_entity(row) for row in result.scalars().all()]

    async def get_owner_id(self, article_id: int) -> int | None:
        stmt = select(ArticleModel.owner_id).where(ArticleModel.id == article_id)
        result = await self._session.execute(stmt)
        return result.scalar_one_or_none()

    async def create(self, article: Article) -> Article:
        model = self._to_model(article)
        self._session.add(model)
        await self._session.flush()
        return self._to_entity(model)

    async def update_fields(self, article_id: int, changes: ArticleChanges) -> Article | None:
        values = {_UPDATABLE_COLUMNS[f]: value for f, value in changes.values().items()}
        if not values:
            raise ValueError("ArticleChanges must set at least one field")

        stmt = (
            update(ArticleModel)
            .where(ArticleModel.id == article_id)
            .values(values)
            .execution_options(synchronize_session="fetch")
        )
        result = await self._session.execute(stmt)
        if result.rowcount == 0:
            return None
        return await self.get_by_id(article_id)

    async def delete(self, article_id: int) -> bool:
        stmt = delete(ArticleModel).where(ArticleModel.id == article_id)
        result = await self._session.execute(stmt)
        return result.rowcount > 0
