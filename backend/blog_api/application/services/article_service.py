"""Application service (use case) for Article operations."""

from blog_api.application.interfaces import ArticleRepository
from blog_api.application.schemas import ArticleCreate, ArticlePatch, ArticleUpdate
from blog_api.domain.entities import Article, ArticleChanges, Identity
from blog_api.domain.exceptions import EntityNotFoundError, ValidationError, Violation


class ArticleService:
    """Orchestrates article business logic. Depends on the repository port (DI).

    Ownership is decided before these methods run; they only enforce
    existence and the shape of the change.
    """

    def __init__(self, repository: ArticleRepository):
        self._repository = repository

    async def get_article(self, article_id: int) -> Article:
        article = await self._repository.get_by_id(article_id)
        if article is None:
            raise EntityNotFoundError("Article", article_id)
        return article

    async def list_articles(self, skip: int = 0, limit: int = 10) -> list[Article]:
        return await self._repository.get_all(skip=skip, limit=limit)

    async def create_article(self, data: ArticleCreate, identity: Identity) -> Article:
        article = Article(
            title=data.title,
            body=data.body,
            category=data.category,
            owner_id=identity.user_id,
        )
        return await self._repository.create(article)

    async def replace_article(self, article_id: int, data: ArticleUpdate) -> Article:
        return await self._apply(article_id, data.to_changes())

    async def patch_article(self, article_id: int, data: ArticlePatch) -> Article:
        return await self._apply(article_id, data.to_changes())

    async def delete_article(self, article_id: int) -> bool:
        deleted = await self._repository.delete(article_id)
        if not deleted:
            raise EntityNotFoundError("Article", article_id)
        return deleted

    async def _apply(self, article_id: int, changes: ArticleChanges) -> Article:
        if changes.is_empty():
            raise ValidationError(
                [Violation("body", "At least one field (title, body or category) is required")]
            )
        article = await self._repository.update_fields(article_id, changes)
        if article is None:
            raise EntityNotFoundError("Article", article_id)
        return article
