"""Abstract repository interfaces (ports) — define the contract, not the implementation."""

from abc import ABC, abstractmethod

from blog_api.domain.entities import Article, ArticleChanges


class ArticleRepository(ABC):
    """Port for article persistence — implemented in the infrastructure layer."""

    @abstractmethod
    async def get_by_id(self, article_id: int) -> Article | None:
        """Retrieve a single article by its ID."""
        ...

    @abstractmethod
    async def get_all(self, skip: int = 0, limit: int = 10) -> list[Article]:
        """Retrieve a page of articles in storage order."""
        ...

    @abstractmethod
    async def get_owner_id(self, article_id: int) -> int | None:
        """Return the owning user's ID, or None when the article does not exist."""
        ...

    @abstractmethod
    async def create(self, article: Article) -> Article:
        """Persist a new article and return it with the generated ID."""
        ...

    @abstractmethod
    async def update_fields(self, article_id: int, changes: ArticleChanges) -> Article | None:
        """Apply ``changes`` in a single write. Returns None if the article is gone."""
        ...

    @abstractmethod
    async def delete(self, article_id: int) -> bool:
        """Delete an article. Returns True if deleted, False if not found."""
        ...
