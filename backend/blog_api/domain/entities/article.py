"""Domain entities — pure Python business objects, no framework dependencies."""

from dataclasses import dataclass, field
from datetime import datetime, timezone
from enum import Enum


class ArticleField(str, Enum):
    """The fields of an article an update may set."""

    TITLE = "title"
    BODY = "body"
    CATEGORY = "category"


@dataclass
class Article:
    """Core domain entity representing a submitted article.

    ``owner_id`` is assigned once at creation and never changes.
    """

    title: str
    body: str
    category: str
    owner_id: int
    id: int | None = None
    created_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))


@dataclass(frozen=True)
class ArticleChanges:
    """A set of field replacements for an article.

    ``None`` means "leave untouched".  A full update supplies all three.
    """

    title: str | None = None
    body: str | None = None
    category: str | None = None

    def values(self) -> dict[ArticleField, str]:
        supplied = {
            ArticleField.TITLE: self.title,
            ArticleField.BODY: self.body,
            ArticleField.CATEGORY: self.category,
        }
        return {f: v for f, v in supplied.items() if v is not None}

    def is_empty(self) -> bool:
        return not self.values()
