"""Pydantic DTOs (Data Transfer Objects) for the Article feature.

None of these accept an owner ID: ownership always comes from the
authenticated identity.
"""

from datetime import datetime

from pydantic import BaseModel, Field, model_validator

from blog_api.domain.entities import ArticleChanges


class ArticleCreate(BaseModel):
    """Schema for creating a new article."""

    title: str = Field(..., min_length=5, max_length=100, examples=["Hello World"])
    body: str = Field(..., min_length=10, examples=["This is the body."])
    category: str = Field(..., min_length=3, examples=["tech"])

    def to_changes(self) -> ArticleChanges:
        return ArticleChanges(title=self.title, body=self.body, category=self.category)


class ArticleUpdate(ArticleCreate):
    """Schema for a full replacement; every field required."""


class ArticlePatch(BaseModel):
    """Schema for a partial update: any non-empty subset of the fields."""

    title: str | None = Field(None, min_length=5, max_length=100)
    body: str | None = Field(None, min_length=10)
    category: str | None = Field(None, min_length=3)

    @model_validator(mode="after")
    def _at_least_one_field(self) -> "ArticlePatch":
        if self.to_changes().is_empty():
            raise ValueError("At least one field (title, body or category) is required")
        return self

    def to_changes(self) -> ArticleChanges:
        return ArticleChanges(title=self.title, body=self.body, category=self.category)


class ArticleResponse(BaseModel):
    """Schema returned to the client."""

    id: int
    title: str
    body: str
    category: str
    owner_id: int
    created_at: datetime

    model_config = {"from_attributes": True}
