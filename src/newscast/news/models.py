"""Data models for news headlines."""

from datetime import datetime
from typing import Optional
from pydantic import BaseModel, ConfigDict, Field


class ArticleSource(BaseModel):
    """Publisher of an article."""

    id: Optional[str] = None
    name: Optional[str] = None


class Article(BaseModel):
    """A headline returned by the news service."""

    model_config = ConfigDict(extra="allow", populate_by_name=True, frozen=True)

    title: str = Field(..., description="Headline text")
    description: Optional[str] = Field(None, description="Short summary")
    url: Optional[str] = Field(None)
    url_to_image: Optional[str] = Field(None, alias="urlToImage")
    published_at: Optional[datetime] = Field(None, alias="publishedAt")
    content: Optional[str] = Field(None)
    author: Optional[str] = Field(None)
    source: Optional[ArticleSource] = Field(None)

    @property
    def source_name(self) -> Optional[str]:
        return self.source.name if self.source else None
