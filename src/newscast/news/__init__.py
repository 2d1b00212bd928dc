"""News headline sources."""

from .models import Article, ArticleSource
from .newsapi import NewsFetcher, NewsFetcherConfig

__all__ = ["Article", "ArticleSource", "NewsFetcher", "NewsFetcherConfig"]
