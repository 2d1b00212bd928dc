"""
NewsAPI headline fetcher.

Queries the /top-headlines endpoint for a fixed country, category and page
size and returns the articles as ``Article`` models.

API reference: https://newsapi.org/docs/endpoints/top-headlines
"""

from typing import Optional
import httpx
import structlog
from pydantic import BaseModel

from ..errors import NewsAPIError, log_api_error
from .models import Article

logger = structlog.get_logger()

# NewsAPI replaces takedowns with this placeholder title
REMOVED_TITLE = "[Removed]"


class NewsFetcherConfig(BaseModel):
    """Configuration for the headline fetcher."""

    api_key: str
    base_url: str = "https://newsapi.org/v2"
    country: str = "us"
    category: str = "technology"
    page_size: int = 5
    timeout_seconds: float = 30.0


class NewsFetcher:
    """Fetches top headlines from NewsAPI."""

    def __init__(
        self,
        config: NewsFetcherConfig,
        client: Optional[httpx.AsyncClient] = None,
    ):
        self.config = config
        self._client = client

    @property
    def name(self) -> str:
        return "NewsAPI"

    @property
    def endpoint(self) -> str:
        return f"{self.config.base_url.rstrip('/')}/top-headlines"

    def _params(self) -> dict:
        return {
            "apiKey": self.config.api_key,
            "country": self.config.country,
            "category": self.config.category,
            "pageSize": self.config.page_size,
        }

    async def fetch_top_headlines(self) -> list[Article]:
        """
        Fetch trending articles.

        Returns:
            Articles in the order NewsAPI ranked them. Entries without a
            usable title are skipped.
        """
        logger.info(
            "Fetching top headlines",
            country=self.config.country,
            category=self.config.category,
            page_size=self.config.page_size,
        )

        try:
            payload = await self._get(self._params())
            articles = self._parse_articles(payload)
        except Exception as e:
            log_api_error(e, self.name)
            raise

        logger.info(f"Fetched {len(articles)} news articles")
        for i, article in enumerate(articles, 1):
            logger.info(f"   {i}. {article.title}")

        return articles

    async def _get(self, params: dict) -> dict:
        if self._client is not None:
            response = await self._client.get(self.endpoint, params=params)
        else:
            async with httpx.AsyncClient(timeout=self.config.timeout_seconds) as client:
                response = await client.get(self.endpoint, params=params)

        response.raise_for_status()
        return response.json()

    def _parse_articles(self, payload: dict) -> list[Article]:
        if payload.get("status") == "error":
            raise NewsAPIError(
                payload.get("code", "unknown"),
                payload.get("message", "NewsAPI returned an error"),
            )

        articles = []
        for raw in payload.get("articles") or []:
            title = (raw.get("title") or "").strip()
            if not title or title == REMOVED_TITLE:
                logger.debug("Skipping article without title", url=raw.get("url"))
                continue
            articles.append(Article.model_validate({**raw, "title": title}))

        return articles
